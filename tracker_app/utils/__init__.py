"""
Utility functions module.

Date semantics:
- Ledger dates are calendar dates with no time component
- The run date is supplied by the caller; wall-clock time is only a fallback
- Ledger text dates use the DD-MM-YYYY layout unless configured otherwise
"""
