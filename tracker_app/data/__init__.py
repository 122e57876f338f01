"""
Ledger and price record module.

Fixed record types for ledger rows and today's price observations, and the
extraction of those records from web listing and broker export rows.
"""
