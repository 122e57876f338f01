"""
Tracker App - Stock Tracking Ledger Reconciliation

Reconciles a longitudinal tracking ledger of stock positions against daily
price snapshots from a web listing and a broker CSV export, matching the
inconsistent security names each source uses.
"""

__version__ = "0.1.0"
__author__ = "Tracker Team"
