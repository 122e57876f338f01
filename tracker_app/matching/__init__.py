"""
Security name matching.

Normalizes free-text security names, resolves curated aliases and runs the
ordered strategy cascade that pairs a ledger name with today's candidates.
"""

from .alias_table import AliasTable
from .engine import MatchEngine
from .normalizer import normalize_name

__all__ = [
    "AliasTable",
    "MatchEngine",
    "normalize_name",
]
