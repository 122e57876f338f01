"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List

from tracker_app.data.models import LedgerEntry
from tracker_app.matching.alias_table import AliasTable
from tracker_app.matching.engine import MatchEngine


@pytest.fixture
def run_date() -> date:
    """Date stamped on rows touched by a reconciliation run."""
    return date(2024, 1, 2)


@pytest.fixture
def cipla_entry() -> LedgerEntry:
    """Ledger entry recorded under the web listing's short name."""
    return LedgerEntry(
        stock_name="Cipla",
        first_seen_date=date(2024, 1, 1),
        initial_price=Decimal("1000"),
        last_seen_date=date(2024, 1, 1),
        current_price=Decimal("1000"),
    )


@pytest.fixture
def fuzzy_engine() -> MatchEngine:
    """Match engine without any aliases, exercising only the fuzzy strategies."""
    return MatchEngine(alias_table=AliasTable())


@pytest.fixture
def builtin_engine() -> MatchEngine:
    """Match engine backed by the built-in alias table."""
    return MatchEngine(alias_table=AliasTable.builtin())


@pytest.fixture
def sample_ledger_rows() -> List[Dict[str, Any]]:
    """Stored ledger rows as handed over by the storage collaborator."""
    return [
        {
            "stockName": "Cipla",
            "firstDate": "01-01-2024",
            "initialPrice": "1000.00",
            "lastDate": "01-01-2024",
            "currentPrice": "1000.00",
        },
        {
            "stockName": "XYZ Corp",
            "firstDate": "15-12-2023",
            "initialPrice": "200.00",
            "lastDate": "29-12-2023",
            "currentPrice": "205.00",
        },
    ]


@pytest.fixture
def sample_broker_rows() -> List[Dict[str, Any]]:
    """Rows of the broker's daily price export."""
    return [
        {
            "GAIN_LOSS": "G",
            "SECURITY": "CIPLA LTD",
            "CLOSE_PRIC": "1050.00",
            "PREV_CL_PR": "1032.10",
            "PERCENT_CG": "1.73",
        },
        {
            "GAIN_LOSS": "G",
            "SECURITY": "XYZ CORPORATION LIMITED",
            "CLOSE_PRIC": "210.00",
            "PREV_CL_PR": "205.00",
            "PERCENT_CG": "2.44",
        },
    ]


@pytest.fixture
def sample_web_rows() -> List[Dict[str, Any]]:
    """Rows scraped from the 52-week-high web listing."""
    return [
        {"name": "Cipla", "price": "1,000.00"},
        {"name": "XYZ Corp", "price": "200"},
        {"name": "Kirloskar Industries", "price": "--"},
    ]
