"""
Date handling for ledger rows.

Ledger rows carry plain calendar dates. Collaborators hand them over either
as ``date`` objects or as text in the ledger's day-first layout, and the run
date is always chosen by the caller when it can be.
"""

from datetime import date, datetime
from typing import Optional, Union

from ..errors import MalformedDataError

LEDGER_DATE_FORMAT = "%d-%m-%Y"


def get_run_date(today: Optional[date] = None) -> date:
    """
    Get the date a reconciliation run is stamped with.

    Args:
        today: Explicit run date from the caller

    Returns:
        The explicit date, falling back to the local wall-clock date
    """
    if today is not None:
        return today

    return datetime.now().date()


def parse_ledger_date(value: Union[str, date, datetime],
                      fmt: str = LEDGER_DATE_FORMAT) -> date:
    """
    Parse a ledger date cell.

    Args:
        value: ``date``/``datetime`` instance or text in ``fmt``
        fmt: strptime layout for text values

    Returns:
        Calendar date

    Raises:
        MalformedDataError: If the value cannot be read as a date
    """
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise MalformedDataError(
            f"Unsupported date value: {value!r}",
            raw_data=repr(value),
            expected_format=fmt,
        )

    try:
        return datetime.strptime(value.strip(), fmt).date()
    except ValueError as e:
        raise MalformedDataError(
            f"Invalid ledger date {value!r}: {e}",
            raw_data=value,
            expected_format=fmt,
        )


def format_ledger_date(value: date, fmt: str = LEDGER_DATE_FORMAT) -> str:
    """Format a calendar date for a ledger row."""
    return value.strftime(fmt)
