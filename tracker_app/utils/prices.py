"""
Price cell conversion.

Sources deliver prices as numbers or as text with thousands separators.
A value that cannot be read is treated as absent rather than as an error.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def to_decimal(raw: Any) -> Optional[Decimal]:
    """Convert a number or number text to a finite Decimal, None if unreadable."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)):
        value = Decimal(str(raw))
    else:
        text = str(raw).strip().replace(",", "")
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None

    if not value.is_finite():
        return None
    return value


def parse_price(raw: Any) -> Optional[Decimal]:
    """
    Parse a price cell.

    Accepts numbers or text with thousands separators ("1,234.50").

    Returns:
        Non-negative Decimal, or None when the value is blank, non-numeric,
        non-finite or negative
    """
    value = to_decimal(raw)
    if value is None or value < 0:
        return None
    return value


def parse_percent(raw: Any) -> Optional[Decimal]:
    """Parse a percent cell such as "5.00%" or "-1.2". None if unreadable."""
    if isinstance(raw, str):
        raw = raw.strip().rstrip("%")
    return to_decimal(raw)
