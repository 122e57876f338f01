"""
Record extraction for ledger rows and the two price sources.

Collaborators hand over plain mappings (CSV rows, scraped table rows, stored
ledger rows). Each parser pulls named fields into a fixed record type and
fills defaults for missing fields, instead of assembling records from
whatever headers happen to be present.

Prices are the one place where bad input degrades silently: a price that
cannot be read becomes "absent" rather than an error, because a name seen
without a price still moves the ledger's last seen date.
"""

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, Optional

from ..config.defaults import LedgerParams, SourceParams
from ..errors import MalformedDataError, MissingDataError
from ..utils.prices import parse_percent, parse_price
from ..utils.time import format_ledger_date, parse_ledger_date
from .models import (
    BrokerPriceRecord,
    LedgerEntry,
    Observation,
    ObservationBatch,
    SkippedRecord,
    compute_percent_change,
)

logger = logging.getLogger(__name__)

SOURCE_WEB_LISTING = "web_listing"
SOURCE_BROKER_EXPORT = "broker_export"

# Accepted spellings for ledger row fields, first one present wins
_LEDGER_FIELDS = {
    "stock_name": ("stock_name", "stockName"),
    "first_seen_date": ("first_seen_date", "firstSeenDate", "firstDate"),
    "initial_price": ("initial_price", "initialPrice"),
    "last_seen_date": ("last_seen_date", "lastSeenDate", "lastDate"),
    "current_price": ("current_price", "currentPrice"),
}


def _clean_name(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def parse_web_listing_row(row: Mapping[str, Any],
                          params: Optional[SourceParams] = None) -> Observation:
    """
    Extract an observation from a web listing row.

    Args:
        row: Mapping with name and price text fields
        params: Source field names

    Returns:
        Observation, with price None if the price text was unusable

    Raises:
        MissingDataError: If the row has no security name
    """
    params = params or SourceParams()
    name = _clean_name(row.get(params.web_name_field))
    if not name:
        raise MissingDataError("Web listing row has no security name",
                               field_name=params.web_name_field)

    raw_price = row.get(params.web_price_field)
    price = parse_price(raw_price)
    if price is None and raw_price not in (None, ""):
        logger.debug(f"Unreadable price {raw_price!r} for {name}, treating as absent")

    return Observation(name=name, price=price)


def parse_broker_row(row: Mapping[str, Any],
                     params: Optional[SourceParams] = None) -> BrokerPriceRecord:
    """
    Extract a broker export row.

    Missing columns default to blank and parse as absent values.

    Raises:
        MissingDataError: If the row has no security name
    """
    params = params or SourceParams()
    security = _clean_name(row.get(params.broker_name_column, ""))
    if not security:
        raise MissingDataError("Broker export row has no security name",
                               field_name=params.broker_name_column)

    return BrokerPriceRecord(
        security=security,
        close_price=parse_price(row.get(params.broker_close_column, "")),
        prev_close_price=parse_price(row.get(params.broker_prev_close_column, "")),
        percent_change=parse_percent(row.get(params.broker_percent_column, "")),
        gain_loss=_clean_name(row.get(params.broker_gain_loss_column, "")),
    )


def parse_observations(rows: Iterable[Mapping[str, Any]], source: str,
                       params: Optional[SourceParams] = None) -> ObservationBatch:
    """
    Extract observations from a batch of source rows.

    Rows without a security name are skipped and recorded on the batch.

    Args:
        rows: Source rows in discovery order
        source: SOURCE_WEB_LISTING or SOURCE_BROKER_EXPORT
        params: Source field names

    Returns:
        ObservationBatch preserving row order
    """
    if source == SOURCE_WEB_LISTING:
        def extract(row):
            return parse_web_listing_row(row, params)
    elif source == SOURCE_BROKER_EXPORT:
        def extract(row):
            return parse_broker_row(row, params).to_observation()
    else:
        raise ValueError(f"Unknown observation source: {source}")

    observations = []
    skipped = []
    for index, row in enumerate(rows):
        try:
            observations.append(extract(row))
        except MissingDataError as e:
            skipped.append(SkippedRecord(index=index, reason=str(e), source=source))

    if skipped:
        logger.warning(f"Skipped {len(skipped)} {source} rows without a security name")

    return ObservationBatch(source=source, observations=observations, skipped=skipped)


def _ledger_field(row: Mapping[str, Any], name: str) -> Any:
    for key in _LEDGER_FIELDS[name]:
        if key in row and row[key] is not None:
            return row[key]
    raise MissingDataError(f"Missing required ledger field: {name}", field_name=name)


def _ledger_price(row: Mapping[str, Any], name: str) -> Decimal:
    raw = _ledger_field(row, name)
    price = parse_price(raw)
    if price is None:
        raise MalformedDataError(f"Invalid {name}: {raw!r}", raw_data=str(raw),
                                 expected_format="non-negative decimal")
    return price


def parse_ledger_row(row: Mapping[str, Any],
                     params: Optional[LedgerParams] = None) -> LedgerEntry:
    """
    Extract a ledger entry from a stored ledger row.

    Percent change is always recomputed from the two prices.

    Raises:
        MissingDataError: If a required field is absent or the name is blank
        MalformedDataError: If a date or price cannot be parsed
    """
    params = params or LedgerParams()

    stock_name = _clean_name(_ledger_field(row, "stock_name"))
    if not stock_name:
        raise MissingDataError("Ledger row has a blank stock name", field_name="stock_name")

    initial_price = _ledger_price(row, "initial_price")
    current_price = _ledger_price(row, "current_price")

    return LedgerEntry(
        stock_name=stock_name,
        first_seen_date=parse_ledger_date(_ledger_field(row, "first_seen_date"), params.date_format),
        initial_price=initial_price,
        last_seen_date=parse_ledger_date(_ledger_field(row, "last_seen_date"), params.date_format),
        current_price=current_price,
        percent_change=compute_percent_change(initial_price, current_price, params.percent_places),
    )


def ledger_entry_to_row(entry: LedgerEntry,
                        params: Optional[LedgerParams] = None) -> dict[str, Any]:
    """Convert a ledger entry back to a plain row for the storage collaborator."""
    params = params or LedgerParams()
    return {
        "stock_name": entry.stock_name,
        "first_seen_date": format_ledger_date(entry.first_seen_date, params.date_format),
        "initial_price": entry.initial_price,
        "last_seen_date": format_ledger_date(entry.last_seen_date, params.date_format),
        "current_price": entry.current_price,
        "percent_change": entry.percent_change,
    }
