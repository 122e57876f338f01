"""
Canonical record types for ledger reconciliation.

Ledger entries and observations are immutable; an updated ledger row is a
new entry built from the previous one, which keeps the creation-time fields
(name, first seen date, initial price) out of reach of every update path.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional

from ..utils.prices import parse_price

ZERO = Decimal("0")


class MatchStrategy(str, Enum):
    """Name matching cascade strategies, in cascade order."""
    ALIAS = "alias"
    EXACT_NORMALIZED = "exact_normalized"
    CASE_INSENSITIVE = "case_insensitive"
    SUBSTRING_PARTIAL = "substring_partial"
    ABBREVIATION_REWRITE = "abbreviation_rewrite"
    NONE = "none"


class RowStatus(str, Enum):
    """Outcome of reconciliation for a single ledger row."""
    UPDATED = "updated"
    DATE_ONLY_UPDATED = "date-only-updated"
    UNMATCHED = "unmatched"
    NEW = "new"


def compute_percent_change(initial_price: Decimal, current_price: Decimal,
                           places: int = 2) -> Decimal:
    """
    Percent move from the initial price, rounded half-up to ``places``.

    Returns zero when there is no usable initial price.
    """
    if initial_price <= 0:
        return ZERO
    change = (current_price - initial_price) / initial_price * 100
    return change.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Observation:
    """One security seen in today's snapshot."""
    name: str
    price: Optional[Decimal] = None     # None when the source had no usable price

    def __post_init__(self) -> None:
        # Unreadable or negative prices mean "seen without a price"
        object.__setattr__(self, "price", parse_price(self.price))

    @property
    def has_price(self) -> bool:
        """True when the observation carries a positive price."""
        return self.price is not None and self.price > 0


@dataclass(frozen=True)
class LedgerEntry:
    """A tracked security and its price history summary."""
    stock_name: str             # Identity key for matching
    first_seen_date: date
    initial_price: Decimal
    last_seen_date: date
    current_price: Decimal
    percent_change: Optional[Decimal] = None   # Derived from the prices when omitted

    def __post_init__(self) -> None:
        if self.percent_change is None:
            object.__setattr__(
                self, "percent_change",
                compute_percent_change(self.initial_price, self.current_price),
            )

    @classmethod
    def open(cls, observation: Observation, seen_on: date) -> "LedgerEntry":
        """Start tracking a security first seen in ``observation``."""
        price = observation.price if observation.has_price else ZERO
        return cls(
            stock_name=observation.name,
            first_seen_date=seen_on,
            initial_price=price,
            last_seen_date=seen_on,
            current_price=price,
            percent_change=ZERO,
        )

    def with_price(self, price: Decimal, seen_on: date, places: int = 2) -> "LedgerEntry":
        """Copy of this entry repriced on ``seen_on``."""
        return replace(
            self,
            current_price=price,
            last_seen_date=seen_on,
            percent_change=compute_percent_change(self.initial_price, price, places),
        )

    def with_last_seen(self, seen_on: date) -> "LedgerEntry":
        """Copy of this entry with only the last seen date moved."""
        return replace(self, last_seen_date=seen_on)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one recorded name against today's candidates."""
    matched_name: Optional[str] = None
    strategy: MatchStrategy = MatchStrategy.NONE

    @property
    def matched(self) -> bool:
        return self.matched_name is not None

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls()


@dataclass(frozen=True)
class BrokerPriceRecord:
    """A row of the broker's daily price export."""
    security: str
    close_price: Optional[Decimal] = None
    prev_close_price: Optional[Decimal] = None
    percent_change: Optional[Decimal] = None
    gain_loss: str = ""

    def to_observation(self) -> Observation:
        return Observation(name=self.security, price=self.close_price)


@dataclass(frozen=True)
class SkippedRecord:
    """A source row that could not become an observation."""
    index: int
    reason: str
    source: str


@dataclass(frozen=True)
class ObservationBatch:
    """Observations extracted from one source, plus the rows left out."""
    source: str
    observations: list[Observation] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [obs.name for obs in self.observations]


@dataclass(frozen=True)
class RowDiagnostic:
    """Diagnostic record for one row of the reconciled ledger."""
    stock_name: str
    status: RowStatus
    strategy: MatchStrategy = MatchStrategy.NONE
    matched_name: Optional[str] = None
    # Alias resolved to a name that is not among today's observations
    alias_target_missing: bool = False


@dataclass(frozen=True)
class ReconciliationReport:
    """Per-row diagnostics for a reconciliation run, in ledger order."""
    run_date: date
    rows: list[RowDiagnostic] = field(default_factory=list)

    def count(self, status: RowStatus) -> int:
        return sum(1 for row in self.rows if row.status == status)

    def by_status(self, status: RowStatus) -> list[RowDiagnostic]:
        return [row for row in self.rows if row.status == status]

    def for_stock(self, stock_name: str) -> Optional[RowDiagnostic]:
        """First diagnostic for ``stock_name``, or None."""
        for row in self.rows:
            if row.stock_name == stock_name:
                return row
        return None

    def summary(self) -> dict[str, int]:
        """Row counts keyed by status value."""
        return {status.value: self.count(status) for status in RowStatus}
