"""Default configuration parameters for ledger reconciliation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MatchParams:
    """Name matching parameters."""
    # (full form, abbreviation) pairs tried in order by the last strategy
    abbreviation_pairs: tuple[tuple[str, str], ...] = (
        ("LIMITED", "LTD"),
        ("COMPANY", "CO"),
        ("SERVICES", "SERV"),
        ("INDUSTRIES", "IND"),
        ("ASSET MANAGEMENT", "AMC"),
    )


@dataclass(frozen=True)
class LedgerParams:
    """Ledger row parameters."""
    date_format: str = "%d-%m-%Y"      # Day-first text dates in ledger rows
    percent_places: int = 2            # Rounding of percent change


@dataclass(frozen=True)
class SourceParams:
    """Field names used when extracting records from the two price sources."""
    # Broker CSV export columns
    broker_name_column: str = "SECURITY"
    broker_close_column: str = "CLOSE_PRIC"
    broker_prev_close_column: str = "PREV_CL_PR"
    broker_percent_column: str = "PERCENT_CG"
    broker_gain_loss_column: str = "GAIN_LOSS"

    # Web listing record fields
    web_name_field: str = "name"
    web_price_field: str = "price"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    match: MatchParams = field(default_factory=MatchParams)
    ledger: LedgerParams = field(default_factory=LedgerParams)
    sources: SourceParams = field(default_factory=SourceParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        match=MatchParams(),
        ledger=LedgerParams(),
        sources=SourceParams(),
    )
