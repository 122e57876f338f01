"""
Ledger reconciliation coordinator.

Merges today's price observations into the tracking ledger:

Source rows → Observations ─┐
                            ├→ MatchEngine per ledger row → updated ledger + report
Stored rows → LedgerEntries ┘

Existing rows keep their order; securities seen for the first time are
appended after them in observation order.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.models import (
    LedgerEntry,
    MatchStrategy,
    Observation,
    ObservationBatch,
    ReconciliationReport,
    RowDiagnostic,
    RowStatus,
)
from .data.parsers import ledger_entry_to_row, parse_ledger_row, parse_observations
from .errors import ReconciliationError
from .logging.config import get_ledger_logger, log_ledger_update
from .matching.engine import MatchEngine
from .utils.time import get_run_date

logger = structlog.get_logger(__name__)
ledger_logger = get_ledger_logger(__name__)


class LedgerReconciler:
    """
    Applies match results to the tracking ledger.

    Never mutates its inputs: the returned ledger is built from new entries,
    and the creation-time fields of existing entries are carried over as-is.
    """

    def __init__(self, match_engine: Optional[MatchEngine] = None,
                 config: Optional[DefaultConfig] = None) -> None:
        self.config = config or get_default_config()
        self.match_engine = match_engine or MatchEngine(params=self.config.match)
        self.logger = logger
        self.ledger_logger = ledger_logger

    def reconcile(
        self,
        ledger: Sequence[LedgerEntry],
        observations: Sequence[Observation],
        today: date
    ) -> tuple[list[LedgerEntry], ReconciliationReport]:
        """
        Reconcile the ledger against today's observations.

        Args:
            ledger: Existing ledger entries, in ledger order
            observations: Today's observations, in discovery order
            today: Run date stamped on touched rows

        Returns:
            Updated ledger and the per-row diagnostic report

        Raises:
            ReconciliationError: If the inputs are not ledger entries and
                observations
        """
        self._check_inputs(ledger, observations)

        candidate_names = [obs.name for obs in observations]
        # First observation wins when a name repeats
        by_name: dict[str, Observation] = {}
        for obs in observations:
            by_name.setdefault(obs.name, obs)

        places = self.config.ledger.percent_places
        updated_ledger: list[LedgerEntry] = []
        diagnostics: list[RowDiagnostic] = []

        for entry in ledger:
            result = self.match_engine.match(entry.stock_name, candidate_names)
            observation = by_name.get(result.matched_name) if result.matched else None

            if observation is None:
                alias_target_missing = result.strategy == MatchStrategy.ALIAS
                updated_ledger.append(entry)
                diagnostics.append(RowDiagnostic(
                    stock_name=entry.stock_name,
                    status=RowStatus.UNMATCHED,
                    strategy=result.strategy,
                    matched_name=result.matched_name,
                    alias_target_missing=alias_target_missing,
                ))
                if alias_target_missing:
                    self.logger.warning(
                        "Alias target not observed today, price left unchanged",
                        stock_name=entry.stock_name,
                        alias_target=result.matched_name,
                    )
            elif observation.has_price:
                updated_ledger.append(entry.with_price(observation.price, today, places))
                diagnostics.append(RowDiagnostic(
                    stock_name=entry.stock_name,
                    status=RowStatus.UPDATED,
                    strategy=result.strategy,
                    matched_name=result.matched_name,
                ))
            else:
                updated_ledger.append(entry.with_last_seen(today))
                diagnostics.append(RowDiagnostic(
                    stock_name=entry.stock_name,
                    status=RowStatus.DATE_ONLY_UPDATED,
                    strategy=result.strategy,
                    matched_name=result.matched_name,
                ))

            row = diagnostics[-1]
            log_ledger_update(
                self.ledger_logger,
                stock_name=row.stock_name,
                status=row.status.value,
                strategy=row.strategy.value,
                context={"matched_name": row.matched_name} if row.matched_name else None,
            )

        added_names: set[str] = set()
        for obs in observations:
            if obs.name in added_names or self._is_tracked(obs, ledger):
                continue

            added_names.add(obs.name)
            updated_ledger.append(LedgerEntry.open(obs, today))
            diagnostics.append(RowDiagnostic(
                stock_name=obs.name,
                status=RowStatus.NEW,
                matched_name=obs.name,
            ))
            log_ledger_update(
                self.ledger_logger,
                stock_name=obs.name,
                status=RowStatus.NEW.value,
                strategy=MatchStrategy.NONE.value,
                context={"price_available": obs.has_price},
            )

        report = ReconciliationReport(run_date=today, rows=diagnostics)
        self.logger.info(
            "Ledger reconciled",
            run_date=today.isoformat(),
            ledger_rows=len(ledger),
            observations=len(observations),
            **report.summary()
        )

        return updated_ledger, report

    def reconcile_records(
        self,
        ledger_rows: Iterable[Mapping[str, Any]],
        source_rows: Iterable[Mapping[str, Any]],
        source: str,
        today: Optional[date] = None
    ) -> tuple[list[dict[str, Any]], ReconciliationReport, ObservationBatch]:
        """
        Reconcile plain rows handed over by the storage and source collaborators.

        Args:
            ledger_rows: Stored ledger rows
            source_rows: Raw rows from a web listing or broker export
            source: Source kind for ``source_rows``
            today: Run date, defaults to the current local date

        Returns:
            Updated ledger rows, the diagnostic report, and the observation
            batch (including any skipped source rows)
        """
        run_date = get_run_date(today)
        ledger = [parse_ledger_row(row, self.config.ledger) for row in ledger_rows]
        batch = parse_observations(source_rows, source, self.config.sources)

        updated, report = self.reconcile(ledger, batch.observations, run_date)
        rows = [ledger_entry_to_row(entry, self.config.ledger) for entry in updated]
        return rows, report, batch

    def _is_tracked(self, observation: Observation, ledger: Sequence[LedgerEntry]) -> bool:
        """True when some ledger entry already stands for ``observation``."""
        for entry in ledger:
            if entry.stock_name == observation.name:
                return True
            if self.match_engine.matches(entry.stock_name, observation.name):
                return True
        return False

    def _check_inputs(self, ledger: Sequence[Any], observations: Sequence[Any]) -> None:
        for entry in ledger:
            if not isinstance(entry, LedgerEntry):
                raise ReconciliationError(
                    f"Ledger contains {type(entry).__name__}, expected LedgerEntry",
                    stage="input",
                )
        for obs in observations:
            if not isinstance(obs, Observation):
                raise ReconciliationError(
                    f"Observations contain {type(obs).__name__}, expected Observation",
                    stage="input",
                )
