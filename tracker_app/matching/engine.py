"""
Security name match engine.

Pairs a name recorded in the ledger with one of today's candidate names by
running a fixed cascade of strategies:

1. Alias table lookup (returned even if the target is not a candidate)
2. Exact match after normalization
3. Case-insensitive match after normalization
4. Substring containment in either direction
5. Containment after rewriting full forms back to abbreviations

The first strategy to produce a hit wins, and within a strategy the first
candidate in input order wins. There is no scoring.
"""

import re
from collections.abc import Sequence
from typing import Optional

from ..config.defaults import MatchParams
from ..data.models import MatchResult, MatchStrategy
from ..logging.config import get_match_logger, log_match_decision
from .alias_table import AliasTable
from .normalizer import normalize_name

match_logger = get_match_logger(__name__)


def _contains_either_way(left: str, right: str) -> bool:
    return left in right or right in left


class MatchEngine:
    """
    Strategy cascade over an injected alias table.

    The engine holds no per-call state and can be reused across ledger rows
    and across runs.
    """

    def __init__(self, alias_table: Optional[AliasTable] = None,
                 params: Optional[MatchParams] = None) -> None:
        self.alias_table = alias_table if alias_table is not None else AliasTable.builtin()
        self.params = params or MatchParams()
        self.logger = match_logger

        self._abbreviation_rules = [
            (re.compile(re.escape(full), re.IGNORECASE), abbreviation)
            for full, abbreviation in self.params.abbreviation_pairs
        ]

    def find_best_match(self, recorded_name: str,
                        candidates: Sequence[str]) -> Optional[str]:
        """
        Find the candidate naming the same security as ``recorded_name``.

        Args:
            recorded_name: Name held by the ledger
            candidates: Names observed today, in discovery order

        Returns:
            Matched candidate (or alias target), None if nothing matched
        """
        return self.match(recorded_name, candidates).matched_name

    def matches(self, recorded_name: str, candidate: str) -> bool:
        """True when the cascade pairs ``recorded_name`` with ``candidate``."""
        return self.match(recorded_name, [candidate], log=False).matched_name == candidate

    def match(self, recorded_name: str, candidates: Sequence[str],
              log: bool = True) -> MatchResult:
        """
        Run the cascade and report which strategy produced the result.

        Args:
            recorded_name: Name held by the ledger
            candidates: Names observed today, in discovery order
            log: Emit a match decision log event

        Returns:
            MatchResult with the matched name and strategy
        """
        result = self._run_cascade(recorded_name, candidates)

        if log:
            log_match_decision(
                self.logger,
                recorded_name=recorded_name,
                matched_name=result.matched_name,
                strategy=result.strategy.value,
                context={"candidate_count": len(candidates)},
            )

        return result

    def _run_cascade(self, recorded_name: str,
                     candidates: Sequence[str]) -> MatchResult:
        alias_target = self.alias_table.lookup(recorded_name)
        if alias_target is not None:
            return MatchResult(alias_target, MatchStrategy.ALIAS)

        recorded = normalize_name(recorded_name)
        if not recorded:
            return MatchResult.no_match()

        normalized = [(candidate, normalize_name(candidate)) for candidate in candidates]
        # Blank candidates would be contained in every name
        normalized = [(candidate, norm) for candidate, norm in normalized if norm]

        for candidate, norm in normalized:
            if norm == recorded:
                return MatchResult(candidate, MatchStrategy.EXACT_NORMALIZED)

        recorded_lower = recorded.lower()
        lowered = [(candidate, norm.lower()) for candidate, norm in normalized]

        for candidate, norm_lower in lowered:
            if norm_lower == recorded_lower:
                return MatchResult(candidate, MatchStrategy.CASE_INSENSITIVE)

        for candidate, norm_lower in lowered:
            if _contains_either_way(recorded_lower, norm_lower):
                return MatchResult(candidate, MatchStrategy.SUBSTRING_PARTIAL)

        for pattern, abbreviation in self._abbreviation_rules:
            rewritten = pattern.sub(abbreviation, recorded).lower()
            for candidate, norm_lower in lowered:
                if _contains_either_way(rewritten, norm_lower):
                    return MatchResult(candidate, MatchStrategy.ABBREVIATION_REWRITE)

        return MatchResult.no_match()
