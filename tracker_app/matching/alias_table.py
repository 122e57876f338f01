"""Static alias table mapping name variants to canonical broker names."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from ..config.aliases import BUILTIN_ALIAS_PAIRS


class AliasTable:
    """
    Immutable variant -> canonical name lookup.

    Built once from ordered pairs. When a variant appears more than once the
    last pair wins, so callers can layer overrides after the built-ins.
    Lookups are exact and case-sensitive.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()):
        mapping: dict[str, str] = {}
        for variant, canonical in pairs:
            mapping[variant] = canonical
        self._mapping: Mapping[str, str] = MappingProxyType(mapping)

    @classmethod
    def builtin(cls, extra_pairs: Iterable[tuple[str, str]] = ()) -> "AliasTable":
        """Create a table from the built-in pairs followed by ``extra_pairs``."""
        return cls([*BUILTIN_ALIAS_PAIRS, *extra_pairs])

    def lookup(self, raw_name: str) -> Optional[str]:
        """Return the canonical name for ``raw_name``, or None if unknown."""
        return self._mapping.get(raw_name)

    def as_mapping(self) -> Mapping[str, str]:
        """Read-only view of the resolved table."""
        return self._mapping

    def __contains__(self, raw_name: object) -> bool:
        return raw_name in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)
