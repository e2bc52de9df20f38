"""Prefix matching of a search fragment against a single unit."""

from __future__ import annotations

from enum import Enum, auto

from quickconvert.core.catalog.units import UnitDefinition


class MatchType(Enum):
    NONE = auto()
    PARTIAL = auto()   # fragment is a strict prefix
    EXACT = auto()     # fragment equals the symbol or a name


def matches(unit: UnitDefinition, fragment: str) -> MatchType:
    """Classify how ``fragment`` matches ``unit``.

    The symbol is checked first (case-sensitive); names are only consulted
    when the symbol does not start with the fragment.
    """
    if unit.symbol.startswith(fragment):
        return MatchType.EXACT if unit.symbol == fragment else MatchType.PARTIAL

    matching_names = [name for name in unit.names if name.startswith(fragment)]
    if matching_names:
        return MatchType.EXACT if fragment in matching_names else MatchType.PARTIAL

    return MatchType.NONE
