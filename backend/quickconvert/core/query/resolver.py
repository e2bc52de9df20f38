"""Progressive resolution: drop trailing words until some unit matches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from quickconvert.core.catalog.units import UnitDefinition
from quickconvert.core.query.matcher import MatchType, matches


@dataclass(frozen=True)
class ResolvedMatch:
    unit: UnitDefinition
    matched_chars: int  # length of the fragment prefix that produced the match


def resolve(fragment: str, units: Iterable[UnitDefinition]) -> list[ResolvedMatch]:
    """Find the units named by the longest leading word run of ``fragment``.

    Tries all words first, then one word fewer, and so on. At the first word
    count with any match:
      - an exact match is returned on its own (first one in catalog order);
      - otherwise every partial match is returned, shortest symbol first.
    Returns an empty list when nothing matches at any length.
    """
    units = list(units)
    words = fragment.split()

    for word_index in range(len(words) - 1, -1, -1):
        candidate = " ".join(words[:word_index + 1])
        matched_chars = len(candidate)

        partial: list[UnitDefinition] = []
        for unit in units:
            match_type = matches(unit, candidate)
            if match_type is MatchType.EXACT:
                return [ResolvedMatch(unit, matched_chars)]
            if match_type is MatchType.PARTIAL:
                partial.append(unit)

        if partial:
            # stable sort: equal-length symbols keep catalog order
            partial.sort(key=lambda u: len(u.symbol))
            return [ResolvedMatch(unit, matched_chars) for unit in partial]

    return []
