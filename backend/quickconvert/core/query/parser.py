"""Query parser: raw launcher input -> value, source candidates, targets."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from quickconvert.core.catalog.units import CATALOG, UnitDefinition, same_dimension
from quickconvert.core.query.resolver import ResolvedMatch, resolve

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^(\d+(?:\.\d+)?)\D*", re.ASCII)

# Checked in order; only the first matching prefix is removed.
CONNECTORS = ("to ", "as ", "in ")


class QueryError(ValueError):
    """Base class for input the user has to correct."""

    def __init__(self, message: str, text: str):
        self.text = text
        super().__init__(message)


class InvalidInputError(QueryError):
    """Raised when the input does not start with a number."""

    def __init__(self, text: str):
        super().__init__(f"Expected a leading number, got '{text}'", text)


class InvalidUnitError(QueryError):
    """Raised when no unit in the catalog matches the source fragment."""

    def __init__(self, text: str):
        super().__init__(f"No unit matches '{text}'", text)


@dataclass
class Query:
    value: float
    operation: str = ""
    source_candidates: list[ResolvedMatch] = field(default_factory=list)
    target_candidates: list[UnitDefinition] = field(default_factory=list)

    @property
    def is_preview(self) -> bool:
        """No unit typed yet; every catalog unit is a suggestion."""
        return not self.operation

    @property
    def is_ambiguous(self) -> bool:
        return len(self.source_candidates) > 1

    @property
    def source(self) -> UnitDefinition | None:
        if len(self.source_candidates) != 1:
            return None
        return self.source_candidates[0].unit


def strip_connector(text: str) -> str:
    for prefix in CONNECTORS:
        if text.startswith(prefix):
            return text[len(prefix):]
    return text


def parse_query(raw_input: str, catalog: tuple[UnitDefinition, ...] = CATALOG) -> Query:
    """Parse launcher input such as ``"42 km to miles"``.

    Raises InvalidInputError when there is no leading number and
    InvalidUnitError when the text after it names no known unit.
    """
    text = raw_input.strip()
    m = _NUMBER_RE.match(text)
    if m is None:
        raise InvalidInputError(text)

    raw_number = m.group(1)
    value = float(raw_number)
    operation = text[len(raw_number):].strip()
    if not operation:
        return Query(value=value)

    sources = resolve(operation, catalog)
    if not sources:
        raise InvalidUnitError(operation)
    if len(sources) > 1:
        logger.debug("'%s' is ambiguous: %d candidates", operation, len(sources))
        return Query(value=value, operation=operation, source_candidates=sources)

    source = sources[0]
    raw_end = strip_connector(operation[source.matched_chars:].strip())

    # Restrict to convertible units before matching the target text
    suitable = same_dimension(source.unit, catalog)
    desired = [match.unit for match in resolve(raw_end, suitable)]
    targets = desired or suitable
    logger.debug(
        "'%s' resolved to %s; %d target(s) for '%s'",
        operation, source.unit.symbol, len(targets), raw_end,
    )

    return Query(
        value=value,
        operation=operation,
        source_candidates=sources,
        target_candidates=targets,
    )
