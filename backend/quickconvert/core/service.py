"""Turns a raw query into the launcher's result feed."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

from quickconvert.core.catalog.units import CATALOG, UnitDefinition
from quickconvert.core.convert.engine import convert_all
from quickconvert.core.format.formatter import MeasureFormatter
from quickconvert.core.query.parser import (
    InvalidInputError,
    InvalidUnitError,
    Query,
    parse_query,
)
from quickconvert.models.schemas import ScriptFilterFeed, ScriptFilterItem

logger = logging.getLogger(__name__)


INVALID_INPUT_ITEM = ScriptFilterItem(
    uid="Invalid Input",
    title="Input a Value and Unit",
    subtitle="Example: 42 km",
)

INVALID_UNIT_ITEM = ScriptFilterItem(
    uid="Invalid Unit",
    title="Input a Valid Unit",
    subtitle="Examples: km, kilometers",
)


@dataclass
class QueryOutcome:
    feed: ScriptFilterFeed
    ok: bool  # False when the user must correct the input


def display_name(unit: UnitDefinition) -> str:
    return string.capwords(unit.name)


def suggestion_items(value: float, units: list[UnitDefinition], fmt: MeasureFormatter) -> list[ScriptFilterItem]:
    """Non-actionable items that autocomplete to ``"<value> <symbol> to "``."""
    items = []
    for unit in units:
        formatted = fmt.format_measure(value, unit)
        items.append(ScriptFilterItem(
            uid=unit.symbol,
            title=formatted,
            subtitle=display_name(unit),
            autocomplete=f"{formatted} to ",
        ))
    return items


def conversion_items(query: Query, fmt: MeasureFormatter) -> list[ScriptFilterItem]:
    source = query.source
    formatted_source = fmt.format_measure(query.value, source)

    items = []
    for conversion in convert_all(query.value, source, query.target_candidates):
        target = conversion.target
        formatted = fmt.format_measure(conversion.converted, target)
        items.append(ScriptFilterItem(
            uid=f"{source.symbol} to {target.symbol}",
            title=formatted,
            subtitle=f"{display_name(source)} → {display_name(target)}",
            autocomplete=f"{formatted_source} to {target.symbol}",
            arg=formatted,
            valid=True,
        ))
    return items


def run_query(
    raw_input: str,
    fmt: MeasureFormatter,
    catalog: tuple[UnitDefinition, ...] = CATALOG,
) -> QueryOutcome:
    try:
        query = parse_query(raw_input, catalog)
    except InvalidInputError as e:
        logger.info("Rejected query: %s", e)
        return QueryOutcome(ScriptFilterFeed(items=[INVALID_INPUT_ITEM]), ok=False)
    except InvalidUnitError as e:
        logger.info("Rejected query: %s", e)
        return QueryOutcome(ScriptFilterFeed(items=[INVALID_UNIT_ITEM]), ok=False)

    if query.is_preview:
        items = suggestion_items(query.value, list(catalog), fmt)
    elif query.is_ambiguous:
        units = [match.unit for match in query.source_candidates]
        items = suggestion_items(query.value, units, fmt)
    else:
        items = conversion_items(query, fmt)

    return QueryOutcome(ScriptFilterFeed(items=items), ok=True)
