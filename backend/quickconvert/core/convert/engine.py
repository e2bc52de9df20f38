"""Conversion between units of the same dimension via the dimension's base unit."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from quickconvert.core.catalog.units import UnitDefinition


class DimensionMismatchError(TypeError):
    """Raised when converting between units of different dimensions."""

    def __init__(self, source: UnitDefinition, target: UnitDefinition) -> None:
        super().__init__(
            f"Cannot convert {source.dimension.value} ({source.symbol}) "
            f"to {target.dimension.value} ({target.symbol})"
        )


@dataclass(frozen=True)
class Conversion:
    source: UnitDefinition
    target: UnitDefinition
    value: float
    converted: float


def to_base(value: float, unit: UnitDefinition) -> float:
    """Express ``value`` (in ``unit``) in the dimension's base unit."""
    if unit.reciprocal:
        if value == 0:
            return math.inf
        return unit.coefficient / value
    return value * unit.coefficient + unit.constant


def from_base(value: float, unit: UnitDefinition) -> float:
    """Express a base-unit ``value`` in ``unit``."""
    if unit.reciprocal:
        if value == 0:
            return math.inf
        return unit.coefficient / value
    return (value - unit.constant) / unit.coefficient


def convert(value: float, source: UnitDefinition, target: UnitDefinition) -> float:
    if source.dimension != target.dimension:
        raise DimensionMismatchError(source, target)
    if source == target:
        return value
    return from_base(to_base(value, source), target)


def convert_all(
    value: float, source: UnitDefinition, targets: Iterable[UnitDefinition]
) -> list[Conversion]:
    """Convert ``value`` to each target, keeping the targets' order."""
    return [Conversion(source, target, value, convert(value, source, target)) for target in targets]
