"""Display formatting of converted values."""

from __future__ import annotations

import math
from decimal import Decimal

from quickconvert.core.catalog.units import UnitDefinition

# Digits a double carries reliably; anything below is binary noise.
SIGNIFICANT_DIGITS = 15


class MeasureFormatter:
    """Renders numbers with 0..max_fraction_digits decimals, no grouping."""

    def __init__(self, max_fraction_digits: int):
        if max_fraction_digits < 0:
            raise ValueError(f"max_fraction_digits must be non-negative, got {max_fraction_digits}")
        self.max_fraction_digits = max_fraction_digits

    def format_number(self, value: float) -> str:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "∞" if value > 0 else "-∞"

        # Decimal formatting rounds half-even under the default context
        significant = Decimal(f"{value:.{SIGNIFICANT_DIGITS}g}")
        text = f"{significant:.{self.max_fraction_digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text == "-0":
            text = "0"
        return text

    def format_measure(self, value: float, unit: UnitDefinition) -> str:
        """``"<number> <symbol>"``, e.g. ``"26.1 mi"``."""
        return f"{self.format_number(value)} {unit.symbol}"
