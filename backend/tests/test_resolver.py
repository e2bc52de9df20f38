"""Tests for progressive word-dropping resolution."""

from quickconvert.core.catalog.units import CATALOG, Dimension
from quickconvert.core.query.resolver import ResolvedMatch, resolve


def _unit(symbol: str):
    return next(u for u in CATALOG if u.symbol == symbol)


class TestExactMatches:
    def test_symbol(self):
        assert resolve("km", CATALOG) == [ResolvedMatch(_unit("km"), 2)]

    def test_single_letter_symbol(self):
        assert resolve("m", CATALOG) == [ResolvedMatch(_unit("m"), 1)]

    def test_exact_beats_partial(self):
        # "k" also prefixes kA, km, kg, ... but is an exact kelvin name
        result = resolve("k", CATALOG)
        assert len(result) == 1
        assert result[0].unit.symbol == "K"

    def test_multi_word_name(self):
        result = resolve("square meters", CATALOG)
        assert result == [ResolvedMatch(_unit("m²"), 13)]


class TestTrailingWords:
    def test_drops_target_text(self):
        result = resolve("km to miles", CATALOG)
        assert result == [ResolvedMatch(_unit("km"), 2)]

    def test_drops_noise(self):
        result = resolve("square meters please now", CATALOG)
        assert result == [ResolvedMatch(_unit("m²"), len("square meters"))]

    def test_collapses_whitespace(self):
        result = resolve("  km   to miles", CATALOG)
        assert result[0].unit.symbol == "km"
        assert result[0].matched_chars == 2


class TestPartialMatches:
    def test_sorted_by_symbol_length(self):
        result = resolve("kilo", CATALOG)
        assert len(result) > 2
        lengths = [len(m.unit.symbol) for m in result]
        assert lengths == sorted(lengths)

    def test_ties_keep_catalog_order(self):
        result = resolve("kilo", CATALOG)
        keys = [(len(m.unit.symbol), CATALOG.index(m.unit)) for m in result]
        assert keys == sorted(keys)

    def test_kilo_candidates(self):
        symbols = {m.unit.symbol for m in resolve("kilo", CATALOG)}
        assert {"km", "kg", "kW", "kJ", "kPa", "kL"} <= symbols
        assert all(m.matched_chars == 4 for m in resolve("kilo", CATALOG))

    def test_multi_word_partial(self):
        symbols = [m.unit.symbol for m in resolve("square m", CATALOG)]
        assert symbols == ["m²", "Mm²", "mm²", "µm²", "mi²"]


class TestNoMatch:
    def test_unknown(self):
        assert resolve("xyz", CATALOG) == []

    def test_empty(self):
        assert resolve("", CATALOG) == []
        assert resolve("   ", CATALOG) == []


class TestRestrictedPool:
    def test_only_searches_given_units(self):
        pool = [u for u in CATALOG if u.dimension == Dimension.TEMPERATURE]
        result = resolve("f", pool)
        assert [m.unit.symbol for m in result] == ["°F"]

    def test_idempotent(self):
        assert resolve("kilo", CATALOG) == resolve("kilo", CATALOG)
        assert resolve("mi to km", CATALOG) == resolve("mi to km", CATALOG)
