"""Tests for the launcher result feed."""

import json

from quickconvert.core.catalog.units import CATALOG
from quickconvert.core.service import (
    INVALID_INPUT_ITEM,
    INVALID_UNIT_ITEM,
    run_query,
)


class TestConversions:
    def test_all_length_units(self, formatter):
        outcome = run_query("1 km", formatter)
        assert outcome.ok
        items = outcome.feed.items
        assert len(items) == 21
        assert all(item.valid for item in items)
        assert all(item.arg == item.title for item in items)

        meters = next(item for item in items if item.uid == "km to m")
        assert meters.title == "1000 m"
        assert meters.subtitle == "Kilometers → Meters"
        assert meters.autocomplete == "1 km to m"

    def test_temperature(self, formatter):
        outcome = run_query("100 c to f", formatter)
        assert outcome.ok
        [item] = outcome.feed.items
        assert item.title == "212 °F"
        assert item.arg == "212 °F"
        assert item.uid == "°C to °F"
        assert item.subtitle == "Degrees Celsius → Degrees Fahrenheit"
        assert item.valid

    def test_named_target(self, formatter):
        [item] = run_query("42 km to miles", formatter).feed.items
        assert item.title == "26.1 mi"

    def test_alias_source(self, formatter):
        [item] = run_query("1 atmospheres to psi", formatter).feed.items
        assert item.title == "14.7 psi"
        assert item.subtitle == "Standard Atmospheres → Pounds Per Square Inch"

    def test_reciprocal(self, formatter):
        [item] = run_query("10 mpg to liters per 100 kilometers", formatter).feed.items
        assert item.title == "23.52 L/100km"

    def test_large_values_stay_round(self, formatter):
        [item] = run_query("1 YB to B", formatter).feed.items
        assert item.title == "1000000000000000000000000 B"

    def test_imperial(self, formatter):
        [item] = run_query("1 imperial gallons to gallons", formatter).feed.items
        assert item.title == "1.2 gal"
        assert item.autocomplete == "1 imperial gal to gal"


class TestSuggestions:
    def test_preview_lists_catalog(self, formatter):
        outcome = run_query("42", formatter)
        assert outcome.ok
        items = outcome.feed.items
        assert len(items) == len(CATALOG)
        assert not any(item.valid for item in items)
        assert all(item.arg is None for item in items)
        assert [item.uid for item in items] == [u.symbol for u in CATALOG]

        first = items[0]
        assert first.title == "42 °"
        assert first.subtitle == "Degrees"
        assert first.autocomplete == "42 ° to "

    def test_ambiguous_source(self, formatter):
        outcome = run_query("5 kilo", formatter)
        assert outcome.ok
        items = outcome.feed.items
        assert len(items) > 1
        assert not any(item.valid for item in items)
        lengths = [len(item.uid) for item in items]
        assert lengths == sorted(lengths)
        assert all(item.autocomplete == f"{item.title} to " for item in items)
        assert "5 km" in [item.title for item in items]


class TestGuidance:
    def test_invalid_input(self, formatter):
        outcome = run_query("abc", formatter)
        assert not outcome.ok
        assert outcome.feed.items == [INVALID_INPUT_ITEM]

    def test_invalid_unit(self, formatter):
        outcome = run_query("5 xyz", formatter)
        assert not outcome.ok
        assert outcome.feed.items == [INVALID_UNIT_ITEM]
        assert outcome.feed.items[0].subtitle == "Examples: km, kilometers"

    def test_json_omits_unset_fields(self, formatter):
        data = json.loads(run_query("abc", formatter).feed.to_json())
        assert data == {
            "items": [{
                "uid": "Invalid Input",
                "title": "Input a Value and Unit",
                "subtitle": "Example: 42 km",
                "valid": False,
            }]
        }
