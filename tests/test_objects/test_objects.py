"""Tests for the object and array utilities."""

import json
import logging
from dataclasses import dataclass
from types import MappingProxyType

import pytest

from objkit.config import ObjkitConfig
from objkit.objects import (
    Rectangle,
    compare_objects,
    from_json,
    get_json,
    group,
    is_empty_object,
    make_immutable,
    make_word,
    merge_objects,
    remove_properties,
    sell_tickets,
    shallow_copy,
    sort_cities_array,
)


# ---------------------------------------------------------------------------
# Mappings
# ---------------------------------------------------------------------------


class TestShallowCopy:
    def test_copies_top_level(self):
        source = {"a": 2, "b": 5}
        result = shallow_copy(source)
        assert result == {"a": 2, "b": 5}
        assert result is not source

    def test_nested_values_shared(self):
        nested = {"a": [1, 2, 3]}
        result = shallow_copy({"a": 2, "b": nested})
        assert result["b"] is nested

    def test_empty(self):
        assert shallow_copy({}) == {}

    def test_scalar_returned_as_is(self):
        assert shallow_copy(5) == 5
        assert shallow_copy(None) is None


class TestMergeObjects:
    def test_sums_overlapping_keys(self):
        assert merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}]) == {"a": 1, "b": 5, "c": 5}

    def test_empty_list(self):
        assert merge_objects([]) == {}

    def test_inputs_not_mutated(self):
        first = {"a": 1}
        merge_objects([first, {"a": 2}])
        assert first == {"a": 1}


class TestRemoveProperties:
    def test_removes_keys(self):
        assert remove_properties({"a": 1, "b": 2, "c": 3}, ["b", "c"]) == {"a": 1}

    def test_missing_keys_ignored(self):
        assert remove_properties({"a": 1, "b": 2, "c": 3}, ["d", "e"]) == {"a": 1, "b": 2, "c": 3}

    def test_source_not_mutated(self):
        source = {"name": "John", "age": 30, "city": "New York"}
        assert remove_properties(source, ["age"]) == {"name": "John", "city": "New York"}
        assert "age" in source

    def test_invalid_keys_returns_object(self):
        source = {"a": 1}
        assert remove_properties(source, "a") is source

    def test_non_mapping_returned(self):
        assert remove_properties(None, ["a"]) is None


class TestCompareObjects:
    def test_equal(self):
        assert compare_objects({"a": 1, "b": 2}, {"a": 1, "b": 2}) is True

    def test_different_value(self):
        assert compare_objects({"a": 1, "b": 2}, {"a": 1, "b": 3}) is False

    def test_different_keys(self):
        assert compare_objects({"a": 1}, {"b": 1}) is False

    def test_different_size(self):
        assert compare_objects({"a": 1}, {"a": 1, "b": 2}) is False

    def test_non_mappings(self):
        assert compare_objects(1, 1) is True
        assert compare_objects(None, {}) is False


class TestIsEmptyObject:
    def test_empty(self):
        assert is_empty_object({}) is True

    def test_not_empty(self):
        assert is_empty_object({"a": 1}) is False

    def test_non_mapping(self):
        assert is_empty_object(None) is True


class TestMakeImmutable:
    def test_mapping_is_read_only(self):
        frozen = make_immutable({"a": 1, "b": 2})
        assert isinstance(frozen, MappingProxyType)
        with pytest.raises(TypeError):
            frozen["a"] = 5  # type: ignore[index]
        with pytest.raises(TypeError):
            del frozen["a"]  # type: ignore[attr-defined]
        assert dict(frozen) == {"a": 1, "b": 2}

    def test_source_changes_do_not_leak(self):
        source = {"a": 1}
        frozen = make_immutable(source)
        source["b"] = 2
        assert dict(frozen) == {"a": 1}

    def test_list_becomes_tuple(self):
        assert make_immutable([1, 2]) == (1, 2)

    def test_scalar(self):
        assert make_immutable(3) == 3


class TestMakeWord:
    def test_simple(self):
        assert make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]}) == "aabbcc"

    def test_hello_world(self):
        letters = {"H": [0], "e": [1], "l": [2, 3, 8], "o": [4, 6], "W": [5], "r": [7], "d": [9]}
        assert make_word(letters) == "HelloWorld"

    def test_empty(self):
        assert make_word({}) == ""

    def test_non_mapping(self):
        assert make_word(None) == ""

    def test_non_list_positions_skipped(self):
        assert make_word({"a": [0], "b": 1}) == "a"


# ---------------------------------------------------------------------------
# Tickets
# ---------------------------------------------------------------------------


class TestSellTickets:
    def test_change_for_fifty(self):
        assert sell_tickets([25, 25, 50]) is True

    def test_no_change_for_hundred(self):
        assert sell_tickets([25, 100]) is False

    def test_no_change_for_first_fifty(self):
        assert sell_tickets([50]) is False

    def test_hundred_prefers_fifty(self):
        # 100 takes 50+25, leaving a 25 for the next 50.
        assert sell_tickets([25, 25, 50, 25, 100, 50]) is True

    def test_hundred_with_three_quarters(self):
        assert sell_tickets([25, 25, 25, 100]) is True

    def test_empty_queue(self):
        assert sell_tickets([]) is True

    def test_unknown_bill_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objkit.objects.tickets"):
            assert sell_tickets([25, 20, 50]) is True
        assert "unsupported bill 20" in caplog.text

    def test_custom_price(self):
        config = ObjkitConfig(ticket_price=50)
        assert sell_tickets([50, 100], config) is True
        assert sell_tickets([100], config) is False

    def test_bill_below_price(self):
        assert sell_tickets([25], ObjkitConfig(ticket_price=50)) is False


class TestObjkitConfig:
    def test_defaults(self):
        config = ObjkitConfig()
        assert config.ticket_price == 25
        assert config.denominations == (25, 50, 100)

    @pytest.mark.parametrize("denominations", [(0, 25), (25, -50)])
    def test_non_positive_denomination_rejected(self, denominations):
        with pytest.raises(ValueError, match="must be positive"):
            ObjkitConfig(denominations=denominations)


# ---------------------------------------------------------------------------
# Rectangle / JSON
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields_and_area(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200


@dataclass
class Circle:
    radius: float

    def diameter(self) -> float:
        return self.radius * 2


class TestJSON:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_mapping(self):
        assert get_json({"height": 10, "width": 20}) == '{"height":10,"width":20}'

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_from_json_builds_instance(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.diameter() == 20

    def test_round_trip(self):
        r = from_json(Rectangle, get_json(Rectangle(3, 4)))
        assert r == Rectangle(3, 4)
        assert r.area() == 12

    def test_from_json_rejects_non_object(self):
        with pytest.raises(TypeError):
            from_json(Circle, "[1, 2]")

    def test_from_json_malformed(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Circle, "{radius")


# ---------------------------------------------------------------------------
# Sorting / grouping
# ---------------------------------------------------------------------------


CITIES = [
    {"country": "Russia", "city": "Moscow"},
    {"country": "Belarus", "city": "Minsk"},
    {"country": "Poland", "city": "Warsaw"},
    {"country": "Russia", "city": "Saint Petersburg"},
    {"country": "Poland", "city": "Krakow"},
    {"country": "Belarus", "city": "Brest"},
]


class TestSortCities:
    def test_sorts_by_country_then_city(self):
        result = sort_cities_array([dict(c) for c in CITIES])
        assert [(c["country"], c["city"]) for c in result] == [
            ("Belarus", "Brest"),
            ("Belarus", "Minsk"),
            ("Poland", "Krakow"),
            ("Poland", "Warsaw"),
            ("Russia", "Moscow"),
            ("Russia", "Saint Petersburg"),
        ]

    def test_sorts_in_place(self):
        items = [dict(c) for c in CITIES]
        assert sort_cities_array(items) is items

    def test_ignores_case(self):
        items = [{"country": "b", "city": "x"}, {"country": "A", "city": "y"}]
        assert [c["country"] for c in sort_cities_array(items)] == ["A", "b"]

    def test_non_list(self):
        assert sort_cities_array(None) is None


class TestGroup:
    def test_groups_in_first_seen_order(self):
        items = [
            {"country": "Belarus", "city": "Brest"},
            {"country": "Russia", "city": "Omsk"},
            {"country": "Russia", "city": "Samara"},
            {"country": "Belarus", "city": "Grodno"},
            {"country": "Belarus", "city": "Minsk"},
            {"country": "Poland", "city": "Lodz"},
        ]
        result = group(items, lambda i: i["country"], lambda i: i["city"])
        assert result == {
            "Belarus": ["Brest", "Grodno", "Minsk"],
            "Russia": ["Omsk", "Samara"],
            "Poland": ["Lodz"],
        }
        assert list(result) == ["Belarus", "Russia", "Poland"]

    def test_empty_input(self):
        assert group([], lambda i: i, lambda i: i) == {}

    def test_invalid_selector(self):
        assert group([1, 2], None, lambda i: i) == {}  # type: ignore[arg-type]
