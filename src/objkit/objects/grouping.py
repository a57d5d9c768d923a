"""Sorting and multimap grouping over lists of records."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["sort_cities_array", "group"]


def sort_cities_array(items: Any) -> Any:
    """Sort ``{"country", "city"}`` records by country, then city.

    Comparison ignores case. The list is sorted in place and returned;
    anything that is not a list is returned unchanged.
    """
    if not isinstance(items, list):
        return items
    items.sort(key=lambda r: (r["country"].casefold(), r["city"].casefold()))
    return items


def group(
    items: Any,
    key_selector: Callable[[Any], Any],
    value_selector: Callable[[Any], Any],
) -> dict[Any, list[Any]]:
    """Group *items* into a multimap of ``key -> [values]``.

    Keys keep first-seen order and values keep input order. Invalid input
    (non-list items, non-callable selectors) yields an empty mapping.
    """
    if not isinstance(items, list) or not callable(key_selector) or not callable(value_selector):
        return {}

    result: dict[Any, list[Any]] = {}
    for item in items:
        result.setdefault(key_selector(item), []).append(value_selector(item))
    return result
