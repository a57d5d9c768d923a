"""Object and array utilities -- public re-exports."""

from objkit.objects.grouping import group, sort_cities_array
from objkit.objects.mappings import (
    compare_objects,
    is_empty_object,
    make_immutable,
    make_word,
    merge_objects,
    remove_properties,
    shallow_copy,
)
from objkit.objects.serde import from_json, get_json
from objkit.objects.shapes import Rectangle
from objkit.objects.tickets import sell_tickets

__all__ = [
    # mappings
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "make_immutable",
    "make_word",
    # tickets
    "sell_tickets",
    # shapes
    "Rectangle",
    # serde
    "get_json",
    "from_json",
    # grouping
    "sort_cities_array",
    "group",
]
