"""Flat-mapping helpers: copy, merge, compare and freeze plain objects."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

__all__ = [
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "make_immutable",
    "make_word",
]


def shallow_copy(obj: Any) -> Any:
    """Return a shallow copy of *obj*; nested values are shared, not copied.

    Immutable scalars (and ``None``) come back unchanged.
    """
    return copy.copy(obj)


def merge_objects(objects: Iterable[Mapping[str, float]]) -> dict[str, float]:
    """Merge mappings into one dict, summing values of overlapping keys.

    >>> merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}])
    {'a': 1, 'b': 5, 'c': 5}
    """
    merged: dict[str, float] = {}
    for obj in objects:
        for key, value in obj.items():
            merged[key] = merged.get(key, 0) + value
    return merged


def remove_properties(obj: Any, keys: Any) -> Any:
    """Return a copy of *obj* without *keys*; missing keys are ignored.

    Non-mapping *obj* or non-list *keys* return *obj* untouched.
    """
    if not isinstance(obj, Mapping) or not isinstance(keys, (list, tuple)):
        return obj
    drop = set(keys)
    return {k: v for k, v in obj.items() if k not in drop}


def compare_objects(first: Any, second: Any) -> bool:
    """Compare two flat mappings key by key.

    Falls back to plain equality when either side is not a mapping.
    """
    if not isinstance(first, Mapping) or not isinstance(second, Mapping):
        return first == second
    if len(first) != len(second):
        return False
    for key, value in first.items():
        if key not in second or second[key] != value:
            return False
    return True


def is_empty_object(obj: Any) -> bool:
    if not isinstance(obj, Mapping):
        return True
    return len(obj) == 0


def make_immutable(obj: Any) -> Any:
    """Return a read-only version of *obj*.

    Mappings become a ``MappingProxyType`` over a private copy, so later
    changes to the source do not leak through; lists become tuples.
    """
    if isinstance(obj, Mapping):
        return MappingProxyType(dict(obj))
    if isinstance(obj, list):
        return tuple(obj)
    return obj


def make_word(letters: Any) -> str:
    """Rebuild a word from a ``{letter: [positions]}`` mapping.

    >>> make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]})
    'aabbcc'
    """
    if not isinstance(letters, Mapping):
        return ""

    positions_by_letter = {
        letter: positions
        for letter, positions in letters.items()
        if isinstance(positions, (list, tuple))
    }
    length = max(
        (max(p, default=-1) for p in positions_by_letter.values()), default=-1
    ) + 1

    word = [""] * length
    for letter, positions in positions_by_letter.items():
        for pos in positions:
            if 0 <= pos < length:
                word[pos] = letter
    return "".join(word)
