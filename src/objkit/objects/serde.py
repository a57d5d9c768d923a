"""JSON round-trip helpers for plain values and simple classes."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def get_json(obj: Any) -> str:
    """Serialize *obj* to compact JSON.

    Dataclass instances are converted with :func:`dataclasses.asdict` first.

    >>> get_json({"height": 10, "width": 20})
    '{"height":10,"width":20}'
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    return json.dumps(obj, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object without calling ``__init__``.

    Every top-level key of the decoded object becomes an instance attribute,
    so methods defined on *cls* work on the result.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    return instance
