"""Selector model: SimpleSelector and CombinedSelector node types.

A selector node is either a simple selector, built up part by part in CSS
order::

    element#id.class[attr]:pseudo-class::pseudo-element

or a combination of two nodes joined by a combinator token (``" "``, ``"+"``,
``"~"``, ``">"``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

from objkit.selector.errors import DuplicateSelectorPart, OutOfOrder

__all__ = ["Category", "SimpleSelector", "CombinedSelector", "SelectorNode"]

log = logging.getLogger(__name__)


class Category(IntEnum):
    """Selector part kinds, in the order they must be supplied."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


@dataclass
class SimpleSelector:
    """A single compound selector, mutated in place by chained calls.

    Each builder method returns ``self``. Element, id and pseudo-element may be
    set once; parts must arrive in :class:`Category` order, though classes,
    attributes and pseudo-classes may repeat. Parts are only settable through
    the builder methods, never through the constructor.
    """

    element_name: str | None = field(default=None, init=False)
    id_name: str | None = field(default=None, init=False)
    classes: list[str] = field(default_factory=list, init=False)
    attributes: list[str] = field(default_factory=list, init=False)
    pseudo_classes: list[str] = field(default_factory=list, init=False)
    pseudo_element_name: str | None = field(default=None, init=False)
    _reached: Category | None = field(default=None, init=False, repr=False, compare=False)

    # --- builder --------------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        self._enter(Category.ELEMENT, already_set=self.element_name is not None)
        self.element_name = value
        return self

    def id(self, value: str) -> SimpleSelector:
        self._enter(Category.ID, already_set=self.id_name is not None)
        self.id_name = value
        return self

    def class_(self, value: str) -> SimpleSelector:
        self._enter(Category.CLASS)
        self.classes.append(value)
        return self

    def attr(self, value: str) -> SimpleSelector:
        """Append a raw attribute body, e.g. ``href$=".png"``."""
        self._enter(Category.ATTRIBUTE)
        self.attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> SimpleSelector:
        self._enter(Category.PSEUDO_CLASS)
        self.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> SimpleSelector:
        self._enter(Category.PSEUDO_ELEMENT, already_set=self.pseudo_element_name is not None)
        self.pseudo_element_name = value
        return self

    def _enter(self, category: Category, already_set: bool = False) -> None:
        """Validate *category* against the node state, then record it.

        Nothing is recorded when a check fails, so the node stays usable.
        """
        if already_set:
            log.debug("Rejected duplicate %s part", category.name)
            raise DuplicateSelectorPart(category)
        if self._reached is not None and category < self._reached:
            log.debug(
                "Rejected %s part after %s", category.name, self._reached.name
            )
            raise OutOfOrder(category, self._reached)
        self._reached = category

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        parts: list[str] = []
        if self.element_name:
            parts.append(self.element_name)
        if self.id_name:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{c}" for c in self.classes)
        parts.extend(f"[{a}]" for a in self.attributes)
        parts.extend(f":{p}" for p in self.pseudo_classes)
        if self.pseudo_element_name:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selector nodes joined by a combinator.

    The combinator is rendered with one space on each side whatever the token
    is, so a descendant combinator (``" "``) renders as three spaces.
    """

    left: SelectorNode
    combinator: str
    right: SelectorNode

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


SelectorNode = SimpleSelector | CombinedSelector
