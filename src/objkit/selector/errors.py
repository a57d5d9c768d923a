"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selector.model import Category


class SelectorError(Exception):
    """Raised when a selector part is rejected by the builder."""

    def __init__(self, message: str, category: Category) -> None:
        self.category = category
        super().__init__(message)


class DuplicateSelectorPart(SelectorError):
    """Raised when element, id or pseudo-element is supplied twice."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector",
            category,
        )


class OutOfOrder(SelectorError):
    """Raised when a part is supplied after a later category was reached."""

    def __init__(self, category: Category, reached: Category) -> None:
        self.reached = reached
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            category,
        )
