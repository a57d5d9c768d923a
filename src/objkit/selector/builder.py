"""Selector builder facade: entry points that start or combine selectors.

Example:
    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

import logging

from objkit.selector.model import CombinedSelector, SelectorNode, SimpleSelector

__all__ = ["CSSSelectorBuilder", "css_selector_builder"]

log = logging.getLogger(__name__)


class CSSSelectorBuilder:
    """Static constructors for selector nodes.

    Every simple-selector entry point allocates a fresh
    :class:`SimpleSelector`, so independent chains never share state.
    """

    @staticmethod
    def element(value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    @staticmethod
    def id(value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    @staticmethod
    def class_(value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    @staticmethod
    def attr(value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    @staticmethod
    def pseudo_class(value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    @staticmethod
    def pseudo_element(value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    @staticmethod
    def combine(
        left: SelectorNode, combinator: str, right: SelectorNode
    ) -> CombinedSelector:
        """Join two nodes with *combinator*; the token is not validated."""
        log.debug("Combining selectors with %r", combinator)
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = CSSSelectorBuilder()
