from objkit.selector.builder import CSSSelectorBuilder, css_selector_builder
from objkit.selector.errors import DuplicateSelectorPart, OutOfOrder, SelectorError
from objkit.selector.model import Category, CombinedSelector, SelectorNode, SimpleSelector

__all__ = [
    "css_selector_builder",
    "CSSSelectorBuilder",
    "Category",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorNode",
    "SelectorError",
    "DuplicateSelectorPart",
    "OutOfOrder",
]
