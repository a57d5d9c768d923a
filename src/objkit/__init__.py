"""objkit -- small utilities over plain objects, plus a CSS selector builder."""

__version__ = "0.1.0"
