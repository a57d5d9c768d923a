"""CLI command: objkit selector -- build and print a simple selector."""

from __future__ import annotations

import sys

import click

from objkit.selector import SelectorError, SimpleSelector

# CLI category name -> SimpleSelector builder method
_PART_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _apply_part(node: SimpleSelector, part: str) -> None:
    category, sep, value = part.partition(":")
    if not sep or category not in _PART_METHODS:
        raise ValueError(
            f"Invalid part {part!r}; expected CATEGORY:VALUE with CATEGORY one of "
            + ", ".join(_PART_METHODS)
        )
    getattr(node, _PART_METHODS[category])(value)


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a selector from CATEGORY:VALUE parts and print it.

    Parts are applied in the order given, e.g.
    ``objkit selector element:a 'attr:href$=".png"' pseudo-class:focus``.
    Exits with code 1 if a part is malformed or out of order.
    """
    node = SimpleSelector()
    try:
        for part in parts:
            _apply_part(node, part)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(node.stringify())
