"""CLI command: objkit word -- rebuild a word from letter positions."""

from __future__ import annotations

import click

from objkit.objects import make_word


def _parse_letters(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> dict[str, list[int]]:
    letters: dict[str, list[int]] = {}
    for item in value:
        letter, sep, raw_positions = item.partition("=")
        if not sep or not letter:
            raise click.BadParameter(f"expected LETTER=POS[,POS...], got {item!r}")
        try:
            positions = [int(p) for p in raw_positions.split(",") if p.strip()]
        except ValueError:
            raise click.BadParameter(f"positions must be integers in {item!r}")
        letters.setdefault(letter, []).extend(positions)
    return letters


@click.command()
@click.argument("letters", nargs=-1, required=True, callback=_parse_letters)
def word(letters: dict[str, list[int]]) -> None:
    """Print the word spelled by LETTER=POS[,POS...] arguments.

    Example: ``objkit word H=0 e=1 l=2,3,8 o=4,6 W=5 r=7 d=9``
    """
    click.echo(make_word(letters))
