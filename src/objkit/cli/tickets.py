"""CLI command: objkit tickets -- simulate the box-office queue."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from objkit.config import ObjkitConfig
from objkit.objects import sell_tickets


@click.command()
@click.argument("bills", nargs=-1, type=int)
@click.option("--price", type=int, default=None, help="Ticket price")
@click.pass_obj
def tickets(config: ObjkitConfig | None, bills: tuple[int, ...], price: int | None) -> None:
    """Check whether every customer in BILLS can be given change."""
    config = config or ObjkitConfig()
    if price is not None:
        config = replace(config, ticket_price=price)

    if sell_tickets(bills, config):
        click.echo("OK: change for every customer")
        sys.exit(0)
    click.echo("FAIL: cannot give change")
    sys.exit(1)
