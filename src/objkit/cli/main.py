"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__
from objkit.config import ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """objkit - plain-object utilities and a CSS selector builder."""
    config = ObjkitConfig(log_level="DEBUG") if verbose else ObjkitConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("objkit").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from objkit.cli.selector import selector  # noqa: E402
from objkit.cli.tickets import tickets  # noqa: E402
from objkit.cli.word import word  # noqa: E402

cli.add_command(selector)
cli.add_command(tickets)
cli.add_command(word)
