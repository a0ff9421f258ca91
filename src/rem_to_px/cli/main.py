"""rem-to-px CLI entry point: Click group with subcommands."""

import logging

import click

from rem_to_px import __version__


@click.group()
@click.version_option(version=__version__, prog_name="rem-to-px")
@click.option("-v", "--verbose", is_flag=True, help="Log each converted value")
def cli(verbose: bool) -> None:
    """rem-to-px - rewrite rem lengths in stylesheets as pixel values."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from rem_to_px.cli.convert import convert  # noqa: E402
from rem_to_px.cli.inspect import inspect  # noqa: E402

cli.add_command(convert)
cli.add_command(inspect)
