"""Conversion options shared by the CLI subcommands."""

from __future__ import annotations

import sys
from typing import Any, Callable

import click

from rem_to_px.config import RemToPxConfig, load_config
from rem_to_px.errors import ConfigError, StylesheetParseError
from rem_to_px.stylesheet import Root, parse_stylesheet

_OPTIONS = [
    click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="JSON file with conversion options",
    ),
    click.option("--root-value", type=float, default=None, help="Pixels per rem [default: 8]"),
    click.option(
        "--unit-precision", type=int, default=None, help="Decimal places to keep [default: 5]"
    ),
    click.option(
        "--prop",
        "props",
        multiple=True,
        help="Property pattern to convert (repeatable) [default: *]",
    ),
    click.option(
        "--selector-black-list",
        "selector_black_list",
        multiple=True,
        help="Selector text or /regex/ to skip (repeatable)",
    ),
    click.option(
        "--replace/--no-replace",
        default=None,
        help="Replace values in place, or add a px declaration after each one",
    ),
    click.option(
        "--media-query/--no-media-query",
        default=None,
        help="Also convert @media parameters",
    ),
    click.option(
        "--min-unit-value", type=float, default=None, help="Leave smaller rem values alone"
    ),
]


def config_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared conversion options to a click command."""
    for option in reversed(_OPTIONS):
        func = option(func)
    return func


def build_config(
    config_path: str | None,
    root_value: float | None,
    unit_precision: int | None,
    props: tuple[str, ...],
    selector_black_list: tuple[str, ...],
    replace: bool | None,
    media_query: bool | None,
    min_unit_value: float | None,
) -> RemToPxConfig:
    """Load the config file (if any) and apply command-line overrides.

    Exits with status 1 on invalid options.
    """
    try:
        config = load_config(config_path) if config_path else RemToPxConfig()
        return config.merged(
            root_value=root_value,
            unit_precision=unit_precision,
            prop_list=props or None,
            selector_black_list=selector_black_list or None,
            replace=replace,
            media_query=media_query,
            min_unit_value=min_unit_value,
        )
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)


def read_stylesheet(source: str) -> Root:
    """Parse *source*, exiting with status 1 on a parse error."""
    try:
        return parse_stylesheet(source)
    except StylesheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
