"""CLI command: rem-to-px convert -- rewrite a stylesheet."""

from __future__ import annotations

from pathlib import Path
from typing import IO

import click

from rem_to_px.cli.options import build_config, config_options, read_stylesheet
from rem_to_px.stylesheet import serialize_stylesheet
from rem_to_px.transforms import RemToPxTransform


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the result here instead of stdout",
)
@config_options
def convert(source: IO[str], output: str | None, config_path: str | None, **options: object) -> None:
    """Convert rem lengths in SOURCE (a file or - for stdin) to px."""
    config = build_config(config_path, **options)  # type: ignore[arg-type]
    root = read_stylesheet(source.read())

    report = RemToPxTransform(config).run(root)
    result = serialize_stylesheet(root)

    if output:
        Path(output).write_text(result, encoding="utf-8")
    else:
        click.echo(result, nl=False)

    click.echo(
        f"Converted {report.declarations} declaration(s) "
        f"({report.replaced} replaced, {report.inserted} inserted), "
        f"{report.media_queries} media query(ies)",
        err=True,
    )
