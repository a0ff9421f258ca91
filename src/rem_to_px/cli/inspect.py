"""CLI command: rem-to-px inspect -- list what convert would change."""

from __future__ import annotations

from typing import IO

import click

from rem_to_px.cli.options import build_config, config_options, read_stylesheet
from rem_to_px.transforms import RemToPxTransform
from rem_to_px.transforms.media import MEDIA_KEYWORD


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@config_options
def inspect(source: IO[str], config_path: str | None, **options: object) -> None:
    """Show each value in SOURCE that would be converted, without writing.

    Declarations are listed as ``selector { prop: old -> new }``.
    """
    config = build_config(config_path, **options)  # type: ignore[arg-type]
    root = read_stylesheet(source.read())
    transform = RemToPxTransform(config)

    changes = 0
    for decl in root.walk_decls():
        value = transform.declarations.candidate(decl)
        if value is None:
            continue
        changes += 1
        selector = decl.selector or "(no selector)"
        click.echo(f"{selector} {{ {decl.prop}: {decl.value} -> {value} }}")

    if config.media_query:
        for at_rule in root.walk_at_rules(MEDIA_KEYWORD):
            params = transform.media.candidate(at_rule)
            if params is None:
                continue
            changes += 1
            click.echo(f"@{at_rule.name} {at_rule.params} -> {params}")

    click.echo()
    click.echo(f"Summary: {changes} value(s) would change")
