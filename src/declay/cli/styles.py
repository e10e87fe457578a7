"""CLI command: declay styles -- list a layout's style rules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from declay.errors import MalformedMarkupError
from declay.parser import parse_markup
from declay.parser.properties import serialize_properties


@click.command()
@click.argument("layout", type=click.Path(exists=True, dir_okay=False))
def styles(layout: str) -> None:
    """List the style rules declared in a layout, in source order.

    Rules whose selector can never match are marked ``(unsupported)``; a
    selector declared again later is marked ``(overridden)``.
    """
    try:
        document = parse_markup(Path(layout).read_bytes())
    except MalformedMarkupError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if not document.rules:
        click.echo("No style rules.")
        return

    last_index = {rule.selector.raw: i for i, rule in enumerate(document.rules)}
    for i, rule in enumerate(document.rules):
        notes = []
        if not rule.selector.is_supported:
            notes.append("(unsupported)")
        if last_index[rule.selector.raw] != i:
            notes.append("(overridden)")
        suffix = " " + " ".join(notes) if notes else ""
        click.echo(f"{rule.selector.raw} {{ {serialize_properties(rule.properties)} }}{suffix}")
