"""CLI command: declay validate -- parse and lint a layout file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from declay.errors import MalformedMarkupError
from declay.model.diagnostic import Diagnostic, Severity
from declay.parser import parse_markup
from declay.validation import validate as run_validate


def target_of(diag: Diagnostic) -> str:
    """Name the part of the layout a diagnostic is about.

    Elements are shown as ``<Tag #id>``, or ``<Tag>`` when they have no id;
    style rules as ``rule <selector>``.
    """
    if diag.tag:
        return f"<{diag.tag} #{diag.node_id}>" if diag.node_id else f"<{diag.tag}>"
    if diag.node_id:
        return f"#{diag.node_id}"
    if diag.selector:
        return f"rule {diag.selector}"
    return "layout"


def group_by_target(diagnostics: list[Diagnostic]) -> dict[str, list[Diagnostic]]:
    """Group diagnostics by target: style rules first, then elements.

    Groups keep the order in which their first diagnostic was reported.
    """
    rules: dict[str, list[Diagnostic]] = {}
    elements: dict[str, list[Diagnostic]] = {}
    for diag in diagnostics:
        target = target_of(diag)
        bucket = rules if target.startswith("rule ") else elements
        bucket.setdefault(target, []).append(diag)
    return {**rules, **elements}


@click.command()
@click.argument("layout", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Exit with code 1 on warnings as well as errors.")
def validate(layout: str, strict: bool) -> None:
    """Parse and lint a layout file.

    Diagnostics are grouped under the style rule or element they concern.
    Exits with code 1 if any error is found (or, with --strict, any
    warning), otherwise 0.
    """
    layout_path = Path(layout)

    try:
        document = parse_markup(layout_path.read_bytes())
    except MalformedMarkupError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(document)
    if not diagnostics:
        click.echo(
            f"OK: {layout_path.name} is valid "
            f"({len(document.rules)} rule(s), {sum(1 for _ in document.iter_nodes())} element(s))"
        )
        sys.exit(0)

    groups = group_by_target(diagnostics)
    for target, found in groups.items():
        click.echo(target)
        for diag in found:
            click.echo(f"  {diag.severity.value:<8}{diag.message} [{diag.rule}]")
            if diag.fix:
                click.echo(f"  {'':<8}fix: {diag.fix}")

    counts = {severity: 0 for severity in Severity}
    for diag in diagnostics:
        counts[diag.severity] += 1
    click.echo()
    click.echo(
        f"{layout_path.name}: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info "
        f"across {len(groups)} rule(s) and element(s)"
    )

    failing = counts[Severity.ERROR] or (strict and counts[Severity.WARNING])
    sys.exit(1 if failing else 0)
