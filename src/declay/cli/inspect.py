"""CLI command: declay inspect -- display the layout tree and build outcome."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from declay.builder import Builder, LocalFileFetcher
from declay.errors import DeclayError, MalformedMarkupError
from declay.events import ChildSkipped
from declay.model.document import Node
from declay.parser import parse_markup
from declay.parser.properties import serialize_properties
from declay.stylesheet import RuleRegistry, compute_style


def _describe(node: Node) -> str:
    parts = [f"<{node.tag}>"]
    if node.id:
        parts.append(f"#{node.id}")
    parts.extend(f".{token}" for token in node.classes)
    if node.display_text:
        text = node.display_text
        parts.append(f'"{text[:40] + "..." if len(text) > 40 else text}"')
    return " ".join(parts)


def _echo_tree(node: Node, registry: RuleRegistry | None, depth: int = 0) -> None:
    indent = "  " * depth
    click.echo(f"{indent}{_describe(node)}")
    if registry is not None:
        style = compute_style(node, registry)
        if style:
            click.echo(f"{indent}  style: {serialize_properties(style)}")
    for child in node.children:
        _echo_tree(child, registry, depth + 1)


@click.command()
@click.argument("layout", type=click.Path(exists=True, dir_okay=False))
@click.option("--styles", "show_styles", is_flag=True, help="Show each node's resolved style.")
def inspect(layout: str, show_styles: bool) -> None:
    """Parse a layout file, display its tree, and build it headlessly.

    Exits with code 1 if the markup is malformed or the root cannot be built.
    """
    layout_path = Path(layout)

    try:
        document = parse_markup(layout_path.read_bytes())
    except MalformedMarkupError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    nodes = list(document.iter_nodes())
    click.echo(f"Layout: {layout_path.name}")
    click.echo(f"Rules:  {len(document.rules)}")
    click.echo(f"Nodes:  {len(nodes)}")
    click.echo()

    click.echo("Tree:")
    _echo_tree(document.root, document.rule_registry() if show_styles else None, depth=1)
    click.echo()

    builder = Builder(image_fetcher=LocalFileFetcher(layout_path.parent))
    skipped: list[ChildSkipped] = []
    builder.event_bus.subscribe(ChildSkipped, skipped.append)
    try:
        result = builder.build(document)
    except DeclayError as exc:
        click.echo(f"Build error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Built: {len(result)} element(s) with ids")
    for event in skipped:
        click.echo(f"  skipped <{event.child_tag}> in <{event.parent_tag}>: {event.error}")
