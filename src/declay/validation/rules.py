"""Lint rules for layout documents.

Each rule is a function taking a Document and returning a list of
Diagnostic objects describing any issues found. None of these conditions
stop a build except unknown tags at the root; the rest surface markup that
silently falls back to a default.
"""

from __future__ import annotations

from collections.abc import Iterator

from declay.builder.containers import BORDER_SLOTS
from declay.builder.kinds import WIDGET_KINDS
from declay.errors import InvalidColorComponentError, InvalidSizeError
from declay.model.diagnostic import Diagnostic, Severity
from declay.model.document import Document, Node
from declay.stylesheet.cascade import compute_style
from declay.values.colors import COLOR_RECOGNIZERS
from declay.values.sizes import parse_int, parse_size

# Children consumed by their parent instead of being built.
OPTION_TAGS: dict[str, str] = {"Select": "Option", "RadioGroup": "Radio"}

SIZE_PROPERTIES = ("width", "height", "min-width", "min-height", "font-size")
COLOR_PROPERTIES = ("color", "background-color")


def _walk(node: Node, parent: Node | None = None) -> Iterator[tuple[Node, Node | None]]:
    """Yield (node, parent) for every node the builder would try to build."""
    yield node, parent
    if node.tag in OPTION_TAGS:
        return
    for child in node.children:
        yield from _walk(child, node)


def _is_color(text: str) -> bool:
    text = text.strip()
    for recognizer in COLOR_RECOGNIZERS:
        if recognizer.can_parse(text):
            try:
                recognizer.parse(text)
            except InvalidColorComponentError:
                return False
            return True
    return False


# ---------------------------------------------------------------------------
# Structural rules
# ---------------------------------------------------------------------------


def check_unknown_tags(document: Document) -> list[Diagnostic]:
    """Every element must be a known widget kind."""
    diagnostics: list[Diagnostic] = []
    for node, parent in _walk(document.root):
        if node.tag in WIDGET_KINDS:
            continue
        where = f"inside <{parent.tag}>" if parent is not None else "at the root"
        diagnostics.append(
            Diagnostic(
                rule="check_unknown_tags",
                severity=Severity.ERROR,
                message=f"Unknown element <{node.tag}> {where} will not be built.",
                node_id=node.id or None,
                tag=node.tag,
                fix="Use one of: " + ", ".join(sorted(WIDGET_KINDS)),
            )
        )
    return diagnostics


def check_duplicate_ids(document: Document) -> list[Diagnostic]:
    """Ids should be unique; the last built node wins the lookup."""
    seen: dict[str, int] = {}
    for node, _ in _walk(document.root):
        if node.id:
            seen[node.id] = seen.get(node.id, 0) + 1
    return [
        Diagnostic(
            rule="check_duplicate_ids",
            severity=Severity.WARNING,
            message=f"Id '{node_id}' is used by {count} elements; only one is reachable by id.",
            node_id=node_id,
            fix="Give each element a distinct id.",
        )
        for node_id, count in seen.items()
        if count > 1
    ]


# ---------------------------------------------------------------------------
# Stylesheet rules
# ---------------------------------------------------------------------------


def check_unsupported_selectors(document: Document) -> list[Diagnostic]:
    """Only ``.class`` and ``#id`` selectors match anything."""
    return [
        Diagnostic(
            rule="check_unsupported_selectors",
            severity=Severity.WARNING,
            message=f"Selector '{rule.selector.raw}' targets neither a class nor an id and never matches.",
            selector=rule.selector.raw,
            fix="Target the element with a .class or #id selector.",
        )
        for rule in document.rules
        if not rule.selector.is_supported
    ]


def check_unused_selectors(document: Document) -> list[Diagnostic]:
    """Supported selectors that no element references."""
    referenced: set[str] = set()
    for node, _ in _walk(document.root):
        referenced.update(f".{token}" for token in node.classes)
        if node.id:
            referenced.add(f"#{node.id}")
    diagnostics: list[Diagnostic] = []
    reported: set[str] = set()
    for rule in document.rules:
        raw = rule.selector.raw
        if not rule.selector.is_supported or raw in referenced or raw in reported:
            continue
        reported.add(raw)
        diagnostics.append(
            Diagnostic(
                rule="check_unused_selectors",
                severity=Severity.INFO,
                message=f"Selector '{raw}' does not match any element.",
                selector=raw,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Attribute rules
# ---------------------------------------------------------------------------


def check_grid_columns(document: Document) -> list[Diagnostic]:
    """Grid ``columns`` must be a positive integer."""
    diagnostics: list[Diagnostic] = []
    for node, _ in _walk(document.root):
        if node.tag != "Grid" or "columns" not in node.attributes:
            continue
        raw = node.get_attr("columns")
        try:
            valid = parse_int(raw) >= 1
        except ValueError:
            valid = False
        if not valid:
            diagnostics.append(
                Diagnostic(
                    rule="check_grid_columns",
                    severity=Severity.WARNING,
                    message=f"Grid columns '{raw}' is not a positive integer; the default is used.",
                    node_id=node.id or None,
                    tag=node.tag,
                )
            )
    return diagnostics


def check_border_positions(document: Document) -> list[Diagnostic]:
    """Border children should name a known slot."""
    diagnostics: list[Diagnostic] = []
    for node, parent in _walk(document.root):
        if parent is None or parent.tag != "Border" or "position" not in node.attributes:
            continue
        position = node.get_attr("position")
        if position in BORDER_SLOTS:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_border_positions",
                severity=Severity.WARNING,
                message=f"Unknown border position '{position}'; the child is placed in the center.",
                node_id=node.id or None,
                tag=node.tag,
                fix="Use one of: " + ", ".join(BORDER_SLOTS),
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Resolved style rules
# ---------------------------------------------------------------------------


def check_sizes(document: Document) -> list[Diagnostic]:
    """Size properties in resolved styles must parse as numbers."""
    registry = document.rule_registry()
    diagnostics: list[Diagnostic] = []
    for node, _ in _walk(document.root):
        style = compute_style(node, registry)
        for prop in SIZE_PROPERTIES:
            value = style.get(prop)
            if not value:
                continue
            try:
                parse_size(value)
            except InvalidSizeError:
                diagnostics.append(
                    Diagnostic(
                        rule="check_sizes",
                        severity=Severity.WARNING,
                        message=f"{prop} '{value}' is not a size and is ignored.",
                        node_id=node.id or None,
                        tag=node.tag,
                    )
                )
    return diagnostics


def check_colors(document: Document) -> list[Diagnostic]:
    """Color properties in resolved styles must be recognized."""
    registry = document.rule_registry()
    diagnostics: list[Diagnostic] = []
    for node, _ in _walk(document.root):
        style = compute_style(node, registry)
        for prop in COLOR_PROPERTIES:
            value = style.get(prop)
            if not value or _is_color(value):
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_colors",
                    severity=Severity.WARNING,
                    message=f"{prop} '{value}' is not a recognized color; black is used.",
                    node_id=node.id or None,
                    tag=node.tag,
                )
            )
    return diagnostics


ALL_RULES = [
    check_unknown_tags,
    check_duplicate_ids,
    check_unsupported_selectors,
    check_unused_selectors,
    check_grid_columns,
    check_border_positions,
    check_sizes,
    check_colors,
]
