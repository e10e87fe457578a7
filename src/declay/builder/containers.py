"""Construction routines for container kinds."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from declay.builder.result import BuildResult
from declay.model.document import Node
from declay.values.sizes import parse_int

if TYPE_CHECKING:
    from declay.builder.builder import Builder

logger = logging.getLogger(__name__)

BORDER_SLOTS = ("top", "bottom", "left", "right", "center")
DEFAULT_BORDER_SLOT = "center"


def build_vbox(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    return builder.toolkit.vbox(builder.build_children(node, result))


def build_hbox(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    return builder.toolkit.hbox(builder.build_children(node, result))


def grid_columns(node: Node, default: int) -> int:
    """Return the ``columns`` attribute, or *default* when absent or invalid."""
    raw = node.get_attr("columns")
    if not raw:
        return default
    try:
        columns = parse_int(raw)
    except ValueError:
        logger.debug("Grid columns %r is not an integer, using %d", raw, default)
        return default
    if columns < 1:
        logger.debug("Grid columns %d is not positive, using %d", columns, default)
        return default
    return columns


def build_grid(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    children = builder.build_children(node, result)
    columns = grid_columns(node, builder.config.default_grid_columns)
    return builder.toolkit.grid(columns, children)


def border_slot(node: Node) -> str:
    """Return the border slot a child claims through its ``position`` attribute."""
    position = node.get_attr("position")
    return position if position in BORDER_SLOTS else DEFAULT_BORDER_SLOT


def build_border(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    slots: dict[str, Any] = {}
    for child, widget in builder.build_children_with_nodes(node, result):
        slot = border_slot(child)
        if slot in slots:
            logger.debug("Border slot %r claimed again by <%s>; last one wins", slot, child.tag)
        slots[slot] = widget
    return builder.toolkit.border(
        slots.get("top"),
        slots.get("bottom"),
        slots.get("left"),
        slots.get("right"),
        slots.get("center"),
    )
