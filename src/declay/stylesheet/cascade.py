"""Style cascade: merge class, id and inline properties for a node.

Tiers are applied in ascending precedence, each one overwriting the keys
it declares and leaving the others in place:

    class rules (left to right) < id rule < inline ``style`` attribute
"""

from __future__ import annotations

from declay.model.document import Node
from declay.parser.properties import parse_properties
from declay.stylesheet.registry import RuleRegistry

__all__ = ["compute_style", "explain_style", "INLINE_ORIGIN"]

INLINE_ORIGIN = "inline"


def _tiers(node: Node, registry: RuleRegistry) -> list[tuple[str, dict[str, str]]]:
    """Return ``(origin, properties)`` pairs in application order."""
    tiers: list[tuple[str, dict[str, str]]] = []

    for token in node.class_list.split(" "):
        if not token:
            continue
        rule = registry.lookup(f".{token}")
        if rule is not None:
            tiers.append((rule.selector.raw, rule.properties))

    if node.id:
        rule = registry.lookup(f"#{node.id}")
        if rule is not None:
            tiers.append((rule.selector.raw, rule.properties))

    if node.inline_style:
        tiers.append((INLINE_ORIGIN, parse_properties(node.inline_style)))

    return tiers


def compute_style(node: Node, registry: RuleRegistry) -> dict[str, str]:
    """Compute the resolved style mapping for *node*.

    Missing selectors at any tier are ignored.
    """
    style: dict[str, str] = {}
    for _origin, properties in _tiers(node, registry):
        style.update(properties)
    return style


def explain_style(node: Node, registry: RuleRegistry) -> list[tuple[str, str, str]]:
    """Return ``(property, value, origin)`` for every resolved property.

    *origin* is the selector that supplied the winning value, or
    ``"inline"`` for the node's own ``style`` attribute.
    """
    winners: dict[str, tuple[str, str]] = {}
    for origin, properties in _tiers(node, registry):
        for key, value in properties.items():
            winners[key] = (value, origin)
    return [(key, value, origin) for key, (value, origin) in winners.items()]
