"""Layout document model: Node, Selector, StyleRule and Document dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declay.stylesheet.registry import RuleRegistry


@dataclass(frozen=True)
class Node:
    """A single element of the layout tree."""

    tag: str
    id: str = ""
    class_list: str = ""
    inline_style: str = ""
    text: str = ""
    content: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def get_attr(self, name: str, default: str = "") -> str:
        """Return an attribute value, or *default* when the node does not carry it."""
        return self.attributes.get(name, default)

    @property
    def classes(self) -> list[str]:
        """Non-empty class tokens in declaration order."""
        return [token for token in self.class_list.split(" ") if token]

    @property
    def display_text(self) -> str:
        """Return the ``text`` attribute if set, otherwise the trimmed content."""
        return self.text or self.content.strip()

    def iter_nodes(self) -> Iterator[Node]:
        """Yield this node and all descendants, depth-first, pre-order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class Selector:
    """A selector targeting nodes by class (``.name``) or id (``#name``).

    The name after the prefix is matched verbatim, so ``#a.b`` targets the
    node whose id is ``a.b``. A class name cannot contain a space, because
    the ``class`` attribute is split on spaces. Anything else (universal,
    tag, descendant, empty name) is kept with kind ``unsupported`` and
    never matches a node.
    """

    kind: str  # "class", "id", "unsupported"
    value: str
    raw: str

    @classmethod
    def parse(cls, raw: str) -> Selector:
        text = raw.strip()
        body = text[1:]
        if body and text.startswith("#"):
            return cls(kind="id", value=body, raw=text)
        if body and text.startswith(".") and " " not in body:
            return cls(kind="class", value=body, raw=text)
        return cls(kind="unsupported", value=text, raw=text)

    @property
    def is_supported(self) -> bool:
        return self.kind != "unsupported"


@dataclass(frozen=True)
class StyleRule:
    """A selector paired with its parsed property declarations."""

    selector: Selector
    properties: dict[str, str]
    raw: str = ""


@dataclass(frozen=True)
class Document:
    """A parsed layout: style rules in source order plus one root node."""

    rules: tuple[StyleRule, ...]
    root: Node

    def rule_registry(self) -> RuleRegistry:
        """Return a fresh registry holding this document's rules."""
        from declay.stylesheet.registry import RuleRegistry

        return RuleRegistry.from_rules(self.rules)

    def iter_nodes(self) -> Iterator[Node]:
        return self.root.iter_nodes()
