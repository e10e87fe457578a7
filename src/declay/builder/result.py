"""Accumulator threaded through one build traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BuildResult:
    """The outcome of building one document.

    Attributes:
        root: The outward-facing root widget (``None`` until the build finishes).
        elements: id -> outward-facing widget (the sizing wrapper, if any).
        widgets: id -> unwrapped widget, used for binding and callbacks.
        styles: id -> resolved style the widget was built with.
        bound: Every widget this build connected to a reactive cell, with or
            without an id. :meth:`Builder.release` disconnects them.
    """

    root: Any = None
    elements: dict[str, Any] = field(default_factory=dict)
    widgets: dict[str, Any] = field(default_factory=dict)
    styles: dict[str, dict[str, str]] = field(default_factory=dict)
    bound: list[Any] = field(default_factory=list)

    def register(self, node_id: str, outward: Any, widget: Any, style: dict[str, str]) -> None:
        """Record a built node under *node_id*; a repeated id replaces the earlier entry."""
        self.elements[node_id] = outward
        self.widgets[node_id] = widget
        self.styles[node_id] = style

    def get(self, node_id: str) -> Any | None:
        return self.elements.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.elements

    def __len__(self) -> int:
        return len(self.elements)
