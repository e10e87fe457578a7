"""Widget tree builder: turns a parsed layout document into toolkit widgets."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from declay.binding.cells import Bindable
from declay.binding.context import BindingContext, parse_bind_attribute
from declay.builder.images import ImageFetcher, LocalFileFetcher
from declay.builder.kinds import lookup_kind
from declay.builder.result import BuildResult
from declay.builder.sizing import size_widget
from declay.callbacks.registry import Callback, CallbackRegistry, EventHandler
from declay.config import BuilderConfig
from declay.errors import DeclayError, UnknownElementKindError
from declay.events import types as events
from declay.events.bus import EventBus
from declay.model.document import Document, Node
from declay.parser.markup import parse_markup
from declay.stylesheet.cascade import compute_style
from declay.stylesheet.registry import RuleRegistry
from declay.toolkit.base import Toolkit

logger = logging.getLogger(__name__)

BIND_ATTR = "bind"


class Builder:
    """Builds widget trees and keeps the id, callback and binding tables.

    Style rules and id tables accumulate across builds; a builder is not
    reset between documents. Build a fresh builder to start over. When a
    build replaces an id, the widget it replaces stops following its cell;
    call :meth:`release` to disconnect a whole discarded tree.
    """

    def __init__(
        self,
        toolkit: Toolkit | None = None,
        *,
        config: BuilderConfig | None = None,
        callbacks: CallbackRegistry | None = None,
        bindings: BindingContext | None = None,
        event_handler: EventHandler | None = None,
        image_fetcher: ImageFetcher | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        if toolkit is None:
            from declay.toolkit.headless import HeadlessToolkit

            toolkit = HeadlessToolkit()
        self.toolkit = toolkit
        self.config = config or BuilderConfig()
        self.rules = RuleRegistry()
        self.callbacks = callbacks or CallbackRegistry()
        self.bindings = bindings or BindingContext()
        self.event_handler = event_handler
        self.image_fetcher: ImageFetcher = image_fetcher or LocalFileFetcher()
        self.event_bus = event_bus or EventBus()
        self._elements: dict[str, Any] = {}
        self._widgets: dict[str, Any] = {}
        self._styles: dict[str, dict[str, str]] = {}

    # --- documents ------------------------------------------------------------

    def load(self, raw: bytes | str) -> Document:
        """Parse *raw* markup and register its style rules."""
        document = parse_markup(raw)
        self.register_rules(document)
        return document

    def register_rules(self, document: Document) -> None:
        for rule in document.rules:
            self.rules.register(rule)

    def build(self, document: Document) -> BuildResult:
        """Build the widget tree for *document*.

        Raises :class:`UnknownElementKindError` (or any other declay error)
        when the root itself cannot be built; the builder's id tables are
        updated only when the build succeeds.
        """
        self.register_rules(document)
        root = document.root
        self._emit(events.BuildStarted(root_tag=root.tag))
        result = BuildResult()
        try:
            result.root = self.build_node(root, result)
        except DeclayError as exc:
            logger.debug("Build of <%s> failed: %s", root.tag, exc)
            self._emit(events.BuildFailed(root_tag=root.tag, error=str(exc)))
            self.release(result)
            raise
        self._commit(result)
        self._emit(events.BuildCompleted(root_tag=root.tag, registered_ids=len(result)))
        return result

    def _commit(self, result: BuildResult) -> None:
        for node_id, widget in result.widgets.items():
            previous = self._widgets.get(node_id)
            if previous is not None and previous is not widget:
                _unbind(previous)
        self._elements.update(result.elements)
        self._widgets.update(result.widgets)
        self._styles.update(result.styles)
        for node_id, widget in result.widgets.items():
            self.bindings.register_widget(node_id, widget)

    def release(self, result: BuildResult) -> None:
        """Disconnect every widget *result* bound to a cell.

        Call this when a built tree is discarded; its widgets then stop
        following cell updates. Widgets of a later build are unaffected.
        """
        for widget in result.bound:
            _unbind(widget)
        result.bound.clear()

    # --- nodes ----------------------------------------------------------------

    def build_node(self, node: Node, result: BuildResult) -> Any:
        """Build one node (and its subtree); returns the outward-facing widget."""
        kind = lookup_kind(node.tag)
        if kind is None:
            raise UnknownElementKindError(node.tag)

        style = compute_style(node, self.rules)
        built = kind.construct(self, node, style, result)
        widget, outward = size_widget(built, style, self.toolkit, styled=kind.sized)

        if node.id:
            result.register(node.id, outward, widget, style)
        self._emit(events.WidgetBuilt(tag=node.tag, node_id=node.id, wrapped=outward is not widget))
        return outward

    def build_children_with_nodes(self, node: Node, result: BuildResult) -> Iterator[tuple[Node, Any]]:
        """Yield (child node, widget) pairs, skipping children that fail to build."""
        for child in node.children:
            try:
                widget = self.build_node(child, result)
            except DeclayError as exc:
                logger.debug("Skipping <%s> inside <%s>: %s", child.tag, node.tag, exc)
                self._emit(
                    events.ChildSkipped(parent_tag=node.tag, child_tag=child.tag, error=str(exc))
                )
                continue
            yield child, widget

    def build_children(self, node: Node, result: BuildResult) -> list[Any]:
        return [widget for _, widget in self.build_children_with_nodes(node, result)]

    # --- lookups --------------------------------------------------------------

    def get_element(self, node_id: str) -> Any | None:
        """Return the object placed in the tree for *node_id* (a sizing wrapper, if any)."""
        return self._elements.get(node_id)

    def get_widget(self, node_id: str) -> Any | None:
        """Return the unwrapped widget built for *node_id*."""
        return self._widgets.get(node_id)

    def get_style(self, node_id: str) -> dict[str, str] | None:
        return self._styles.get(node_id)

    @property
    def element_ids(self) -> list[str]:
        return list(self._elements)

    # --- callbacks ------------------------------------------------------------

    def on(self, name: str, fn: Callback) -> Builder:
        """Register a tap callback for ``onclick="name"``."""
        self.callbacks.register_button_callback(name, fn)
        return self

    def on_change(self, name: str, fn: Callback) -> Builder:
        """Register a change callback for ``onchange="name"``."""
        self.callbacks.register_change_callback(name, fn)
        return self

    def set_event_handler(self, handler: EventHandler | None) -> None:
        self.event_handler = handler

    # --- collaborators used by construction routines --------------------------

    def bind_cell(self, node: Node, widget: Any, initial: Any, result: BuildResult) -> None:
        """Connect *widget* to the cell named by the node's ``bind`` attribute."""
        key = parse_bind_attribute(node.get_attr(BIND_ATTR))
        if not key:
            return
        cell = self.bindings.bind(key, initial)
        if isinstance(widget, Bindable):
            widget.bind(cell)
            result.bound.append(widget)
        else:
            logger.debug("<%s> widget %r cannot follow binding %r", node.tag, widget, key)

    def _emit(self, event: Any) -> None:
        self.event_bus.emit(event)


def _unbind(widget: Any) -> None:
    if isinstance(widget, Bindable):
        widget.unbind()
