"""Event wiring from ``onclick``/``onchange`` attributes to callbacks.

Named callbacks are looked up when the widget is constructed; registering a
callback afterwards does not affect widgets that were already built. When no
named callback matches, the builder's fallback ``EventHandler`` is notified
instead, provided the node has an id.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from declay.callbacks.context import EventContext, serialize_value
from declay.model.document import Node

if TYPE_CHECKING:
    from declay.builder.builder import Builder

logger = logging.getLogger(__name__)

CLICK_ATTR = "onclick"
CHANGE_ATTR = "onchange"


class TargetRef:
    """Holds the widget an event handler reports, assigned once it exists."""

    def __init__(self) -> None:
        self.widget: Any = None


def tap_handler(builder: Builder, node: Node, ref: TargetRef) -> Callable[[], None]:
    name = node.get_attr(CLICK_ATTR)
    callback = builder.callbacks.lookup_button_callback(name) if name else None
    if name and callback is None:
        logger.debug("No tap callback registered for %r on <%s>", name, node.tag)
    node_id = node.id

    def on_tapped() -> None:
        if callback is not None:
            callback(EventContext(event_name=name, target=ref.widget, target_id=node_id))
            return
        handler = builder.event_handler
        if handler is not None and node_id:
            handler.on_button_tapped(node_id)

    return on_tapped


def change_handler(builder: Builder, node: Node, ref: TargetRef) -> Callable[[Any], None]:
    name = node.get_attr(CHANGE_ATTR)
    callback = builder.callbacks.lookup_change_callback(name) if name else None
    if name and callback is None:
        logger.debug("No change callback registered for %r on <%s>", name, node.tag)
    node_id = node.id

    def on_changed(value: Any) -> None:
        serialized = serialize_value(value)
        if callback is not None:
            callback(
                EventContext(
                    event_name=name, target=ref.widget, target_id=node_id, value=serialized
                )
            )
            return
        handler = builder.event_handler
        if handler is not None and node_id:
            handler.on_entry_changed(node_id, serialized)

    return on_changed
