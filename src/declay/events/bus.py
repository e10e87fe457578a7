"""Synchronous event bus for build and reload lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus keyed by event dataclass type.

    Listeners run synchronously on the emitting thread, catch-all listeners
    first, then type listeners, each group in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns an unsubscribe function."""
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(callback)

        def unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def on_all(self, callback: Listener) -> None:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
