"""Named callback tables and the builder-wide fallback handler."""

from __future__ import annotations

from typing import Callable, Protocol

from declay.callbacks.context import EventContext

Callback = Callable[[EventContext], None]


class EventHandler(Protocol):
    """Coarse notification target used when no named callback matches."""

    def on_button_tapped(self, widget_id: str) -> None: ...

    def on_entry_changed(self, widget_id: str, value: str) -> None: ...


class CallbackRegistry:
    """Maps callback names to functions for tap and change events.

    Registering a name twice replaces the earlier function.
    """

    def __init__(self) -> None:
        self._button_callbacks: dict[str, Callback] = {}
        self._change_callbacks: dict[str, Callback] = {}

    def register_button_callback(self, name: str, fn: Callback) -> None:
        self._button_callbacks[name] = fn

    def register_change_callback(self, name: str, fn: Callback) -> None:
        self._change_callbacks[name] = fn

    def lookup_button_callback(self, name: str) -> Callback | None:
        return self._button_callbacks.get(name)

    def lookup_change_callback(self, name: str) -> Callback | None:
        return self._change_callbacks.get(name)

    @property
    def names(self) -> set[str]:
        """All registered callback names, tap and change."""
        return set(self._button_callbacks) | set(self._change_callbacks)
