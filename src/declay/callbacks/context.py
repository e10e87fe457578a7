"""Interaction context passed to named callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from declay.values.sizes import format_number


@dataclass(frozen=True)
class EventContext:
    """Describes one widget interaction.

    Attributes:
        event_name: The callback name declared in ``onclick``/``onchange``.
        target: The widget that produced the event (unwrapped).
        target_id: The node's id, empty if it has none.
        value: The new value for change events, serialized as a string.
    """

    event_name: str
    target: Any
    target_id: str
    value: str = ""


def serialize_value(value: object) -> str:
    """Serialize an interaction value the way callbacks receive it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if value is None:
        return ""
    return str(value)
