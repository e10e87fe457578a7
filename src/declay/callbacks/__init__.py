from declay.callbacks.context import EventContext, serialize_value
from declay.callbacks.registry import Callback, CallbackRegistry, EventHandler

__all__ = [
    "Callback",
    "CallbackRegistry",
    "EventContext",
    "EventHandler",
    "serialize_value",
]
