"""Event system: bus and event types for build and reload lifecycle."""

from declay.events.bus import EventBus
from declay.events.types import (
    BuildCompleted,
    BuildFailed,
    BuildStarted,
    ChildSkipped,
    LayoutReloaded,
    ReloadFailed,
    WidgetBuilt,
)

__all__ = [
    "EventBus",
    "BuildCompleted",
    "BuildFailed",
    "BuildStarted",
    "ChildSkipped",
    "LayoutReloaded",
    "ReloadFailed",
    "WidgetBuilt",
]
