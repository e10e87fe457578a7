"""Event types emitted while building and reloading layouts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildStarted:
    root_tag: str


@dataclass(frozen=True)
class WidgetBuilt:
    tag: str
    node_id: str
    wrapped: bool


@dataclass(frozen=True)
class ChildSkipped:
    parent_tag: str
    child_tag: str
    error: str


@dataclass(frozen=True)
class BuildCompleted:
    root_tag: str
    registered_ids: int


@dataclass(frozen=True)
class BuildFailed:
    root_tag: str
    error: str


@dataclass(frozen=True)
class LayoutReloaded:
    path: str


@dataclass(frozen=True)
class ReloadFailed:
    path: str
    error: str
