"""Static dispatch table from markup tag to widget construction routine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from declay.builder import containers, widgets
from declay.builder.result import BuildResult
from declay.model.document import Node

if TYPE_CHECKING:
    from declay.builder.builder import Builder

Constructor = Callable[["Builder", Node, dict[str, str], BuildResult], Any]


@dataclass(frozen=True)
class WidgetKind:
    """A buildable tag.

    ``sized`` says whether ``width``/``height`` style properties apply to
    nodes of this kind; containers are never sized. A construction routine
    may return a :class:`~declay.builder.sizing.MinSize` to ask for a
    minimum size of its own.
    """

    tag: str
    construct: Constructor
    container: bool = False
    sized: bool = True


def _container(tag: str, construct: Constructor) -> WidgetKind:
    return WidgetKind(tag, construct, container=True, sized=False)


WIDGET_KINDS: dict[str, WidgetKind] = {
    kind.tag: kind
    for kind in (
        _container("VBox", containers.build_vbox),
        _container("HBox", containers.build_hbox),
        _container("Grid", containers.build_grid),
        _container("Border", containers.build_border),
        WidgetKind("Label", widgets.build_label),
        WidgetKind("Button", widgets.build_button),
        WidgetKind("Entry", widgets.build_entry),
        WidgetKind("Checkbox", widgets.build_checkbox),
        WidgetKind("Select", widgets.build_select),
        WidgetKind("RadioGroup", widgets.build_radio_group),
        WidgetKind("ProgressBar", widgets.build_progress_bar),
        WidgetKind("Slider", widgets.build_slider),
        WidgetKind("Rectangle", widgets.build_rectangle),
        WidgetKind("Circle", widgets.build_circle),
        WidgetKind("Text", widgets.build_text),
        WidgetKind("Image", widgets.build_image),
        WidgetKind("Spacer", widgets.build_spacer),
    )
}

# Child elements consumed by their parent rather than built as widgets.
CHILD_ONLY_TAGS = frozenset({"Option", "Radio"})


def lookup_kind(tag: str) -> WidgetKind | None:
    return WIDGET_KINDS.get(tag)
