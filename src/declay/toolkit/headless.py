"""In-memory toolkit: widgets that record their state and simulate interaction.

Nothing is drawn. Each widget keeps the properties the builder set on it and
exposes methods (``tap``, ``set_text``, ``set_checked``, ``set_selected``,
``set_value``) that behave like the matching user interaction, firing the
widget's handler and writing back to a bound cell.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable

from declay.binding.cells import CellKind, ReactiveCell
from declay.model.color import Color
from declay.toolkit.base import ChangeHandler, ImageFill, TapHandler, TextAlign

__all__ = [
    "HeadlessToolkit",
    "Widget",
    "Box",
    "Grid",
    "Border",
    "FixedSize",
    "Label",
    "Button",
    "Entry",
    "Check",
    "Select",
    "RadioGroup",
    "ProgressBar",
    "Slider",
    "Spacer",
    "Rectangle",
    "Circle",
    "CanvasText",
    "Image",
]


class Widget:
    """Base for all headless widgets."""

    kind = "widget"

    def __init__(self) -> None:
        self.visible = True
        self._natural_size: tuple[float, float] = (0.0, 0.0)

    def min_size(self) -> tuple[float, float]:
        return self._natural_size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CanvasObject(Widget):
    """Canvas primitives accept a minimum size directly."""

    def set_min_size(self, width: float, height: float) -> None:
        self._natural_size = (width, height)


class _Bound:
    """Mixin for widgets that follow a reactive cell.

    ``_apply`` updates the widget silently; ``_publish`` writes a value the
    user produced back to the cell.
    """

    binding_kind: CellKind
    _cell: ReactiveCell | None = None
    _unsubscribe: Callable[[], None] | None = None

    def bind(self, cell: ReactiveCell) -> None:
        self.unbind()
        self._cell = cell
        self._apply(cell.get())
        self._unsubscribe = cell.subscribe(self._apply)

    def unbind(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._cell = None
        self._unsubscribe = None

    @property
    def cell(self) -> ReactiveCell | None:
        return self._cell

    def _apply(self, value: Any) -> None:
        raise NotImplementedError

    def _publish(self, value: Any) -> None:
        if self._cell is not None:
            self._cell.set(value)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class Box(Widget):
    def __init__(self, orientation: str, children: Sequence[Any]) -> None:
        super().__init__()
        self.orientation = orientation
        self.children = list(children)

    @property
    def kind(self) -> str:  # type: ignore[override]
        return self.orientation

    def __repr__(self) -> str:
        return f"Box({self.orientation}, children={len(self.children)})"


class Grid(Widget):
    kind = "grid"

    def __init__(self, columns: int, children: Sequence[Any]) -> None:
        super().__init__()
        self.columns = columns
        self.children = list(children)

    @property
    def rows(self) -> int:
        return -(-len(self.children) // self.columns) if self.children else 0


class Border(Widget):
    kind = "border"

    def __init__(self, top: Any, bottom: Any, left: Any, right: Any, center: Any) -> None:
        super().__init__()
        self.top = top
        self.bottom = bottom
        self.left = left
        self.right = right
        self.center = center

    @property
    def children(self) -> list[Any]:
        slots = (self.top, self.bottom, self.left, self.right, self.center)
        return [w for w in slots if w is not None]


class FixedSize(Widget):
    """Wrapper enforcing a minimum size on a widget that cannot hold one."""

    kind = "fixed_size"

    def __init__(self, content: Any, width: float, height: float) -> None:
        super().__init__()
        self.content = content
        self._natural_size = (width, height)

    @property
    def children(self) -> list[Any]:
        return [self.content]

    def __repr__(self) -> str:
        width, height = self._natural_size
        return f"FixedSize({self.content!r}, {width:g}x{height:g})"


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------


class Label(_Bound, Widget):
    kind = "label"
    binding_kind = CellKind.STRING

    def __init__(self, text: str, alignment: TextAlign, bold: bool, italic: bool) -> None:
        super().__init__()
        self.text = text
        self.alignment = alignment
        self.bold = bold
        self.italic = italic

    def set_text(self, text: str) -> None:
        self.text = text
        self._publish(text)

    def _apply(self, value: Any) -> None:
        self.text = value

    def __repr__(self) -> str:
        return f"Label({self.text!r})"


class Button(Widget):
    kind = "button"

    def __init__(self, text: str, on_tapped: TapHandler | None) -> None:
        super().__init__()
        self.text = text
        self.on_tapped = on_tapped
        self.disabled = False

    def tap(self) -> None:
        """Simulate a click."""
        if not self.disabled and self.on_tapped is not None:
            self.on_tapped()

    def __repr__(self) -> str:
        return f"Button({self.text!r})"


class Entry(_Bound, Widget):
    kind = "entry"
    binding_kind = CellKind.STRING

    def __init__(
        self, text: str, placeholder: str, password: bool, multiline: bool,
        on_changed: ChangeHandler | None,
    ) -> None:
        super().__init__()
        self.text = text
        self.placeholder = placeholder
        self.password = password
        self.multiline = multiline
        self.on_changed = on_changed

    def set_text(self, text: str) -> None:
        """Simulate typing: replaces the text and fires ``on_changed``."""
        if text == self.text:
            return
        self.text = text
        self._publish(text)
        if self.on_changed is not None:
            self.on_changed(text)

    def _apply(self, value: Any) -> None:
        self.text = value

    def __repr__(self) -> str:
        return f"Entry({self.text!r})"


class Check(_Bound, Widget):
    kind = "check"
    binding_kind = CellKind.BOOL

    def __init__(self, label: str, checked: bool, on_changed: ChangeHandler | None) -> None:
        super().__init__()
        self.label = label
        self.checked = checked
        self.on_changed = on_changed

    def set_checked(self, checked: bool) -> None:
        if checked == self.checked:
            return
        self.checked = checked
        self._publish(checked)
        if self.on_changed is not None:
            self.on_changed(checked)

    def toggle(self) -> None:
        self.set_checked(not self.checked)

    def _apply(self, value: Any) -> None:
        self.checked = value

    def __repr__(self) -> str:
        return f"Check({self.label!r}, checked={self.checked})"


class _Choice(_Bound, Widget):
    binding_kind = CellKind.STRING

    def __init__(self, options: Sequence[str], selected: str, on_changed: ChangeHandler | None) -> None:
        super().__init__()
        self.options = list(options)
        self.selected = selected if selected in self.options else ""
        self.on_changed = on_changed

    def set_selected(self, value: str) -> None:
        """Simulate picking *value*; unknown options are ignored."""
        if value and value not in self.options:
            return
        if value == self.selected:
            return
        self.selected = value
        self._publish(value)
        if self.on_changed is not None:
            self.on_changed(value)

    def _apply(self, value: Any) -> None:
        if not value or value in self.options:
            self.selected = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.options!r}, selected={self.selected!r})"


class Select(_Choice):
    kind = "select"


class RadioGroup(_Choice):
    kind = "radio_group"


class ProgressBar(_Bound, Widget):
    kind = "progress_bar"
    binding_kind = CellKind.FLOAT

    def __init__(self, value: float, maximum: float) -> None:
        super().__init__()
        self.maximum = maximum
        self.value = value

    def set_value(self, value: float) -> None:
        self.value = value
        self._publish(float(value))

    def _apply(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ProgressBar({self.value:g}/{self.maximum:g})"


class Slider(_Bound, Widget):
    kind = "slider"
    binding_kind = CellKind.FLOAT

    def __init__(
        self, minimum: float, maximum: float, value: float, step: float,
        on_changed: ChangeHandler | None,
    ) -> None:
        super().__init__()
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        self.step = step
        self.on_changed = on_changed

    def set_value(self, value: float) -> None:
        """Simulate dragging to *value*, clamped to the slider's range."""
        value = float(min(max(value, self.minimum), self.maximum))
        if value == self.value:
            return
        self.value = value
        self._publish(value)
        if self.on_changed is not None:
            self.on_changed(value)

    def _apply(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Slider({self.value:g} in [{self.minimum:g}, {self.maximum:g}])"


class Spacer(Widget):
    kind = "spacer"


# ---------------------------------------------------------------------------
# Canvas objects
# ---------------------------------------------------------------------------


class Rectangle(CanvasObject):
    kind = "rectangle"

    def __init__(self, fill: Color | None) -> None:
        super().__init__()
        self.fill = fill

    def __repr__(self) -> str:
        return f"Rectangle({self.fill})"


class Circle(CanvasObject):
    kind = "circle"

    def __init__(self, fill: Color | None) -> None:
        super().__init__()
        self.fill = fill

    def __repr__(self) -> str:
        return f"Circle({self.fill})"


class CanvasText(CanvasObject):
    kind = "text"

    def __init__(
        self, text: str, color: Color, size: float | None, alignment: TextAlign,
        bold: bool, italic: bool,
    ) -> None:
        super().__init__()
        self.text = text
        self.color = color
        self.size = size
        self.alignment = alignment
        self.bold = bold
        self.italic = italic

    def __repr__(self) -> str:
        return f"CanvasText({self.text!r})"


class Image(CanvasObject):
    kind = "image"

    def __init__(self, source: str, data: bytes, fill: ImageFill) -> None:
        super().__init__()
        self.source = source
        self.data = data
        self.fill = fill

    def __repr__(self) -> str:
        return f"Image({self.source!r}, {len(self.data)} bytes)"


# ---------------------------------------------------------------------------
# Toolkit
# ---------------------------------------------------------------------------


class HeadlessToolkit:
    """A :class:`~declay.toolkit.base.Toolkit` producing headless widgets."""

    def vbox(self, children: Sequence[Any]) -> Box:
        return Box("vbox", children)

    def hbox(self, children: Sequence[Any]) -> Box:
        return Box("hbox", children)

    def grid(self, columns: int, children: Sequence[Any]) -> Grid:
        return Grid(columns, children)

    def border(self, top: Any, bottom: Any, left: Any, right: Any, center: Any) -> Border:
        return Border(top, bottom, left, right, center)

    def fixed_size(self, widget: Any, width: float, height: float) -> FixedSize:
        return FixedSize(widget, width, height)

    def label(
        self, text: str, *, alignment: TextAlign | None = None,
        bold: bool = False, italic: bool = False,
    ) -> Label:
        return Label(text, alignment or TextAlign.LEADING, bold, italic)

    def button(self, text: str, on_tapped: TapHandler | None = None) -> Button:
        return Button(text, on_tapped)

    def entry(
        self, *, text: str = "", placeholder: str = "", password: bool = False,
        multiline: bool = False, on_changed: ChangeHandler | None = None,
    ) -> Entry:
        return Entry(text, placeholder, password, multiline, on_changed)

    def check(
        self, label: str, *, checked: bool = False,
        on_changed: ChangeHandler | None = None,
    ) -> Check:
        return Check(label, checked, on_changed)

    def select(
        self, options: Sequence[str], *, selected: str = "",
        on_changed: ChangeHandler | None = None,
    ) -> Select:
        return Select(options, selected, on_changed)

    def radio_group(
        self, options: Sequence[str], *, selected: str = "",
        on_changed: ChangeHandler | None = None,
    ) -> RadioGroup:
        return RadioGroup(options, selected, on_changed)

    def progress_bar(self, *, value: float = 0.0, maximum: float = 1.0) -> ProgressBar:
        return ProgressBar(value, maximum)

    def slider(
        self, minimum: float, maximum: float, *, value: float, step: float,
        on_changed: ChangeHandler | None = None,
    ) -> Slider:
        return Slider(minimum, maximum, value, step, on_changed)

    def spacer(self) -> Spacer:
        return Spacer()

    def rectangle(self, fill: Color | None) -> Rectangle:
        return Rectangle(fill)

    def circle(self, fill: Color | None) -> Circle:
        return Circle(fill)

    def text(
        self, text: str, color: Color, *, size: float | None = None,
        alignment: TextAlign | None = None, bold: bool = False, italic: bool = False,
    ) -> CanvasText:
        return CanvasText(text, color, size, alignment or TextAlign.LEADING, bold, italic)

    def image(self, source: str, data: bytes, *, fill: ImageFill) -> Image:
        return Image(source, data, fill)
