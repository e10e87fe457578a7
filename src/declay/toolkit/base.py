"""Protocols describing the host widget toolkit the builder drives."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

from declay.model.color import Color

TapHandler = Callable[[], None]
ChangeHandler = Callable[[Any], None]


class TextAlign(Enum):
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class ImageFill(Enum):
    CONTAIN = "contain"
    ORIGINAL = "original"
    STRETCH = "stretch"


@runtime_checkable
class SupportsMinSize(Protocol):
    """Widgets that accept a minimum-size hint directly."""

    def min_size(self) -> tuple[float, float]: ...

    def set_min_size(self, width: float, height: float) -> None: ...


class Toolkit(Protocol):
    """Widget constructors for every kind a layout can declare.

    Widgets are opaque to the builder except for :class:`SupportsMinSize`
    and the binding protocol in :mod:`declay.binding`.
    """

    # --- containers ------------------------------------------------------------

    def vbox(self, children: Sequence[Any]) -> Any: ...

    def hbox(self, children: Sequence[Any]) -> Any: ...

    def grid(self, columns: int, children: Sequence[Any]) -> Any: ...

    def border(
        self,
        top: Any | None,
        bottom: Any | None,
        left: Any | None,
        right: Any | None,
        center: Any | None,
    ) -> Any: ...

    def fixed_size(self, widget: Any, width: float, height: float) -> Any: ...

    # --- widgets ---------------------------------------------------------------

    def label(
        self, text: str, *, alignment: TextAlign | None = None,
        bold: bool = False, italic: bool = False,
    ) -> Any: ...

    def button(self, text: str, on_tapped: TapHandler | None = None) -> Any: ...

    def entry(
        self, *, text: str = "", placeholder: str = "", password: bool = False,
        multiline: bool = False, on_changed: ChangeHandler | None = None,
    ) -> Any: ...

    def check(
        self, label: str, *, checked: bool = False,
        on_changed: ChangeHandler | None = None,
    ) -> Any: ...

    def select(
        self, options: Sequence[str], *, selected: str = "",
        on_changed: ChangeHandler | None = None,
    ) -> Any: ...

    def radio_group(
        self, options: Sequence[str], *, selected: str = "",
        on_changed: ChangeHandler | None = None,
    ) -> Any: ...

    def progress_bar(self, *, value: float = 0.0, maximum: float = 1.0) -> Any: ...

    def slider(
        self, minimum: float, maximum: float, *, value: float, step: float,
        on_changed: ChangeHandler | None = None,
    ) -> Any: ...

    def spacer(self) -> Any: ...

    # --- canvas objects --------------------------------------------------------

    def rectangle(self, fill: Color | None) -> Any: ...

    def circle(self, fill: Color | None) -> Any: ...

    def text(
        self, text: str, color: Color, *, size: float | None = None,
        alignment: TextAlign | None = None, bold: bool = False, italic: bool = False,
    ) -> Any: ...

    def image(self, source: str, data: bytes, *, fill: ImageFill) -> Any: ...
