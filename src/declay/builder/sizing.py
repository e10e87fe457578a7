"""Minimum-size application from ``width``/``height`` style properties."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from declay.errors import InvalidSizeError
from declay.toolkit.base import SupportsMinSize, Toolkit
from declay.values.sizes import parse_size

__all__ = ["MinSize", "apply_min_size", "resolve_dimension", "set_minimum", "size_widget"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MinSize:
    """A freshly constructed widget together with the minimum size it asks for.

    Construction routines return this instead of sizing the widget
    themselves, so the builder keeps the bare widget apart from any
    wrapper. When *styled* is true, ``width``/``height`` style properties
    replace the requested dimensions.
    """

    widget: Any
    width: float
    height: float
    styled: bool = True


def resolve_dimension(style: dict[str, str], primary: str, fallback: str) -> float | None:
    """Return the size declared by *primary*, else by *fallback*, else ``None``.

    The fallback is consulted only when *primary* is absent or empty. An
    unparseable value leaves the dimension unset.
    """
    key = primary if style.get(primary) else fallback
    raw = style.get(key)
    if not raw:
        return None
    try:
        return parse_size(raw)
    except InvalidSizeError as exc:
        logger.debug("Ignoring %s: %s", key, exc)
        return None


def apply_min_size(widget: Any, style: dict[str, str], toolkit: Toolkit) -> Any:
    """Apply ``width``/``min-width`` and ``height``/``min-height`` as a minimum size.

    Widgets implementing :class:`SupportsMinSize` take the hint directly;
    any other widget is wrapped in ``toolkit.fixed_size``. A missing
    dimension keeps the widget's current minimum. Returns the object to
    place in the parent, which is *widget* itself unless it was wrapped.
    """
    width = resolve_dimension(style, "width", "min-width")
    height = resolve_dimension(style, "height", "min-height")
    if width is None and height is None:
        return widget

    current = widget.min_size() if hasattr(widget, "min_size") else (0.0, 0.0)
    if width is None:
        width = current[0]
    if height is None:
        height = current[1]

    return set_minimum(widget, width, height, toolkit)


def set_minimum(widget: Any, width: float, height: float, toolkit: Toolkit) -> Any:
    if isinstance(widget, SupportsMinSize):
        widget.set_min_size(width, height)
        return widget
    return toolkit.fixed_size(widget, width, height)


def size_widget(built: Any, style: dict[str, str], toolkit: Toolkit, *, styled: bool) -> tuple[Any, Any]:
    """Split a construction result into ``(widget, outward)``.

    *built* is either a bare widget or a :class:`MinSize`. The first item is
    always the unwrapped widget; the second is what the parent places,
    possibly a ``fixed_size`` wrapper around it. *styled* says whether
    ``width``/``height`` style properties apply to this node at all.
    """
    if not isinstance(built, MinSize):
        outward = apply_min_size(built, style, toolkit) if styled else built
        return built, outward

    width, height = built.width, built.height
    if styled and built.styled:
        width = _or_default(resolve_dimension(style, "width", "min-width"), width)
        height = _or_default(resolve_dimension(style, "height", "min-height"), height)
    return built.widget, set_minimum(built.widget, width, height, toolkit)


def _or_default(value: float | None, default: float) -> float:
    return default if value is None else value
