"""Size and number literals."""

from __future__ import annotations

import re
from decimal import Decimal

from declay.errors import InvalidSizeError

__all__ = ["parse_size", "parse_int", "format_number", "PIXEL_UNIT"]

PIXEL_UNIT = "px"

_FLOAT_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_size(text: str) -> float:
    """Parse ``"100"``, ``"200px"`` or ``"  50  "`` into a float.

    Only the pixel unit is recognized. Raises :class:`InvalidSizeError`
    when the remainder is not a decimal floating-point literal.
    """
    value = text.strip()
    if value.endswith(PIXEL_UNIT):
        value = value[: -len(PIXEL_UNIT)]
    if not _FLOAT_RE.fullmatch(value):
        raise InvalidSizeError(text)
    return float(value)


def parse_int(text: str) -> int:
    """Parse a plain ASCII decimal integer; raises ``ValueError`` otherwise."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def format_number(value: float) -> str:
    """Return the shortest round-trip decimal form of *value*.

    No exponent and no trailing ``.0``: ``100.0 -> "100"``, ``0.5 -> "0.5"``,
    ``1e-07 -> "0.0000001"``.
    """
    return format(Decimal(repr(float(value))).normalize(), "f")
