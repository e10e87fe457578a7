"""Color literal parsing.

Three recognizers are consulted in a fixed order; the first one whose
``can_parse`` accepts the text is the only one asked to parse it:

    red / WHITE        named colors (case-insensitive)
    #F00 / #FF0000     hex notation
    rgb(128, 64, 32)   functional notation, integer components in [0, 255]

Anything unrecognized or malformed resolves to black.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from declay.errors import InvalidColorComponentError
from declay.model.color import BLACK, Color

__all__ = [
    "ColorRecognizer",
    "NamedColorRecognizer",
    "HexColorRecognizer",
    "RgbColorRecognizer",
    "COLOR_RECOGNIZERS",
    "NAMED_COLORS",
    "parse_color",
]

logger = logging.getLogger(__name__)

NAMED_COLORS: dict[str, Color] = {
    "black": Color(0, 0, 0),
    "white": Color(255, 255, 255),
    "red": Color(255, 0, 0),
    "green": Color(0, 255, 0),
    "blue": Color(0, 0, 255),
    "yellow": Color(255, 255, 0),
    "cyan": Color(0, 255, 255),
    "magenta": Color(255, 0, 255),
}

_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")


class ColorRecognizer(Protocol):
    """Strategy for one color notation."""

    def can_parse(self, text: str) -> bool: ...

    def parse(self, text: str) -> Color: ...


class NamedColorRecognizer:
    def can_parse(self, text: str) -> bool:
        return text.strip().lower() in NAMED_COLORS

    def parse(self, text: str) -> Color:
        try:
            return NAMED_COLORS[text.strip().lower()]
        except KeyError:
            raise InvalidColorComponentError(f"Unknown named color: {text!r}") from None


class HexColorRecognizer:
    def can_parse(self, text: str) -> bool:
        text = text.strip()
        return text.startswith("#") and len(text) - 1 in (3, 6)

    def parse(self, text: str) -> Color:
        digits = text.strip()[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise InvalidColorComponentError(f"Invalid hex color length: {text!r}")
        if not _HEX_DIGITS_RE.fullmatch(digits):
            raise InvalidColorComponentError(f"Invalid hex digits in color: {text!r}")
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


class RgbColorRecognizer:
    def can_parse(self, text: str) -> bool:
        text = text.strip()
        return text.startswith("rgb(") and text.endswith(")")

    def parse(self, text: str) -> Color:
        inner = text.strip()[len("rgb("):-1]
        parts = inner.split(",")
        if len(parts) != 3:
            raise InvalidColorComponentError(
                f"rgb() requires 3 components, got {len(parts)}: {text!r}"
            )
        channels: list[int] = []
        for name, part in zip(("red", "green", "blue"), parts):
            part = part.strip()
            if not _INT_RE.fullmatch(part) or not 0 <= int(part) <= 255:
                raise InvalidColorComponentError(f"Invalid {name} component {part!r} in {text!r}")
            channels.append(int(part))
        return Color(*channels)


COLOR_RECOGNIZERS: list[ColorRecognizer] = [
    NamedColorRecognizer(),
    HexColorRecognizer(),
    RgbColorRecognizer(),
]


def parse_color(text: str | None) -> Color:
    """Convert a color literal into a :class:`Color`. Never raises.

    Empty, unrecognized, or malformed input yields :data:`BLACK`.
    """
    text = (text or "").strip()
    if not text:
        return BLACK
    for recognizer in COLOR_RECOGNIZERS:
        if recognizer.can_parse(text):
            try:
                return recognizer.parse(text)
            except InvalidColorComponentError as exc:
                logger.debug("Falling back to black: %s", exc)
                return BLACK
    logger.debug("Unrecognized color %r, falling back to black", text)
    return BLACK
