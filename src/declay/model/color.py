"""Color value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the ``(r, g, b)`` triple."""
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.hex


BLACK = Color(0, 0, 0)
