"""Value parsers for style properties and attributes."""

from declay.values.colors import COLOR_RECOGNIZERS, NAMED_COLORS, parse_color
from declay.values.sizes import format_number, parse_int, parse_size

__all__ = [
    "parse_color",
    "parse_size",
    "parse_int",
    "format_number",
    "COLOR_RECOGNIZERS",
    "NAMED_COLORS",
]
