"""Layout markup parser package."""

from declay.errors import MalformedMarkupError
from declay.parser.markup import parse_markup
from declay.parser.properties import parse_properties, serialize_properties

__all__ = [
    "parse_markup",
    "parse_properties",
    "serialize_properties",
    "MalformedMarkupError",
]
