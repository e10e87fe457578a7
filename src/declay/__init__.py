"""declay: build widget trees from XML layouts with CSS-like styles."""

__version__ = "0.1.0"

from declay.binding import BindingContext, CellKind, ReactiveCell  # noqa: E402
from declay.builder import Builder, BuildResult, build_from_file, load_layout  # noqa: E402
from declay.callbacks import CallbackRegistry, EventContext, EventHandler  # noqa: E402
from declay.config import BuilderConfig  # noqa: E402
from declay.errors import (  # noqa: E402
    BindingNotFoundError,
    DeclayError,
    InvalidColorComponentError,
    InvalidSizeError,
    MalformedMarkupError,
    TypeMismatchError,
    UnknownElementKindError,
)
from declay.model import Color, Document, Node, StyleRule  # noqa: E402
from declay.parser import parse_markup, parse_properties, serialize_properties  # noqa: E402
from declay.reload import LayoutReloader  # noqa: E402
from declay.stylesheet import RuleRegistry, compute_style  # noqa: E402
from declay.values import format_number, parse_color, parse_size  # noqa: E402

__all__ = [
    "__version__",
    "Builder",
    "BuildResult",
    "BuilderConfig",
    "build_from_file",
    "load_layout",
    "LayoutReloader",
    "parse_markup",
    "parse_properties",
    "serialize_properties",
    "compute_style",
    "RuleRegistry",
    "parse_color",
    "parse_size",
    "format_number",
    "BindingContext",
    "CellKind",
    "ReactiveCell",
    "CallbackRegistry",
    "EventContext",
    "EventHandler",
    "Color",
    "Document",
    "Node",
    "StyleRule",
    "DeclayError",
    "MalformedMarkupError",
    "UnknownElementKindError",
    "InvalidSizeError",
    "InvalidColorComponentError",
    "TypeMismatchError",
    "BindingNotFoundError",
]
