"""declay model layer -- public type re-exports."""

from declay.model.color import BLACK, Color
from declay.model.diagnostic import Diagnostic, Severity
from declay.model.document import Document, Node, Selector, StyleRule

ResolvedStyle = dict[str, str]

__all__ = [
    # document
    "Node",
    "Selector",
    "StyleRule",
    "Document",
    "ResolvedStyle",
    # color
    "Color",
    "BLACK",
    # diagnostic
    "Severity",
    "Diagnostic",
]
