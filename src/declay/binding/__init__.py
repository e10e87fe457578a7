"""Two-way data binding between reactive cells and widgets."""

from declay.binding.cells import Bindable, CellKind, ReactiveCell
from declay.binding.context import BindingContext, parse_bind_attribute

__all__ = [
    "Bindable",
    "BindingContext",
    "CellKind",
    "ReactiveCell",
    "parse_bind_attribute",
]
