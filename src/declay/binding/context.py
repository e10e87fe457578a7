"""Binding context: the named store of reactive cells for one layout."""

from __future__ import annotations

import threading
from typing import Any

from declay.binding.cells import Bindable, CellKind, ReactiveCell
from declay.errors import BindingNotFoundError, TypeMismatchError


class BindingContext:
    """Creates, fetches and connects reactive cells by key.

    Keys are plain strings; dotted names such as ``user.name`` are used as-is.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cells: dict[str, ReactiveCell] = {}
        self._widgets: dict[str, Any] = {}
        self._bindings: dict[str, list[str]] = {}

    # --- cells ----------------------------------------------------------------

    def bind(self, key: str, initial: Any) -> ReactiveCell:
        """Return the cell for *key*, creating it with *initial* if absent.

        An existing cell keeps its current value. Raises
        :class:`TypeMismatchError` if it holds a different kind of value.
        """
        kind = CellKind.of(initial)
        with self._lock:
            cell = self._cells.get(key)
            if cell is None:
                cell = ReactiveCell(key, kind, initial)
                self._cells[key] = cell
                return cell
        if cell.kind is not kind and not (cell.kind is CellKind.FLOAT and kind is CellKind.INT):
            raise TypeMismatchError(key, cell.kind, kind)
        return cell

    def get(self, key: str) -> ReactiveCell | None:
        with self._lock:
            return self._cells.get(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cells

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._cells)

    def _typed(self, key: str, kind: CellKind) -> Any:
        cell = self.get(key)
        if cell is None:
            raise BindingNotFoundError(f"Binding not found: {key}")
        if cell.kind is not kind:
            raise TypeMismatchError(key, cell.kind, kind)
        return cell.get()

    def get_string(self, key: str) -> str:
        return self._typed(key, CellKind.STRING)

    def get_int(self, key: str) -> int:
        return self._typed(key, CellKind.INT)

    def get_float(self, key: str) -> float:
        return self._typed(key, CellKind.FLOAT)

    def get_bool(self, key: str) -> bool:
        return self._typed(key, CellKind.BOOL)

    # --- widgets --------------------------------------------------------------

    def register_widget(self, widget_id: str, widget: Any) -> None:
        with self._lock:
            self._widgets[widget_id] = widget

    def get_widget(self, widget_id: str) -> Any | None:
        with self._lock:
            return self._widgets.get(widget_id)

    def bind_widget(self, widget_id: str, key: str) -> None:
        """Connect a registered widget to an existing cell.

        Raises :class:`BindingNotFoundError` if either side is missing and
        :class:`TypeMismatchError` if the widget cannot follow the cell's kind.
        """
        widget = self.get_widget(widget_id)
        if widget is None:
            raise BindingNotFoundError(f"Widget not found: {widget_id}")
        cell = self.get(key)
        if cell is None:
            raise BindingNotFoundError(f"Binding not found: {key}")
        if not isinstance(widget, Bindable):
            raise TypeMismatchError(key, type(widget).__name__, "a bindable widget")
        if widget.binding_kind is not cell.kind:
            raise TypeMismatchError(key, cell.kind, widget.binding_kind)
        widget.bind(cell)
        with self._lock:
            self._bindings.setdefault(widget_id, []).append(key)

    def bindings_for(self, widget_id: str) -> list[str]:
        """Return the keys explicitly bound to *widget_id* via :meth:`bind_widget`."""
        with self._lock:
            return list(self._bindings.get(widget_id, []))


def parse_bind_attribute(value: str) -> str:
    """Normalize a ``bind`` attribute value into a cell key."""
    return value.strip()
