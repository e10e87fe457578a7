"""Reactive cells: named, typed values that widgets can follow."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

from declay.errors import TypeMismatchError

Listener = Callable[[Any], None]


class CellKind(Enum):
    """Value kinds a cell can hold."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"

    @classmethod
    def of(cls, value: object) -> CellKind:
        """Return the kind for a Python value."""
        # bool before int: bool is a subclass of int
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        raise TypeError(f"Unsupported binding value type: {type(value).__name__}")

    def __str__(self) -> str:
        return self.value


class ReactiveCell:
    """A thread-safe value holder that notifies listeners on change.

    Listeners are called outside the lock, in subscription order, and only
    when the stored value actually changes.
    """

    def __init__(self, key: str, kind: CellKind, value: Any) -> None:
        self.key = key
        self.kind = kind
        self._lock = threading.Lock()
        self._value = self._coerce(value)
        self._listeners: list[Listener] = []

    def _coerce(self, value: Any) -> Any:
        if self.kind is CellKind.FLOAT and not isinstance(value, bool) and isinstance(value, int):
            return float(value)
        actual = CellKind.of(value)
        if actual is not self.kind:
            raise TypeMismatchError(self.key, self.kind, actual)
        return value

    def get(self) -> Any:
        with self._lock:
            return self._value

    def set(self, value: Any) -> None:
        """Store *value* and notify listeners if it differs from the current one."""
        value = self._coerce(value)
        with self._lock:
            if value == self._value:
                return
            self._value = value
            listeners = list(self._listeners)
        for listener in listeners:
            listener(value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that removes it again."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def __repr__(self) -> str:
        return f"ReactiveCell(key={self.key!r}, kind={self.kind}, value={self.get()!r})"


@runtime_checkable
class Bindable(Protocol):
    """A widget that can follow (and, if interactive, write back to) a cell."""

    binding_kind: CellKind

    def bind(self, cell: ReactiveCell) -> None: ...

    def unbind(self) -> None: ...
