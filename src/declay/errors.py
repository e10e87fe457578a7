"""Error hierarchy for declay."""

from __future__ import annotations


class DeclayError(Exception):
    """Base error for all declay errors."""


class MalformedMarkupError(DeclayError):
    """Raised when layout markup cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class UnknownElementKindError(DeclayError):
    """Raised when a node's tag is not a known widget kind."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unknown element kind: {tag!r}")


class InvalidSizeError(DeclayError, ValueError):
    """Raised when a size literal has non-numeric content."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid size: {text!r}")


class InvalidColorComponentError(DeclayError, ValueError):
    """Raised by a color recognizer that accepted the shape of a value but not its content."""


class TypeMismatchError(DeclayError, TypeError):
    """Raised when a binding cell is used with a value of another kind."""

    def __init__(self, key: str, expected: object, actual: object) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Binding {key!r} holds {expected}, not {actual}"
        )


class BindingNotFoundError(DeclayError, LookupError):
    """Raised when a binding key or a bindable widget id is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
