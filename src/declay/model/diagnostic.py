"""Diagnostic model: structured lint messages for layout documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a layout document.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        node_id: The id of the node involved, if it has one.
        tag: The tag of the node involved, if applicable.
        selector: The style selector involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    node_id: str | None = None
    tag: str | None = None
    selector: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.node_id:
            location = f" [id={self.node_id}]"
        elif self.selector:
            location = f" [selector={self.selector}]"
        elif self.tag:
            location = f" [tag={self.tag}]"
        return f"{self.severity.value}{location}: {self.message}"
