"""Layout validator: runs all lint rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from declay.errors import DeclayError
from declay.model.diagnostic import Diagnostic
from declay.model.document import Document
from declay.validation.rules import ALL_RULES


class ValidationError(DeclayError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[Document], list[Diagnostic]]


def validate(
    document: Document, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all lint rules against *document* and return every diagnostic."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(document))
    return diagnostics


def validate_or_raise(
    document: Document, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the warnings and info diagnostics otherwise.
    """
    diagnostics = validate(document, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
