"""Rule registry: selector string to StyleRule lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from declay.model.document import StyleRule


class RuleRegistry:
    """Maps selector strings (``.name`` / ``#name``) to style rules.

    Registering a selector twice replaces the earlier rule.
    """

    def __init__(self) -> None:
        self._rules: dict[str, StyleRule] = {}

    @classmethod
    def from_rules(cls, rules: Iterable[StyleRule]) -> RuleRegistry:
        registry = cls()
        for rule in rules:
            registry.register(rule)
        return registry

    def register(self, rule: StyleRule) -> None:
        """Register *rule* under its selector's raw text."""
        self._rules[rule.selector.raw] = rule

    def lookup(self, selector: str) -> StyleRule | None:
        """Return the rule registered for *selector*, or ``None``."""
        return self._rules.get(selector)

    def selectors(self) -> list[str]:
        return list(self._rules)

    def rules(self) -> list[StyleRule]:
        return list(self._rules.values())

    def clear(self) -> None:
        self._rules.clear()

    def __contains__(self, selector: object) -> bool:
        return selector in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[StyleRule]:
        return iter(self._rules.values())
