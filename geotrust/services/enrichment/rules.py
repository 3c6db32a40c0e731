"""Ordered substring rule tables for keyword heuristics."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class KeywordRule(Generic[V]):
    """A case-insensitive substring pattern mapped to a verdict."""

    pattern: str
    verdict: V

    def matches(self, text: str) -> bool:
        return self.pattern.lower() in text.lower()


def rules_for(patterns: Iterable[str], verdict: V) -> tuple[KeywordRule[V], ...]:
    """Build a rule table assigning the same verdict to every pattern."""
    return tuple(KeywordRule(pattern, verdict) for pattern in patterns if pattern)


def matching_verdicts(rules: Iterable[KeywordRule[V]], *texts: str) -> list[V]:
    """Return the verdicts of all rules matching any of the texts, in rule order."""
    candidates = [text for text in texts if text]
    return [rule.verdict for rule in rules if any(rule.matches(text) for text in candidates)]


def any_match(rules: Iterable[KeywordRule[V]], *texts: str) -> bool:
    """Return True if any rule matches any non-empty text."""
    candidates = [text for text in texts if text]
    if not candidates:
        return False
    return any(rule.matches(text) for rule in rules for text in candidates)
