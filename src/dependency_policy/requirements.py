"""Bookkeeping for include patterns that are still unsatisfied during a run."""

from __future__ import annotations

from collections.abc import Iterable

from .matching import Pattern, matches
from .models import Coordinate


class RequirementSet:
    """Live working copy of the include patterns for a single run.

    Patterns are removed the first time any coordinate satisfies them and are
    never added back. The original sequence is retained for diagnostics.
    """

    def __init__(self, patterns: Iterable[Pattern] | None = None) -> None:
        original = tuple(patterns or ())
        self._original: tuple[Pattern, ...] = original
        self._remaining: list[Pattern] = list(original)

    def reconcile(self, coordinate: Coordinate) -> list[Pattern]:
        """Drop every remaining pattern the coordinate satisfies and return them."""

        satisfied: list[Pattern] = []
        unsatisfied: list[Pattern] = []
        for pattern in self._remaining:
            if matches(coordinate, pattern):
                satisfied.append(pattern)
            else:
                unsatisfied.append(pattern)
        self._remaining = unsatisfied
        return satisfied

    def is_satisfied(self) -> bool:
        return not self._remaining

    def original_patterns(self) -> tuple[Pattern, ...]:
        return self._original

    def remaining(self) -> tuple[Pattern, ...]:
        return tuple(self._remaining)

    def __len__(self) -> int:
        return len(self._remaining)

    def __repr__(self) -> str:
        return f"RequirementSet(remaining={list(self._remaining)!r})"
