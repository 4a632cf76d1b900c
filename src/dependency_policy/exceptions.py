"""Exceptions raised by dependency policy evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .matching import Pattern
    from .policy import PolicyResult


class PolicyViolation(Exception):
    """One or more required dependency patterns were not found."""

    def __init__(self, result: PolicyResult) -> None:
        super().__init__(result.message)
        self.result = result

    @property
    def missing(self) -> list[Pattern]:
        return list(self.result.missing)


class ResolverError(RuntimeError):
    """The dependency graph could not be obtained from a resolver."""
