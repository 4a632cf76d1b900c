"""Coordinate pattern matching with per-segment wildcards.

A pattern has the form ``group[:artifact[:version]]``. A segment that is
``*``, empty, or omitted matches anything; any other segment must equal the
coordinate's segment exactly (case-sensitive). Patterns may also arrive
already split into a tuple or list of up to three segments, with ``None``
standing in for an omitted segment.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Coordinate

Pattern = str | Sequence[str | None]

WILDCARD = "*"
SEPARATOR = ":"


def _segments(pattern: Pattern) -> tuple[str | None, str | None, str | None]:
    if isinstance(pattern, str):
        parts: list[str | None] = list(pattern.split(SEPARATOR, 2))
    else:
        parts = list(pattern)[:3]
    parts.extend([None] * (3 - len(parts)))
    return parts[0], parts[1], parts[2]


def _segment_matches(expected: str | None, actual: str) -> bool:
    if expected is None or expected == "" or expected == WILDCARD:
        return True
    return expected == actual


def matches(coordinate: Coordinate, pattern: Pattern) -> bool:
    """Return True when every non-wildcard segment equals the coordinate's."""

    return all(
        _segment_matches(expected, actual)
        for expected, actual in zip(_segments(pattern), coordinate.segments())
    )


def matches_any(coordinate: Coordinate, patterns: Iterable[Pattern] | None) -> bool:
    """Return True when at least one pattern matches the coordinate."""

    if not patterns:
        return False
    return any(matches(coordinate, pattern) for pattern in patterns)


def format_pattern(pattern: Pattern) -> str:
    """Render a pattern in its ``group:artifact:version`` string form."""

    if isinstance(pattern, str):
        return pattern
    return SEPARATOR.join(WILDCARD if part is None else part for part in pattern)


class PatternMatcher:
    """Stateless matcher exposing the module functions as methods."""

    @staticmethod
    def matches(coordinate: Coordinate, pattern: Pattern) -> bool:
        return matches(coordinate, pattern)

    @staticmethod
    def matches_any(coordinate: Coordinate, patterns: Iterable[Pattern] | None) -> bool:
        return matches_any(coordinate, patterns)


__all__ = [
    "Pattern",
    "PatternMatcher",
    "SEPARATOR",
    "WILDCARD",
    "format_pattern",
    "matches",
    "matches_any",
]
