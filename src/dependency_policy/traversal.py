"""Depth-first validation of a dependency graph against include/exclude patterns.

An excluded node hides its entire subtree: none of its descendants can
satisfy an include, even when they would match one. Traversal stops as soon
as every requirement has been satisfied.
"""

from __future__ import annotations

from collections.abc import Iterable

from .matching import Pattern, matches_any
from .models import Coordinate, DependencyNode
from .requirements import RequirementSet


def validate_tree(
    root: DependencyNode,
    excludes: Iterable[Pattern] | None,
    requirements: RequirementSet,
) -> None:
    """Reconcile requirements against ``root`` and its descendants in pre-order."""

    exclude_list = list(excludes or ())
    _visit(root, exclude_list, requirements)


def _visit(
    node: DependencyNode, excludes: list[Pattern], requirements: RequirementSet
) -> None:
    if matches_any(node.coordinate, excludes):
        return
    requirements.reconcile(node.coordinate)
    if requirements.is_satisfied():
        return
    for child in node.children:
        if requirements.is_satisfied():
            break
        _visit(child, excludes, requirements)


def validate_flat(
    coordinates: Iterable[Coordinate],
    excludes: Iterable[Pattern] | None,
    requirements: RequirementSet,
) -> None:
    """Reconcile requirements against a flat list of direct dependencies."""

    exclude_list = list(excludes or ())
    for coordinate in coordinates:
        if requirements.is_satisfied():
            break
        if matches_any(coordinate, exclude_list):
            continue
        requirements.reconcile(coordinate)


class GraphValidator:
    """Method-style access to the traversal functions."""

    def validate_tree(
        self,
        root: DependencyNode,
        excludes: Iterable[Pattern] | None,
        requirements: RequirementSet,
    ) -> None:
        validate_tree(root, excludes, requirements)

    def validate_flat(
        self,
        coordinates: Iterable[Coordinate],
        excludes: Iterable[Pattern] | None,
        requirements: RequirementSet,
    ) -> None:
        validate_flat(coordinates, excludes, requirements)


__all__ = ["GraphValidator", "validate_flat", "validate_tree"]
