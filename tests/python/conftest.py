"""Test configuration for adding src to the import path."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC_PATH = ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from dependency_policy import Coordinate, DependencyNode


class RecordingResolver:
    """Resolver double that counts how often each graph accessor is used."""

    def __init__(
        self,
        root: DependencyNode | None = None,
        direct: list[Coordinate] | None = None,
    ) -> None:
        self.root = root
        self.direct = direct or []
        self.transitive_calls = 0
        self.direct_calls = 0

    def resolve_transitive_graph(self) -> DependencyNode:
        self.transitive_calls += 1
        assert self.root is not None
        return self.root

    def direct_dependencies(self) -> list[Coordinate]:
        self.direct_calls += 1
        return list(self.direct)


@pytest.fixture()
def coordinate() -> Callable[[str], Coordinate]:
    return Coordinate.parse


@pytest.fixture()
def node_factory() -> Callable[..., DependencyNode]:
    def _factory(value: str, *children: DependencyNode) -> DependencyNode:
        return DependencyNode(coordinate=Coordinate.parse(value), children=children)

    return _factory


@pytest.fixture()
def resolver_factory() -> Callable[..., RecordingResolver]:
    return RecordingResolver


@pytest.fixture()
def xerces_tree(node_factory: Callable[..., DependencyNode]) -> DependencyNode:
    return node_factory(
        "com.example:app:1.0",
        node_factory(
            "xerces:xerces-impl:1.0",
            node_factory("xerces:xerces-api:1.0"),
        ),
        node_factory("g:runtime:1.0"),
    )
