"""Tests for dependency coordinate and graph models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dependency_policy.models import Coordinate, DependencyNode


class TestCoordinate:
    """Coordinate parsing and immutability."""

    def test_parse_round_trips_to_string(self) -> None:
        coordinate = Coordinate.parse("org.apache:commons-lang3:3.14.0")

        assert coordinate.group == "org.apache"
        assert coordinate.artifact == "commons-lang3"
        assert coordinate.version == "3.14.0"
        assert str(coordinate) == "org.apache:commons-lang3:3.14.0"

    def test_parse_rejects_missing_segments(self) -> None:
        with pytest.raises(ValueError, match="group:artifact:version"):
            Coordinate.parse("g:a")

    def test_coordinates_are_frozen_and_hashable(self) -> None:
        coordinate = Coordinate(group="g", artifact="a", version="1")

        with pytest.raises(ValidationError):
            coordinate.group = "other"  # type: ignore[misc]
        assert {coordinate, Coordinate.parse("g:a:1")} == {coordinate}

    def test_coerce_accepts_mappings(self) -> None:
        coordinate = Coordinate.coerce({"group": "g", "artifact": "a", "version": "2"})

        assert coordinate == Coordinate.parse("g:a:2")

    def test_coerce_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            Coordinate.coerce(42)


class TestDependencyNode:
    """Tree construction from nested mappings."""

    def test_from_mapping_accepts_both_node_shapes(self) -> None:
        tree = DependencyNode.from_mapping(
            {
                "coordinate": "com.example:app:1.0",
                "children": [
                    {"group": "g", "artifact": "lib", "version": "2.0"},
                    {
                        "coordinate": "g:other:1.1",
                        "children": [{"coordinate": "g:leaf:0.1"}],
                    },
                ],
            }
        )

        assert [str(c) for c in tree.iter_coordinates()] == [
            "com.example:app:1.0",
            "g:lib:2.0",
            "g:other:1.1",
            "g:leaf:0.1",
        ]

    def test_children_default_to_empty(self) -> None:
        node = DependencyNode(coordinate="g:a:1", children=None)

        assert node.children == ()
        assert node.coordinate == Coordinate.parse("g:a:1")

    def test_from_mapping_requires_coordinate_fields(self) -> None:
        with pytest.raises(ValidationError):
            DependencyNode.from_mapping({"group": "g", "artifact": "a"})
