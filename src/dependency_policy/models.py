"""Core models for resolved dependency coordinates and graphs."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinate(BaseModel):
    """Identifier for a single resolved dependency."""

    group: str = Field(..., description="Group (organisation) segment")
    artifact: str = Field(..., description="Artifact name segment")
    version: str = Field(..., description="Resolved version segment")

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @classmethod
    def parse(cls, value: str) -> Coordinate:
        """Build a coordinate from a ``group:artifact:version`` string."""

        parts = value.split(":", 2)
        if len(parts) != 3:
            msg = f"Coordinate must have the form group:artifact:version, got '{value}'"
            raise ValueError(msg)
        group, artifact, version = parts
        return cls(group=group, artifact=artifact, version=version)

    @classmethod
    def coerce(cls, value: object) -> Coordinate:
        """Accept a coordinate, a colon string, or a mapping of its fields."""

        if isinstance(value, Coordinate):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"Cannot build a coordinate from {type(value).__name__}")

    def segments(self) -> tuple[str, str, str]:
        return (self.group, self.artifact, self.version)

    def __str__(self) -> str:
        return ":".join(self.segments())


class DependencyNode(BaseModel):
    """One node of a resolved dependency tree."""

    coordinate: Coordinate = Field(..., description="Dependency at this node")
    children: tuple[DependencyNode, ...] = Field(
        default_factory=tuple, description="Direct children in resolution order"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("coordinate", mode="before")
    @classmethod
    def _coerce_coordinate(cls, value: object) -> object:
        if isinstance(value, str):
            return Coordinate.parse(value)
        return value

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: object) -> object:
        if value is None:
            return ()
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DependencyNode:
        """Build a tree from the nested mapping form used by report files.

        A node is either ``{"coordinate": "g:a:v", "children": [...]}`` or
        carries ``group``/``artifact``/``version`` keys directly.
        """

        if not isinstance(data, Mapping):
            raise TypeError("Dependency node must be a mapping")
        raw_children = data.get("children") or []
        children = tuple(cls.from_mapping(child) for child in raw_children)
        if "coordinate" in data:
            coordinate = Coordinate.coerce(data["coordinate"])
        else:
            coordinate = Coordinate.model_validate(
                {key: data.get(key) for key in ("group", "artifact", "version")}
            )
        return cls(coordinate=coordinate, children=children)

    def iter_coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate in the tree in pre-order."""

        yield self.coordinate
        for child in self.children:
            yield from child.iter_coordinates()
