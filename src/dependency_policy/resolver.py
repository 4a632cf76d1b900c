"""Resolver collaborators that supply already-resolved dependency graphs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ResolverError
from .models import Coordinate, DependencyNode

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    """Source of the resolved dependency graph for the project under check."""

    def resolve_transitive_graph(self) -> DependencyNode:
        """Return the root of the full resolved dependency tree."""

    def direct_dependencies(self) -> Sequence[Coordinate]:
        """Return the project's direct dependencies in declaration order."""


class StaticResolver(BaseModel):
    """Resolver backed by an in-memory graph, typically read from a report file."""

    root: DependencyNode | None = Field(
        default=None, description="Root of the resolved dependency tree"
    )
    direct: list[Coordinate] | None = Field(
        default=None,
        description="Direct dependencies; defaults to the root's immediate children",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("root", mode="before")
    @classmethod
    def _coerce_root(cls, value: object) -> object:
        if isinstance(value, dict):
            return DependencyNode.from_mapping(value)
        return value

    @field_validator("direct", mode="before")
    @classmethod
    def _coerce_direct(cls, value: object) -> object:
        if value is None:
            return None
        if not isinstance(value, list | tuple):
            raise ValueError("direct must be a list of coordinates")
        return [Coordinate.coerce(item) for item in value]

    @classmethod
    def from_yaml(cls, content: str) -> StaticResolver:
        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ResolverError("Dependency report is not valid YAML or JSON") from exc
        if not isinstance(data, dict):
            raise ResolverError("Dependency report must be a mapping")
        try:
            return cls.model_validate(data)
        except (ValidationError, TypeError, ValueError) as exc:
            raise ResolverError(f"Invalid dependency report: {exc}") from exc

    @classmethod
    def from_file(cls, path: str | Path) -> StaticResolver:
        target_path = Path(path)
        logger.debug("Loading dependency report from %s", target_path)
        return cls.from_yaml(target_path.read_text(encoding="utf-8"))

    def resolve_transitive_graph(self) -> DependencyNode:
        if self.root is None:
            raise ResolverError("No resolved dependency tree is available")
        return self.root

    def direct_dependencies(self) -> list[Coordinate]:
        if self.direct is not None:
            return list(self.direct)
        if self.root is None:
            return []
        return [child.coordinate for child in self.root.children]


__all__ = ["Resolver", "StaticResolver"]
