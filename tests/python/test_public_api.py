"""Tests for package root public API imports."""

from __future__ import annotations

import tomllib
from pathlib import Path

import dependency_policy as dp
from dependency_policy import (
    PolicyEvaluator,
    PolicyViolation,
    __version__,
    check_dependencies,
    matches,
)


def test_public_api_exports() -> None:
    """Core API symbols should be importable from the package root."""
    required_exports = {
        "__version__",
        "Coordinate",
        "DependencyNode",
        "PatternMatcher",
        "RequirementSet",
        "GraphValidator",
        "PolicyEvaluator",
        "PolicyViolation",
        "check_dependencies",
    }

    assert required_exports.issubset(set(dp.__all__))
    assert all(hasattr(dp, name) for name in dp.__all__)
    assert callable(check_dependencies)
    assert callable(matches)
    assert issubclass(PolicyViolation, Exception)
    assert PolicyEvaluator is not None


def test_version_matches_pyproject() -> None:
    """Package __version__ should align with pyproject.toml."""
    pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    pyproject_data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    assert __version__ == pyproject_data["project"]["version"]
