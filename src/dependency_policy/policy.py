"""Required-dependency policy evaluation.

The evaluator seeds a :class:`RequirementSet` from the configured include
patterns, walks either the resolved transitive tree or the flat list of direct
dependencies supplied by a resolver, and reports every include pattern that
was never satisfied.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import PolicyViolation
from .matching import format_pattern
from .requirements import RequirementSet
from .resolver import Resolver
from .traversal import validate_flat, validate_tree

logger = logging.getLogger(__name__)

NOT_FOUND_PREFIX = "Not found Require Dependency: "
CONFIG_SECTION = "requireDependencies"
LINE_BREAK = "\n"


class PolicyConfig(BaseModel):
    """Include/exclude settings for one required-dependency check."""

    includes: list[str] = Field(
        default_factory=list,
        description="Patterns that must match at least one accepted dependency",
    )
    excludes: list[str] = Field(
        default_factory=list,
        description="Patterns whose matching dependencies (and subtrees) are ignored",
    )
    search_transitive: bool = Field(
        default=True,
        description="Walk the full resolved tree instead of direct dependencies only",
    )
    message: str | None = Field(
        default=None, description="Optional custom text placed before the diagnostics"
    )
    report_all_includes: bool = Field(
        default=False,
        description=(
            "List every configured include on failure rather than only the "
            "unsatisfied ones"
        ),
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def _coerce_patterns(cls, value: object) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list | tuple):
            raise ValueError("patterns must be a list")
        patterns: list[str] = []
        for item in value:
            if item is None:
                continue
            # YAML reads an unquoted 1.10 as the float 1.1; quote such versions.
            if isinstance(item, list | tuple):
                segments = [None if part is None else str(part) for part in item]
                patterns.append(format_pattern(segments))
            else:
                patterns.append(str(item))
        return patterns

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> PolicyConfig:
        section = data.get(CONFIG_SECTION, data)
        if not isinstance(section, dict):
            raise ValueError(f"'{CONFIG_SECTION}' must be a mapping")
        normalized = {_normalize_key(key): value for key, value in section.items()}
        return cls.model_validate(normalized)

    @classmethod
    def from_yaml(cls, content: str) -> PolicyConfig:
        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ValueError("Policy configuration is not valid YAML") from exc
        if not isinstance(data, dict):
            raise ValueError("Policy configuration must be a mapping")
        return cls.from_mapping(data)

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> PolicyConfig:
        target_path = Path(path) if path is not None else _default_policy_path()
        if target_path is None:
            raise FileNotFoundError("No dependency-policy.yaml file found")
        return cls.from_yaml(target_path.read_text(encoding="utf-8"))

    @classmethod
    def from_environment(
        cls, env_var: str = "DEPENDENCY_POLICY_CONFIG"
    ) -> PolicyConfig:
        content = os.getenv(env_var)
        if not content:
            raise ValueError(f"Environment variable '{env_var}' is not set or empty")
        return cls.from_yaml(content)


_KEY_ALIASES = {
    "searchTransitive": "search_transitive",
    "reportAllIncludes": "report_all_includes",
}


def _normalize_key(key: object) -> object:
    return _KEY_ALIASES.get(key, key) if isinstance(key, str) else key


def _default_policy_path() -> Path | None:
    for parent in Path(__file__).resolve().parents:
        candidate = parent / "config" / "dependency-policy.yaml"
        if candidate.exists():
            return candidate
    return None


class PolicyResult(BaseModel):
    """Verdict of a required-dependency check."""

    passed: bool = Field(..., description="True when every include was satisfied")
    message: str = Field(default="", description="Diagnostic text; empty on success")
    missing: list[str] = Field(
        default_factory=list, description="Include patterns left unsatisfied"
    )
    reported: list[str] = Field(
        default_factory=list, description="Include patterns listed in the message"
    )

    model_config = ConfigDict(frozen=True)


def error_line(pattern: str) -> str:
    return f"{NOT_FOUND_PREFIX}{pattern}{LINE_BREAK}"


def render_message(patterns: Iterable[str], custom_message: str | None = None) -> str:
    """Build the multi-line diagnostic for unmet include patterns."""

    prefix = f"{custom_message}{LINE_BREAK}" if custom_message is not None else ""
    return prefix + "".join(error_line(pattern) for pattern in patterns)


class PolicyEvaluator:
    """Evaluate a required-dependency policy against a resolver's graph."""

    def __init__(self, resolver: Resolver) -> None:
        if resolver is None:
            raise ValueError("A resolver is required")
        self.resolver = resolver

    def evaluate(self, config: PolicyConfig) -> PolicyResult:
        if not config.includes:
            logger.debug("No required dependencies configured; policy passes")
            return PolicyResult(passed=True)

        requirements = RequirementSet(config.includes)
        if config.search_transitive:
            logger.debug(
                "Checking %d include(s) against the transitive dependency tree",
                len(config.includes),
            )
            root = self.resolver.resolve_transitive_graph()
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Resolved tree has %d node(s)",
                    sum(1 for _ in root.iter_coordinates()),
                )
            validate_tree(root, config.excludes, requirements)
        else:
            logger.debug(
                "Checking %d include(s) against direct dependencies",
                len(config.includes),
            )
            coordinates = self.resolver.direct_dependencies()
            validate_flat(coordinates, config.excludes, requirements)

        if requirements.is_satisfied():
            logger.debug("All required dependencies found")
            return PolicyResult(passed=True)

        missing = [format_pattern(pattern) for pattern in requirements.remaining()]
        if config.report_all_includes:
            reported = [
                format_pattern(pattern) for pattern in requirements.original_patterns()
            ]
        else:
            reported = missing
        logger.debug("Required dependencies missing: %s", ", ".join(missing))
        return PolicyResult(
            passed=False,
            message=render_message(reported, config.message),
            missing=missing,
            reported=reported,
        )

    def enforce(self, config: PolicyConfig) -> PolicyResult:
        """Evaluate and raise :class:`PolicyViolation` when the policy fails."""

        result = self.evaluate(config)
        if not result.passed:
            raise PolicyViolation(result)
        return result


def check_dependencies(
    resolver: Resolver,
    includes: Iterable[str] | None = None,
    excludes: Iterable[str] | None = None,
    *,
    search_transitive: bool = True,
    message: str | None = None,
) -> PolicyResult:
    """One-shot helper building a config and evaluating it."""

    config = PolicyConfig(
        includes=list(includes or []),
        excludes=list(excludes or []),
        search_transitive=search_transitive,
        message=message,
    )
    return PolicyEvaluator(resolver).evaluate(config)


__all__ = [
    "NOT_FOUND_PREFIX",
    "PolicyConfig",
    "PolicyEvaluator",
    "PolicyResult",
    "check_dependencies",
    "error_line",
    "render_message",
]
