"""Dependency Policy - Required-dependency checks over resolved build graphs."""

from .exceptions import PolicyViolation, ResolverError
from .matching import PatternMatcher, format_pattern, matches, matches_any
from .models import Coordinate, DependencyNode
from .policy import (
    NOT_FOUND_PREFIX,
    PolicyConfig,
    PolicyEvaluator,
    PolicyResult,
    check_dependencies,
    render_message,
)
from .requirements import RequirementSet
from .resolver import Resolver, StaticResolver
from .traversal import GraphValidator, validate_flat, validate_tree

__all__ = [
    "Coordinate",
    "DependencyNode",
    "GraphValidator",
    "NOT_FOUND_PREFIX",
    "PatternMatcher",
    "PolicyConfig",
    "PolicyEvaluator",
    "PolicyResult",
    "PolicyViolation",
    "RequirementSet",
    "Resolver",
    "ResolverError",
    "StaticResolver",
    "check_dependencies",
    "format_pattern",
    "matches",
    "matches_any",
    "render_message",
    "validate_flat",
    "validate_tree",
    "__version__",
]
__version__ = "0.1.0"
