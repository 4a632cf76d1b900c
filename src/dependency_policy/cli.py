"""Command-line interface for checking a dependency report against a policy."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .exceptions import PolicyViolation, ResolverError
from .policy import PolicyConfig, PolicyEvaluator
from .resolver import StaticResolver


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check-dependencies",
        description=(
            "Fail when a resolved dependency report is missing any dependency "
            "required by the policy."
        ),
    )
    parser.add_argument(
        "policy", type=Path, help="Path to the dependency policy YAML file."
    )
    parser.add_argument(
        "report",
        type=Path,
        help="Path to the resolved dependency report (YAML or JSON).",
    )
    parser.add_argument(
        "--direct-only",
        action="store_true",
        help="Only consider direct dependencies instead of the transitive tree.",
    )
    parser.add_argument(
        "--message", help="Custom text printed before the missing dependencies."
    )
    parser.add_argument(
        "--report-all-includes",
        action="store_true",
        help="List every configured include when the check fails.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def _load_config(args: argparse.Namespace) -> PolicyConfig:
    if not args.policy.exists():
        raise FileNotFoundError(f"Policy file not found: {args.policy}")
    config = PolicyConfig.from_file(args.policy)
    updates: dict[str, object] = {}
    if args.direct_only:
        updates["search_transitive"] = False
    if args.message is not None:
        updates["message"] = args.message
    if args.report_all_includes:
        updates["report_all_includes"] = True
    return config.model_copy(update=updates) if updates else config


def _load_resolver(path: Path) -> StaticResolver:
    if not path.exists():
        raise FileNotFoundError(f"Dependency report not found: {path}")
    return StaticResolver.from_file(path)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load_config(args)
        resolver = _load_resolver(args.report)
        PolicyEvaluator(resolver).enforce(config)
    except PolicyViolation as exc:
        print(str(exc), end="", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print("Error: policy configuration validation failed.", file=sys.stderr)
        print(str(exc), file=sys.stderr)
        return 2
    except ResolverError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print("Dependency policy satisfied")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
