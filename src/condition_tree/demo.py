"""
Demonstration entry point for condition-tree.

Builds the reference tree

    (true && (false || false))
    || (true && false && (false || true))
    || (((true || true) && false) && false)

evaluates it and prints the result.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

import yaml

from condition_tree.core.conditions import (
    FALSE_CONDITION,
    TRUE_CONDITION,
    CompositeCondition,
    create_and_condition,
    create_or_condition,
)
from condition_tree.core.config import EvaluationStrategy, EvaluatorConfig
from condition_tree.evaluation.evaluator import ConditionEvaluator


def build_reference_tree() -> CompositeCondition:
    """Build the reference tree, which evaluates to False."""
    return create_or_condition([
        create_and_condition([
            TRUE_CONDITION,
            create_or_condition([FALSE_CONDITION, FALSE_CONDITION]),
        ]),
        create_and_condition([
            TRUE_CONDITION,
            FALSE_CONDITION,
            create_or_condition([FALSE_CONDITION, TRUE_CONDITION]),
        ]),
        create_and_condition([
            create_and_condition([
                create_or_condition([TRUE_CONDITION, TRUE_CONDITION]),
                FALSE_CONDITION,
            ]),
            FALSE_CONDITION,
        ]),
    ])


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="condition-tree",
        description="Evaluate the reference condition tree and print the result.",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in EvaluationStrategy],
        help="Traversal strategy (overrides the config file)",
    )
    parser.add_argument(
        "--config",
        help="Evaluator config file (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging with per-node tracing",
    )
    return parser


def load_config(args: argparse.Namespace) -> EvaluatorConfig:
    """Resolve evaluator settings from the config file and CLI flags."""
    data = {}
    if args.config:
        data = EvaluatorConfig.from_file(args.config).to_dict()
    if args.strategy:
        data["strategy"] = args.strategy
    if args.verbose:
        data["trace"] = True
    return EvaluatorConfig.from_dict(data)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = ConditionEvaluator(config).evaluate(build_reference_tree())
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
