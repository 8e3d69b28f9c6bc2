"""
condition-tree - Short-circuit evaluator for boolean condition trees.

Builds trees of leaf conditions combined under OR/AND composites and
evaluates them with standard short-circuit semantics.
"""

__version__ = "0.1.0"

from condition_tree.core.conditions import (
    FALSE_CONDITION,
    TRUE_CONDITION,
    CompositeCondition,
    Condition,
    ConditionType,
    LeafCondition,
    UnrecognizedConditionError,
    create_and_condition,
    create_or_condition,
)
from condition_tree.core.config import EvaluationStrategy, EvaluatorConfig
from condition_tree.evaluation.evaluator import ConditionEvaluator, evaluate

__all__ = [
    # Version
    "__version__",
    # Conditions
    "Condition",
    "ConditionType",
    "LeafCondition",
    "CompositeCondition",
    "TRUE_CONDITION",
    "FALSE_CONDITION",
    "create_or_condition",
    "create_and_condition",
    "UnrecognizedConditionError",
    # Config
    "EvaluatorConfig",
    "EvaluationStrategy",
    # Evaluation
    "ConditionEvaluator",
    "evaluate",
]
