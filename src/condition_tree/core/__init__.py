"""Core module for condition-tree.

This module provides the condition node model and the evaluator
configuration.
"""

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

__all__ = [
    "Condition",
    "ConditionType",
    "LeafCondition",
    "CompositeCondition",
    "TRUE_CONDITION",
    "FALSE_CONDITION",
    "create_or_condition",
    "create_and_condition",
    "UnrecognizedConditionError",
    "EvaluatorConfig",
    "EvaluationStrategy",
]
