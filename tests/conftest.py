"""Pytest fixtures for condition-tree tests.

This module provides reusable fixtures for building and evaluating
condition trees.
"""

import pytest
from typing import List

from condition_tree.core.conditions import (
    FALSE_CONDITION,
    TRUE_CONDITION,
    CompositeCondition,
    LeafCondition,
    create_and_condition,
    create_or_condition,
)
from condition_tree.core.config import EvaluationStrategy, EvaluatorConfig
from condition_tree.evaluation.evaluator import ConditionEvaluator


@pytest.fixture(params=[EvaluationStrategy.RECURSIVE, EvaluationStrategy.ITERATIVE], ids=lambda s: s.value)
def evaluator(request) -> ConditionEvaluator:
    """Evaluator for each traversal strategy."""
    return ConditionEvaluator(EvaluatorConfig(strategy=request.param))


@pytest.fixture
def reference_tree() -> CompositeCondition:
    """Create the reference tree.

    (true && (false || false))
    || (true && false && (false || true))
    || (((true || true) && false) && false)
    """
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


@pytest.fixture
def recording_leaf():
    """Factory fixture for leaves that record each verification.

    Returns a function that creates a leaf and the list its verifier appends
    to.

    Example:
        leaf, calls = recording_leaf(True, "first")
        evaluator.evaluate(leaf)
        assert calls == ["first"]
    """
    calls: List[str] = []

    def _create_leaf(value: bool, name: str = "leaf"):
        def _verifier(condition: LeafCondition) -> bool:
            calls.append(name)
            return condition.value

        return LeafCondition(value, verifier=_verifier), calls

    return _create_leaf
