"""
Evaluation module for condition-tree.

This module provides short-circuit evaluation of condition trees.
"""

from condition_tree.evaluation.evaluator import ConditionEvaluator, evaluate

__all__ = ["ConditionEvaluator", "evaluate"]
