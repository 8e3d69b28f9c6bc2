"""
Short-circuit evaluator for boolean condition trees.

This module provides evaluation of condition trees built from:
- Leaf conditions (delegates to the leaf's verify capability)
- OR composites (true if any child is true, stops at first True)
- AND composites (true if all children are true, stops at first False)

Two traversal strategies are available: recursive, and iterative with an
explicit stack for trees deeper than the interpreter recursion limit.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from condition_tree.core.conditions import (
    CompositeCondition,
    Condition,
    ConditionType,
    UnrecognizedConditionError,
)
from condition_tree.core.config import EvaluationStrategy, EvaluatorConfig

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class ConditionEvaluator:
    """
    Evaluator for condition trees.

    Children are always evaluated left to right and evaluation of a composite
    stops as soon as its outcome is decided, whichever strategy is used.

    Examples:
        >>> from condition_tree.core.conditions import (
        ...     TRUE_CONDITION, FALSE_CONDITION, create_or_condition
        ... )
        >>> evaluator = ConditionEvaluator()
        >>> evaluator.evaluate(create_or_condition([FALSE_CONDITION, TRUE_CONDITION]))
        True
    """

    __slots__ = ("config",)

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        """Initialize the evaluator.

        Args:
            config: Evaluator settings. Defaults to recursive traversal.
        """
        self.config = config or EvaluatorConfig()

        logger.debug(
            "ConditionEvaluator initialized",
            extra={"strategy": self.config.strategy.value, "trace": self.config.trace}
        )

    def evaluate(self, condition: Condition) -> bool:
        """
        Evaluate a condition tree.

        Args:
            condition: Root node (leaf or composite)

        Returns:
            Boolean result of the tree

        Raises:
            UnrecognizedConditionError: If a visited node is neither a
                composite nor exposes a callable verify()
        """
        if self.config.strategy is EvaluationStrategy.ITERATIVE:
            result = self._evaluate_iterative(condition)
        else:
            result = self._evaluate_recursive(condition)

        logger.debug(
            "Evaluated condition tree",
            extra={"result": result, "strategy": self.config.strategy.value}
        )
        return result

    def _evaluate_recursive(self, condition: Any) -> bool:
        if isinstance(condition, CompositeCondition):
            self._trace(condition)
            if condition.type is ConditionType.OR:
                # Short-circuit: stop at first True
                for sub in condition.conditions:
                    if self._evaluate_recursive(sub):
                        return True
                return False

            # Short-circuit: stop at first False
            for sub in condition.conditions:
                if not self._evaluate_recursive(sub):
                    return False
            return True

        return self._verify_leaf(condition)

    def _evaluate_iterative(self, condition: Any) -> bool:
        """
        Evaluate a tree with an explicit stack of pending composites.

        Each stack frame holds a composite and an iterator over its remaining
        children. A child result equal to the composite's deciding value
        (True for OR, False for AND) pops the frame and propagates upwards;
        an exhausted iterator yields the opposite value.
        """
        stack: List[Tuple[CompositeCondition, Iterator[Any]]] = []
        node = condition

        while True:
            if isinstance(node, CompositeCondition):
                self._trace(node)
                stack.append((node, iter(node.conditions)))
                result = None
            else:
                result = self._verify_leaf(node)

            while stack:
                composite, children = stack[-1]
                deciding = composite.type is ConditionType.OR

                if result is deciding:
                    stack.pop()
                    continue

                child = next(children, _EXHAUSTED)
                if child is _EXHAUSTED:
                    stack.pop()
                    result = not deciding
                    continue

                node = child
                break

            if not stack:
                return result

    def _verify_leaf(self, condition: Any) -> bool:
        verify = getattr(condition, "verify", None)
        if not callable(verify):
            raise UnrecognizedConditionError(condition)

        self._trace(condition)
        return bool(verify())

    def _trace(self, condition: Any) -> None:
        if not self.config.trace:
            return

        if isinstance(condition, CompositeCondition):
            logger.debug(
                "Visiting composite condition",
                extra={"type": condition.type.value, "children": len(condition.conditions)}
            )
        else:
            logger.debug(
                "Visiting leaf condition",
                extra={"node": type(condition).__name__}
            )


_default_evaluator = ConditionEvaluator()


def evaluate(condition: Condition) -> bool:
    """
    Evaluate a condition tree with the default recursive evaluator.

    Args:
        condition: Root node (leaf or composite)

    Returns:
        Boolean result of the tree

    Examples:
        >>> from condition_tree.core.conditions import (
        ...     TRUE_CONDITION, FALSE_CONDITION, create_and_condition
        ... )
        >>> evaluate(create_and_condition([TRUE_CONDITION, FALSE_CONDITION]))
        False
        >>> evaluate(create_and_condition([]))
        True
    """
    return _default_evaluator.evaluate(condition)
