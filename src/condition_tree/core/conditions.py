"""Condition node classes for condition-tree.

This module defines the data model for boolean condition trees: leaf
conditions carrying a value and a verification capability, and composite
conditions combining children under OR or AND.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence, Tuple, Union


class ConditionType(str, Enum):
    """Logical operators for composite conditions."""

    OR = "OR"
    AND = "AND"


class UnrecognizedConditionError(TypeError):
    """Raised when a node is neither a composite nor a verifiable leaf."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(
            f"Unrecognized condition node of type {type(node).__name__}: "
            "expected a CompositeCondition or an object with a callable verify()"
        )


def value_of(condition: "LeafCondition") -> bool:
    """Default verifier: return the leaf's stored value."""
    return condition.value


@dataclass(frozen=True)
class LeafCondition:
    """Terminal node of a condition tree.

    Attributes:
        value: Stored boolean value.
        verifier: Callable receiving the leaf itself and returning its truth
            value. Defaults to returning ``value``.
    """

    value: bool
    verifier: Callable[["LeafCondition"], bool] = field(default=value_of, compare=False, repr=False)

    def __post_init__(self):
        """Validate the stored value."""
        if not isinstance(self.value, bool):
            raise ValueError(f"Leaf value must be a boolean, got {type(self.value).__name__}")

    def verify(self) -> bool:
        """Run the verifier against this leaf."""
        return self.verifier(self)


@dataclass(frozen=True)
class CompositeCondition:
    """Internal node combining child conditions under OR or AND.

    Children are held as a tuple so the node cannot be mutated after
    construction.

    Attributes:
        type: Logical operator applied to the children.
        conditions: Ordered child conditions (leaves or composites).
    """

    type: Union[str, ConditionType]
    conditions: Tuple["Condition", ...] = ()

    def __post_init__(self):
        """Validate the operator tag and freeze the child sequence."""
        if not isinstance(self.type, ConditionType):
            try:
                object.__setattr__(self, "type", ConditionType(self.type))
            except ValueError:
                valid = [t.value for t in ConditionType]
                raise ValueError(
                    f"Invalid composite condition type: {self.type!r}. Must be one of {valid}"
                ) from None

        if not isinstance(self.conditions, tuple):
            object.__setattr__(self, "conditions", tuple(self.conditions))


Condition = Union[LeafCondition, CompositeCondition]

TRUE_CONDITION = LeafCondition(True)
FALSE_CONDITION = LeafCondition(False)


def create_or_condition(conditions: Sequence[Condition]) -> CompositeCondition:
    """Create a composite that is true when any child is true."""
    return CompositeCondition(type=ConditionType.OR, conditions=conditions)


def create_and_condition(conditions: Sequence[Condition]) -> CompositeCondition:
    """Create a composite that is true when every child is true."""
    return CompositeCondition(type=ConditionType.AND, conditions=conditions)
