"""Configuration classes for the condition evaluator.

This module defines the evaluator settings and their loading from
dictionaries, JSON files and YAML files.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

import yaml


class EvaluationStrategy(str, Enum):
    """Tree traversal strategies."""

    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


@dataclass(frozen=True)
class EvaluatorConfig:
    """Settings for ConditionEvaluator.

    Attributes:
        strategy: Traversal strategy. ``iterative`` walks the tree with an
            explicit stack and is not bound by the interpreter recursion limit.
        trace: Log every visited node at DEBUG level.
    """

    strategy: Union[str, EvaluationStrategy] = EvaluationStrategy.RECURSIVE
    trace: bool = False

    def __post_init__(self):
        """Validate evaluator configuration."""
        if not isinstance(self.strategy, EvaluationStrategy):
            try:
                object.__setattr__(self, "strategy", EvaluationStrategy(self.strategy))
            except ValueError:
                valid = [s.value for s in EvaluationStrategy]
                raise ValueError(
                    f"Invalid evaluation strategy: {self.strategy!r}. Must be one of {valid}"
                ) from None

        if not isinstance(self.trace, bool):
            raise ValueError(f"trace must be a boolean, got {type(self.trace).__name__}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "strategy": self.strategy.value,
            "trace": self.trace,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvaluatorConfig":
        """Create config from dictionary."""
        return cls(
            strategy=data.get("strategy", EvaluationStrategy.RECURSIVE),
            trace=data.get("trace", False),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EvaluatorConfig":
        """Load evaluator config from JSON or YAML file.

        Args:
            path: Path to configuration file (.json or .yaml/.yml).

        Returns:
            Loaded evaluator configuration.

        Raises:
            ValueError: If file format is unsupported or the file does not
                contain a mapping.
        """
        path = Path(path)
        suffix = path.suffix.lower()

        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            elif suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported file format: {suffix}. Use .json, .yaml, or .yml")

        # An empty YAML document loads as None
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")

        return cls.from_dict(data)

    def to_json(self, indent: int = 2) -> str:
        """Convert config to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        """Convert config to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
