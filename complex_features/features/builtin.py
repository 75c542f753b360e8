"""Example complex features available to every configuration."""
from typing import Any, Sequence

from .base import ComplexFeature, Goal
from .factory import register_feature


@register_feature()
class GreaterThanFeature(ComplexFeature):
    """
    Holds when every numeric argument of the goal is greater than a threshold.
    Configured as ``functor = GreaterThanFeature,<threshold>``.
    """

    def __init__(self, program: Any, arguments: Sequence[str]):
        super().__init__(program, arguments)
        if len(self.arguments) != 1:
            raise ValueError(f"GreaterThanFeature expects exactly one threshold argument, got {list(self.arguments)}")
        self.threshold = float(self.arguments[0])

    def apply(self, goal: Goal) -> bool:
        values = []
        for arg in goal.args:
            try:
                values.append(float(arg))
            except (TypeError, ValueError):
                return False
        return bool(values) and all(v > self.threshold for v in values)


@register_feature()
class ConstantWeightFeature(ComplexFeature):
    """Always yields the same weight (``1.0`` unless configured)."""

    def __init__(self, program: Any, arguments: Sequence[str]):
        super().__init__(program, arguments)
        self.weight = float(self.arguments[0]) if self.arguments else 1.0

    def apply(self, goal: Goal) -> float:
        return self.weight
