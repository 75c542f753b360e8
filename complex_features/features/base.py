from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence, Tuple


class Goal(Protocol):
    """The slice of a goal the library relies on: its functor and arguments."""
    functor: str
    args: Sequence[Any]


class ComplexFeature(ABC):
    """
    Abstract base class for complex features.
    A complex feature is built once per library initialization from the shared
    logic program and its configured string arguments, and is then applied to
    goals whose functor is mapped to it.
    """

    def __init__(self, program: Any, arguments: Sequence[str]):
        """
        Args:
            program: The logic program shared by every feature in the library.
            arguments: Configured construction arguments, in declaration order.
        """
        self.program = program
        self.arguments: Tuple[str, ...] = tuple(arguments)

    @abstractmethod
    def apply(self, goal: Goal) -> Any:
        """
        Evaluates the feature for a goal.

        Args:
            goal: The goal whose functor resolved to this feature.

        Returns:
            Whatever the evaluator expects from this kind of feature.
        """
        pass

    def __call__(self, goal: Goal) -> Any:
        return self.apply(goal)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(arguments={list(self.arguments)})"
