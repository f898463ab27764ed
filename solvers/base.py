"""Abstract base class for solvers."""

from abc import ABC, abstractmethod

from solution.solution import Solution
from models.problem import LineProblem
from evaluation.base import Evaluator


class Solver(ABC):
    """
    Abstract base class for all line balancing algorithms.
    Any algorithm must implement this interface.
    """

    @abstractmethod
    def solve(self, problem: LineProblem, evaluator: Evaluator) -> Solution:
        """
        Run algorithm and return the station assignment found.

        Args:
            problem: The problem instance to solve
            evaluator: The evaluator to use for fitness calculation

        Returns:
            The solution found
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
