"""Weighted evaluator implementation."""

from .base import Evaluator
from solution.solution import Solution
from models.problem import LineProblem


class WeightedEvaluator(Evaluator):
    """
    Evaluator that uses a weighted sum of station count, idle time and smoothness.

    fitness = alpha * num_stations + beta * total_idle_time + gamma * smoothness_index

    Attributes:
        alpha: Weight for the number of stations (default: 1.0)
        beta: Weight for total idle time (default: 0.0)
        gamma: Weight for the smoothness index (default: 0.0)
    """

    def __init__(self, alpha: float = 1.0, beta: float = 0.0, gamma: float = 0.0):
        self.alpha = alpha
        self.beta = beta
        self.gamma = gamma

    def evaluate(self, solution: Solution, problem: LineProblem) -> float:
        """Weighted sum objective (lower is better)."""
        return self.get_components(solution, problem)['fitness']

    def get_components(self, solution: Solution, problem: LineProblem) -> dict:
        """
        Get individual components of the evaluation.

        Args:
            solution: The solution to evaluate
            problem: The problem instance

        Returns:
            Dictionary with station count, idle time, smoothness and weighted components
        """
        num_stations = solution.num_stations()
        idle_time = solution.get_total_idle_time()
        smoothness = solution.get_smoothness_index()

        return {
            'num_stations': num_stations,
            'total_idle_time': idle_time,
            'smoothness_index': smoothness,
            'weighted_stations': self.alpha * num_stations,
            'weighted_idle_time': self.beta * idle_time,
            'weighted_smoothness': self.gamma * smoothness,
            'fitness': self.alpha * num_stations + self.beta * idle_time + self.gamma * smoothness
        }

    def __repr__(self) -> str:
        return f"WeightedEvaluator(alpha={self.alpha}, beta={self.beta}, gamma={self.gamma})"
