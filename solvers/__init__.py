"""Solvers package for line balancing."""

from .base import Solver
from .cycle_time import calculate_cycle_time
from .feasibility import feasible_candidates, annotate_placement
from .greedy import GreedyLineBalancer, balance_line
from .validation import validate_tasks, build_dependency_graph

__all__ = [
    'Solver', 'GreedyLineBalancer', 'balance_line', 'calculate_cycle_time',
    'feasible_candidates', 'annotate_placement', 'validate_tasks', 'build_dependency_graph',
]
