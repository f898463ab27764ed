"""Evaluation package for line balancing."""

from .base import Evaluator
from .weighted import WeightedEvaluator

__all__ = ['Evaluator', 'WeightedEvaluator']
