"""Solution package for line balancing."""

from .solution import Solution

__all__ = ['Solution']
