"""Models package for line balancing."""

from .task import Task, TaskAnnotation, AnnotatedTask
from .station import Station
from .problem import LineProblem
from .errors import (
    LineBalancingError,
    InvalidGoalError,
    InvalidCycleTimeError,
    InvalidDurationError,
    DuplicateTaskNameError,
    UnknownPrecedenceError,
    CyclicPrecedenceError,
    TaskExceedsCycleTimeError,
    MissingColumnError,
)

__all__ = [
    'Task', 'TaskAnnotation', 'AnnotatedTask', 'Station', 'LineProblem',
    'LineBalancingError', 'InvalidGoalError', 'InvalidCycleTimeError', 'InvalidDurationError',
    'DuplicateTaskNameError', 'UnknownPrecedenceError', 'CyclicPrecedenceError',
    'TaskExceedsCycleTimeError', 'MissingColumnError',
]
