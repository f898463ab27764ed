"""Input errors raised before or while balancing a line."""

from typing import List


class LineBalancingError(ValueError):
    """Raised when a line balancing input is invalid."""


class InvalidGoalError(LineBalancingError):
    """Production goal is zero or negative."""

    def __init__(self, production_goal: float):
        self.production_goal = production_goal
        super().__init__(f"Production goal must be greater than zero, got {production_goal}")


class InvalidCycleTimeError(LineBalancingError):
    """Cycle time (or the available time it is derived from) is not positive."""

    def __init__(self, value: float, what: str = "cycle time"):
        self.value = value
        super().__init__(f"The {what} must be greater than zero, got {value}")


class InvalidDurationError(LineBalancingError):
    """A task duration is negative or not a number."""

    def __init__(self, task_name: str, duration: object):
        self.task_name = task_name
        self.duration = duration
        super().__init__(f"Task '{task_name}' has an invalid duration: {duration!r}")


class DuplicateTaskNameError(LineBalancingError):
    """Two or more tasks share a name."""

    def __init__(self, names: List[str]):
        self.names = names
        super().__init__(f"Duplicate task names: {', '.join(names)}")


class UnknownPrecedenceError(LineBalancingError):
    """A precedence entry references a task that is not in the task set."""

    def __init__(self, task_name: str, missing: List[str]):
        self.task_name = task_name
        self.missing = missing
        super().__init__(
            f"Task '{task_name}' depends on unknown task(s): {', '.join(missing)}"
        )


class CyclicPrecedenceError(LineBalancingError):
    """Precedence relations form a cycle, so some tasks can never be placed."""

    def __init__(self, tasks: List[str]):
        self.tasks = tasks
        super().__init__(f"Cyclic precedence between tasks: {' -> '.join(tasks)}")


class TaskExceedsCycleTimeError(LineBalancingError):
    """A single task is longer than the cycle time and fits in no station."""

    def __init__(self, task_name: str, duration: float, cycle_time: float):
        self.task_name = task_name
        self.duration = duration
        self.cycle_time = cycle_time
        super().__init__(
            f"Task '{task_name}' ({duration}) exceeds the cycle time ({cycle_time})"
        )


class MissingColumnError(LineBalancingError):
    """A task table lacks a required column."""

    def __init__(self, candidates: List[str], columns: List[str]):
        self.candidates = candidates
        self.columns = columns
        super().__init__(f"Task table needs one of the columns {candidates}, got {columns}")
