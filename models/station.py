"""Station model for line balancing."""

from dataclasses import dataclass, field
from typing import Dict, List

from .task import AnnotatedTask


@dataclass
class Station:
    """
    A closed workstation on the line.

    Attributes:
        id: 1-based position on the line, in creation order
        tasks: Placed tasks in assignment order
        total_time: Sum of task durations (never above the cycle time)
    """
    id: int
    tasks: List[AnnotatedTask] = field(default_factory=list)
    total_time: float = 0

    def idle_time(self, cycle_time: float) -> float:
        """Unused time of this station within one cycle."""
        return cycle_time - self.total_time

    def utilization(self, cycle_time: float) -> float:
        """Share of the cycle time in use, in percent."""
        return (self.total_time / cycle_time) * 100

    def num_tasks(self) -> int:
        """Return the number of tasks in this station."""
        return len(self.tasks)

    def get_task_names(self) -> List[str]:
        """Return task names in assignment order."""
        return [task.name for task in self.tasks]

    def is_empty(self) -> bool:
        """True if no tasks assigned."""
        return len(self.tasks) == 0

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "tasks": [task.to_dict() for task in self.tasks],
            "total_time": self.total_time
        }

    def __repr__(self) -> str:
        return f"Station(id={self.id}, tasks={self.get_task_names()}, total_time={self.total_time})"

    def __lt__(self, other: 'Station') -> bool:
        """Allow sorting stations by id."""
        return self.id < other.id
