"""Task models for line balancing."""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


NO_SELECTION_LABEL = "none"


@dataclass(frozen=True)
class Task:
    """
    A unit of work to be placed on the assembly line.

    Attributes:
        name: Unique identifier (e.g., "A")
        duration: Time needed to perform the task
        precedence: Names of tasks that must be completed before this one
    """
    name: str
    duration: float
    precedence: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any sequence of names (or a single name) but store an immutable copy.
        if isinstance(self.precedence, str):
            precedence = (self.precedence,) if self.precedence else ()
        else:
            precedence = tuple(self.precedence)
        object.__setattr__(self, "precedence", precedence)

    def is_initial(self) -> bool:
        """True if the task has no predecessors."""
        return len(self.precedence) == 0

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "duration": self.duration,
            "precedence": list(self.precedence)
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Task':
        """Create Task from dictionary with `name`, `duration` (or `time`) and `precedence`."""
        duration = data["duration"] if "duration" in data else data["time"]
        precedence = data.get("precedence") or []
        if isinstance(precedence, str):
            precedence = re.split(r"[,;]", precedence)
        return cls(
            name=str(data["name"]),
            duration=duration,
            precedence=[str(p).strip() for p in precedence if str(p).strip()]
        )

    def __repr__(self) -> str:
        return f"Task(name={self.name}, duration={self.duration}, precedence={self.precedence})"


@dataclass
class TaskAnnotation:
    """
    Diagnostics recorded right after a task is placed into a station.

    Attributes:
        feasible_next: Tasks assignable immediately after the placement
        max_duration_candidates: Subset of feasible_next sharing the largest duration
        selected_next: First of max_duration_candidates, None if nothing was feasible
    """
    feasible_next: List[str] = field(default_factory=list)
    max_duration_candidates: List[str] = field(default_factory=list)
    selected_next: Optional[str] = None


@dataclass(frozen=True)
class AnnotatedTask:
    """A placed task joined with its placement diagnostics."""
    task: Task
    annotation: TaskAnnotation

    @property
    def name(self) -> str:
        return self.task.name

    @property
    def duration(self) -> float:
        return self.task.duration

    @property
    def precedence(self) -> Tuple[str, ...]:
        return self.task.precedence

    @property
    def feasible_next(self) -> List[str]:
        return self.annotation.feasible_next

    @property
    def max_duration_candidates(self) -> List[str]:
        return self.annotation.max_duration_candidates

    @property
    def selected_next(self) -> Optional[str]:
        return self.annotation.selected_next

    def to_dict(self) -> Dict:
        """Task fields plus diagnostics; a missing selection is written as "none"."""
        data = self.task.to_dict()
        data.update({
            "feasible_next": list(self.feasible_next),
            "max_duration_candidates": list(self.max_duration_candidates),
            "selected_next": self.selected_next if self.selected_next is not None else NO_SELECTION_LABEL
        })
        return data

    def __repr__(self) -> str:
        return (f"AnnotatedTask(name={self.name}, duration={self.duration}, "
                f"selected_next={self.selected_next})")
