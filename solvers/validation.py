"""Input checks run before the balancing loop starts."""

import math
import numbers
from collections import Counter
from typing import List, Optional

import networkx as nx

from models.task import Task
from models.errors import (
    CyclicPrecedenceError,
    DuplicateTaskNameError,
    InvalidCycleTimeError,
    InvalidDurationError,
    TaskExceedsCycleTimeError,
    UnknownPrecedenceError,
)


def build_dependency_graph(tasks: List[Task]) -> nx.DiGraph:
    """Directed graph with an edge prerequisite -> dependent for every precedence entry."""
    graph = nx.DiGraph()
    graph.add_nodes_from(task.name for task in tasks)
    for task in tasks:
        for predecessor in task.precedence:
            graph.add_edge(predecessor, task.name)
    return graph


def validate_tasks(tasks: List[Task], cycle_time: Optional[float] = None) -> None:
    """
    Reject inputs the greedy balancer cannot handle.

    Checks run in order: durations, duplicate names, unknown predecessors,
    precedence cycles and, when cycle_time is given, the cycle time itself and
    tasks that are longer than it.

    Raises:
        LineBalancingError subclass describing the first problem found
    """
    for task in tasks:
        duration = task.duration
        if (isinstance(duration, bool) or not isinstance(duration, numbers.Real)
                or math.isnan(duration) or duration < 0):
            raise InvalidDurationError(task.name, duration)

    counts = Counter(task.name for task in tasks)
    duplicates = [name for name, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateTaskNameError(duplicates)

    for task in tasks:
        missing = [name for name in task.precedence if name not in counts]
        if missing:
            raise UnknownPrecedenceError(task.name, missing)

    graph = build_dependency_graph(tasks)
    if not nx.is_directed_acyclic_graph(graph):
        cycle = nx.find_cycle(graph)
        raise CyclicPrecedenceError([edge[0] for edge in cycle] + [cycle[0][0]])

    if cycle_time is None:
        return
    if not cycle_time > 0 or not math.isfinite(cycle_time):
        raise InvalidCycleTimeError(cycle_time)
    for task in tasks:
        if task.duration > cycle_time:
            raise TaskExceedsCycleTimeError(task.name, task.duration, cycle_time)
