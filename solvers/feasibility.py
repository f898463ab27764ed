"""Feasible-candidate diagnostics recorded after each placement."""

from typing import Iterable, List, Set

from models.task import Task, TaskAnnotation


def is_feasible(task: Task, station_time: float, cycle_time: float, completed: Set[str]) -> bool:
    """True if every predecessor is completed and the task fits in the station's remaining time."""
    return (all(name in completed for name in task.precedence)
            and station_time + task.duration <= cycle_time)


def feasible_candidates(
    placed_task: Task,
    remaining: Iterable[Task],
    cycle_time: float,
    station_time: float,
    completed: Set[str]
) -> List[Task]:
    """
    Tasks that could be placed right now into the current station.

    Args:
        placed_task: The task that was just placed (never returned)
        remaining: Tasks still waiting, in queue order
        cycle_time: Station time budget
        station_time: Time already used in the current station
        completed: Names of all tasks placed so far

    Returns:
        Feasible tasks in queue order. Inputs are not modified.
    """
    return [
        task for task in remaining
        if task.name != placed_task.name and is_feasible(task, station_time, cycle_time, completed)
    ]


def annotate_placement(
    placed_task: Task,
    remaining: List[Task],
    cycle_time: float,
    station_time: float,
    completed: Set[str]
) -> TaskAnnotation:
    """
    Build the diagnostics for a placement from the state right after it.

    The selected task is the longest feasible candidate; ties go to the one
    earliest in the queue. With no feasible candidate, selected_next is None.
    """
    candidates = feasible_candidates(placed_task, remaining, cycle_time, station_time, completed)
    if not candidates:
        return TaskAnnotation()

    longest = max(task.duration for task in candidates)
    max_candidates = [task.name for task in candidates if task.duration == longest]

    return TaskAnnotation(
        feasible_next=[task.name for task in candidates],
        max_duration_candidates=max_candidates,
        selected_next=max_candidates[0]
    )
