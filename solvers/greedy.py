"""Greedy largest-task-time line balancer."""

from typing import Dict, List, Set

from .base import Solver
from .cycle_time import calculate_cycle_time
from .feasibility import annotate_placement, is_feasible
from .validation import validate_tasks
from solution.solution import Solution
from models.problem import LineProblem
from models.station import Station
from models.task import AnnotatedTask, Task, TaskAnnotation
from models.errors import CyclicPrecedenceError
from evaluation.base import Evaluator


class GreedyLineBalancer(Solver):
    """
    Greedy line balancer using largest task time first with precedence checks.

    Algorithm:
    1. Split tasks into initial (no predecessors) and the rest
    2. Sort each group by duration descending (stable) and queue initial tasks first
    3. Place the first queued task whose predecessors are done and that fits the
       open station, then scan again from the top of the queue
    4. When nothing fits, close the station and open a new one

    The queue order is fixed after step 2.
    """

    def solve(self, problem: LineProblem, evaluator: Evaluator) -> Solution:
        """
        Balance the line for a problem instance.

        Args:
            problem: The problem instance
            evaluator: The evaluator (used for final evaluation)

        Returns:
            A complete solution
        """
        cycle_time = calculate_cycle_time(problem.available_time, problem.production_goal)
        stations = self.balance(problem.tasks, cycle_time)

        solution = Solution(stations=stations, cycle_time=cycle_time)
        solution.compute_metrics(problem)
        solution.metrics['fitness'] = evaluator.evaluate(solution, problem)

        return solution

    def balance(self, tasks: List[Task], cycle_time: float) -> List[Station]:
        """
        Assign tasks to stations.

        Args:
            tasks: Tasks to place, in input order
            cycle_time: Maximum total task time per station

        Returns:
            Closed stations in line order

        Raises:
            LineBalancingError: If the input is invalid (nothing is returned in that case)
        """
        validate_tasks(tasks, cycle_time)
        if not tasks:
            return []

        queue = self._build_queue(tasks)
        completed: Set[str] = set()
        annotations: Dict[str, TaskAnnotation] = {}
        closed: List[List[Task]] = []

        station_tasks: List[Task] = []
        station_time = 0

        while queue:
            index = self._first_feasible(queue, station_time, cycle_time, completed)

            if index is None:
                if not station_tasks:
                    # An empty station accepts any released task, so the rest are blocked for good.
                    raise CyclicPrecedenceError([task.name for task in queue])
                closed.append(station_tasks)
                station_tasks = []
                station_time = 0
                continue

            task = queue.pop(index)
            station_tasks.append(task)
            station_time += task.duration
            completed.add(task.name)
            annotations[task.name] = annotate_placement(
                task, queue, cycle_time, station_time, completed
            )

        if station_tasks:
            closed.append(station_tasks)

        return self._build_stations(closed, annotations)

    def _build_queue(self, tasks: List[Task]) -> List[Task]:
        """Initial tasks first, each group by duration descending; sorted() keeps ties in input order."""
        initial = [task for task in tasks if task.is_initial()]
        dependent = [task for task in tasks if not task.is_initial()]
        return (sorted(initial, key=lambda t: t.duration, reverse=True)
                + sorted(dependent, key=lambda t: t.duration, reverse=True))

    def _first_feasible(self, queue: List[Task], station_time: float,
                        cycle_time: float, completed: Set[str]):
        for i, task in enumerate(queue):
            if is_feasible(task, station_time, cycle_time, completed):
                return i
        return None

    def _build_stations(self, closed: List[List[Task]],
                        annotations: Dict[str, TaskAnnotation]) -> List[Station]:
        """Join placement diagnostics onto the closed stations and number them from 1."""
        stations = []
        for station_id, tasks in enumerate(closed, start=1):
            stations.append(Station(
                id=station_id,
                tasks=[AnnotatedTask(task=task, annotation=annotations[task.name]) for task in tasks],
                total_time=sum(task.duration for task in tasks)
            ))
        return stations

    def __repr__(self) -> str:
        return "GreedyLineBalancer(rule=largest_task_time)"


def balance_line(tasks: List[Task], cycle_time: float) -> List[Station]:
    """Balance a task list with the greedy largest-task-time rule."""
    return GreedyLineBalancer().balance(tasks, cycle_time)
