"""Solution model for line balancing."""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from models.station import Station
from models.problem import LineProblem


@dataclass
class Solution:
    """
    Represents a complete line balance: the ordered stations and the cycle
    time they were filled against.

    Attributes:
        stations: Closed stations in line order
        cycle_time: Time budget per station
        metrics: Computed metrics (populated after evaluation)
    """
    stations: List[Station] = field(default_factory=list)
    cycle_time: float = 0.0
    metrics: Dict[str, float] = field(default_factory=dict)

    def num_stations(self) -> int:
        """Total number of stations used."""
        return len(self.stations)

    def get_total_work_content(self) -> float:
        """Sum of all placed task durations."""
        return sum(station.total_time for station in self.stations)

    def get_theoretical_min_stations(self) -> int:
        """Lower bound on the station count: ceil(work content / cycle time)."""
        if self.cycle_time <= 0:
            return 0
        return math.ceil(self.get_total_work_content() / self.cycle_time)

    def get_total_idle_time(self) -> float:
        """Sum of unused station time across the line."""
        return sum(station.idle_time(self.cycle_time) for station in self.stations)

    def get_efficiency(self) -> float:
        """Line efficiency in percent: work content / (stations * cycle time)."""
        if not self.stations or self.cycle_time <= 0:
            return 0.0
        return self.get_total_work_content() / (self.num_stations() * self.cycle_time) * 100

    def get_balance_delay(self) -> float:
        """Share of idle capacity in percent (100 - efficiency)."""
        if not self.stations:
            return 0.0
        return 100 - self.get_efficiency()

    def get_smoothness_index(self) -> float:
        """sqrt(sum((max station time - station time)^2)); 0 for a perfectly even line."""
        if not self.stations:
            return 0.0
        busiest = max(station.total_time for station in self.stations)
        return math.sqrt(sum((busiest - station.total_time) ** 2 for station in self.stations))

    def get_station_by_id(self, station_id: int) -> Optional[Station]:
        """Get a station by its ID."""
        for station in self.stations:
            if station.id == station_id:
                return station
        return None

    def get_station_of_task(self, task_name: str) -> Optional[Station]:
        """Get the station a task was placed in."""
        for station in self.stations:
            if task_name in station.get_task_names():
                return station
        return None

    def is_valid(self, problem: LineProblem) -> bool:
        """
        Check if solution satisfies all constraints.

        Validates:
        1. Station time constraint (total_time matches its tasks and fits the cycle time)
        2. Task assignment constraint (each task assigned exactly once)
        3. Precedence constraint (predecessors placed earlier on the line)
        """
        # 1. Station times
        for station in self.stations:
            station_sum = sum(task.duration for task in station.tasks)
            if abs(station_sum - station.total_time) > 1e-9:
                return False
            if station.total_time > self.cycle_time:
                return False

        # 2. Every task exactly once
        placed: Set[str] = set()
        for station in self.stations:
            for task in station.tasks:
                if task.name in placed:
                    return False  # Task assigned twice
                placed.add(task.name)

        if placed != set(problem.get_task_names()):
            return False

        # 3. Precedence: walk the line in order, predecessors must already be done
        done: Set[str] = set()
        for station in sorted(self.stations):
            for task in station.tasks:
                if any(name not in done for name in task.precedence):
                    return False
                done.add(task.name)

        return True

    def compute_metrics(self, problem: LineProblem) -> Dict[str, float]:
        """Compute and store all metrics (other entries such as fitness are kept)."""
        self.metrics.update({
            'num_stations': self.num_stations(),
            'cycle_time': self.cycle_time,
            'total_work_content': self.get_total_work_content(),
            'theoretical_min_stations': self.get_theoretical_min_stations(),
            'total_idle_time': self.get_total_idle_time(),
            'efficiency': self.get_efficiency(),
            'balance_delay': self.get_balance_delay(),
            'smoothness_index': self.get_smoothness_index(),
            'is_valid': float(self.is_valid(problem))
        })
        return self.metrics

    def to_dict(self) -> Dict:
        """Stations in the {id, tasks, total_time} output shape, plus the cycle time."""
        return {
            "cycle_time": self.cycle_time,
            "stations": [station.to_dict() for station in self.stations]
        }

    def summary(self, problem: LineProblem) -> str:
        """Generate a summary string of the solution."""
        self.compute_metrics(problem)
        unit = problem.time_unit
        lines = [
            "=" * 50,
            "SOLUTION SUMMARY",
            "=" * 50,
            f"Cycle time: {self.metrics['cycle_time']:.2f} {unit}",
            f"Stations used: {self.metrics['num_stations']}",
            f"Theoretical minimum: {self.metrics['theoretical_min_stations']}",
            f"Total work content: {self.metrics['total_work_content']:.2f} {unit}",
            f"Total idle time: {self.metrics['total_idle_time']:.2f} {unit}",
            f"Line efficiency: {self.metrics['efficiency']:.2f}%",
            f"Balance delay: {self.metrics['balance_delay']:.2f}%",
            f"Smoothness index: {self.metrics['smoothness_index']:.2f}",
            f"Valid solution: {bool(self.metrics['is_valid'])}",
            "=" * 50
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Solution(stations={self.num_stations()}, cycle_time={self.cycle_time:.2f})"
