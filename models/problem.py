"""Problem model for line balancing."""

import json
import numbers
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .task import Task
from .errors import InvalidDurationError, MissingColumnError


NAME_COLUMNS = ("task", "name")
TIME_COLUMNS = ("time", "duration")
PRECEDENCE_COLUMNS = ("precedence", "predecessors")


def _pick_column(df: pd.DataFrame, candidates: tuple, required: bool = True) -> Optional[str]:
    lookup = {str(col).strip().lower(): col for col in df.columns}
    for name in candidates:
        if name in lookup:
            return lookup[name]
    if required:
        raise MissingColumnError(list(candidates), list(df.columns))
    return None


def clean_name(value: object) -> str:
    """Task names read from numeric columns come back as floats (1.0); write them as "1"."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def parse_precedence(value: object) -> List[str]:
    """Split a precedence cell ("A, B" or "A;B") into task names. Blank cells mean no predecessors."""
    if isinstance(value, (list, tuple)):
        return [clean_name(v) for v in value if clean_name(v)]
    if value is None or pd.isna(value):
        return []
    if isinstance(value, numbers.Number):
        return [clean_name(value)]
    return [token for token in (t.strip() for t in re.split(r"[,;]", str(value))) if token]


@dataclass
class LineProblem:
    """
    Encapsulates one line balancing instance.
    This is the input to any solver.

    Attributes:
        tasks: Tasks in input order (input order breaks duration ties)
        available_time: Total production time available in the period
        production_goal: Units to produce in that period
        time_unit: Label used in reports (e.g., "s", "min")
    """
    tasks: List[Task] = field(default_factory=list)
    available_time: float = 0.0
    production_goal: float = 1.0
    time_unit: str = "s"

    def get_task(self, name: str) -> Optional[Task]:
        """Get task by name."""
        for task in self.tasks:
            if task.name == name:
                return task
        return None

    def get_task_names(self) -> List[str]:
        """Get task names in input order."""
        return [task.name for task in self.tasks]

    def total_work_content(self) -> float:
        """Sum of all task durations."""
        return sum(task.duration for task in self.tasks)

    def num_tasks(self) -> int:
        """Get total number of tasks."""
        return len(self.tasks)

    def get_initial_tasks(self) -> List[Task]:
        """Tasks without predecessors."""
        return [task for task in self.tasks if task.is_initial()]

    @classmethod
    def load_from_dataframe(cls, df: pd.DataFrame, line_config: Dict) -> 'LineProblem':
        """
        Create LineProblem from pandas DataFrame and line config dict.

        Args:
            df: DataFrame with a task name column ("task" or "name"), a time column
                ("time" or "duration") and an optional "precedence" column
            line_config: Dict with 'available_time', 'production_goal' and optional 'time_unit'

        Returns:
            LineProblem instance
        """
        name_col = _pick_column(df, NAME_COLUMNS)
        time_col = _pick_column(df, TIME_COLUMNS)
        precedence_col = _pick_column(df, PRECEDENCE_COLUMNS, required=False)

        tasks = []
        for _, row in df.iterrows():
            if pd.isna(row[name_col]):
                continue
            name = clean_name(row[name_col])
            precedence = parse_precedence(row[precedence_col]) if precedence_col is not None else []
            try:
                duration = float(row[time_col])
            except (TypeError, ValueError):
                raise InvalidDurationError(name, row[time_col]) from None
            tasks.append(Task(
                name=name,
                duration=duration,
                precedence=precedence
            ))

        return cls(
            tasks=tasks,
            available_time=float(line_config.get("available_time", 0.0)),
            production_goal=float(line_config.get("production_goal", 1.0)),
            time_unit=str(line_config.get("time_unit", "s"))
        )

    @staticmethod
    def read_task_table(data_path: str) -> pd.DataFrame:
        """Read a task table: Excel for .xlsx/.xls, CSV otherwise."""
        if Path(data_path).suffix.lower() in (".xlsx", ".xls"):
            return pd.read_excel(data_path)
        return pd.read_csv(data_path)

    @classmethod
    def load_from_files(cls, data_path: str, config_path: str) -> 'LineProblem':
        """
        Load problem from a CSV/Excel task table and a JSON config file.

        Args:
            data_path: Path to .csv, .xlsx or .xls file with the task table
            config_path: Path to JSON config file with the line settings

        Returns:
            LineProblem instance
        """
        df = cls.read_task_table(data_path)

        with open(config_path, 'r') as f:
            line_config = json.load(f)

        return cls.load_from_dataframe(df, line_config)

    def __repr__(self) -> str:
        return (f"LineProblem(tasks={self.num_tasks()}, available_time={self.available_time}, "
                f"production_goal={self.production_goal})")
