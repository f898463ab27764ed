import pytest

from models import LineProblem, Task


@pytest.fixture
def scenario_tasks():
    return [Task("A", 5), Task("B", 3), Task("C", 2, ["A"])]


@pytest.fixture
def sample_problem():
    tasks = [
        Task("A", 45),
        Task("B", 11, ["A"]),
        Task("C", 9, ["B"]),
        Task("D", 50),
        Task("E", 15, ["D"]),
        Task("F", 12, ["C"]),
        Task("G", 12, ["C"]),
        Task("H", 12, ["E", "F", "G"]),
        Task("I", 12, ["H"]),
        Task("J", 8, ["I"]),
        Task("K", 9, ["J"]),
    ]
    return LineProblem(tasks=tasks, available_time=25200, production_goal=500)
