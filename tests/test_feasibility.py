from models import Task, TaskAnnotation
from solvers import annotate_placement, feasible_candidates


def test_feasible_candidates_filters_on_precedence_and_capacity():
    placed = Task("A", 5)
    remaining = [Task("B", 3), Task("C", 2, ["A"]), Task("D", 4), Task("E", 1, ["X"])]
    result = feasible_candidates(placed, remaining, cycle_time=8, station_time=5, completed={"A"})
    assert [task.name for task in result] == ["B", "C"]


def test_feasible_candidates_excludes_placed_task():
    placed = Task("A", 1)
    remaining = [Task("A", 1), Task("B", 1)]
    result = feasible_candidates(placed, remaining, cycle_time=10, station_time=1, completed={"A"})
    assert [task.name for task in result] == ["B"]


def test_feasible_candidates_does_not_mutate_inputs():
    placed = Task("A", 5)
    remaining = [Task("B", 3), Task("C", 2, ["A"])]
    completed = {"A"}
    first = feasible_candidates(placed, remaining, 8, 5, completed)
    second = feasible_candidates(placed, remaining, 8, 5, completed)
    assert first == second
    assert [task.name for task in remaining] == ["B", "C"]
    assert completed == {"A"}


def test_exact_fit_is_feasible():
    result = feasible_candidates(Task("A", 5), [Task("B", 3)], cycle_time=8, station_time=5, completed={"A"})
    assert [task.name for task in result] == ["B"]


def test_annotation_picks_longest_first_in_queue_on_ties():
    placed = Task("A", 1)
    remaining = [Task("B", 2), Task("C", 4), Task("D", 4), Task("E", 3)]
    annotation = annotate_placement(placed, remaining, cycle_time=10, station_time=1, completed={"A"})
    assert annotation.feasible_next == ["B", "C", "D", "E"]
    assert annotation.max_duration_candidates == ["C", "D"]
    assert annotation.selected_next == "C"


def test_annotation_without_candidates():
    annotation = annotate_placement(Task("A", 8), [Task("B", 3)], cycle_time=8, station_time=8, completed={"A"})
    assert annotation == TaskAnnotation()
    assert annotation.selected_next is None
    assert annotation.feasible_next == []
    assert annotation.max_duration_candidates == []
