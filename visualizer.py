"""Text reports and precedence graph data for line balancing solutions."""

from typing import Dict, List

import networkx as nx

from models import LineProblem
from models.task import Task, NO_SELECTION_LABEL
from solution import Solution


def generate_graph_data(tasks: List[Task]) -> Dict[str, List[Dict[str, str]]]:
    """
    Convert tasks into nodes and edges for drawing a directed precedence diagram.

    One node per task in input order, one edge per precedence entry
    (prerequisite -> dependent). Station assignment plays no part.
    """
    nodes = [{"id": task.name, "name": task.name} for task in tasks]
    edges = []
    for task in tasks:
        for predecessor in task.precedence:
            edges.append({"from": predecessor, "to": task.name})
    return {"nodes": nodes, "edges": edges}


def build_precedence_graph(tasks: List[Task]) -> nx.DiGraph:
    """Same data as generate_graph_data, as a networkx graph with durations on the nodes."""
    data = generate_graph_data(tasks)
    graph = nx.DiGraph()
    for task, node in zip(tasks, data["nodes"]):
        graph.add_node(node["id"], name=node["name"], duration=task.duration)
    graph.add_edges_from((edge["from"], edge["to"]) for edge in data["edges"])
    return graph


def layered_layout(graph: nx.DiGraph, x_spacing: float = 2.0, y_spacing: float = 1.5) -> Dict:
    """Left-to-right layout: each node one column right of its deepest predecessor."""
    level = {}
    for node in nx.topological_sort(graph):
        preds = list(graph.predecessors(node))
        level[node] = 0 if not preds else 1 + max(level[p] for p in preds)

    columns: Dict[int, List[str]] = {}
    for node, lvl in level.items():
        columns.setdefault(lvl, []).append(node)

    pos = {}
    for lvl, nodes in columns.items():
        top = (len(nodes) - 1) / 2
        for i, node in enumerate(nodes):
            pos[node] = (lvl * x_spacing, (top - i) * y_spacing)
    return pos


class LineVisualizer:
    """Console reports for a line balance."""

    def __init__(self, solution: Solution, problem: LineProblem):
        self.solution = solution
        self.problem = problem

    def print_station_summary(self):
        """Print summary of all stations."""
        unit = self.problem.time_unit
        print("\n" + "=" * 70)
        print("STATION SUMMARY")
        print("=" * 70)
        print(f"Cycle time: {self.solution.cycle_time:.2f} {unit}")
        print(f"Total stations: {self.solution.num_stations()} "
              f"(theoretical minimum {self.solution.get_theoretical_min_stations()})")
        print(f"Line efficiency: {self.solution.get_efficiency():.2f}%")
        print(f"Total idle time: {self.solution.get_total_idle_time():.2f} {unit}")
        print("=" * 70)

    def print_stations_detail(self, max_stations: int = None):
        """Print each station with its tasks and placement diagnostics."""
        stations = self.solution.stations
        if max_stations:
            stations = stations[:max_stations]

        print("\n" + "=" * 70)
        print("STATION DETAILS")
        print("=" * 70)

        cycle_time = self.solution.cycle_time
        for station in stations:
            print(f"\n+{'-' * 68}+")
            print(f"| {'Station ' + str(station.id):<66} |")
            print(f"+{'-' * 68}+")
            line = (f"Tasks: {station.num_tasks():<6} Time: {station.total_time:.2f} / {cycle_time:.2f}"
                    f"   Idle: {station.idle_time(cycle_time):.2f}")
            print(f"| {line:<66} |")
            print(f"+{'-' * 68}+")

            for task in station.tasks:
                selected = task.selected_next if task.selected_next is not None else NO_SELECTION_LABEL
                line = f"   - {task.name} ({task.duration:g}) -> next: {selected}"
                print(f"| {line:<66} |")
                if task.feasible_next:
                    line = f"       feasible: {', '.join(task.feasible_next)}"
                    print(f"| {line[:66]:<66} |")

            print(f"+{'-' * 68}+")

        if max_stations and len(self.solution.stations) > max_stations:
            print(f"\n... and {len(self.solution.stations) - max_stations} more stations")

    def print_load_chart_text(self, width: int = 50):
        """Print a text bar chart of station loads against the cycle time."""
        print("\n" + "=" * 70)
        print("STATION LOADS (Text Chart)")
        print("=" * 70)

        cycle_time = self.solution.cycle_time
        if cycle_time <= 0 or not self.solution.stations:
            print("No stations available.")
            return

        scale = width / cycle_time
        for station in self.solution.stations:
            filled = min(int(station.total_time * scale), width)
            bar = "#" * filled + "." * (width - filled)
            print(f"  S{station.id:<4}|{bar}| {station.utilization(cycle_time):6.1f}%")

        print(f"\nLegend: # = busy, . = idle, full bar = cycle time ({cycle_time:.2f})")

    def print_full_report(self, max_stations_detail: int = 20):
        """Print a full visualization report."""
        self.print_station_summary()
        self.print_stations_detail(max_stations=max_stations_detail)
        self.print_load_chart_text()


def visualize_solution(solution: Solution, problem: LineProblem):
    """Main function to visualize a solution."""
    viz = LineVisualizer(solution, problem)
    viz.print_full_report()
    return viz
