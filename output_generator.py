"""Output generator for line balancing solutions - creates run folder, CSV files and charts."""

import csv
from datetime import datetime
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.patches as patches
import networkx as nx

from models import LineProblem
from models.task import NO_SELECTION_LABEL
from solution import Solution
from visualizer import build_precedence_graph, layered_layout


class OutputGenerator:
    """Generates output files and charts for line balancing solutions."""

    def __init__(self, solution: Solution, problem: LineProblem, data_file: str,
                 output_base: str = "output"):
        self.solution = solution
        self.problem = problem
        self.data_file = data_file
        self.output_base = Path(output_base)
        self.run_folder = None

    def create_output_folder(self) -> Path:
        """Create output folder based on input file name."""
        data_name = Path(self.data_file).stem
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        # output/{data_name}_{timestamp}/
        self.run_folder = self.output_base / f"{data_name}_{timestamp}"
        self.run_folder.mkdir(parents=True, exist_ok=True)

        print(f"\nOutput folder created: {self.run_folder}")
        return self.run_folder

    def export_station_tasks_csv(self):
        """Export one row per placed task, including placement diagnostics."""
        output_path = self.run_folder / "station_tasks.csv"

        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['Station ID', 'Position', 'Task', 'Duration', 'Precedence',
                             'Feasible Next', 'Max Duration Candidates', 'Selected Next'])

            for station in self.solution.stations:
                for position, task in enumerate(station.tasks, start=1):
                    writer.writerow([
                        station.id,
                        position,
                        task.name,
                        task.duration,
                        "; ".join(task.precedence),
                        "; ".join(task.feasible_next),
                        "; ".join(task.max_duration_candidates),
                        task.selected_next if task.selected_next is not None else NO_SELECTION_LABEL
                    ])

        print(f"Station tasks CSV saved to: {output_path}")

    def export_station_summary_csv(self):
        """Export station summary to CSV."""
        output_path = self.run_folder / "station_summary.csv"
        cycle_time = self.solution.cycle_time

        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['Station ID', 'Num Tasks', 'Total Time', 'Cycle Time',
                             'Idle Time', 'Utilization (%)', 'Tasks'])

            for station in self.solution.stations:
                writer.writerow([
                    station.id,
                    station.num_tasks(),
                    f"{station.total_time:.4f}",
                    f"{cycle_time:.4f}",
                    f"{station.idle_time(cycle_time):.4f}",
                    f"{station.utilization(cycle_time):.2f}",
                    "; ".join(station.get_task_names())
                ])

        print(f"Station summary CSV saved to: {output_path}")

    def export_solution_summary(self):
        """Export overall solution summary to text file."""
        output_path = self.run_folder / "solution_summary.txt"
        unit = self.problem.time_unit

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("=" * 60 + "\n")
            f.write("LINE BALANCING SUMMARY\n")
            f.write("=" * 60 + "\n\n")

            f.write(f"Input file: {self.data_file}\n")
            f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")

            f.write("-" * 40 + "\n")
            f.write("PROBLEM STATISTICS\n")
            f.write("-" * 40 + "\n")
            f.write(f"Total tasks: {self.problem.num_tasks()}\n")
            f.write(f"Total work content: {self.problem.total_work_content():.2f} {unit}\n")
            f.write(f"Available time: {self.problem.available_time:.2f} {unit}\n")
            f.write(f"Production goal: {self.problem.production_goal:g}\n")
            f.write(f"Cycle time: {self.solution.cycle_time:.2f} {unit}\n\n")

            f.write("-" * 40 + "\n")
            f.write("SOLUTION STATISTICS\n")
            f.write("-" * 40 + "\n")
            f.write(f"Stations used: {self.solution.num_stations()}\n")
            f.write(f"Theoretical minimum stations: {self.solution.get_theoretical_min_stations()}\n")
            f.write(f"Total idle time: {self.solution.get_total_idle_time():.2f} {unit}\n")
            f.write(f"Line efficiency: {self.solution.get_efficiency():.2f}%\n")
            f.write(f"Balance delay: {self.solution.get_balance_delay():.2f}%\n")
            f.write(f"Smoothness index: {self.solution.get_smoothness_index():.2f}\n")
            f.write(f"Solution valid: {self.solution.is_valid(self.problem)}\n\n")

            f.write("-" * 40 + "\n")
            f.write("OUTPUT FILES\n")
            f.write("-" * 40 + "\n")
            f.write("- station_tasks.csv: Task assignments with placement diagnostics\n")
            f.write("- station_summary.csv: Station statistics\n")
            f.write("- station_loads.png: Station load chart\n")
            f.write("- precedence_graph.png: Precedence diagram colored by station\n")

        print(f"Solution summary saved to: {output_path}")

    def generate_station_load_chart(self, output_path: Path = None):
        """Stacked bar per station (one segment per task) with the cycle time as a line."""
        output_path = output_path or self.run_folder / "station_loads.png"
        cycle_time = self.solution.cycle_time

        fig, ax = plt.subplots(1, 1, figsize=(max(6, 1.2 * self.solution.num_stations() + 2), 6))
        colors = plt.cm.Set3(range(max(self.problem.num_tasks(), 1)))
        color_index = {name: i for i, name in enumerate(self.problem.get_task_names())}

        for station in self.solution.stations:
            bottom = 0
            for task in station.tasks:
                color = colors[color_index.get(task.name, 0) % len(colors)]
                ax.bar(station.id, task.duration, bottom=bottom, color=color,
                       edgecolor='black', linewidth=1)
                if task.duration > 0:
                    ax.text(station.id, bottom + task.duration / 2, task.name,
                            ha='center', va='center', fontsize=8)
                bottom += task.duration

        ax.axhline(cycle_time, color='red', linestyle='--', linewidth=2)
        ax.set_xticks([station.id for station in self.solution.stations])
        ax.set_xlabel('Station')
        ax.set_ylabel(f'Time ({self.problem.time_unit})')
        ax.set_title(f"Station loads | Cycle time: {cycle_time:.2f} | "
                     f"Efficiency: {self.solution.get_efficiency():.1f}%", fontsize=10)
        ax.legend(handles=[patches.Patch(color='red', label='Cycle time')], loc='upper right')

        plt.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        print(f"Station load chart saved to: {output_path}")

    def generate_precedence_graph_image(self, output_path: Path = None):
        """Draw the precedence diagram with tasks colored by station."""
        output_path = output_path or self.run_folder / "precedence_graph.png"
        graph = build_precedence_graph(self.problem.tasks)
        pos = layered_layout(graph)

        palette = ['tab:red', 'tab:green', 'tab:blue', 'tab:orange', 'tab:purple',
                   'tab:brown', 'tab:pink', 'tab:olive', 'tab:cyan']
        colour = {}
        for i, station in enumerate(self.solution.stations):
            for name in station.get_task_names():
                colour[name] = palette[i % len(palette)]

        fig, ax = plt.subplots(1, 1, figsize=(10, 7))
        nx.draw(graph, pos, ax=ax, with_labels=True, node_size=1200,
                node_color=[colour.get(node, 'lightgray') for node in graph.nodes],
                font_size=10, font_weight='bold', arrowsize=15)
        legend_handles = [patches.Patch(color=palette[i % len(palette)], label=f"Station {station.id}")
                          for i, station in enumerate(self.solution.stations)]
        if legend_handles:
            ax.legend(handles=legend_handles, loc='upper left', bbox_to_anchor=(1.02, 1), fontsize=8)
        ax.set_title('Precedence diagram')

        plt.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        print(f"Precedence graph saved to: {output_path}")

    def generate_all_outputs(self, include_images: bool = True):
        """Generate all output files and images."""
        self.create_output_folder()

        self.export_station_tasks_csv()
        self.export_station_summary_csv()
        self.export_solution_summary()

        if include_images:
            self.generate_station_load_chart()
            self.generate_precedence_graph_image()

        print(f"\nAll outputs generated in: {self.run_folder}")
        return self.run_folder


def generate_outputs(solution: Solution, problem: LineProblem, data_file: str,
                     output_base: str = "output", include_images: bool = True) -> Path:
    """
    Main function to generate all outputs for a solution.

    Args:
        solution: The balanced line
        problem: The problem instance
        data_file: Path to the input data file (names the run folder)
        output_base: Folder that holds run folders
        include_images: Also render PNG charts

    Returns:
        Path to the output folder
    """
    generator = OutputGenerator(solution, problem, data_file, output_base)
    return generator.generate_all_outputs(include_images)
