"""Main entry point for the line balancing solver."""

import argparse
import json
import sys
from pathlib import Path

from models import LineProblem, LineBalancingError, Task
from solvers import GreedyLineBalancer
from evaluation import WeightedEvaluator
from visualizer import visualize_solution
from output_generator import generate_outputs


DEFAULT_CONFIG = "config/line.json"

SAMPLE_TASKS = [
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


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Assign precedence-constrained tasks to line stations.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="JSON file with line settings")
    parser.add_argument("--data", default=None, help="CSV/Excel task table (overrides config data_file)")
    parser.add_argument("--available-time", type=float, default=None,
                        help="Total available production time (overrides config)")
    parser.add_argument("--goal", type=float, default=None,
                        help="Production goal in units (overrides config)")
    parser.add_argument("--no-output", action="store_true", help="Skip writing the output folder")
    parser.add_argument("--csv-only", action="store_true", help="Write CSV/text outputs but no images")
    return parser.parse_args(argv)


def load_config(config_path: str) -> dict:
    """Read the JSON line config; a missing file gives an empty config."""
    if not Path(config_path).exists():
        print(f"\nWarning: Config file not found at {config_path}, using defaults")
        return {}
    with open(config_path, 'r') as f:
        return json.load(f)


def build_problem(args: argparse.Namespace, config: dict):
    """
    Return (problem, data_file) from the task table.

    A configured table that is missing falls back to the built-in sample;
    a table named with --data must exist.
    """
    if args.data and not Path(args.data).exists():
        raise FileNotFoundError(f"Task table not found: {args.data}")
    data_file = args.data or config.get("data_file", "data/sample_tasks.csv")

    if Path(data_file).exists():
        print(f"\nLoading problem from {data_file}...")
        problem = LineProblem.load_from_dataframe(LineProblem.read_task_table(data_file), config)
    else:
        print(f"\nWarning: Data file not found at {data_file}")
        print("Running with sample data for demonstration...")
        data_file = "sample"
        problem = LineProblem(
            tasks=list(SAMPLE_TASKS),
            available_time=float(config.get("available_time", 25200)),
            production_goal=float(config.get("production_goal", 500)),
            time_unit=str(config.get("time_unit", "s"))
        )

    if args.available_time is not None:
        problem.available_time = args.available_time
    if args.goal is not None:
        problem.production_goal = args.goal

    return problem, data_file


def main(argv=None) -> int:
    """Main function to run the line balancing solver."""
    args = parse_args(argv)

    print("=" * 60)
    print("ASSEMBLY LINE BALANCING SOLVER")
    print("=" * 60)

    config = load_config(args.config)
    evaluator_config = config.get("evaluator", {})

    try:
        problem, data_file = build_problem(args, config)

        print(f"\nProblem loaded:")
        print(f"  - Tasks: {problem.num_tasks()}")
        print(f"  - Initial tasks: {len(problem.get_initial_tasks())}")
        print(f"  - Total work content: {problem.total_work_content():.2f} {problem.time_unit}")
        print(f"  - Available time: {problem.available_time:.2f} {problem.time_unit}")
        print(f"  - Production goal: {problem.production_goal:g}")

        evaluator = WeightedEvaluator(
            alpha=evaluator_config.get("alpha", 1.0),
            beta=evaluator_config.get("beta", 0.0),
            gamma=evaluator_config.get("gamma", 0.0)
        )
        solver = GreedyLineBalancer()
        print(f"\nEvaluator: {evaluator}")
        print(f"Solver: {solver}")

        print("\nSolving...")
        solution = solver.solve(problem, evaluator)
    except (LineBalancingError, FileNotFoundError) as exc:
        print(f"\nError: {exc}")
        return 1

    print(solution.summary(problem))
    print(f"\nFitness (weighted objective): {solution.metrics['fitness']:.4f}")

    visualize_solution(solution, problem)

    if not args.no_output:
        output_folder = generate_outputs(
            solution,
            problem,
            data_file,
            output_base=config.get("output_dir", "output"),
            include_images=not args.csv_only
        )
        print("\n" + "=" * 60)
        print(f"COMPLETED - Output folder: {output_folder}")
        print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
