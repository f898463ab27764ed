import csv

from evaluation import WeightedEvaluator
from output_generator import OutputGenerator, generate_outputs
from solvers import GreedyLineBalancer


def read_rows(path):
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.reader(f))


def test_generate_csv_outputs(tmp_path, sample_problem):
    solution = GreedyLineBalancer().solve(sample_problem, WeightedEvaluator())

    folder = generate_outputs(solution, sample_problem, "data/sample_tasks.csv",
                              output_base=str(tmp_path), include_images=False)

    assert folder.parent == tmp_path
    assert folder.name.startswith("sample_tasks_")

    task_rows = read_rows(folder / "station_tasks.csv")
    assert task_rows[0][0] == "Station ID"
    assert len(task_rows) == 1 + sample_problem.num_tasks()
    assert task_rows[1][:3] == ["1", "1", "D"]
    assert task_rows[1][-1] == "none"

    summary_rows = read_rows(folder / "station_summary.csv")
    assert len(summary_rows) == 1 + solution.num_stations()
    assert summary_rows[3][-1] == "E; B; C; F"

    text = (folder / "solution_summary.txt").read_text(encoding='utf-8')
    assert "Stations used: 5" in text
    assert not (folder / "station_loads.png").exists()


def test_generate_images(tmp_path, sample_problem):
    solution = GreedyLineBalancer().solve(sample_problem, WeightedEvaluator())
    generator = OutputGenerator(solution, sample_problem, "sample", output_base=str(tmp_path))

    folder = generator.generate_all_outputs()

    assert (folder / "station_loads.png").stat().st_size > 0
    assert (folder / "precedence_graph.png").stat().st_size > 0
