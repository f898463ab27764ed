import json

from main import main


def write_config(tmp_path, **overrides):
    config = {
        "available_time": 480,
        "production_goal": 60,
        "output_dir": str(tmp_path / "output"),
    }
    config.update(overrides)
    path = tmp_path / "line.json"
    path.write_text(json.dumps(config))
    return path


def test_main_runs_on_task_table(tmp_path, capsys):
    data_path = tmp_path / "tasks.csv"
    data_path.write_text('task,time,precedence\nA,5,\nB,3,\nC,2,A\n')
    config_path = write_config(tmp_path, data_file=str(data_path))

    assert main(["--config", str(config_path), "--csv-only"]) == 0

    out = capsys.readouterr().out
    assert "Stations used: 2" in out
    assert (tmp_path / "output").is_dir()


def test_main_reports_input_errors(tmp_path, capsys):
    data_path = tmp_path / "tasks.csv"
    data_path.write_text('task,time,precedence\nA,5,\nB,3,Z\n')
    config_path = write_config(tmp_path, data_file=str(data_path))

    assert main(["--config", str(config_path), "--no-output"]) == 1
    assert "unknown task" in capsys.readouterr().out


def test_main_rejects_zero_goal(tmp_path, capsys):
    config_path = write_config(tmp_path, data_file=str(tmp_path / "missing.csv"))

    assert main(["--config", str(config_path), "--goal", "0", "--no-output"]) == 1
    assert "Production goal" in capsys.readouterr().out


def test_main_reports_non_numeric_time(tmp_path, capsys):
    data_path = tmp_path / "tasks.csv"
    data_path.write_text('task,time,precedence\nA,abc,\n')
    config_path = write_config(tmp_path, data_file=str(data_path))

    assert main(["--config", str(config_path), "--no-output"]) == 1
    assert "invalid duration" in capsys.readouterr().out


def test_main_reports_missing_time_column(tmp_path, capsys):
    data_path = tmp_path / "tasks.csv"
    data_path.write_text('task,precedence\nA,\n')
    config_path = write_config(tmp_path, data_file=str(data_path))

    assert main(["--config", str(config_path), "--no-output"]) == 1
    assert "needs one of the columns" in capsys.readouterr().out


def test_main_rejects_missing_explicit_data_file(tmp_path, capsys):
    config_path = write_config(tmp_path)

    code = main(["--config", str(config_path), "--data", str(tmp_path / "nope.csv"), "--no-output"])

    assert code == 1
    out = capsys.readouterr().out
    assert "Task table not found" in out
    assert "sample data" not in out
