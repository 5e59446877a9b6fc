import pytest

from polymino_solver import api, cli
from polymino_solver.types import Move, NoSolutionError, Orientation
from polymino_solver.yaml_io import load_solution_yaml, write_solution_yaml


def test_replay_saved_solution(tmp_path, capsys, solution):
    src = tmp_path / "in.yaml"
    out = tmp_path / "out.yaml"
    html = tmp_path / "solution.html"
    write_solution_yaml(src, solution)

    code = cli.main(
        ["--load", str(src), "--output", str(out), "--plot-html", str(html)]
    )

    assert code == 0
    assert load_solution_yaml(out) == solution
    assert "<html" in html.read_text(encoding="utf-8").lower()
    printed = capsys.readouterr().out
    assert printed.count("board state:") == 10
    assert f"- {solution[-1]}" in printed


def test_searches_when_nothing_loaded(monkeypatch, capsys, solution):
    monkeypatch.setattr(cli, "solve", lambda: solution)
    assert cli.main([]) == 0
    assert "Loaded" not in capsys.readouterr().out


def test_no_solution_exits_nonzero(monkeypatch, capsys):
    def _fail():
        raise NoSolutionError("exhausted")

    monkeypatch.setattr(cli, "solve", _fail)
    assert cli.main([]) == 1
    assert "No solution found" in capsys.readouterr().err


def test_bad_saved_solution_exits_nonzero(tmp_path, capsys, solution):
    src = tmp_path / "in.yaml"
    write_solution_yaml(src, [solution[0], Move(3, Orientation(), (0, 0, 0))])
    assert cli.main(["--load", str(src)]) == 1
    assert "Cannot replay" in capsys.readouterr().err

    write_solution_yaml(src, solution[:2], overwrite=True)
    assert cli.main(["--load", str(src)]) == 1
    assert "not complete" in capsys.readouterr().err


def test_verify_solution(solution):
    assert api.verify_solution(solution).is_complete()
    with pytest.raises(ValueError, match="incomplete"):
        api.verify_solution(solution[:3])


def test_solve_and_plot_from_file(tmp_path, solution):
    path = tmp_path / "solution.yaml"
    write_solution_yaml(path, solution)
    fig, moves = api.solve_and_plot(path=path)
    assert moves == solution
    assert sum(t.type == "mesh3d" for t in fig.data) == 10
