"""Command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.mark.parametrize("frontend", ["vanilla", "rich"])
def test_single_search_writes_report(frontend: str, tmp_path: Path) -> None:
    out = tmp_path / "results.csv"
    result = runner.invoke(
        app, ["-f", frontend, "-s", "123405786", "-a", "bfs", "-o", str(out)]
    )

    assert result.exit_code == 0, result.output
    assert "Search successful!" in result.output
    assert out.read_text().splitlines()[-1] == "Start, 5 to 6, 6 to 9,"


def test_letter_blank_marker_is_accepted(tmp_path: Path) -> None:
    out = tmp_path / "results.csv"
    result = runner.invoke(app, ["-s", "1234E5786", "-a", "astar-manhattan", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Starting State: 123405786" in out.read_text()


def test_goal_start_is_refused(tmp_path: Path) -> None:
    out = tmp_path / "results.csv"
    result = runner.invoke(app, ["-s", "123456780", "-o", str(out)])
    assert result.exit_code == 1
    assert "initialize a new start state" in result.output
    assert not out.exists()


def test_unsolvable_start_is_refused(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-s", "213456780", "-o", str(tmp_path / "r.csv")])
    assert result.exit_code == 2


def test_invalid_start_is_refused(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-s", "11345678E", "-o", str(tmp_path / "r.csv")])
    assert result.exit_code == 2


def test_non_ascii_digit_start_is_refused(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-s", "\u00b923456780", "-o", str(tmp_path / "r.csv")])
    assert result.exit_code == 2


def test_random_start_with_seed(tmp_path: Path) -> None:
    out = tmp_path / "results.csv"
    result = runner.invoke(
        app, ["--random", "--seed", "4", "-a", "astar-manhattan", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    assert "Final State: 123456780" in out.read_text()


def test_interactive_menu_runs_a_search(tmp_path: Path) -> None:
    out = tmp_path / "results.csv"
    keys = "7\n123456708\n3\n99\n"
    result = runner.invoke(app, ["-o", str(out)], input=keys)

    assert result.exit_code == 0, result.output
    assert "Search successful!" in result.output
    assert "Exiting the application!" in result.output
    assert out.read_text().splitlines()[-1] == "Start, 8 to 9,"


def test_interactive_menu_rejects_unknown_option(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-o", str(tmp_path / "r.csv")], input="42\n99\n")
    assert result.exit_code == 0
    assert "Incorrect option, choose again!" in result.output
