"""Tests for the command line entry point."""

import io

import pytest

from main import build_parser, main


@pytest.fixture
def word_lists(tmp_path):
    goals = tmp_path / "goals.txt"
    extra = tmp_path / "extra.txt"
    goals.write_text("cigar\ncider\ncivic\n", encoding="utf-8")
    extra.write_text("fuzzy\n", encoding="utf-8")
    return ["--goals", str(goals), "--extra", str(extra), "--no-progress", "--seed", "1"]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.goal is None
    assert args.workers is None
    assert not args.no_progress


@pytest.mark.parametrize("argv", [["Crane"], ["cran"], ["crane", "--workers", "0"]])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_simulated_game(word_lists, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cigar\ncider\n"))
    assert main(["cider"] + word_lists) == 0
    assert "Solved in 2 guesses: cider" in capsys.readouterr().out


def test_unsolved_game_exit_code(word_lists, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["cider"] + word_lists) == 1


def test_missing_word_list(tmp_path):
    assert main(["--goals", str(tmp_path / "missing.txt"), "--no-progress"]) == 1
