from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from smart_signal.cli import build_parser, main
from smart_signal.prompts import (
    InvalidInputError,
    parse_count,
    prompt_cycle_count,
    prompt_initial_queues,
)


def scripted_input(answers):
    remaining = list(answers)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


def test_parse_count_accepts_whitespace_and_negatives():
    assert parse_count(" 12\n") == 12
    assert parse_count("-4") == -4

    with pytest.raises(InvalidInputError):
        parse_count("three")


def test_prompt_initial_queues_clamps_negative_answers():
    shown = []

    counts = prompt_initial_queues(4, scripted_input(["3", "-5", "0", "7"]), shown.append)

    assert counts == [3, 0, 0, 7]
    assert shown == ["Enter initial vehicle count for each of the 4 lanes:"]


def test_prompt_initial_queues_rejects_text_and_missing_input():
    with pytest.raises(InvalidInputError):
        prompt_initial_queues(2, scripted_input(["1", "many"]), lambda _: None)
    with pytest.raises(InvalidInputError):
        prompt_initial_queues(2, scripted_input(["1"]), lambda _: None)


def test_prompt_cycle_count_requires_positive_number():
    assert prompt_cycle_count(scripted_input(["3"])) == 3

    with pytest.raises(InvalidInputError):
        prompt_cycle_count(scripted_input(["0"]))
    with pytest.raises(InvalidInputError):
        prompt_cycle_count(scripted_input(["x"]))


def test_parser_defaults_match_reference_intersection():
    args = build_parser().parse_args([])

    assert args.name == "Main_1"
    assert args.lanes == 4
    assert args.base_green == 5
    assert args.max_green == 40
    assert args.stats_file == "traffic_stats.txt"


def test_main_runs_non_interactively_and_saves_statistics(tmp_path, capsys):
    stats_path = tmp_path / "stats.txt"

    exit_code = main(
        [
            "--initial", "3", "0", "0", "0",
            "--cycles", "1",
            "--no-arrivals",
            "--stats-file", str(stats_path),
        ]
    )

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "--- Starting cycle 1 ---" in output
    assert "Simulation finished. Final state:" in output
    content = stats_path.read_text(encoding="utf-8")
    assert "=== Stats for intersection 'Main_1'" in content
    assert "Total vehicles served: 3" in content
    assert "Average wait time per vehicle: 0.00 seconds" in content


def test_main_prompts_for_missing_values(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted_input(["1", "2", "-3", "0", "2"]))
    stats_path = tmp_path / "stats.txt"

    exit_code = main(["--seed", "3", "--quiet", "--stats-file", str(stats_path)])

    assert exit_code == 0
    assert "Enter initial vehicle count for each of the 4 lanes:" in capsys.readouterr().out
    assert "Cycles run: 2" in stats_path.read_text(encoding="utf-8")


def test_main_fails_on_non_numeric_input(tmp_path, monkeypatch):
    monkeypatch.setattr("builtins.input", scripted_input(["abc"]))
    stats_path = tmp_path / "stats.txt"

    assert main(["--stats-file", str(stats_path)]) == 1
    assert not stats_path.exists()


def test_main_fails_on_invalid_cycle_count(tmp_path):
    stats_path = tmp_path / "stats.txt"

    assert main(["--initial", "1", "1", "1", "1", "--cycles", "0", "--stats-file", str(stats_path)]) == 1
    assert main(["--initial", "1", "1", "--cycles", "2", "--stats-file", str(stats_path)]) == 1
    assert main(["--lanes", "0", "--cycles", "2", "--stats-file", str(stats_path)]) == 1
    assert not stats_path.exists()


def test_main_runs_named_scenario(tmp_path):
    stats_path = tmp_path / "stats.txt"

    assert main(["--scenario", "balanced", "--quiet", "--stats-file", str(stats_path)]) == 0
    assert "Cycles run: 4" in stats_path.read_text(encoding="utf-8")

    assert main(["--scenario", "unknown", "--stats-file", str(stats_path)]) == 1


def test_main_lists_scenarios(capsys):
    assert main(["--list-scenarios"]) == 0

    output = capsys.readouterr().out
    assert "morning-rush:" in output
    assert "balanced:" in output


def test_main_rejects_zero_cycles_for_scenario(tmp_path):
    stats_path = tmp_path / "stats.txt"

    exit_code = main(
        ["--scenario", "balanced", "--cycles", "0", "--quiet", "--stats-file", str(stats_path)]
    )

    assert exit_code == 1
    assert not stats_path.exists()


def test_main_scenario_keeps_explicit_cycle_count(tmp_path):
    stats_path = tmp_path / "stats.txt"

    assert main(["--scenario", "balanced", "--cycles", "1", "--quiet", "--stats-file", str(stats_path)]) == 0
    assert "Cycles run: 1" in stats_path.read_text(encoding="utf-8")
