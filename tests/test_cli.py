"""End-to-end tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import pytest
from typer.testing import CliRunner

from hns_leaderboard.cli import app

runner = CliRunner()

START_PLAYERS = [
    {"handle": "ace", "name": "Alice", "level": 40, "experience": 100.0, "immortal": 2},
    {"handle": "bobby", "name": "Bob", "level": 90, "experience": 50.0, "immortal": 0},
]
CURRENT_PLAYERS = [
    {"handle": "ace", "name": "Alice", "level": 50, "experience": 300.0, "immortal": 5},
    {"handle": "bobby", "name": "Bob", "level": 99, "experience": 900.0, "immortal": 1},
    {"handle": "newbie", "name": "Nina", "level": 10, "experience": 5.5, "immortal": 1},
]


def _write_inputs(base: Path, current: List[Dict] | None = None) -> Dict[str, Path]:
    paths = {
        "greeting": base / "greeting.txt",
        "logo": base / "logo.txt",
        "start_data": base / "start.json",
        "data": base / "players.json",
        "output": base / "output.txt",
        "config": base / "config.toml",
    }
    paths["greeting"].write_text("Välkommen till tävlingen!\nLycka till", encoding="utf-8")
    paths["logo"].write_text("HACK'N'SLASH", encoding="utf-8")
    paths["start_data"].write_text(json.dumps(START_PLAYERS), encoding="utf-8")
    paths["data"].write_text(json.dumps(CURRENT_PLAYERS if current is None else current), encoding="utf-8")
    return paths


def _render_args(paths: Dict[str, Path], *extra: str) -> List[str]:
    return [
        "render",
        "--start", "2024-03-01T00:00:00+01:00",
        "--end", "2024-03-03T00:00:00+01:00",
        "--now", "2024-03-02T00:00:00+01:00",
        "--greeting-path", str(paths["greeting"]),
        "--logo-path", str(paths["logo"]),
        "--start-data", str(paths["start_data"]),
        "--data", str(paths["data"]),
        "--output-path", str(paths["output"]),
        "--config", str(paths["config"]),
        *extra,
    ]


@pytest.fixture
def inputs(tmp_path: Path) -> Dict[str, Path]:
    return _write_inputs(tmp_path)


def test_render_writes_encoded_output(inputs):
    result = runner.invoke(app, _render_args(inputs, "--seed", "3"))

    assert result.exit_code == 0, result.output
    raw = inputs["output"].read_bytes()
    text = raw.decode("cp1252")
    assert "[Topplistan - Dag 1 av 2]" in text
    assert "V\xe4lkommen" in text
    assert "\x1b[32m" in text
    assert b"V\xe4lkommen" in raw
    assert len(text.splitlines()) == 27


def test_render_ranks_players_by_total_level(inputs):
    result = runner.invoke(app, _render_args(inputs))

    assert result.exit_code == 0, result.output
    lines = inputs["output"].read_bytes().decode("cp1252").splitlines()
    standings = [line for line in lines if ") " in line and " | " in line]
    # Alice 50 + 300, Bob 99 + 100, Nina 10 + 100
    assert "1) ace" in standings[0] and "350" in standings[0]
    assert "2) bobby" in standings[1] and "199" in standings[1]
    assert "3) newbie" in standings[2] and "110" in standings[2]


def test_render_prints_screen_to_terminal(inputs):
    result = runner.invoke(app, _render_args(inputs), env={"NO_COLOR": None})

    assert result.exit_code == 0, result.output
    assert "Topplistan - Dag 1 av 2" in result.output
    assert "50%" in result.output
    assert "\x1b[32m" in result.output
    assert "\x1b[0m" in result.output


def test_no_color_strips_escapes_from_terminal_copy(inputs):
    result = runner.invoke(app, ["--no-color", *_render_args(inputs)], env={"NO_COLOR": None})

    assert result.exit_code == 0, result.output
    assert "Topplistan - Dag 1 av 2" in result.output
    assert "\x1b[" not in result.output
    assert "\x1b[32m" in inputs["output"].read_bytes().decode("cp1252")


def test_quiet_render_still_writes_file(inputs):
    result = runner.invoke(app, ["--quiet", *_render_args(inputs)])

    assert result.exit_code == 0, result.output
    assert "Topplistan" not in result.output
    assert inputs["output"].exists()


def test_seeded_renders_are_reproducible(tmp_path):
    first = _write_inputs(tmp_path)
    runner.invoke(app, _render_args(first, "--seed", "42"))
    expected = first["output"].read_bytes()

    first["output"].unlink()
    result = runner.invoke(app, _render_args(first, "--seed", "42"))

    assert result.exit_code == 0, result.output
    assert first["output"].read_bytes() == expected


def test_missing_greeting_aborts_without_output(inputs):
    inputs["greeting"].unlink()

    result = runner.invoke(app, _render_args(inputs))

    assert result.exit_code == 1
    assert "Greeting file not found" in result.output
    assert not inputs["output"].exists()


def test_malformed_player_json_aborts(inputs):
    inputs["data"].write_text("[{not json", encoding="utf-8")

    result = runner.invoke(app, _render_args(inputs))

    assert result.exit_code == 1
    assert "Invalid player data" in result.output
    assert not inputs["output"].exists()


def test_invalid_date_aborts(inputs):
    args = _render_args(inputs)
    args[args.index("--start") + 1] = "the first of March"

    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert "Invalid RFC3339 timestamp" in result.output


def test_empty_player_list_aborts(tmp_path):
    paths = _write_inputs(tmp_path, current=[])

    result = runner.invoke(app, _render_args(paths))

    assert result.exit_code == 1
    assert "No players to rank" in result.output
    assert not paths["output"].exists()


def test_render_honours_config_file(inputs):
    inputs["config"].write_text('[layout]\ntitle = "[Day {current_day} of {last_day}]"\n', encoding="utf-8")

    result = runner.invoke(app, _render_args(inputs))

    assert result.exit_code == 0, result.output
    assert "[Day 1 of 2]" in inputs["output"].read_bytes().decode("cp1252")


def test_render_rejects_invalid_config(inputs):
    inputs["config"].write_text("[screen]\nheight = 0\n", encoding="utf-8")

    result = runner.invoke(app, _render_args(inputs))

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_config_commands(tmp_path):
    config_path = str(tmp_path / "config.toml")

    init = runner.invoke(app, ["config", "init", "--config", config_path])
    assert init.exit_code == 0, init.output

    again = runner.invoke(app, ["config", "init", "--config", config_path])
    assert again.exit_code == 1

    updated = runner.invoke(app, ["config", "set", "layout.max_rows", "5", "--config", config_path])
    assert updated.exit_code == 0, updated.output

    value = runner.invoke(app, ["config", "get", "layout.max_rows", "--config", config_path])
    assert value.exit_code == 0
    assert "layout.max_rows = 5" in value.output

    shown = runner.invoke(app, ["config", "show", "--config", config_path])
    assert shown.exit_code == 0
    assert "max_rows" in shown.output


def test_config_set_rejects_bad_values(tmp_path):
    config_path = str(tmp_path / "config.toml")

    result = runner.invoke(app, ["config", "set", "screen.width", "wide", "--config", config_path])

    assert result.exit_code == 1
    assert not (tmp_path / "config.toml").exists()
