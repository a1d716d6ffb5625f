"""
Tests for the soundboard CLI.
"""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

SCRIPT_LINES = [
    '{"type": "SET_SONGS", "args": {"songs": [{"id": 1, "notes": ["C", "E"]}]}}',
    '{"type": "PLAY_SONG", "args": {"id": 1}}',
    '{"type": "SET_LOCATION", "args": {"location": {"pathname": "/piano", "search": "?visualizer=bars"}}}',
    '{"type": "TRIGGER_RECORDING", "args": {"isRecording": false}}',
]


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text("\n".join(SCRIPT_LINES) + "\n", encoding="utf-8")
    return path


def test_replay_json(script):
    result = runner.invoke(
        app,
        ["replay", str(script), "-i", "piano", "-v", "bars", "--show-state", "--json"],
    )
    assert result.exit_code == 0, result.output
    out = json.loads(result.stdout)
    assert out["success"] is True
    assert out["actions_replayed"] == 4
    assert len(out["state_hash"]) == 64
    assert out["kind_counts"]["PLAY_SONG"] == 1
    assert out["state"]["notes"] == ["C", "E"]
    assert out["state"]["instrument"] == "piano"
    assert out["state"]["visualizer"] == "bars"
    assert out["state"]["is_recording"] is True


def test_replay_until(script):
    result = runner.invoke(app, ["replay", str(script), "--until", "1", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["actions_replayed"] == 1


def test_replay_text(script):
    result = runner.invoke(app, ["replay", str(script)])
    assert result.exit_code == 0, result.output
    assert "Replayed 4 actions" in result.output
    assert "SET_LOCATION" in result.output


def test_replay_missing_script(tmp_path):
    result = runner.invoke(app, ["replay", str(tmp_path / "missing.jsonl"), "--json"])
    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "Script not found"


def test_replay_bad_script(tmp_path):
    path = tmp_path / "bad.jsonl"
    path.write_text('{"type": "STOP_SONG"}\nnot json\n', encoding="utf-8")
    result = runner.invoke(app, ["replay", str(path)])
    assert result.exit_code == 2
    assert "line 2" in result.output


def test_replay_strict_rejects_malformed_payload(tmp_path):
    path = tmp_path / "malformed.jsonl"
    path.write_text('{"type": "ADD_NOTE_TO_SONG", "args": {}}\n', encoding="utf-8")

    lenient = runner.invoke(app, ["replay", str(path), "--json"])
    assert lenient.exit_code == 0

    strict = runner.invoke(app, ["replay", str(path), "--strict", "--json"])
    assert strict.exit_code == 2
    assert "malformed action payload" in json.loads(strict.stdout)["error"]


def test_replay_rejects_unknown_toggle_source(script):
    result = runner.invoke(app, ["replay", str(script), "--toggle-source", "nowhere"])
    assert result.exit_code == 2


def test_kinds_lists_reserved_kind():
    result = runner.invoke(app, ["kinds"])
    assert result.exit_code == 0
    assert "GET_RECORDING_STATUS" in result.output
    assert "reserved" in result.output


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_replay_socket_without_close(tmp_path):
    path = tmp_path / "sockets.jsonl"
    line = '{"type": "SET_SOCKET", "args": {"socket": "a"}}'
    path.write_text(line + "\n" + line + "\n", encoding="utf-8")

    lenient = runner.invoke(app, ["replay", str(path), "--show-state", "--json"])
    assert lenient.exit_code == 0, lenient.output
    assert "socket" not in json.loads(lenient.stdout)["state"]

    strict = runner.invoke(app, ["replay", str(path), "--strict", "--json"])
    assert strict.exit_code == 2
    assert "has no close()" in json.loads(strict.stdout)["error"]
