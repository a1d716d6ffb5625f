"""
Tests for transition logging and logging configuration.
"""

import io
import json
import logging

import pytest

from soundboard.config import ReducerConfig
from soundboard.core import Action, build_reducer, set_socket, set_songs, stop_song
from soundboard.logging_config import TraceIDFilter, get_logger, setup_logging


def _messages(caplog, level):
    return [r.getMessage() for r in caplog.records if r.levelno == level]


def test_every_action_kind_is_traced(reducer, state, caplog):
    caplog.set_level(logging.DEBUG, logger="soundboard")
    reducer.apply(state, stop_song())
    assert "STOP_SONG" in _messages(caplog, logging.DEBUG)
    traced = [r for r in caplog.records if r.getMessage() == "STOP_SONG"]
    assert traced[0].trace_id == "STOP_SONG"


def test_unknown_kind_logged_as_error_with_payload(reducer, state, caplog):
    caplog.set_level(logging.DEBUG, logger="soundboard")
    reducer.apply(state, Action("DANCE", {"moves": ["spin"]}))
    errors = _messages(caplog, logging.ERROR)
    assert errors == ["type unknown: DANCE {'moves': ['spin']}"]


def test_snapshot_log_redacts_socket(reducer, state, make_socket, caplog):
    caplog.set_level(logging.DEBUG, logger="soundboard")
    reducer.apply(state, set_socket(make_socket("secret-handle")))

    snapshots = [m for m in _messages(caplog, logging.DEBUG) if m.startswith("state ")]
    assert len(snapshots) == 1
    assert '"socket":"[socket]"' in snapshots[0]
    assert "secret-handle" not in snapshots[0]


def test_snapshot_log_can_be_disabled(state, make_socket, caplog):
    caplog.set_level(logging.DEBUG, logger="soundboard")
    reducer = build_reducer(ReducerConfig(log_snapshots=False))
    reducer.apply(state, set_socket(make_socket()))
    assert not [m for m in _messages(caplog, logging.DEBUG) if m.startswith("state ")]


def test_malformed_payload_logged_as_error(reducer, state, caplog):
    caplog.set_level(logging.DEBUG, logger="soundboard")
    reducer.apply(state, Action("PLAY_SONG"))
    errors = _messages(caplog, logging.ERROR)
    assert len(errors) == 1
    assert "malformed action payload for PLAY_SONG" in errors[0]


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_json(monkeypatch, restore_root_logger):
    monkeypatch.setenv("SOUNDBOARD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SOUNDBOARD_LOG_FORMAT", "json")
    stream = io.StringIO()
    setup_logging(stream=stream)

    get_logger("soundboard.test", trace_id="SET_SONGS").info("hello")

    line = stream.getvalue().strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["message"] == "hello"
    assert rec["level"] == "INFO"
    assert rec["logger"] == "soundboard.test"
    assert rec["trace_id"] == "SET_SONGS"


def test_setup_logging_text_fills_missing_trace_id(monkeypatch, restore_root_logger):
    monkeypatch.setenv("SOUNDBOARD_LOG_LEVEL", "INFO")
    monkeypatch.setenv("SOUNDBOARD_LOG_FORMAT", "text")
    stream = io.StringIO()
    setup_logging(stream=stream)

    logging.getLogger("soundboard.test").warning("plain")

    out = stream.getvalue()
    assert "plain" in out
    assert "[trace_id=N/A]" in out


def test_trace_id_filter_keeps_existing_value():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.trace_id = "abc"
    assert TraceIDFilter().filter(record)
    assert record.trace_id == "abc"


def test_snapshot_log_with_mixed_key_records(reducer, state, caplog):
    caplog.set_level(logging.DEBUG, logger="soundboard")
    s = reducer.apply(state, set_songs([{"id": 1, 2: "x"}]))

    assert len(s.songs) == 1
    snapshots = [m for m in _messages(caplog, logging.DEBUG) if m.startswith("state ")]
    assert len(snapshots) == 1
    assert '"2":"x"' in snapshots[0]
