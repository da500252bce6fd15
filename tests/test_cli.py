"""Tests for the command line interface.

The CLI builds its session through ``_open_session``; these tests swap
that for a session backed by a `FakeTransport`.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest  # type: ignore

import beanflow.cli as cli
from beanflow.config import ENV_OVERRIDES
from beanflow.session.controller import TrainingSession

from helpers import NEW_WORD_HTML, QUIZ_HTML, UNKNOWN_HTML, FakeTransport


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    for name in ENV_OVERRIDES.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.yaml"
    path.write_text("session:\n  session_id: 42\n  auth_token: tok\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> FakeTransport:
    fake = FakeTransport([])

    def open_session(config):
        return TrainingSession(config.session_id, config.auth_token, transport=fake)

    monkeypatch.setattr(cli, "_open_session", open_session)
    return fake


def test_state_prints_record(config_path: str, transport: FakeTransport, capsys) -> None:
    transport.bodies.append(QUIZ_HTML)
    assert cli.main(["--config", config_path, "state"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["event"] == "quiz"
    assert out["record"]["clock"] == {"elapsed": "01:23", "total": "05:00"}
    assert transport.closed


def test_advance_submits_fields(config_path: str, transport: FakeTransport, capsys) -> None:
    transport.bodies.append(QUIZ_HTML)
    argv = ["--config", config_path, "advance", "--event", "next!", "--barrier", "b1",
            "--field", "k=v", "--time-on-page", "3"]
    assert cli.main(argv) == 0
    body = transport.posts[0][1]
    assert body == "event=next!&barrier=b1&id=42&k=v&time-on-page=%7B%22time%22%3A3%7D&it=0&more_ts=ostentatious"
    assert json.loads(capsys.readouterr().out)["event"] == "quiz"


def test_navigate_follows_named_navigator(config_path: str, transport: FakeTransport, capsys) -> None:
    transport.bodies.extend([NEW_WORD_HTML, QUIZ_HTML])
    assert cli.main(["--config", config_path, "navigate", "Next - word"]) == 0
    assert transport.posts[0][1].startswith("event=next!&barrier=b1&id=42&")
    assert json.loads(capsys.readouterr().out)["event"] == "quiz"


def test_errors_return_nonzero(config_path: str, transport: FakeTransport) -> None:
    transport.bodies.append(UNKNOWN_HTML)
    assert cli.main(["--config", config_path, "state"]) == 1


def test_bad_field_syntax(config_path: str, transport: FakeTransport) -> None:
    argv = ["--config", config_path, "advance", "--event", "e", "--barrier", "b", "--field", "novalue"]
    with pytest.raises(SystemExit):
        cli.main(argv)


def test_unknown_log_level_returns_nonzero(config_path: str, transport: FakeTransport) -> None:
    transport.bodies.append(QUIZ_HTML)
    assert cli.main(["--config", config_path, "--log-level", "bogus", "state"]) == 1
    assert transport.gets == []
