import json
from pathlib import Path

import pytest

from scoreboard.errors import ConflictError, InvalidArgumentError
from scoreboard.live_scoreboard import LiveScoreboard
from scoreboard.scoreboard_cli import format_summary, load_events, main, replay_events

FIXTURE = Path(__file__).resolve().parent / "fixtures" / "world_cup.json"

EXPECTED_ORDER = ["Uruguay", "Spain", "Mexico", "Argentina", "Germany"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # keep a developer's .env out of the way
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SCOREBOARD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SCOREBOARD_SUMMARY_FORMAT", raising=False)


def test_replay_world_cup_fixture():
    summary = replay_events(load_events(FIXTURE))
    assert [s.home_team for s in summary] == EXPECTED_ORDER


def test_replay_uses_given_board():
    board = LiveScoreboard()
    board.start_match("Mexico", "Canada")
    with pytest.raises(ConflictError):
        replay_events([{"action": "start", "home": "Canada", "away": "Peru"}], board=board)


def test_replay_unknown_action():
    with pytest.raises(InvalidArgumentError):
        replay_events([{"action": "pause", "home": "a", "away": "b"}])


def test_load_events_accepts_plain_list(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps([{"action": "start", "home": "a", "away": "b"}]), encoding="utf-8")
    assert load_events(path) == [{"action": "start", "home": "a", "away": "b"}]


def test_load_events_rejects_other_json(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps("nope"), encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_events(path)


def test_main_prints_json(capsys):
    rc = main([str(FIXTURE)])
    out = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert out["ok"] is True
    assert [row["home_team"] for row in out["summary"]] == EXPECTED_ORDER
    assert out["summary"][0] == {"home_team": "Uruguay", "home_score": 6, "away_team": "Italy", "away_score": 6}


def test_main_text_format_from_env(monkeypatch, capsys):
    monkeypatch.setenv("SCOREBOARD_SUMMARY_FORMAT", "text")
    rc = main([str(FIXTURE)])
    lines = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert lines == [
        "1. Uruguay 6 - Italy 6",
        "2. Spain 10 - Brazil 2",
        "3. Mexico 0 - Canada 5",
        "4. Argentina 3 - Australia 1",
        "5. Germany 2 - France 2",
    ]


def test_main_flag_overrides_env(monkeypatch, capsys):
    monkeypatch.setenv("SCOREBOARD_SUMMARY_FORMAT", "text")
    rc = main([str(FIXTURE), "--format", "json"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["ok"] is True


def test_main_handles_replay_error(tmp_path, capsys):
    path = tmp_path / "events.json"
    path.write_text(json.dumps([{"action": "update", "home": "a", "home_score": 1, "away": "b", "away_score": 0}]), encoding="utf-8")
    rc = main([str(path)])
    out = json.loads(capsys.readouterr().out)
    assert rc == 2
    assert out["ok"] is False
    assert "home team: a and away team: b" in out["error"]


def test_main_missing_file(tmp_path, capsys):
    rc = main([str(tmp_path / "missing.json")])
    assert rc == 2
    assert json.loads(capsys.readouterr().out)["ok"] is False


def test_format_summary_empty():
    board = LiveScoreboard()
    assert format_summary(board.get_summary(), "text") == ""
    assert json.loads(format_summary(board.get_summary())) == {"ok": True, "summary": []}


@pytest.mark.parametrize("event", [
    {"action": "update", "home": "a", "away": "b"},
    {"action": "update", "home": "a", "home_score": 2, "away": "b"},
])
def test_replay_update_without_scores_rejected(event):
    board = LiveScoreboard()
    replay_events([
        {"action": "start", "home": "a", "away": "b"},
        {"action": "update", "home": "a", "home_score": 3, "away": "b", "away_score": 1},
    ], board=board)
    with pytest.raises(InvalidArgumentError) as exc:
        replay_events([event], board=board)
    assert "event #1" in str(exc.value)
    assert "away_score" in str(exc.value)
    # previous score is kept
    assert board.get_summary().scores[0].total_score == 4


def test_load_events_rejects_object_without_events(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"matches": []}), encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_events(path)


def test_main_rejects_object_without_events(tmp_path, capsys):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"matches": []}), encoding="utf-8")
    rc = main([str(path)])
    assert rc == 2
    assert json.loads(capsys.readouterr().out)["ok"] is False


def test_replay_non_string_team_name():
    with pytest.raises(InvalidArgumentError):
        replay_events([{"action": "start", "home": 5, "away": "b"}])
