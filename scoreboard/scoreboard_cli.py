"""Replay CLI: run a file of scoreboard events and print the final summary.

This module exposes a programmatic `replay_events` function and a CLI
entrypoint. The events file is JSON: either a list of events or an object
with an ``"events"`` list. Each event has an ``"action"`` of ``start``,
``update``, ``finish`` or ``summary`` plus the team names and scores the
action needs, e.g.::

    {"action": "update", "home": "Spain", "home_score": 10, "away": "Brazil", "away_score": 2}

Usage:
    python -m scoreboard.scoreboard_cli tests/fixtures/world_cup.json --format text

"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from scoreboard.config import SUMMARY_FORMATS, load_settings
from scoreboard.errors import InvalidArgumentError
from scoreboard.live_scoreboard import LiveScoreboard
from scoreboard.logging_config import get_logger, setup_logging
from scoreboard.summary import Summary

logger = get_logger(__name__)


def load_events(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, dict):
        if "events" not in data:
            raise InvalidArgumentError(f"Events file has no \"events\" list: {path}")
        data = data["events"]
    if not isinstance(data, list):
        raise InvalidArgumentError(f"Events file must hold a JSON list of events: {path}")
    return data


def replay_events(events: Iterable[Dict[str, Any]], board: Optional[LiveScoreboard] = None) -> Summary:
    """Apply events to `board` (a fresh one by default) and return its summary.

    The first failing event stops the replay and its error propagates.
    """
    board = board if board is not None else LiveScoreboard()
    for seq, event in enumerate(events, 1):
        action = str(event.get("action", "")).lower()
        home = event.get("home")
        away = event.get("away")
        if action == "start":
            board.start_match(home, away)
        elif action == "update":
            missing = [k for k in ("home_score", "away_score") if k not in event]
            if missing:
                raise InvalidArgumentError(f"Update event #{seq} is missing {', '.join(missing)}")
            board.update_score(home, event["home_score"], away, event["away_score"])
        elif action == "finish":
            board.finish_match(home, away)
        elif action == "summary":
            logger.info("Summary after event #%d: %s", seq, board.get_summary().lines())
        else:
            raise InvalidArgumentError(f"Unknown action in event #{seq}: {event.get('action')!r}")
    return board.get_summary()


def format_summary(summary: Summary, fmt: str = "json") -> str:
    if fmt == "text":
        return "\n".join(summary.lines())
    return json.dumps({"ok": True, "summary": summary.to_list()})


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Replay scoreboard events and print the summary")
    p.add_argument("events", help="Path to a JSON events file")
    p.add_argument("--format", choices=SUMMARY_FORMATS, default=None, help="Output format (overrides SCOREBOARD_SUMMARY_FORMAT)")
    p.add_argument("--log-level", required=False, help="Log level (overrides SCOREBOARD_LOG_LEVEL)")

    args = p.parse_args(argv)
    try:
        settings = load_settings()
        setup_logging(args.log_level or settings.log_level)
        summary = replay_events(load_events(Path(args.events)))
    except Exception as exc:
        logger.error("Replay of %s failed: %s", args.events, exc)
        print(json.dumps({"ok": False, "error": str(exc)}))
        return 2

    print(format_summary(summary, args.format or settings.summary_format))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())  # pragma: no cover
