"""Convenience script to replay a scoreboard events file from the workspace root.

Example:
    python scripts/run_replay.py tests/fixtures/world_cup.json --format text

This script forwards to `scoreboard.scoreboard_cli` so it benefits from the
same logic and tests.
"""
import sys

from scoreboard.scoreboard_cli import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
