"""Runtime settings read from the environment.

A ``.env`` file found from the working directory upwards is loaded first (without overriding
variables that are already set), then these variables are read:

- ``SCOREBOARD_LOG_LEVEL``: level for the ``scoreboard`` logger (default WARNING)
- ``SCOREBOARD_SUMMARY_FORMAT``: ``json`` or ``text`` output of the replay CLI
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

SUMMARY_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    summary_format: str = "json"


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    log_level = os.getenv("SCOREBOARD_LOG_LEVEL", "WARNING").strip().upper()
    summary_format = os.getenv("SCOREBOARD_SUMMARY_FORMAT", "json").strip().lower()
    if summary_format not in SUMMARY_FORMATS:
        raise ValueError(
            f"SCOREBOARD_SUMMARY_FORMAT must be one of {', '.join(SUMMARY_FORMATS)}, got: {summary_format}"
        )
    return Settings(log_level=log_level, summary_format=summary_format)
