"""Typed failures raised by the scoreboard.

Every error is detected before any state is mutated, so callers can catch
them and carry on with the board exactly as it was.
"""
from __future__ import annotations


class ScoreboardError(Exception):
    """Base class for all scoreboard failures."""


class InvalidArgumentError(ScoreboardError, ValueError):
    """Null/blank/identical team names or an invalid score value."""


class ConflictError(ScoreboardError):
    """A team is already playing in another match on the board."""


class NotFoundError(ScoreboardError, LookupError):
    """No match is on the board for the requested home/away pair."""
