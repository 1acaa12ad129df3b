"""Match entity: one in-progress contest between two named teams.

Teams and start time form the identity of a match and never change once it
is created. The score is the only mutable part and is validated on every
update.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Tuple

from scoreboard.errors import InvalidArgumentError


def _check_team_name(name: str) -> None:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"Team name must be a string, provided: {name!r}")
    if not name or not name.strip():
        raise InvalidArgumentError(f"Team name cannot be blank, provided: {name}")


def _check_team_names(home_team: str, away_team: str) -> None:
    _check_team_name(home_team)
    _check_team_name(away_team)
    if home_team == away_team:
        raise InvalidArgumentError(
            f"Team names cannot be the same, provided home team: {home_team} , away team: {away_team}"
        )


def _check_score(score: int) -> None:
    # bool is an int subclass but never a meaningful score
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidArgumentError(f"Team score must be an integer, provided: {score!r}")
    if score < 0:
        raise InvalidArgumentError(f"Team score cannot be negative number, provided: {score}")


class Match:
    __slots__ = ("_home_team", "_away_team", "_start_time", "_home_score", "_away_score")

    def __init__(self, home_team: str, away_team: str, start_time: datetime) -> None:
        _check_team_names(home_team, away_team)
        self._home_team = home_team
        self._away_team = away_team
        self._start_time = start_time
        self._home_score = 0
        self._away_score = 0

    @classmethod
    def create(cls, home_team: str, away_team: str, start_time: datetime) -> "Match":
        return cls(home_team, away_team, start_time)

    @property
    def home_team(self) -> str:
        return self._home_team

    @property
    def away_team(self) -> str:
        return self._away_team

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def home_score(self) -> int:
        return self._home_score

    @property
    def away_score(self) -> int:
        return self._away_score

    @property
    def key(self) -> Tuple[str, str]:
        return (self._home_team, self._away_team)

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    def update_score(self, home_score: int, away_score: int) -> "Match":
        """Replace both scores in place and return the same match.

        Both values are validated before either is assigned.
        """
        _check_score(home_score)
        _check_score(away_score)
        self._home_score = home_score
        self._away_score = away_score
        return self

    def copy(self) -> "Match":
        """Independent match with the same identity and score."""
        clone = Match(self._home_team, self._away_team, self._start_time)
        clone._home_score = self._home_score
        clone._away_score = self._away_score
        return clone

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_team": self._home_team,
            "away_team": self._away_team,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "total_score": self.total_score,
            "start_time": self._start_time.isoformat(),
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Match):
            return NotImplemented
        return (
            self._home_team == other._home_team
            and self._away_team == other._away_team
            and self._start_time == other._start_time
        )

    def __hash__(self) -> int:
        return hash((self._home_team, self._away_team, self._start_time))

    def __repr__(self) -> str:
        return (
            f"Match({self._home_team!r} {self.home_score} - {self.away_score} {self._away_team!r}, "
            f"started={self._start_time.isoformat()})"
        )
