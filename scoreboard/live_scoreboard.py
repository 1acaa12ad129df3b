"""Live scoreboard: the public operations of the board.

Create one :class:`LiveScoreboard` per tournament board. Each instance owns
its own :class:`~scoreboard.match_store.MatchStore` and clock, so several
boards can live side by side in one process (and in tests).

Example:
    board = LiveScoreboard()
    board.start_match("Mexico", "Canada")
    board.update_score("Mexico", 0, "Canada", 5)
    print(board.get_summary().lines())
    board.finish_match("Mexico", "Canada")
"""
from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from scoreboard.errors import ConflictError, InvalidArgumentError, NotFoundError
from scoreboard.logging_config import get_logger
from scoreboard.match import Match
from scoreboard.match_store import MatchStore
from scoreboard.summary import Summary

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IncreasingClock:
    """Wrap a clock so that successive readings are strictly increasing.

    System clocks can return the same instant for calls made in quick
    succession; matches started that way would otherwise tie on start time.
    """

    def __init__(self, base: Clock = utc_now, step: timedelta = timedelta(microseconds=1)) -> None:
        self._base = base
        self._step = step
        self._last: Optional[datetime] = None
        self._lock = threading.Lock()

    def __call__(self) -> datetime:
        with self._lock:
            now = self._base()
            if self._last is not None and now <= self._last:
                now = self._last + self._step
            self._last = now
            return now


def _check_not_null(home_team: Optional[str], away_team: Optional[str]) -> None:
    if home_team is None or away_team is None:
        raise InvalidArgumentError(
            f"Provided team names cannot be null, provided home team: {home_team} away team: {away_team}"
        )


class LiveScoreboard:
    def __init__(self, clock: Optional[Clock] = None, store: Optional[MatchStore] = None) -> None:
        self._clock = clock if clock is not None else IncreasingClock(utc_now)
        self._store = store if store is not None else MatchStore()

    def start_match(self, home_team: str, away_team: str) -> None:
        """Put a new 0-0 match on the board, stamped with the current time.

        Raises InvalidArgumentError for null, blank or identical names and
        ConflictError when either team is already playing (home reported
        first).
        """
        _check_not_null(home_team, away_team)
        match = Match.create(home_team, away_team, self._clock())
        busy = self._store.add_if_teams_free(match)
        if busy is not None:
            logger.warning("Rejected start of %s vs %s: %s is already playing", home_team, away_team, busy)
            raise ConflictError(f"There is already ongoing match for a team on the scoreboard: {busy}")
        logger.info("Started match %s vs %s at %s", home_team, away_team, match.start_time.isoformat())

    def finish_match(self, home_team: str, away_team: str) -> None:
        """Take the match off the board; unknown pairs are silently ignored."""
        _check_not_null(home_team, away_team)
        removed = self._store.delete_by_teams(home_team, away_team)
        if removed is None:
            logger.debug("No match to finish for %s vs %s", home_team, away_team)
        else:
            logger.info(
                "Finished match %s %d - %s %d", home_team, removed.home_score, away_team, removed.away_score
            )

    def update_score(self, home_team: str, home_score: int, away_team: str, away_score: int) -> None:
        """Replace the score of a match that is on the board.

        Raises NotFoundError when the pair is not on the board and
        InvalidArgumentError for negative scores (the previous score is kept).
        """
        _check_not_null(home_team, away_team)
        match = self._store.update_scores(home_team, away_team, home_score, away_score)
        if match is None:
            raise NotFoundError(
                f"There is no match on the scoreboard for home team: {home_team} and away team: {away_team}"
            )
        logger.debug("Updated score %s %d - %s %d", home_team, home_score, away_team, away_score)

    def get_summary(self) -> Summary:
        return self._store.snapshot(Summary.from_matches)

    def is_playing(self, team: str) -> bool:
        return self._store.exists_for_team(team)
