"""In-memory registry of matches currently in progress.

The store keeps three pieces of state: the authoritative mapping from
``(home_team, away_team)`` to :class:`Match`, the set of team names that are
currently playing, and a pre-sorted view used for summaries. The two derived
collections are rebuilt eagerly on every mutation while the same lock is held,
so a reader never sees them disagree with the mapping.

The store keeps its own copies of saved matches and hands out copies from
every read, so scores only change through the locked mutation methods.
"""
from __future__ import annotations

import threading
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Tuple, TypeVar

from scoreboard.match import Match

T = TypeVar("T")

MatchKey = Tuple[str, str]


def rank_matches(matches: Iterable[Match]) -> Tuple[Match, ...]:
    """Order matches by total score, most recently started first on ties.

    ``sorted`` is stable (also with ``reverse=True``) so matches that tie on
    both keys keep their input order.
    """
    return tuple(sorted(matches, key=lambda m: (m.total_score, m.start_time), reverse=True))


class MatchStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_key: Dict[MatchKey, Match] = {}
        self._active_teams: FrozenSet[str] = frozenset()
        self._ordered: Tuple[Match, ...] = ()

    def _refresh(self) -> None:
        # caller must hold self._lock
        self._active_teams = frozenset(team for key in self._by_key for team in key)
        self._ordered = rank_matches(self._by_key.values())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def save(self, match: Match) -> None:
        """Insert or replace the match stored under its (home, away) key."""
        with self._lock:
            self._by_key[match.key] = match.copy()
            self._refresh()

    def add_if_teams_free(self, match: Match) -> Optional[str]:
        """Store ``match`` unless one of its teams is already playing.

        Returns the first team found busy (home checked before away), or None
        when the match was stored.
        """
        with self._lock:
            for team in match.key:
                if team in self._active_teams:
                    return team
            self._by_key[match.key] = match.copy()
            self._refresh()
            return None

    def update_scores(self, home_team: str, away_team: str, home_score: int, away_score: int) -> Optional[Match]:
        """Replace the score of a stored match and re-rank.

        Returns a copy of the updated match, or None if no match is stored for the key.
        Score validation errors propagate before anything is changed.
        """
        with self._lock:
            match = self._by_key.get((home_team, away_team))
            if match is None:
                return None
            match.update_score(home_score, away_score)
            self._refresh()
            return match.copy()

    def delete_by_teams(self, home_team: str, away_team: str) -> Optional[Match]:
        """Remove the match for the exact key; missing keys are ignored."""
        with self._lock:
            removed = self._by_key.pop((home_team, away_team), None)
            if removed is not None:
                self._refresh()
            return removed

    def clear(self) -> None:
        with self._lock:
            self._by_key.clear()
            self._refresh()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find_by_teams(self, home_team: str, away_team: str) -> Optional[Match]:
        with self._lock:
            match = self._by_key.get((home_team, away_team))
            return match.copy() if match is not None else None

    def exists_for_team(self, team: str) -> bool:
        with self._lock:
            return team in self._active_teams

    def active_teams(self) -> FrozenSet[str]:
        with self._lock:
            return self._active_teams

    def ordered_matches(self) -> Tuple[Match, ...]:
        with self._lock:
            return tuple(m.copy() for m in self._ordered)

    def snapshot(self, builder: Callable[[Tuple[Match, ...]], T]) -> T:
        """Build a value from the ordered view while holding the lock.

        The builder sees the stored matches themselves and must not mutate
        them or keep references to them.
        """
        with self._lock:
            return builder(self._ordered)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_key)
