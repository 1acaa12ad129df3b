"""Read-only summary of the scoreboard.

A :class:`Summary` is a frozen, ranked list of :class:`Score` rows taken at
the moment it was requested. It does not follow later changes to the board;
callers poll ``LiveScoreboard.get_summary()`` again to refresh.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from scoreboard.match import Match


@dataclass(frozen=True)
class Score:
    home_team: str
    home_score: int
    away_team: str
    away_score: int

    @classmethod
    def from_match(cls, match: Match) -> "Score":
        return cls(match.home_team, match.home_score, match.away_team, match.away_score)

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_team": self.home_team,
            "home_score": self.home_score,
            "away_team": self.away_team,
            "away_score": self.away_score,
        }

    def __str__(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"


@dataclass(frozen=True)
class Summary:
    scores: Tuple[Score, ...] = ()

    @classmethod
    def of(cls, *scores: Score) -> "Summary":
        return cls(tuple(scores))

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "Summary":
        return cls(tuple(Score.from_match(m) for m in matches))

    @property
    def is_empty(self) -> bool:
        return not self.scores

    def to_list(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self.scores]

    def lines(self) -> List[str]:
        """Numbered rows, e.g. ``"1. Uruguay 6 - Italy 6"``."""
        return [f"{i}. {s}" for i, s in enumerate(self.scores, 1)]

    def __iter__(self) -> Iterator[Score]:
        return iter(self.scores)

    def __len__(self) -> int:
        return len(self.scores)
