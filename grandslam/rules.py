from __future__ import annotations

"""Tournament rule table and the pure functions that read it.

Each tournament is one row of data. The engine never branches on a
tournament name directly; it asks these helpers instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Tournament(Enum):
    FRENCH_OPEN = "french-open"
    US_OPEN = "us-open"
    WIMBLEDON = "wimbledon"


class MatchFormat(Enum):
    BEST_OF_THREE = 3
    BEST_OF_FIVE = 5


@dataclass(frozen=True)
class MatchConfig:
    match_format: MatchFormat
    tournament: Tournament

    @property
    def is_mens_play(self) -> bool:
        return self.match_format is MatchFormat.BEST_OF_FIVE


@dataclass(frozen=True)
class RuleSet:
    """Scoring knobs for one tournament."""

    court: str
    # Tie-break at 6-6 even when no further set can follow.
    deciding_set_tie_break: bool
    # At 40-40 the next point wins the game (no advantage).
    sudden_point_deuce: bool
    deuce_word: str = "Deuce"
    advantage_word: str = "Advantage"
    games_per_set: int = 6
    tie_break_at: int = 6
    tie_break_points: int = 7


RULES: Dict[Tournament, RuleSet] = {
    Tournament.FRENCH_OPEN: RuleSet(
        court="clay",
        deciding_set_tie_break=False,
        sudden_point_deuce=True,
        deuce_word="Égalité",
        advantage_word="Avantage",
    ),
    Tournament.US_OPEN: RuleSet(
        court="hard",
        deciding_set_tie_break=True,
        sudden_point_deuce=False,
    ),
    Tournament.WIMBLEDON: RuleSet(
        court="grass",
        deciding_set_tie_break=False,
        sudden_point_deuce=False,
    ),
}


@dataclass(frozen=True)
class SetFormat:
    games: int
    # None means an advantage set: no tie-break, win by two with no cap.
    tie_break_at: Optional[int]


def rules_for(tournament: Tournament) -> RuleSet:
    return RULES[tournament]


def max_possible_sets(config: MatchConfig) -> int:
    return config.match_format.value


def sets_needed_to_win(config: MatchConfig) -> int:
    """Return three for best of five and two for best of three."""
    return 3 if config.match_format is MatchFormat.BEST_OF_FIVE else 2


def set_format(config: MatchConfig, sets_played: int) -> SetFormat:
    """Return the game threshold and tie-break trigger for the open set.

    `sets_played` counts every set so far including the open one. A tie-break
    is available for tournaments that play one in the deciding set, and for
    everyone else only while fewer than the maximum number of sets exist.
    """
    rules = rules_for(config.tournament)
    if rules.deciding_set_tie_break or sets_played < max_possible_sets(config):
        return SetFormat(games=rules.games_per_set, tie_break_at=rules.tie_break_at)
    return SetFormat(games=rules.games_per_set, tie_break_at=None)


def is_deuce_sudden_point(config: MatchConfig, in_tie_break: bool = False) -> bool:
    """Return True when a point at 40-40 ends the game outright."""
    return rules_for(config.tournament).sudden_point_deuce and not in_tie_break


def parse_tournament(raw: str) -> Tournament:
    """Map a loose user string like 'US Open' or 'wimbledon' to a Tournament.

    Raises ValueError for anything unknown.
    """
    key = raw.strip().lower().replace("_", "-").replace(" ", "-")
    for t in Tournament:
        if key in (t.value, t.name.lower().replace("_", "-")):
            return t
    aliases = {"roland-garros": Tournament.FRENCH_OPEN, "rg": Tournament.FRENCH_OPEN, "uso": Tournament.US_OPEN}
    if key in aliases:
        return aliases[key]
    raise ValueError(f"unknown tournament: {raw!r}")


def parse_format(raw: str) -> MatchFormat:
    """Return the match format for '3' or '5'."""
    try:
        return MatchFormat(int(str(raw).strip()))
    except ValueError:
        raise ValueError(f"match format must be 3 or 5, got {raw!r}") from None


__all__ = [
    "Tournament",
    "MatchFormat",
    "MatchConfig",
    "RuleSet",
    "RULES",
    "SetFormat",
    "rules_for",
    "max_possible_sets",
    "sets_needed_to_win",
    "set_format",
    "is_deuce_sudden_point",
    "parse_tournament",
    "parse_format",
]
