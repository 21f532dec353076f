from __future__ import annotations

"""Match state values.

A match is either `InProgress` or `Concluded`. Both are frozen; the engine
returns a new value for every point. Only `InProgress` carries a game, so
only it can be passed to `engine.apply_point`.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Tuple, Union

from .rules import MatchConfig
from .serve import is_player1_serving


class Player(Enum):
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def other(self) -> "Player":
        return Player.PLAYER2 if self is Player.PLAYER1 else Player.PLAYER1


class Point(IntEnum):
    """Point phase inside a regular game."""

    LOVE = 0
    FIFTEEN = 1
    THIRTY = 2
    FORTY = 3
    ADVANTAGE = 4


POINT_LABELS = {Point.LOVE: "0", Point.FIFTEEN: "15", Point.THIRTY: "30", Point.FORTY: "40"}


@dataclass(frozen=True)
class SetScore:
    player1: int = 0
    player2: int = 0

    def of(self, player: Player) -> int:
        return self.player1 if player is Player.PLAYER1 else self.player2

    def won_by(self, player: Player) -> "SetScore":
        """Return a new entry with one more game for `player`."""
        if player is Player.PLAYER1:
            return SetScore(self.player1 + 1, self.player2)
        return SetScore(self.player1, self.player2 + 1)

    @property
    def leader(self) -> Union[Player, None]:
        if self.player1 == self.player2:
            return None
        return Player.PLAYER1 if self.player1 > self.player2 else Player.PLAYER2

    def __str__(self) -> str:
        return f"[{self.player1}-{self.player2}]"


@dataclass(frozen=True)
class RegularGame:
    player1: Point = Point.LOVE
    player2: Point = Point.LOVE

    def of(self, player: Player) -> Point:
        return self.player1 if player is Player.PLAYER1 else self.player2

    def with_points(self, player: Player, mine: Point, theirs: Point) -> "RegularGame":
        if player is Player.PLAYER1:
            return RegularGame(mine, theirs)
        return RegularGame(theirs, mine)

    @property
    def is_deuce(self) -> bool:
        return self.player1 is Point.FORTY and self.player2 is Point.FORTY

    @property
    def advantage(self) -> Union[Player, None]:
        if self.player1 is Point.ADVANTAGE:
            return Player.PLAYER1
        if self.player2 is Point.ADVANTAGE:
            return Player.PLAYER2
        return None

    @property
    def points(self) -> Tuple[int, int]:
        return (int(self.player1), int(self.player2))


@dataclass(frozen=True)
class TieBreakGame:
    player1: int = 0
    player2: int = 0

    def of(self, player: Player) -> int:
        return self.player1 if player is Player.PLAYER1 else self.player2

    def scored(self, player: Player) -> "TieBreakGame":
        if player is Player.PLAYER1:
            return TieBreakGame(self.player1 + 1, self.player2)
        return TieBreakGame(self.player1, self.player2 + 1)

    @property
    def total(self) -> int:
        return self.player1 + self.player2

    @property
    def points(self) -> Tuple[int, int]:
        return (self.player1, self.player2)


Game = Union[RegularGame, TieBreakGame]


@dataclass(frozen=True)
class InProgress:
    config: MatchConfig
    # Never empty; the last entry is the open set.
    sets: Tuple[SetScore, ...] = (SetScore(),)
    game: Game = field(default_factory=RegularGame)

    @property
    def in_tie_break(self) -> bool:
        return isinstance(self.game, TieBreakGame)

    @property
    def current_set(self) -> SetScore:
        return self.sets[-1]

    @property
    def closed_sets(self) -> Tuple[SetScore, ...]:
        return self.sets[:-1]

    @property
    def current_game_points(self) -> Tuple[int, int]:
        return self.game.points

    @property
    def is_player1_serving(self) -> bool:
        tie_break_points = self.game.total if isinstance(self.game, TieBreakGame) else 0
        return is_player1_serving(self.sets, self.in_tie_break, tie_break_points)

    @property
    def server(self) -> Player:
        return Player.PLAYER1 if self.is_player1_serving else Player.PLAYER2

    def with_open_set(self, open_set: SetScore, game: Game) -> "InProgress":
        return replace(self, sets=self.closed_sets + (open_set,), game=game)

    def __str__(self) -> str:
        from .notation import describe

        return describe(self)


@dataclass(frozen=True)
class Concluded:
    winner: Player
    # Final scores of every set played, for display only.
    sets: Tuple[SetScore, ...] = ()

    def __str__(self) -> str:
        from .notation import describe

        return describe(self)


MatchState = Union[InProgress, Concluded]


def initial(config: MatchConfig) -> InProgress:
    """Return a fresh match: one empty set and a love-all game."""
    return InProgress(config=config, sets=(SetScore(),), game=RegularGame())


__all__ = [
    "Player",
    "Point",
    "POINT_LABELS",
    "SetScore",
    "RegularGame",
    "TieBreakGame",
    "Game",
    "InProgress",
    "Concluded",
    "MatchState",
    "initial",
]
