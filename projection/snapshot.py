from __future__ import annotations

"""Read-only scoreboard snapshots for front-ends.

`take_snapshot` projects a `MatchState` into plain display values: names,
serving side, set boxes, and either two game-score boxes or a deuce/advantage
banner. `SnapshotStream` replays point outcomes and yields one snapshot per
point so a GUI never re-implements scoring rules.

The only randomness here is the trophy artwork picked once the match is
over. It comes from a caller-supplied RNG and never feeds back into scoring.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple
import random

from grandslam.engine import apply_point
from grandslam.notation import describe
from grandslam.rules import MatchConfig, Tournament, rules_for
from grandslam.state import POINT_LABELS, Concluded, InProgress, MatchState, Player, TieBreakGame, initial


# Number of trophy artworks a front-end can show.
TROPHY_COUNT = 3

# Court texture order, one per tournament.
COURT_ORDER: Tuple[Tournament, ...] = (Tournament.FRENCH_OPEN, Tournament.US_OPEN, Tournament.WIMBLEDON)


@dataclass(frozen=True)
class Scoreboard:
    """Everything a front-end needs to draw the current state."""

    name1: str
    name2: str
    tournament: Tournament
    court: str
    court_index: int
    # Set boxes, closed sets first, open set last
    sets: Tuple[Tuple[int, int], ...]
    # Canonical text, same as grandslam.describe
    description: str
    # One-line human game score, e.g. "15 - 30" or "Advantage Nadal"
    game_text: str = ""
    serving: Optional[Player] = None
    tie_break: bool = False
    # Two score boxes when the game is not at deuce/advantage
    game_boxes: Optional[Tuple[str, str]] = None
    # Deuce or advantage banner, may contain a newline before the name
    banner: Optional[str] = None

    match_over: bool = False
    winner: Optional[Player] = None
    winner_name: Optional[str] = None
    trophy_index: Optional[int] = None

    @property
    def serving_name(self) -> Optional[str]:
        if self.serving is None:
            return None
        return self.name1 if self.serving is Player.PLAYER1 else self.name2


def pick_trophy(rng: random.Random, count: int = TROPHY_COUNT) -> int:
    """Return a random trophy artwork index."""
    return rng.randrange(count)


def _name_of(player: Player, name1: str, name2: str) -> str:
    return name1 if player is Player.PLAYER1 else name2


def _game_display(state: InProgress, name1: str, name2: str) -> Tuple[Optional[Tuple[str, str]], Optional[str], str]:
    """Return (boxes, banner, text) for the game in progress."""
    game = state.game
    rules = rules_for(state.config.tournament)
    if isinstance(game, TieBreakGame):
        boxes = (str(game.player1), str(game.player2))
        return boxes, None, f"Tie break {game.player1} - {game.player2}"
    if game.is_deuce:
        return None, rules.deuce_word, rules.deuce_word
    leader = game.advantage
    if leader is not None:
        name = _name_of(leader, name1, name2)
        return None, f"{rules.advantage_word}\n{name}", f"{rules.advantage_word} {name}"
    boxes = (POINT_LABELS[game.player1], POINT_LABELS[game.player2])
    return boxes, None, f"{boxes[0]} - {boxes[1]}"


def take_snapshot(
    state: MatchState,
    config: MatchConfig,
    name1: str,
    name2: str,
    trophy_rng: Optional[random.Random] = None,
) -> Scoreboard:
    """Project a match state into a `Scoreboard`.

    `config` is needed because a concluded match no longer carries one.
    `trophy_rng` is only read when the match is over.
    """
    common = dict(
        name1=name1,
        name2=name2,
        tournament=config.tournament,
        court=rules_for(config.tournament).court,
        court_index=COURT_ORDER.index(config.tournament),
        sets=tuple((s.player1, s.player2) for s in state.sets),
        description=describe(state),
    )
    if isinstance(state, Concluded):
        winner_name = _name_of(state.winner, name1, name2)
        return Scoreboard(
            **common,
            game_text=f"Game, set and match {winner_name}",
            match_over=True,
            winner=state.winner,
            winner_name=winner_name,
            trophy_index=pick_trophy(trophy_rng) if trophy_rng is not None else None,
        )
    boxes, banner, text = _game_display(state, name1, name2)
    return Scoreboard(
        **common,
        game_text=text,
        serving=state.server,
        tie_break=state.in_tie_break,
        game_boxes=boxes,
        banner=banner,
    )


def SnapshotStream(
    config: MatchConfig,
    name1: str,
    name2: str,
    outcomes: Iterable[bool],
    trophy_rng: Optional[random.Random] = None,
) -> Iterator[Scoreboard]:
    """Yield one scoreboard per applied point.

    Stops after the point that decides the match, even if outcomes remain.
    """
    state: MatchState = initial(config)
    for server_won in outcomes:
        state = apply_point(state, server_won)
        yield take_snapshot(state, config, name1, name2, trophy_rng)
        if isinstance(state, Concluded):
            break


__all__ = ["TROPHY_COUNT", "COURT_ORDER", "Scoreboard", "pick_trophy", "take_snapshot", "SnapshotStream"]
