from __future__ import annotations

"""Point-by-point transition engine.

`apply_point` is the only mutator: it takes an `InProgress` state and the
outcome of one point and returns the next state. `replay` folds a whole
sequence, and `iter_events` narrates the same fold as start, point, game, set
and match events for hosts that print or animate a match.
"""

import logging
from typing import Any, Dict, Generator, Iterable, Optional, Tuple

from .rules import MatchConfig, is_deuce_sudden_point, rules_for, set_format, sets_needed_to_win
from .state import (
    Concluded,
    InProgress,
    MatchState,
    Player,
    Point,
    RegularGame,
    SetScore,
    TieBreakGame,
    initial,
)

logger = logging.getLogger(__name__)

Event = Tuple[str, Dict[str, Any]]


def _advance_regular(game: RegularGame, scorer: Player, sudden_point: bool) -> Optional[RegularGame]:
    """Return the game after `scorer` wins a point, or None if that wins the game."""
    mine = game.of(scorer)
    theirs = game.of(scorer.other)
    if mine is Point.ADVANTAGE:
        return None
    if mine is Point.FORTY:
        if theirs < Point.FORTY:
            return None
        if theirs is Point.ADVANTAGE:
            # Back to deuce, never below it.
            return game.with_points(scorer, Point.FORTY, Point.FORTY)
        if sudden_point:
            return None
        return game.with_points(scorer, Point.ADVANTAGE, Point.FORTY)
    return game.with_points(scorer, Point(mine + 1), theirs)


def _advance_tie_break(game: TieBreakGame, scorer: Player, target: int) -> Optional[TieBreakGame]:
    """Return the tie-break after `scorer` wins a point, or None if that wins it."""
    after = game.scored(scorer)
    if after.of(scorer) >= target and after.of(scorer) - after.of(scorer.other) >= 2:
        return None
    return after


def _sets_won(sets: Iterable[SetScore], player: Player) -> int:
    return sum(1 for s in sets if s.leader is player)


def _close_game(state: InProgress, scorer: Player) -> MatchState:
    """Credit a won game to `scorer` and cascade into the set and match checks."""
    config = state.config
    fmt = set_format(config, len(state.sets))
    open_set = state.current_set.won_by(scorer)
    mine = open_set.of(scorer)
    theirs = open_set.of(scorer.other)

    if not state.in_tie_break and not (mine >= fmt.games and mine - theirs >= 2):
        if fmt.tie_break_at is not None and mine == theirs == fmt.tie_break_at:
            logger.debug("tie-break at %s", open_set)
            return state.with_open_set(open_set, TieBreakGame())
        return state.with_open_set(open_set, RegularGame())

    closed = state.closed_sets + (open_set,)
    logger.debug("set %d to %s %s", len(closed), scorer.name, open_set)
    if _sets_won(closed, scorer) >= sets_needed_to_win(config):
        logger.debug("match to %s", scorer.name)
        return Concluded(winner=scorer, sets=closed)
    return InProgress(config=config, sets=closed + (SetScore(),), game=RegularGame())


def apply_point(state: InProgress, server_won: bool) -> MatchState:
    """Return the state after one point.

    `server_won` is relative to whoever serves in `state`; the serve rule turns
    it into Player 1 or Player 2 before any score changes. Only an
    `InProgress` match can take a point.
    """
    scorer = state.server if server_won else state.server.other
    game = state.game
    if isinstance(game, TieBreakGame):
        next_game = _advance_tie_break(game, scorer, rules_for(state.config.tournament).tie_break_points)
    else:
        next_game = _advance_regular(game, scorer, is_deuce_sudden_point(state.config))
    if next_game is not None:
        return state.with_open_set(state.current_set, next_game)
    return _close_game(state, scorer)


def replay(config: MatchConfig, outcomes: Iterable[bool]) -> MatchState:
    """Fold a sequence of server-won flags into a match state from the start.

    Outcomes left over once the match is decided are ignored.
    """
    state: MatchState = initial(config)
    ignored = 0
    for server_won in outcomes:
        if isinstance(state, Concluded):
            ignored += 1
            continue
        state = apply_point(state, server_won)
    if ignored:
        logger.warning("ignored %d point(s) after the match was decided", ignored)
    return state


def iter_events(config: MatchConfig, outcomes: Iterable[bool]) -> Generator[Event, None, MatchState]:
    """Yield start point game set and match events while replaying outcomes.

    Every point yields a `point` event with the state after it. A point that
    closes a game also yields `game`, a closed set yields `set`, and the last
    point yields `match`. The generator returns the final state.
    """
    state: MatchState = initial(config)
    yield ("start", {"config": config, "state": state})
    for server_won in outcomes:
        if not isinstance(state, InProgress):
            break
        before = state
        scorer = before.server if server_won else before.server.other
        state = apply_point(before, server_won)
        yield ("point", {"winner": scorer, "server": before.server, "state": state})

        if isinstance(state, Concluded):
            final = state.sets[-1]
            yield ("game", {"winner": scorer, "set_score": final})
            yield ("set", {"winner": scorer, "final_games": final, "number": len(state.sets)})
            yield ("match", {"winner": scorer, "sets": state.sets})
            break
        if len(state.sets) > len(before.sets):
            final = state.sets[-2]
            yield ("game", {"winner": scorer, "set_score": final})
            yield ("set", {"winner": scorer, "final_games": final, "number": len(before.sets)})
        elif state.current_set != before.current_set:
            yield ("game", {"winner": scorer, "set_score": state.current_set})
    return state


__all__ = ["apply_point", "replay", "iter_events"]
