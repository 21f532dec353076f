"""Deterministic tennis scoring for Grand Slam tournament rules.

Typical use::

    from grandslam import MatchConfig, MatchFormat, Tournament, initial, apply_point

    state = initial(MatchConfig(MatchFormat.BEST_OF_FIVE, Tournament.WIMBLEDON))
    state = apply_point(state, server_won=True)
"""

from .rules import (
    MatchConfig,
    MatchFormat,
    Tournament,
    RuleSet,
    RULES,
    SetFormat,
    rules_for,
    max_possible_sets,
    sets_needed_to_win,
    set_format,
    is_deuce_sudden_point,
    parse_tournament,
    parse_format,
)
from .state import (
    Player,
    Point,
    SetScore,
    RegularGame,
    TieBreakGame,
    InProgress,
    Concluded,
    MatchState,
    initial,
)
from .serve import is_player1_serving
from .engine import apply_point, replay, iter_events
from .notation import describe

__all__ = [
    "MatchConfig",
    "MatchFormat",
    "Tournament",
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
    "Player",
    "Point",
    "SetScore",
    "RegularGame",
    "TieBreakGame",
    "InProgress",
    "Concluded",
    "MatchState",
    "initial",
    "is_player1_serving",
    "apply_point",
    "replay",
    "iter_events",
    "describe",
]
