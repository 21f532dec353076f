from __future__ import annotations

"""Canonical one-line text for a match state.

Examples:
    W•P1 [1-0] [0-0] 15-30
    M•P2 [6-6] Tie break 3-2
    W•P1 [2-3] Advantage Player 2
    Player 1 wins.
"""

from .rules import rules_for
from .state import POINT_LABELS, Concluded, InProgress, MatchState, Player, TieBreakGame


def game_token(state: InProgress) -> str:
    """Return the trailing token: points, tie-break count, deuce or advantage."""
    game = state.game
    if isinstance(game, TieBreakGame):
        return f"Tie break {game.player1}-{game.player2}"
    if game.is_deuce:
        return rules_for(state.config.tournament).deuce_word
    leader = game.advantage
    if leader is not None:
        return f"Advantage Player {leader.value}"
    return f"{POINT_LABELS[game.player1]}-{POINT_LABELS[game.player2]}"


def describe(state: MatchState) -> str:
    if isinstance(state, Concluded):
        return f"Player {state.winner.value} wins."
    play = "M" if state.config.is_mens_play else "W"
    server = 1 if state.server is Player.PLAYER1 else 2
    sets = " ".join(str(s) for s in state.sets)
    return f"{play}•P{server} {sets} {game_token(state)}"


__all__ = ["describe", "game_token"]
