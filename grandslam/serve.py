from __future__ import annotations

"""Who serves next, derived from the score alone."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .state import SetScore


def games_played(sets: Sequence["SetScore"]) -> int:
    """Return the number of completed games across every set."""
    return sum(s.player1 + s.player2 for s in sets)


def is_player1_serving(sets: Sequence["SetScore"], in_tie_break: bool, tie_break_points: int = 0) -> bool:
    """Return True if Player 1 serves the next point.

    Serve changes every game. Inside a tie-break it changes after the first
    point and then every two points, which is what the `+ 1` and `% 4` encode.
    """
    even_games = games_played(sets) % 2 == 0
    tie_break_swap = in_tie_break and (tie_break_points + 1) % 4 >= 2
    return even_games ^ tie_break_swap
