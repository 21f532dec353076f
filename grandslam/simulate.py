from __future__ import annotations

"""Random point outcomes for simulators.

The scoring engine is deterministic; randomness lives here, in the caller.
"""

import random
from typing import Iterator, List, Optional

# Probability percent that the server wins a point. Servers hold most games.
DEFAULT_SERVE_BIAS = 62


def clamp_bias(value: int) -> int:
    """Clamp a bias value into a safe range.

    This keeps both sides with some chance to win a point.
    """
    return max(10, min(90, value))


def server_wins_biased(bias: int, rng: random.Random) -> bool:
    """Return True when the server wins, with probability `bias` percent."""
    # Use 0..99 so bias=100 means always True and bias=0 always False
    return rng.randint(0, 99) < bias


def random_outcomes(seed: Optional[int] = None, serve_bias: int = DEFAULT_SERVE_BIAS) -> Iterator[bool]:
    """Yield an endless stream of server-won flags.

    The same seed always gives the same stream.
    """
    rng = random.Random(seed)
    bias = clamp_bias(serve_bias)
    while True:
        yield server_wins_biased(bias, rng)


def parse_outcomes(text: str) -> List[bool]:
    """Turn a string like 'SSRS' into server-won flags.

    S means the server won the point and R the receiver. Spaces, commas and
    case are ignored. Raises ValueError on any other character.
    """
    flags: List[bool] = []
    for ch in text.upper():
        if ch in " ,":
            continue
        if ch == "S":
            flags.append(True)
        elif ch == "R":
            flags.append(False)
        else:
            raise ValueError(f"invalid point letter {ch!r}; use S or R")
    return flags


__all__ = ["DEFAULT_SERVE_BIAS", "clamp_bias", "server_wins_biased", "random_outcomes", "parse_outcomes"]
