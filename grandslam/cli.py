from __future__ import annotations

import argparse
import logging
import sys
from itertools import islice
from typing import Callable, Iterable, Optional

from .engine import iter_events
from .notation import describe
from .rules import MatchConfig, Tournament, parse_format, parse_tournament
from .simulate import DEFAULT_SERVE_BIAS, parse_outcomes, random_outcomes
from .state import Player

# Hard stop for simulated matches; an advantage set can in theory run forever.
MAX_SIMULATED_POINTS = 5000

TOURNAMENT_TITLES = {
    Tournament.FRENCH_OPEN: "French Open",
    Tournament.US_OPEN: "US Open",
    Tournament.WIMBLEDON: "Wimbledon",
}


def prompt_with_retries(prompt: str, transform: Callable[[str], object], max_attempts: int = 10):
    """Ask for input and transform it, with a small retry budget.

    `transform` raises ValueError on bad input. Returns the transformed value
    or exits on repeated invalid entries.
    """
    attempts = 0
    while attempts < max_attempts:
        try:
            raw = input(prompt).strip()
        except EOFError:
            print("Error: no input provided.")
            sys.exit(1)
        try:
            return transform(raw)
        except ValueError as exc:
            print(f"Invalid input ({exc}). Please try again.")
            attempts += 1
    print("Multiple invalid attempts. Exiting.")
    sys.exit(1)


def is_valid_bias(v: int) -> bool:
    """Return True if bias is within zero to one hundred inclusive."""
    return 0 <= v <= 100


def run_match(cfg: MatchConfig, outcomes: Iterable[bool], name1: str, name2: str) -> int:
    """Print every event of a match and return the number of points played."""
    names = {Player.PLAYER1: name1, Player.PLAYER2: name2}
    points = 0
    finished = False
    state = None
    for event, data in iter_events(cfg, outcomes):
        if event == "start":
            print(
                f"Start of play - {name1} vs {name2} - {TOURNAMENT_TITLES[cfg.tournament]}"
                f" - best out of {cfg.match_format.value} sets"
            )
        elif event == "point":
            points += 1
            state = data["state"]
            print(f"Point {names[data['winner']]}: {describe(state)}")
        elif event == "game":
            s = data["set_score"]
            print(f"Game {names[data['winner']]}. Set Score: {name1} vs {name2} {s.player1} - {s.player2}")
        elif event == "set":
            s = data["final_games"]
            print(f"Set {data['number']} won by {names[data['winner']]}. Games: {name1} vs {name2} {s.player1} - {s.player2}")
        elif event == "match":
            finished = True
            final = " ".join(str(s) for s in data["sets"])
            print(f"Winner: {names[data['winner']]}. Final Score (sets): {final}")
    if not finished:
        print(f"Match unfinished after {points} points: {describe(state) if state is not None else 'no points played'}")
    return points


def main(argv=None) -> int:
    """Run the text mode host for the scorekeeper.

    Points come from --points (S for server, R for receiver) or, when that is
    absent, from a seeded simulation.
    """
    parser = argparse.ArgumentParser(description="Grand Slam tennis scorekeeper (CLI)")
    parser.add_argument("--player-1", dest="player_1", type=str, default="Player 1", help="Player 1 display name")
    parser.add_argument("--player-2", dest="player_2", type=str, default="Player 2", help="Player 2 display name")
    parser.add_argument("--tournament", dest="tournament", type=str, default=None, help="french-open, us-open or wimbledon")
    parser.add_argument("--format", dest="match_format", type=str, default=None, help="Best of 3 or 5 sets")
    parser.add_argument("--points", dest="points", type=str, default=None, help="Point outcomes, e.g. SSRSRR")
    parser.add_argument("--seed", dest="seed", type=int, default=None, help="Random seed for simulated points")
    parser.add_argument("--serve-bias", dest="serve_bias", type=int, default=DEFAULT_SERVE_BIAS, help="Chance in percent that the server wins a simulated point")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log game and set transitions")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.tournament is None:
            tournament = prompt_with_retries("Tournament (french-open, us-open, wimbledon): ", parse_tournament)
        else:
            tournament = parse_tournament(args.tournament)

        if args.match_format is None:
            match_format = prompt_with_retries("Number of sets (3 or 5): ", parse_format)
        else:
            match_format = parse_format(args.match_format)

        outcomes: Optional[Iterable[bool]] = None
        if args.points is not None:
            outcomes = parse_outcomes(args.points)
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 2

    if outcomes is None:
        if not is_valid_bias(args.serve_bias):
            print("Invalid input: serve bias must be within 0..100")
            return 2
        outcomes = islice(random_outcomes(args.seed, args.serve_bias), MAX_SIMULATED_POINTS)

    cfg = MatchConfig(match_format=match_format, tournament=tournament)
    run_match(cfg, outcomes, args.player_1, args.player_2)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
