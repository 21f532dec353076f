import logging
from itertools import islice

import pytest

from grandslam.engine import apply_point, iter_events, replay
from grandslam.notation import describe
from grandslam.rules import MatchFormat, Tournament
from grandslam.simulate import random_outcomes
from grandslam.state import (
    Concluded,
    InProgress,
    Player,
    Point,
    RegularGame,
    SetScore,
    TieBreakGame,
    initial,
)

from scoring_helpers import config, game_for, point_for, straight_sets_flags


def deuce_state(tournament, sets=(SetScore(),)):
    return InProgress(config=config(tournament), sets=sets, game=RegularGame(Point.FORTY, Point.FORTY))


# ---------- GAMES ----------

def test_initial_state():
    state = initial(config())
    assert state.sets == (SetScore(),)
    assert state.current_game_points == (0, 0)
    assert state.in_tie_break is False
    assert state.server is Player.PLAYER1


def test_four_straight_points_win_a_game():
    state = initial(config(Tournament.US_OPEN, MatchFormat.BEST_OF_THREE))
    for _ in range(3):
        state = apply_point(state, True)
    assert describe(state) == "W•P1 [0-0] 40-0"
    assert state.current_game_points == (3, 0)

    state = apply_point(state, True)
    assert state.sets == (SetScore(1, 0),)
    assert state.current_game_points == (0, 0)
    assert describe(state) == "W•P2 [1-0] 0-0"


def test_receiver_point_goes_to_the_non_server():
    state = apply_point(initial(config()), False)
    assert state.game == RegularGame(Point.LOVE, Point.FIFTEEN)


def test_forty_thirty_wins_game_without_deuce():
    state = InProgress(config=config(), game=RegularGame(Point.FORTY, Point.THIRTY))
    state = point_for(state, Player.PLAYER1)
    assert state.sets == (SetScore(1, 0),)


@pytest.mark.parametrize("tournament", [Tournament.US_OPEN, Tournament.WIMBLEDON])
def test_deuce_ladder(tournament):
    state = deuce_state(tournament)

    state = point_for(state, Player.PLAYER1)
    assert state.current_game_points == (4, 3)
    assert state.game.advantage is Player.PLAYER1

    state = point_for(state, Player.PLAYER2)
    assert state.current_game_points == (3, 3)
    assert state.game.is_deuce

    state = point_for(state, Player.PLAYER2)
    assert state.current_game_points == (3, 4)
    state = point_for(state, Player.PLAYER2)
    assert state.sets == (SetScore(0, 1),)
    assert state.game == RegularGame()


@pytest.mark.parametrize("winner, expected", [
    (Player.PLAYER1, SetScore(1, 0)),
    (Player.PLAYER2, SetScore(0, 1)),
])
def test_french_open_sudden_point_at_deuce(winner, expected):
    state = point_for(deuce_state(Tournament.FRENCH_OPEN), winner)
    assert state.sets == (expected,)
    assert state.current_game_points == (0, 0)


def test_french_open_never_shows_advantage():
    state = initial(config(Tournament.FRENCH_OPEN, MatchFormat.BEST_OF_FIVE))
    for server_won in islice(random_outcomes(seed=5, serve_bias=50), 3000):
        if isinstance(state, Concluded):
            break
        assert state.in_tie_break or state.game.advantage is None
        state = apply_point(state, server_won)


# ---------- SETS AND TIE-BREAKS ----------

@pytest.mark.parametrize("tournament", list(Tournament))
def test_six_all_in_first_set_starts_tie_break(tournament):
    state = InProgress(config=config(tournament), sets=(SetScore(6, 5),))
    state = game_for(state, Player.PLAYER2)
    assert state.sets == (SetScore(6, 6),)
    assert state.in_tie_break
    assert state.game == TieBreakGame(0, 0)


def test_us_open_deciding_set_has_tie_break():
    sets = (SetScore(6, 4), SetScore(4, 6), SetScore(6, 5))
    state = game_for(InProgress(config=config(Tournament.US_OPEN), sets=sets), Player.PLAYER2)
    assert state.in_tie_break


@pytest.mark.parametrize("tournament", [Tournament.FRENCH_OPEN, Tournament.WIMBLEDON])
def test_deciding_set_is_an_advantage_set(tournament):
    sets = (SetScore(6, 4), SetScore(4, 6), SetScore(6, 5))
    state = game_for(InProgress(config=config(tournament), sets=sets), Player.PLAYER2)
    assert state.sets[-1] == SetScore(6, 6)
    assert not state.in_tie_break

    state = game_for(state, Player.PLAYER1)
    assert state.sets[-1] == SetScore(7, 6)
    assert isinstance(state, InProgress)
    assert not state.in_tie_break

    state = game_for(state, Player.PLAYER1)
    assert state == Concluded(
        winner=Player.PLAYER1,
        sets=(SetScore(6, 4), SetScore(4, 6), SetScore(8, 6)),
    )


def test_french_open_fifth_set_point_at_six_all_is_not_a_tie_break():
    cfg = config(Tournament.FRENCH_OPEN, MatchFormat.BEST_OF_FIVE)
    sets = (SetScore(6, 4), SetScore(4, 6), SetScore(6, 4), SetScore(4, 6), SetScore(6, 6))
    state = InProgress(config=cfg, sets=sets)

    state = point_for(state, Player.PLAYER1)
    assert not state.in_tie_break
    assert state.game == RegularGame(Point.FIFTEEN, Point.LOVE)

    state = game_for(state, Player.PLAYER1)
    assert state.sets[-1] == SetScore(7, 6)
    assert isinstance(state, InProgress)

    state = game_for(state, Player.PLAYER1)
    assert isinstance(state, Concluded)
    assert state.winner is Player.PLAYER1
    assert state.sets[-1] == SetScore(8, 6)


def test_winning_tie_break_closes_set():
    state = InProgress(config=config(), sets=(SetScore(6, 6),), game=TieBreakGame(6, 5))
    assert state.server is Player.PLAYER1
    state = apply_point(state, True)
    assert state.sets == (SetScore(7, 6), SetScore())
    assert state.game == RegularGame()


def test_winning_tie_break_can_win_the_match():
    sets = (SetScore(6, 3), SetScore(6, 6))
    state = InProgress(config=config(), sets=sets, game=TieBreakGame(6, 5))
    state = point_for(state, Player.PLAYER1)
    assert state == Concluded(winner=Player.PLAYER1, sets=(SetScore(6, 3), SetScore(7, 6)))


def test_tie_break_needs_two_point_lead():
    state = InProgress(config=config(), sets=(SetScore(6, 6),), game=TieBreakGame(6, 6))
    state = point_for(state, Player.PLAYER1)
    assert state.game == TieBreakGame(7, 6)
    state = point_for(state, Player.PLAYER2)
    assert state.game == TieBreakGame(7, 7)
    state = point_for(state, Player.PLAYER2)
    state = point_for(state, Player.PLAYER2)
    assert state.sets == (SetScore(6, 7), SetScore())


def test_set_needs_two_game_lead():
    state = InProgress(config=config(), sets=(SetScore(5, 5),))
    state = game_for(state, Player.PLAYER1)
    assert state.sets == (SetScore(6, 5),)
    state = game_for(state, Player.PLAYER1)
    assert state.sets == (SetScore(7, 5), SetScore())


# ---------- MATCH ----------

@pytest.mark.parametrize("match_format, points", [
    (MatchFormat.BEST_OF_THREE, 48),
    (MatchFormat.BEST_OF_FIVE, 72),
])
def test_straight_sets_match(match_format, points):
    flags, state = straight_sets_flags(config(Tournament.WIMBLEDON, match_format), Player.PLAYER2)
    assert len(flags) == points
    assert isinstance(state, Concluded)
    assert state.winner is Player.PLAYER2
    assert all(s == SetScore(0, 6) for s in state.sets)
    assert str(state) == "Player 2 wins."


def test_replay_is_deterministic():
    cfg = config(Tournament.WIMBLEDON, MatchFormat.BEST_OF_FIVE)
    outcomes = list(islice(random_outcomes(seed=42), 2000))
    assert replay(cfg, outcomes) == replay(cfg, outcomes)


def test_replay_ignores_points_after_match(caplog):
    cfg = config()
    flags, final = straight_sets_flags(cfg)
    with caplog.at_level(logging.WARNING, logger="grandslam.engine"):
        assert replay(cfg, flags + [True, False]) == final
    assert "ignored 2 point(s)" in caplog.text


@pytest.mark.parametrize("tournament", list(Tournament))
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_reachable_states_keep_set_invariants(tournament, seed):
    state = initial(config(tournament, MatchFormat.BEST_OF_FIVE))
    for server_won in islice(random_outcomes(seed=seed), 5000):
        if isinstance(state, Concluded):
            break
        assert state.sets
        for s in state.closed_sets:
            hi, lo = max(s.player1, s.player2), min(s.player1, s.player2)
            assert hi >= 6
            assert hi - lo >= 2 or (hi, lo) == (7, 6)
        state = apply_point(state, server_won)
    assert isinstance(state, Concluded)
    won = sum(1 for s in state.sets if s.leader is state.winner)
    assert won == 3


# ---------- EVENTS ----------

def test_iter_events_narrates_a_match():
    cfg = config()
    flags, final = straight_sets_flags(cfg)
    events = list(iter_events(cfg, flags))
    kinds = [kind for kind, _ in events]

    assert kinds[0] == "start"
    assert kinds[-1] == "match"
    assert kinds.count("match") == 1
    assert kinds.count("point") == 48
    assert kinds.count("game") == 12
    assert kinds.count("set") == 2
    assert events[-1][1]["sets"] == final.sets
    set_events = [data for kind, data in events if kind == "set"]
    assert [d["number"] for d in set_events] == [1, 2]
    assert all(d["final_games"] == SetScore(6, 0) for d in set_events)


def test_iter_events_returns_final_state():
    cfg = config()
    flags, final = straight_sets_flags(cfg)
    gen = iter_events(cfg, flags + [True])
    with pytest.raises(StopIteration) as stop:
        while True:
            next(gen)
    assert stop.value.value == final
