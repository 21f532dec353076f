import pytest

from grandslam.rules import (
    RULES,
    MatchFormat,
    Tournament,
    is_deuce_sudden_point,
    max_possible_sets,
    parse_format,
    parse_tournament,
    set_format,
    sets_needed_to_win,
)

from scoring_helpers import config


def test_sets_needed_to_win():
    assert sets_needed_to_win(config(match_format=MatchFormat.BEST_OF_FIVE)) == 3
    assert sets_needed_to_win(config(match_format=MatchFormat.BEST_OF_THREE)) == 2
    assert max_possible_sets(config(match_format=MatchFormat.BEST_OF_FIVE)) == 5


@pytest.mark.parametrize("tournament, match_format, sets_played, tie_break_at", [
    (Tournament.US_OPEN, MatchFormat.BEST_OF_THREE, 1, 6),
    (Tournament.US_OPEN, MatchFormat.BEST_OF_THREE, 3, 6),
    (Tournament.US_OPEN, MatchFormat.BEST_OF_FIVE, 5, 6),
    (Tournament.WIMBLEDON, MatchFormat.BEST_OF_THREE, 2, 6),
    (Tournament.WIMBLEDON, MatchFormat.BEST_OF_THREE, 3, None),
    (Tournament.FRENCH_OPEN, MatchFormat.BEST_OF_FIVE, 4, 6),
    (Tournament.FRENCH_OPEN, MatchFormat.BEST_OF_FIVE, 5, None),
    # Only the last possible set of a best of five is an advantage set
    (Tournament.WIMBLEDON, MatchFormat.BEST_OF_FIVE, 3, 6),
])
def test_set_format_tie_break_availability(tournament, match_format, sets_played, tie_break_at):
    fmt = set_format(config(tournament, match_format), sets_played)
    assert fmt.games == 6
    assert fmt.tie_break_at == tie_break_at


def test_sudden_point_only_for_french_open_outside_tie_breaks():
    assert is_deuce_sudden_point(config(Tournament.FRENCH_OPEN)) is True
    assert is_deuce_sudden_point(config(Tournament.FRENCH_OPEN), in_tie_break=True) is False
    assert is_deuce_sudden_point(config(Tournament.US_OPEN)) is False
    assert is_deuce_sudden_point(config(Tournament.WIMBLEDON)) is False


def test_rule_table_labels_and_courts():
    assert RULES[Tournament.FRENCH_OPEN].deuce_word == "Égalité"
    assert RULES[Tournament.FRENCH_OPEN].advantage_word == "Avantage"
    assert RULES[Tournament.WIMBLEDON].deuce_word == "Deuce"
    assert {r.court for r in RULES.values()} == {"clay", "hard", "grass"}


@pytest.mark.parametrize("raw, expected", [
    ("US Open", Tournament.US_OPEN),
    ("us-open", Tournament.US_OPEN),
    ("French_Open", Tournament.FRENCH_OPEN),
    ("Roland Garros", Tournament.FRENCH_OPEN),
    (" WIMBLEDON ", Tournament.WIMBLEDON),
])
def test_parse_tournament(raw, expected):
    assert parse_tournament(raw) is expected


def test_parse_tournament_rejects_unknown():
    with pytest.raises(ValueError):
        parse_tournament("australian open")


def test_parse_format():
    assert parse_format("5") is MatchFormat.BEST_OF_FIVE
    assert parse_format(" 3 ") is MatchFormat.BEST_OF_THREE
    for bad in ("4", "three", ""):
        with pytest.raises(ValueError):
            parse_format(bad)
