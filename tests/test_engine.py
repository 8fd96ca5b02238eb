from collections import Counter
from itertools import product

import pytest
from mastermind.engine import (
    DEFAULT_RULES,
    Feedback,
    InvalidCodeLength,
    InvalidInput,
    Rules,
    is_win,
    parse_code,
    score,
    validate_code,
)

R, Y, G, B, M, K = "red", "yellow", "green", "blue", "magenta", "black"


# --- N=4 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ((R, Y, Y, Y), (R, R, B, G), (1, 0)),
    ((R, G, G, G), (R, R, G, B), (2, 0)),
    ((R, R, Y, Y), (Y, Y, R, R), (0, 4)),
    ((R, R, R, B), (B, R, G, G), (1, 1)),
    ((G, G, B, B), (B, G, M, K), (1, 1)),
    ((K, K, K, K), (R, Y, G, B), (0, 0)),
    ((R, Y, G, B), (R, Y, G, B), (4, 0)),
    ((Y, R, B, G), (R, Y, G, B), (0, 4)),
])
def test_score_n4_golden(guess, secret, expected):
    assert score(guess, secret) == expected


# --- N=2 sample tests ---
@pytest.mark.parametrize("guess,secret,expected", [
    ((Y, R), (R, Y), (0, 2)),
    ((R, Y), (R, Y), (2, 0)),
    ((R, R), (R, Y), (1, 0)),
    ((Y, Y), (R, Y), (1, 0)),
])
def test_score_n2_samples(guess, secret, expected):
    assert score(guess, secret) == expected


def test_score_returns_feedback_with_named_counts():
    fb = score((R, G, G, G), (R, R, G, B))
    assert isinstance(fb, Feedback)
    assert fb.exact == 2 and fb.partial == 0
    assert fb.pegs() == ["exact", "exact"]


def test_score_length_mismatch_raises():
    with pytest.raises(InvalidCodeLength):
        score((R, Y, G), (R, Y, G, B))
    # also usable as a plain ValueError
    with pytest.raises(ValueError):
        score((R,), ())


def test_score_self_is_win():
    for secret in [(R, R, R, R), (R, Y, G, B), (K, M, K, M)]:
        fb = score(secret, secret)
        assert is_win(fb, 4)
        assert fb.is_win(4)


def test_score_peg_totals_on_small_board():
    # Every pair on a 3-color, 3-peg board: totals never exceed N and match
    # the per-color multiset overlap (min(k, m) summed over colors).
    codes = list(product((R, Y, G), repeat=3))
    for g in codes:
        for s in codes:
            fb = score(g, s)
            overlap = sum((Counter(g) & Counter(s)).values())
            assert fb.exact + fb.partial <= 3
            assert fb.total == overlap
            assert score(s, g) == fb


def test_is_win_requires_all_exact():
    assert is_win(Feedback(4, 0), 4)
    assert not is_win(Feedback(3, 0), 4)
    assert not is_win(Feedback(2, 2), 4)


def test_parse_code_accepts_names_case_and_commas():
    assert parse_code("red yellow green blue") == (R, Y, G, B)
    assert parse_code("  Red, YELLOW,green   blue ") == (R, Y, G, B)


def test_parse_code_accepts_unambiguous_prefixes():
    assert parse_code("mag r gr y") == (M, R, G, Y)


@pytest.mark.parametrize("text,fragment", [
    ("red red red", "must have 4 colors"),
    ("red red red red red", "must have 4 colors"),
    ("purple red red red", "Invalid color 'purple'"),
    ("bl red red red", "Ambiguous color 'bl'"),
    ("", "must have 4 colors"),
])
def test_parse_code_rejects_bad_input(text, fragment):
    with pytest.raises(InvalidInput) as exc:
        parse_code(text)
    assert fragment in str(exc.value)


def test_parse_code_uses_given_rules():
    rules = Rules(palette=("red", "yellow", "green", "blue"), code_length=2)
    assert parse_code("yellow red", rules) == (Y, R)
    with pytest.raises(InvalidInput):
        parse_code("magenta red", rules)


def test_validate_code():
    assert validate_code((R, Y, G, B)) is True
    assert validate_code([K, K, K, K]) is True
    assert validate_code((R, Y, G)) is False
    assert validate_code((R, Y, G, "purple")) is False
    assert validate_code("redd") is False


def test_rules_defaults_and_overrides():
    assert DEFAULT_RULES.palette == (R, Y, G, B, M, K)
    assert DEFAULT_RULES.code_length == 4
    assert DEFAULT_RULES.max_turns == 12
    assert DEFAULT_RULES.space_size == 1296

    small = DEFAULT_RULES.with_overrides(palette=["Red", "Blue"], code_length=3)
    assert small.palette == (R, B)
    assert small.space_size == 8
    assert small.max_turns == 12


@pytest.mark.parametrize("kwargs", [
    {"palette": ()},
    {"palette": ("red", "red")},
    {"palette": ("dark red", "blue")},
    {"palette": ("red,blue", "green")},
    {"code_length": 0},
    {"max_turns": 0},
])
def test_rules_reject_bad_configuration(kwargs):
    with pytest.raises(ValueError):
        Rules(**kwargs)
