"""
Testing pure game logic.
"""

import itertools

import pytest

from hitblow.engine import score_guess, is_win


def test_score_guess_no_matches():
    secret = [1, 2, 3]
    guess = [4, 5, 6]

    hits, blows = score_guess(secret, guess)

    assert hits == 0
    assert blows == 0


def test_score_guess_reversed_keeps_middle_hit():
    # Only the middle 2 stays in place; 1 and 3 swapped
    hits, blows = score_guess([1, 2, 3], [3, 2, 1])

    assert hits == 1
    assert blows == 2


def test_score_guess_with_zero_inside_secret():
    secret = [5, 0, 7, 2]
    guess = [5, 2, 7, 0]

    hits, blows = score_guess(secret, guess)

    # 5 and 7 in place, 2 and 0 swapped
    assert hits == 2
    assert blows == 2


def test_score_guess_repeated_guess_digit_counts_once():
    # The 3 appears three times in the guess but only once in the secret
    hits, blows = score_guess([1, 2, 3], [3, 3, 3])
    assert hits == 1
    assert blows == 0

    hits, blows = score_guess([1, 2, 3], [3, 3, 1])
    assert hits == 0
    assert blows == 2


def test_score_guess_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score_guess([1, 2, 3], [1, 2])
    with pytest.raises(ValueError):
        score_guess([], [])


def test_hits_plus_blows_never_exceed_level():
    # Every 3-digit guess (repeats included) against one secret
    secret = [0, 4, 9]
    for guess in itertools.product(range(10), repeat=3):
        hits, blows = score_guess(secret, list(guess))
        assert hits + blows <= 3
        assert (hits == 3) == (list(guess) == secret)


def test_reversed_secret_finds_every_digit():
    for secret in ([1, 2, 3], [5, 0, 7, 2], [9, 8, 7, 6, 5, 4, 3, 2, 1]):
        reverse = list(reversed(secret))
        hits, blows = score_guess(secret, reverse)
        assert hits + blows == len(secret)


def test_is_win_true_and_false():
    assert is_win([0, 1, 2, 3], [0, 1, 2, 3]) is True
    assert is_win([0, 1, 2, 3], [0, 1, 2, 4]) is False
    assert is_win([0, 1, 2], [0, 1]) is False
