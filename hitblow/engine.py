"""
Pure game logic (no terminal, no threads).
We compute two feedback numbers for each guess:
- hits: how many indices are exactly correct (right digit, right place)
- blows: digits that appear in the secret but were guessed at another place

The secret never repeats a digit. The guess may (nothing validates the live
keystrokes), so blows are counted as the overlap of both digit multisets
minus the hits. A repeated guess digit can then score at most once.
"""

from typing import Tuple

from .types import Code


def score_guess(secret: Code, guess: Code) -> Tuple[int, int]:
    """
    Example:
      secret = [5, 0, 7, 2]
      guess  = [5, 2, 7, 0]
      hits  = 2  (5 and 7 are in place)
      blows = 2  (2 and 0 are in the secret, elsewhere)
      Returns a tuple: (hits, blows)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    # 1. Count exact position matches --> hits
    hits = sum(1 for s, g in zip(secret, guess) if s == g)

    # 2. Count digits shared by both lists, one per matching pair --> overlap
    secret_counts = [0] * 10
    guess_counts = [0] * 10
    for digit in secret:
        secret_counts[digit] += 1
    for digit in guess:
        guess_counts[digit] += 1

    overlap = 0
    for digit in range(10):
        overlap += min(secret_counts[digit], guess_counts[digit])

    # Hits are part of the overlap; what is left is misplaced
    blows = overlap - hits
    return (hits, blows)


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = all digits match in order, for all positions.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False
    return list(secret) == list(guess)
