"""
Pure game logic (no I/O, no session state).
We compute two feedback numbers for each guess:
- exact: how many indices are exactly correct (right digit, right place)
- partial: how many of the remaining digits appear in the secret at a
  different position that has not already been matched

Duplicates are allowed in the secret and in the guess. Every position, on both
sides, can be credited at most once.
"""

from dataclasses import dataclass
from typing import List

from .types import Code

MATCH_MARKER = "+"
PARTIAL_MARKER = "-"

# Marks a position already accounted for. Digits are never negative.
_CONSUMED = -1


@dataclass(frozen=True)
class Hint:
    exact: int
    partial: int
    won: bool = False

    @classmethod
    def win(cls, length: int) -> "Hint":
        return cls(exact=length, partial=0, won=True)


def _check_lengths(secret: Code, guess: Code) -> int:
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")
    return n


def evaluate(secret: Code, guess: Code) -> Hint:
    """
    Example:
      secret = [1, 2, 3, 4]
      guess  = [4, 2, 3, 3]
      exact   = 2  (the 2 and the first 3)
      partial = 1  (the 4 sits at another position in the secret)
      The second 3 in the guess gets nothing: the secret's only 3 is taken.

    A guess equal to the secret returns Hint.win() without counting partials.
    """
    n = _check_lengths(secret, guess)

    if is_win(secret, guess):
        return Hint.win(n)

    # Work on copies so the caller's lists stay untouched
    temp_secret: List[int] = list(secret)
    temp_guess: List[int] = list(guess)
    exact = 0
    partial = 0

    # 1. Exact pass: consume both sides on a positional match
    for i in range(n):
        if temp_guess[i] == temp_secret[i]:
            exact += 1
            temp_guess[i] = _CONSUMED
            temp_secret[i] = _CONSUMED

    # 2. Value pass: first unconsumed secret position wins (lowest j)
    for i in range(n):
        if temp_guess[i] == _CONSUMED:
            continue

        for j in range(n):
            if temp_secret[j] == _CONSUMED:
                continue

            if temp_guess[i] == temp_secret[j]:
                partial += 1
                temp_guess[i] = _CONSUMED
                temp_secret[j] = _CONSUMED
                break

    return Hint(exact=exact, partial=partial)


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = all digits match in order, for all positions.
    Works for any length, as long as lengths match.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False

    for i in range(n):
        if secret[i] != guess[i]:
            return False
    return True


def render_hint(hint: Hint) -> str:
    """'+' per exact match, then '-' per partial match. Non-matches print nothing."""
    return MATCH_MARKER * hint.exact + PARTIAL_MARKER * hint.partial
