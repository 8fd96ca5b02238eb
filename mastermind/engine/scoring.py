"""
Mastermind scoring (feedback) for a single (guess, secret) pair.

Conventions:
  - exact   : right color in the right position (red peg on the board)
  - partial : color present elsewhere in the secret and not already matched
              by an exact peg (white peg on the board)

This implementation is:
  - N-aware (any peg count, any palette)
  - duplicate-safe (a color appearing k times in the guess and m times in the
    secret contributes at most min(k, m) pegs in total)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass counts exact pegs and sets aside the unmatched colors of both
     the secret and the guess.
  2) Second pass walks the unmatched guess colors in order; each one found in
     the unmatched secret colors scores a partial peg and consumes the first
     occurrence there.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from .errors import InvalidCodeLength

# A code is an ordered tuple of palette color names.
Code = Tuple[str, ...]

EXACT = "exact"
PARTIAL = "partial"


class Feedback(NamedTuple):
    exact: int
    partial: int

    @property
    def total(self) -> int:
        return self.exact + self.partial

    def pegs(self) -> List[str]:
        """Expand into an ordered peg list: exact pegs first, then partial pegs."""
        return [EXACT] * self.exact + [PARTIAL] * self.partial

    def is_win(self, code_length: int) -> bool:
        return is_win(self, code_length)


def win_feedback(code_length: int) -> Feedback:
    return Feedback(code_length, 0)


def is_win(feedback: Feedback, code_length: int) -> bool:
    """True iff every peg is exact."""
    return feedback == win_feedback(code_length)


def score(guess: Sequence[str], secret: Sequence[str]) -> Feedback:
    """
    Compute Mastermind feedback for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret), else InvalidCodeLength

    Examples:
      score(("red", "yellow"), ("yellow", "red")) -> Feedback(exact=0, partial=2)
      score(("red", "green", "green", "green"),
            ("red", "red", "green", "blue"))      -> Feedback(exact=2, partial=0)
    """
    if len(guess) != len(secret):
        raise InvalidCodeLength(
            f"Guess and secret must be the same length; got {len(guess)} and {len(secret)}"
        )

    exact = 0
    remaining_secret: List[str] = []
    remaining_guess: List[str] = []

    # Pass 1: exact matches; everything else is kept for pass 2.
    for g, s in zip(guess, secret):
        if g == s:
            exact += 1
        else:
            remaining_secret.append(s)
            remaining_guess.append(g)

    # Pass 2: each secret color can satisfy at most one partial peg.
    partial = 0
    for g in remaining_guess:
        if g in remaining_secret:
            partial += 1
            remaining_secret.remove(g)  # drops the first occurrence only

    return Feedback(exact, partial)
