"""
Candidate space for the computer code breaker.

Given:
  - the rules (palette and peg count)
  - a history of (guess, feedback) pairs

Maintain:
  - every code that is consistent with ALL feedback seen so far.

This is the core deduction step: a (guess, feedback) pair is a constraint
every still-possible secret must satisfy, because scoring that secret against
the old guess would have produced the same feedback. The set starts as the
full Cartesian product of the palette (P ** N codes) and only ever shrinks.
"""

from __future__ import annotations

import itertools
import random
from typing import Iterable, Iterator, List, Tuple

from .errors import EmptyCandidateSpace, InconsistentConstraints
from .rules import DEFAULT_RULES, Rules
from .scoring import Code, Feedback, score

# History is a sequence of (guess, feedback) tuples produced by the session.
History = Iterable[Tuple[Code, Feedback]]


def all_codes(rules: Rules) -> List[Code]:
    """Every code for these rules, in lexicographic palette order."""
    return list(itertools.product(rules.palette, repeat=rules.code_length))


def filter_candidates(codes: Iterable[Code], history: History) -> List[Code]:
    """
    Keep only codes that would produce exactly the recorded feedback for every
    (guess, feedback) in `history`. Order is preserved as in `codes`.
    """
    history = list(history)
    out: List[Code] = []

    for c in codes:
        # Candidate c plays the secret: score(guess, c), never the reverse.
        if all(score(g, c) == fb for g, fb in history):
            out.append(c)

    return out


class CandidateSpace:
    """Set of codes still consistent with every constraint applied so far."""

    def __init__(self, rules: Rules = DEFAULT_RULES, *, seed: int | None = None,
                 rng: random.Random | None = None):
        self.rules = rules
        self.rng = rng or random.Random(seed)
        self._codes: List[Code] = all_codes(rules)

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[Code]:
        return iter(list(self._codes))

    def __contains__(self, code) -> bool:
        return tuple(code) in self._codes

    def prune(self, guess: Code, feedback: Feedback) -> None:
        """
        Drop every candidate that disagrees with (guess, feedback).

        Raises InconsistentConstraints if nothing survives; the space is left
        empty in that case, so a later sample() fails as well.
        """
        before = len(self._codes)
        self._codes = filter_candidates(self._codes, [(tuple(guess), feedback)])
        if not self._codes:
            raise InconsistentConstraints(
                f"No candidate out of {before} is consistent with "
                f"guess={list(guess)} feedback={tuple(feedback)}"
            )

    def sample(self) -> Code:
        """Uniform random choice among the remaining candidates."""
        if not self._codes:
            raise EmptyCandidateSpace("Candidate space is empty")
        return self._codes[self.rng.randrange(len(self._codes))]
