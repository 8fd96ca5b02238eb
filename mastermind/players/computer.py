"""
Computer players.

Maker:
  - N colors drawn independently and uniformly from the palette (repetition
    allowed).

Breaker ("random consistent"):
  - Keep a CandidateSpace of every code still consistent with all feedback.
  - Guess uniformly at random from it; prune it with each piece of feedback.

Notes:
  - Deterministic across runs with the same seed (via BasePlayer.rng).
  - Always guessing a consistent code guarantees a win within P ** N guesses;
    it makes no attempt to maximize information per guess.
"""

from __future__ import annotations

from mastermind.engine import DEFAULT_RULES, CandidateSpace, Code, Feedback, Rules
from .base import CodeBreaker, CodeMaker, Operator, register


@register
class ComputerMaker(CodeMaker):
    operator = Operator.COMPUTER
    name = "Computer"

    def generate_code(self) -> Code:
        return tuple(self.rng.choice(self.rules.palette) for _ in range(self.rules.code_length))


@register
class ComputerBreaker(CodeBreaker):
    operator = Operator.COMPUTER
    name = "Computer"

    def __init__(self, rules: Rules = DEFAULT_RULES, *, seed: int | None = None):
        super().__init__(rules, seed=seed)
        # Shares the player's RNG so one seed reproduces the whole game.
        self.candidates = CandidateSpace(self.rules, rng=self.rng)
        self.last_guess: Code | None = None

    def guess(self) -> Code:
        code = self.candidates.sample()
        self.last_guess = code
        return code

    def log_evaluation(self, feedback: Feedback, guess: Code) -> None:
        self.candidates.prune(guess, feedback)
