"""
Human players.

Both ask an input collaborator for a code: a zero-argument callable that
blocks until the person has typed something valid (the terminal re-prompts on
bad input, so the session only ever sees validated codes).
"""

from __future__ import annotations

from typing import Callable

from mastermind.engine import DEFAULT_RULES, Code, Feedback, Rules
from .base import CodeBreaker, CodeMaker, Operator, register

CodePrompt = Callable[[], Code]


@register
class HumanMaker(CodeMaker):
    operator = Operator.HUMAN
    name = "You"

    def __init__(self, rules: Rules = DEFAULT_RULES, *, prompt: CodePrompt,
                 seed: int | None = None):
        super().__init__(rules, seed=seed)
        self.prompt = prompt

    def generate_code(self) -> Code:
        return tuple(self.prompt())


@register
class HumanBreaker(CodeBreaker):
    operator = Operator.HUMAN
    name = "You"

    def __init__(self, rules: Rules = DEFAULT_RULES, *, prompt: CodePrompt,
                 seed: int | None = None):
        super().__init__(rules, seed=seed)
        self.prompt = prompt

    def guess(self) -> Code:
        return tuple(self.prompt())

    def log_evaluation(self, feedback: Feedback, guess: Code) -> None:
        # The person reads feedback off the rendered board.
        pass
