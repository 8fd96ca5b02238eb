"""
Turn state machine for one game of Mastermind.

    SETUP -> IN_PROGRESS -> WON | EXHAUSTED

- SETUP:       the maker supplies the secret (write-once).
- IN_PROGRESS: each turn asks the breaker for a guess, scores it against the
               secret, records (guess, feedback), reports the turn to the
               observer (the board renderer), then hands the feedback back to
               the breaker via log_evaluation.
- WON:         the last feedback was all exact pegs.
- EXHAUSTED:   the turn counter passed max_turns without a win.

The session owns scoring. Renderers receive already-computed feedback and
never call back into the session; the secret is only readable once the game
is over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from mastermind.engine import (
    DEFAULT_RULES,
    Code,
    Feedback,
    GameStateError,
    InvalidCode,
    InvalidCodeLength,
    Rules,
    is_win,
    score,
    validate_code,
)
from mastermind.players import CodeBreaker, CodeMaker


class GameState(str, Enum):
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    WON = "won"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.EXHAUSTED)


@dataclass(frozen=True)
class TurnRecord:
    turn: int
    guess: Code
    feedback: Feedback


@dataclass
class GameResult:
    state: GameState
    secret: Code
    history: List[Tuple[Code, Feedback]] = field(default_factory=list)

    @property
    def won(self) -> bool:
        return self.state is GameState.WON

    @property
    def guesses(self) -> int:
        return len(self.history)


TurnObserver = Callable[[TurnRecord, List[Tuple[Code, Feedback]]], None]


class GameSession:
    def __init__(self, maker: CodeMaker, breaker: CodeBreaker, rules: Rules = DEFAULT_RULES,
                 *, on_turn: Optional[TurnObserver] = None):
        self.rules = rules
        self.maker = maker
        self.breaker = breaker
        self.on_turn = on_turn

        self.state = GameState.SETUP
        self.turn = 1
        self.history: List[Tuple[Code, Feedback]] = []
        self._secret: Code | None = None

    # ---- state queries ----

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    def remaining_turns(self) -> int:
        return max(0, self.rules.max_turns - self.turn + 1)

    @property
    def secret(self) -> Code:
        return self.reveal_secret()

    def reveal_secret(self) -> Code:
        """Return the secret; only allowed once the game has ended."""
        if not self.is_over:
            raise GameStateError("The secret is hidden until the game is over")
        return self._secret

    # ---- transitions ----

    def _checked(self, code, who: str) -> Code:
        code = tuple(code)
        if len(code) != self.rules.code_length:
            raise InvalidCodeLength(
                f"{who} produced {len(code)} pegs; rules need {self.rules.code_length}")
        if not validate_code(code, self.rules):
            unknown = [c for c in code if c not in self.rules.palette]
            raise InvalidCode(f"{who} used colors outside the palette: {unknown}")
        return code

    def setup(self) -> None:
        """Ask the maker for the secret and start the game."""
        if self.state is not GameState.SETUP:
            raise GameStateError(f"setup() called in state {self.state.value}")
        self._secret = self._checked(self.maker.generate_code(), "maker")
        self.state = GameState.IN_PROGRESS

    def play_turn(self) -> TurnRecord:
        """Run exactly one guess/feedback cycle."""
        if self.state is not GameState.IN_PROGRESS:
            raise GameStateError(f"play_turn() called in state {self.state.value}")

        guess = self._checked(self.breaker.guess(), "breaker")
        feedback = score(guess, self._secret)
        self.history.append((guess, feedback))
        record = TurnRecord(self.turn, guess, feedback)

        if self.on_turn is not None:
            self.on_turn(record, list(self.history))

        # Feedback always comes from the real secret, never from the breaker.
        self.breaker.log_evaluation(feedback, guess)

        self.turn += 1
        if is_win(feedback, self.rules.code_length):
            self.state = GameState.WON
        elif self.turn > self.rules.max_turns:
            self.state = GameState.EXHAUSTED

        return record

    def play(self) -> GameResult:
        """Run setup (if needed) and turns until the game ends."""
        if self.state is GameState.SETUP:
            self.setup()
        while not self.is_over:
            self.play_turn()
        return self.result()

    def result(self) -> GameResult:
        if not self.is_over:
            raise GameStateError("result() is only available once the game is over")
        return GameResult(state=self.state, secret=self._secret, history=list(self.history))
