"""
Terminal front end: prompts, messages and the colored board.

The game core never talks to the terminal directly. It receives validated
codes from `prompt_code` (through the human players) and reports finished
turns to `render_board`. Input and output are injectable so tests can drive
a Terminal with a list of canned lines and a StringIO.
"""

from __future__ import annotations

import sys
from typing import Callable, List, Sequence, TextIO, Tuple

from colorama import Fore, Style

from mastermind.engine import DEFAULT_RULES, Code, Feedback, InvalidInput, Rules, parse_code
from mastermind.engine.scoring import EXACT, PARTIAL
from mastermind.players import Role

PEG = "●"
EXACT_PIN = "●"
PARTIAL_PIN = "○"

# peg kind -> (symbol, color)
_PIN_STYLE = {
    EXACT: (EXACT_PIN, "red"),
    PARTIAL: (PARTIAL_PIN, "white"),
}


class Terminal:
    def __init__(self, rules: Rules = DEFAULT_RULES, *, input_fn: Callable[[str], str] = input,
                 output: TextIO | None = None, color: bool = True):
        self.rules = rules
        self.input_fn = input_fn
        self.output = output or sys.stdout
        self.color = color

    # ---- low-level helpers ----

    def say(self, text: str = "") -> None:
        print(text, file=self.output)

    def paint(self, text: str, color_name: str) -> str:
        """Wrap `text` in the ANSI color named like the palette entry (if any)."""
        if not self.color:
            return text
        fore = getattr(Fore, color_name.upper(), None)
        if fore is None:
            return text
        return f"{fore}{text}{Style.RESET_ALL}"

    def ask(self, prompt: str) -> str:
        return self.input_fn(prompt).strip()

    # ---- rendering ----

    def render_palette(self) -> str:
        line = " ".join(self.paint(c, c) for c in self.rules.palette)
        self.say(line)
        return line

    def format_feedback(self, feedback: Feedback) -> str:
        return " ".join(self.paint(*_PIN_STYLE[peg]) for peg in feedback.pegs())

    def format_row(self, guess: Code, feedback: Feedback) -> str:
        pegs = " ".join(f" {self.paint(PEG, c)} " for c in guess)
        return f"{pegs} | {self.format_feedback(feedback)}"

    def render_board(self, history: Sequence[Tuple[Code, Feedback]]) -> List[str]:
        rows = [self.format_row(g, fb) for g, fb in history]
        for r in rows:
            self.say(r)
        return rows

    # ---- prompts ----

    def prompt_role(self) -> Role:
        """Ask MAKER or BREAKER until one of them is typed."""
        while True:
            self.say("Would you like to be the code MAKER or code BREAKER?")
            answer = self.ask("> ").upper()
            if answer in (Role.MAKER.value, Role.BREAKER.value):
                return Role(answer)
            self.say('Please type "MAKER" or "BREAKER"')

    def prompt_code(self, purpose: str = "guess") -> Code:
        """Read codes until one parses; the caller only ever sees a valid code."""
        n = self.rules.code_length
        if purpose == "secret":
            header = f"Please enter a {n}-color code using the following {self.rules.num_colors} colors:"
        else:
            header = f"Please guess {n} colors from the list below:"

        while True:
            self.say(header)
            self.render_palette()
            try:
                return parse_code(self.ask("> "), self.rules)
            except InvalidInput as e:
                self.say(f"Invalid input: {e}")

    # ---- messages ----

    def welcome(self) -> None:
        n = self.rules.code_length
        self.say("Welcome to Mastermind!")
        self.say(f"You will either make or guess a {n}-color code.")
        self.say(f"With each guess, you will see up to {n} dots to the right of the board.")
        self.say(f"A {self.paint('red', 'red')} dot means a color is in the correct position,")
        self.say(f"and a {self.paint('white', 'white')} dot means that a color exists in the code "
                 f"but is in the incorrect position.")

    def announce_computer_guess(self, guess: Code) -> None:
        self.say("The computer guessed " + " ".join(self.paint(c, c) for c in guess))

    def human_win(self) -> None:
        self.say("You won!")

    def computer_win(self) -> None:
        self.say("The computer wins!")

    def guess_limit(self, secret: Code | None = None) -> None:
        self.say(f"Game over, {self.rules.max_turns} guesses!")
        if secret is not None:
            self.say("The secret code was: " + " ".join(self.paint(c, c) for c in secret))
