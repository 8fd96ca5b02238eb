# apps/cli/play.py
"""
Interactive Mastermind in the terminal.

This script:
  1) Builds the rules from the command line (palette, pegs, turn budget).
  2) Asks whether you want to be the code MAKER or the code BREAKER.
  3) Plays one game against the computer, rendering the board after every
     guess, and announces the winner (or the turn-limit loss).
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, List

from colorama import init as colorama_init

from mastermind.engine import DEFAULT_RULES, MastermindError, Rules
from mastermind.game import GameResult, GameSession
from mastermind.players import Operator, Role, create_player
from mastermind.ui import Terminal


def build_session(role: Role, rules: Rules, terminal: Terminal, *,
                  seed: int | None = None) -> GameSession:
    """
    Wire players and renderer for a human playing `role` against the computer.
    """
    if role is Role.BREAKER:
        maker = create_player(Role.MAKER, Operator.COMPUTER, rules, seed=seed)
        breaker = create_player(Role.BREAKER, Operator.HUMAN, rules,
                                prompt=lambda: terminal.prompt_code("guess"))

        def on_turn(record, history):
            terminal.render_board(history)
    else:
        maker = create_player(Role.MAKER, Operator.HUMAN, rules,
                              prompt=lambda: terminal.prompt_code("secret"))
        breaker = create_player(Role.BREAKER, Operator.COMPUTER, rules, seed=seed)

        def on_turn(record, history):
            terminal.announce_computer_guess(record.guess)
            terminal.render_board(history)

    return GameSession(maker, breaker, rules, on_turn=on_turn)


def run_game(role: Role, rules: Rules, terminal: Terminal, *, seed: int | None = None,
             delay: float = 0.0, sleep: Callable[[float], None] = time.sleep) -> GameResult:
    """
    Play one game to the end and print the outcome.
    """
    session = build_session(role, rules, terminal, seed=seed)
    session.setup()

    computer_breaks = role is Role.MAKER
    while not session.is_over:
        session.play_turn()
        # Pacing only; the session itself never waits.
        if computer_breaks and delay > 0 and not session.is_over:
            sleep(delay)

    result = session.result()
    if result.won:
        if computer_breaks:
            terminal.computer_win()
        else:
            terminal.human_win()
    else:
        terminal.guess_limit(result.secret)
    return result


def build_rules(args: argparse.Namespace) -> Rules:
    return DEFAULT_RULES.with_overrides(
        palette=args.colors, code_length=args.pegs, max_turns=args.max_turns)


def make_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Mastermind: play against the computer")
    ap.add_argument("--role", choices=["maker", "breaker"], type=str.lower,
                    help="skip the role prompt (you are the code MAKER or BREAKER)")
    ap.add_argument("--seed", type=int, help="RNG seed for the computer player")
    ap.add_argument("--delay", type=float, default=1.0,
                    help="seconds to pause between computer guesses")
    ap.add_argument("--pegs", type=int, default=DEFAULT_RULES.code_length,
                    help="number of pegs in a code")
    ap.add_argument("--colors", nargs="+", default=list(DEFAULT_RULES.palette),
                    help="palette color names")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_RULES.max_turns,
                    help="guesses allowed before the breaker loses")
    ap.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args and play one game. Returns the process exit code.
    """
    ap = make_parser()
    args = ap.parse_args(argv)

    try:
        rules = build_rules(args)
    except ValueError as e:
        ap.error(str(e))

    if not args.no_color:
        colorama_init()
    terminal = Terminal(rules, color=not args.no_color)

    try:
        terminal.welcome()
        role = Role(args.role.upper()) if args.role else terminal.prompt_role()
        run_game(role, rules, terminal, seed=args.seed, delay=args.delay)
    except (KeyboardInterrupt, EOFError):
        print("\nExiting game.")
        return 130
    except MastermindError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
