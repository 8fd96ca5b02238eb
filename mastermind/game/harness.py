"""
Self-play harness primitives.

- run_case:     one game, computer maker with a fixed secret vs computer breaker.
- draw_secrets: reproducible list of random secrets.
- run_batch:    many games in sequence.
- summarize:    aggregate guess-count statistics over a batch.

These functions are UI-agnostic: the bench CLI wraps them with progress
output, tests call them directly.
"""

from __future__ import annotations

import time
from typing import Dict, List

import numpy as np

from mastermind.engine import DEFAULT_RULES, Code, Rules
from mastermind.players import ComputerBreaker, ComputerMaker
from .session import GameSession


class _FixedSecretMaker(ComputerMaker):
    """Computer maker that always hands out a predetermined secret."""

    def __init__(self, secret: Code, rules: Rules = DEFAULT_RULES):
        super().__init__(rules)
        self._secret = tuple(secret)

    def generate_code(self) -> Code:
        return self._secret


def run_case(secret: Code, *, rules: Rules = DEFAULT_RULES, seed: int | None = None) -> Dict:
    """
    Play one game until the breaker wins or the turn budget is exhausted.

    Args:
        secret: the hidden code for this case
        rules:  palette, peg count and turn budget
        seed:   RNG seed for the breaker's sampling

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)]), secret (Code),
            candidates_left (int)
    """
    maker = _FixedSecretMaker(secret, rules)
    breaker = ComputerBreaker(rules, seed=seed)
    session = GameSession(maker, breaker, rules)

    t0 = time.perf_counter()
    result = session.play()
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": result.won,
        "guesses": result.guesses,
        "time_ms": dt,
        "history": result.history,
        "secret": result.secret,
        "candidates_left": len(breaker.candidates),
    }


def draw_secrets(games: int, *, rules: Rules = DEFAULT_RULES, seed: int | None = None) -> List[Code]:
    maker = ComputerMaker(rules, seed=seed)
    return [maker.generate_code() for _ in range(games)]


def case_seed(base_seed: int | None, idx: int) -> int | None:
    """Per-game seed: reproducible across runs, distinct across games."""
    return None if base_seed is None else base_seed + idx


def run_batch(games: int, *, rules: Rules = DEFAULT_RULES, seed: int | None = None) -> List[Dict]:
    """
    Run `games` self-play games back-to-back with random secrets.

    Each case's breaker seed is derived from the base seed (seed + index);
    secrets come from a separate maker seeded with the base seed.
    """
    out: List[Dict] = []
    for idx, secret in enumerate(draw_secrets(games, rules=rules, seed=seed), start=1):
        out.append(run_case(secret, rules=rules, seed=case_seed(seed, idx)))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: win rate and guess-count statistics over won games.

    Returns zeros for an empty batch (or one without any win) rather than NaN.
    """
    n = len(results)
    if n == 0:
        return {"games": 0, "wins": 0, "win_rate": 0.0,
                "mean_guesses": 0.0, "median_guesses": 0.0, "max_guesses": 0,
                "mean_time_ms": 0.0}

    success = np.array([bool(r["success"]) for r in results])
    guesses = np.array([int(r["guesses"]) for r in results])
    times = np.array([float(r["time_ms"]) for r in results])
    won = guesses[success]

    return {
        "games": n,
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else 0.0,
        "median_guesses": float(np.median(won)) if won.size else 0.0,
        "max_guesses": int(won.max()) if won.size else 0,
        "mean_time_ms": float(times.mean()),
    }


def pretty_summary(summary: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        games=100 | wins=100 (100.0%) | guesses mean=4.63 median=5.0 max=7 | 3.1 ms/game
    """
    return (
        f"games={summary['games']} | wins={summary['wins']} "
        f"({100.0 * summary['win_rate']:.1f}%) "
        f"| guesses mean={summary['mean_guesses']:.2f} "
        f"median={summary['median_guesses']:.1f} max={summary['max_guesses']} "
        f"| {summary['mean_time_ms']:.1f} ms/game"
    )
