# apps/cli/bench.py
"""
Self-play benchmark: computer maker vs computer breaker.

This script:
  1) Draws a reproducible set of random secrets from --seed.
  2) Plays every game with the random-consistent breaker, with a live
     progress indicator.
  3) Writes:
       - CSV:  per-game results + guess/feedback history columns
       - JSON: manifest with config, summary statistics, git commit
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from mastermind.engine import DEFAULT_RULES, Rules
from mastermind.game import draw_secrets, pretty_summary, run_case, summarize
from mastermind.game.harness import case_seed
from mastermind.game.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def run_games(secrets, *, rules: Rules, seed: int | None, progress: str = "off") -> List[dict]:
    """
    Play one game per secret, reporting progress on stderr.
    """
    mode = _progress_mode(progress)
    total = len(secrets)
    iterator = tqdm(secrets, ncols=80, desc="Playing", unit="game") if mode == "bar" else secrets

    results = []
    start = time.time()
    last_print = 0.0

    for idx, secret in enumerate(iterator, 1):
        results.append(run_case(secret, rules=rules, seed=case_seed(seed, idx)))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r{idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="Mastermind: computer vs computer benchmark")
    ap.add_argument("--games", type=int, default=100, help="number of games to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--pegs", type=int, default=DEFAULT_RULES.code_length)
    ap.add_argument("--colors", nargs="+", default=list(DEFAULT_RULES.palette))
    ap.add_argument("--max-turns", type=int, default=DEFAULT_RULES.max_turns)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    if args.games < 1:
        ap.error("--games must be >= 1")
    try:
        rules = DEFAULT_RULES.with_overrides(
            palette=args.colors, code_length=args.pegs, max_turns=args.max_turns)
    except ValueError as e:
        ap.error(str(e))

    print(f"Rules: {rules.code_length} pegs, {rules.num_colors} colors "
          f"({rules.space_size} codes), {rules.max_turns} turns")

    secrets = draw_secrets(args.games, rules=rules, seed=args.seed)
    results = run_games(secrets, rules=rules, seed=args.seed, progress=args.progress)

    summary = summarize(results)
    print(pretty_summary(summary))

    # Write outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=rules.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {
            "games": args.games,
            "seed": args.seed,
            "pegs": rules.code_length,
            "colors": list(rules.palette),
            "max_turns": rules.max_turns,
        },
        "summary": summary,
        "num_cases": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
