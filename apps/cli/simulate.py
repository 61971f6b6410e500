# apps/cli/simulate.py
"""
Autoplay many consecutive rounds through one session.

This script:
  1) Loads the word pool (bundled list, optionally the online lists).
  2) Lets the chosen solver play N rounds through a real SessionController.
  3) Writes:
       - CSV:  one row per round + guess/pattern history columns
       - JSON: manifest with config, pool sizes, per-source counts, win rate

Usage:
    python -m apps.cli.simulate --offline --rounds 200 --solver letter_freq
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from infiwordle.config import MAX_GUESSES
from infiwordle.datasets import DEFAULT_SOURCES, WordPool, extend_pool, parse_source_arg
from infiwordle.datasets.io import is_remote
from infiwordle.errors import EmptyPoolError
from infiwordle.game import SessionController
from infiwordle.harness import run_batch, write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from infiwordle.solvers import create_solver, get_solver_ids


def main(argv: List[str] | None = None) -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="infiwordle — autoplay rounds and report")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--rounds", type=int, default=100, help="number of rounds to play")
    ap.add_argument("--offline", action="store_true", help="skip the online word lists")
    ap.add_argument("--source", action="append", default=[],
                    help="extra word list PATH_OR_URL[@secret|@guess] (repeatable)")
    ap.add_argument("--keep-score-on-loss", action="store_true",
                    help="carry the score over a lost round (default: reset, i.e. win streak)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "plain", "off"], default="bar",
                    help="show run progress")
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Pool
    sources = [s for s in DEFAULT_SOURCES if not (args.offline and is_remote(s.location))]
    sources += [parse_source_arg(s) for s in args.source]
    pool = WordPool(rng=random.Random(args.seed))
    counts = extend_pool(pool, sources)
    print(f"pool: {len(pool.valid_secrets)} secrets, {len(pool.acceptable_guesses)} acceptable guesses")

    # 2) Session + solver
    try:
        session = SessionController(pool, max_guesses=MAX_GUESSES)
    except EmptyPoolError as e:
        print(f"Cannot start: {e}", file=sys.stderr)
        return 1
    solver = create_solver(args.solver)

    # 3) Play with progress
    bar = tqdm(total=args.rounds, ncols=80, desc="Playing", unit="round") \
        if args.progress == "bar" else None
    start = time.time()
    done = 0

    def tick() -> None:
        nonlocal done
        done += 1
        if bar is not None:
            bar.update(1)
        elif args.progress == "plain":
            elapsed = time.time() - start
            sys.stderr.write(f"\r[{done}/{args.rounds}] elapsed {elapsed:6.1f}s")
            sys.stderr.flush()

    results = run_batch(session, solver, args.rounds, seed=args.seed,
                        reset_on_loss=not args.keep_score_on_loss, progress=tick)
    if bar is not None:
        bar.close()
    elif args.progress == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    for r in results:
        r["solver_id"] = solver.id

    # 4) Outputs
    wins = sum(1 for r in results if r["success"])
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_guesses=MAX_GUESSES)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "sources": counts,
        "pool": {"secrets": len(pool.valid_secrets),
                 "acceptable": len(pool.acceptable_guesses)},
        "rounds": len(results),
        "wins": wins,
        "final_score": session.score,
        "solver_id": solver.id,
    }, str(manifest_path))

    print(f"won {wins}/{len(results)} | final score {session.score}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
