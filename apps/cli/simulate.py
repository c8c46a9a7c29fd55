# apps/cli/simulate.py
"""
CLI entry point for guesser-vs-strategy simulations.

This script:
  1) Validates the dictionary (prints count + SHA).
  2) Loads it and instantiates the requested guesser.
  3) Plays a batch of games with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, wordlist hash, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from evilwordle.config import ADVERSARIAL, MODES, GameConfig
from evilwordle.datasets import DEFAULT_WORDLIST, load_wordlist, pretty_summary, validate_wordlist
from evilwordle.guessers import create_guesser, get_guesser_ids
from evilwordle.harness import run_batch, summarize
from evilwordle.harness.core import DEFAULT_TURN_CAP
from evilwordle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    guesser_choices = ", ".join(get_guesser_ids())

    ap = argparse.ArgumentParser(description="evilwordle: simulate automated players")
    ap.add_argument("--guesser", default="minimax",
                    help=f"guesser id (one of: {guesser_choices})")
    ap.add_argument("--mode", choices=MODES, default=ADVERSARIAL, help="response strategy")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST), help="dictionary file")
    ap.add_argument("--games", type=int, default=20, help="number of games to play")
    ap.add_argument("--max-guesses", type=int, help="guess limit per game")
    ap.add_argument("--turn-cap", type=int, default=DEFAULT_TURN_CAP,
                    help="stop unbounded games after this many guesses")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only when stderr is a terminal)")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and load the dictionary
    rep = validate_wordlist(args.N, args.wordlist)
    print(pretty_summary(rep))
    words = load_wordlist(args.wordlist, args.N)

    # 2) Guesser + game config
    guesser = create_guesser(args.guesser)
    kwargs = {} if args.max_guesses is None else {"max_guesses": args.max_guesses}
    config = GameConfig(mode=args.mode, word_length=args.N, seed=args.seed, **kwargs)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    wrap = None
    if show_bar:
        def wrap(it):
            return tqdm(it, total=args.games, ncols=80, desc=args.guesser, unit="game")

    # 3) Play; each game gets its own derived seed
    results = run_batch(guesser, words, games=args.games, config=config, seed=args.seed,
                        turn_cap=args.turn_cap, wrap=wrap)

    summary = summarize(results)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
    }, str(manifest_path))

    print(f"games={summary['games']} win_rate={summary['win_rate']:.3f} "
          f"mean={summary['mean_guesses']:.2f} median={summary['median_guesses']:.1f} "
          f"p90={summary['p90_guesses']:.1f} max={summary['max_guesses']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
