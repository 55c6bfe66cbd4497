# apps/cli/run.py
"""
CLI entry point for running infowordle simulations.

This script:
  1) Loads the dictionary (answers with prior weights, optional guess-only list).
  2) Either plays a single game against --secret and prints every round, or
  3) runs a batch of games with a progress bar and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with options, dictionary hashes, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from infowordle.dictionary import load_dictionary
from infowordle.engine.errors import SolverError
from infowordle.guesser import DEFAULT_MAX_ROUNDS, SolverOptions
from infowordle.harness import run_batch, run_case
from infowordle.harness.io import (
    git_commit_or_unknown,
    sha256_file,
    timestamp_id,
    write_csv,
    write_manifest,
)
from infowordle.solvers import DEFAULT_POLICY, DEFAULT_TIE_BREAK, get_policy_ids, get_tie_break_ids

log = logging.getLogger("infowordle.cli")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="infowordle: entropy solver simulations")
    ap.add_argument("--dictionary", required=True,
                    help="answers table, one '<word> <weight>' per line")
    ap.add_argument("--valids", help="guess-only words, one per line")
    ap.add_argument("--secret", help="play a single game against this word and print it")
    ap.add_argument("--policy", default=DEFAULT_POLICY, choices=get_policy_ids(),
                    help="ranking policy")
    ap.add_argument("--tie-break", default=DEFAULT_TIE_BREAK, choices=get_tie_break_ids(),
                    help="tie-break among equally good guesses")
    ap.add_argument("--opening", help="fixed first guess")
    ap.add_argument("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS,
                    help="turn budget per game")
    ap.add_argument("--prior", choices=["raw", "sigmoid"], default="raw",
                    help="use raw weights or sigmoid-smoothed ones")
    ap.add_argument("--hard-mode", action="store_true",
                    help="only guess words still consistent with the feedback")
    ap.add_argument("--workers", type=int, default=1, help="threads used for ranking")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar for batch runs")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def _play_single(dictionary, secret: str, options: SolverOptions) -> int:
    r = run_case(dictionary, secret, options=options)
    for i, (guess, patt) in enumerate(r["history"], 1):
        print(f"{i}. {guess} {patt}")
    if r["success"]:
        print(f"Solved '{r['answer']}' in {r['guesses']} ({r['time_ms']:.1f} ms)")
        return 0
    print(f"Not solved ({r['outcome']}): {r['error']}")
    return 1


def main(argv=None) -> int:
    """
    Parse CLI args, load the dictionary, run the game(s), and write outputs.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        options = SolverOptions(
            max_rounds=args.max_rounds,
            opening=args.opening,
            policy=args.policy,
            tie_break=args.tie_break,
            prior=args.prior,
            hard_mode=args.hard_mode,
            workers=args.workers,
        )
        dictionary = load_dictionary(args.dictionary, valids=args.valids)
    except (SolverError, ValueError, FileNotFoundError) as exc:
        log.error(str(exc))
        return 2

    if args.secret:
        try:
            return _play_single(dictionary, args.secret, options)
        except SolverError as exc:
            log.error(str(exc))
            return 2

    # Choose cases (deterministic sample by seed)
    cases = dictionary.answer_words()
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]

    results = run_batch(dictionary, cases, options=options,
                        progress=args.progress == "bar" and sys.stderr.isatty())
    for r in results:
        r["policy"] = options.policy  # stamp id for downstream tools

    won = [r for r in results if r["success"]]
    mean = sum(r["guesses"] for r in won) / len(won) if won else float("nan")
    print(f"policy={options.policy} | games={len(results)} | won={len(won)} "
          f"| mean guesses={mean:.4f}")

    # Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_rounds=options.max_rounds)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "options": options.as_dict(),
        "dictionary": {
            "path": args.dictionary,
            "sha256": sha256_file(args.dictionary),
            "answers": len(dictionary.answer_words()),
            "valids_path": args.valids,
            "valids_sha256": sha256_file(args.valids) if args.valids else None,
            "guess_only": len(dictionary.valid_words()),
        },
        "num_cases": len(results),
        "summary": {"won": len(won), "mean_guesses_when_won": mean if won else None},
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
