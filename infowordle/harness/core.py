"""
Simulation harness.

- secret_oracle:     feedback source that scores guesses against a known secret.
- scripted_feedback: feedback source that replays recorded patterns.
- run_case:          play one game with a Guesser against a secret.
- run_batch:         play many games, sharing one PatternTable between them.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from tqdm import tqdm

from infowordle.dictionary import Dictionary
from infowordle.engine.scoring import score
from infowordle.engine.table import PatternTable
from infowordle.engine.validation import canonical_word
from infowordle.guesser import Guesser, SolverOptions

log = logging.getLogger(__name__)


def secret_oracle(secret: str) -> Callable[[str], str]:
    """Feedback function for a game whose secret is known."""
    secret = canonical_word(secret)

    def feedback(guess: str) -> str:
        return score(guess, secret)

    return feedback


def scripted_feedback(patterns: Iterable) -> Callable[[str], object]:
    """Feedback function that returns `patterns` in order, one per guess."""
    it = iter(patterns)

    def feedback(guess: str):
        try:
            return next(it)
        except StopIteration:
            raise RuntimeError(f"no scripted feedback left for guess {guess!r}") from None

    return feedback


def run_case(
        dictionary: Dictionary,
        secret: str,
        *,
        legal_guesses: Optional[Sequence[str]] = None,
        options: Optional[SolverOptions] = None,
        table: Optional[PatternTable] = None,
) -> Dict:
    """
    Play one game until the Guesser wins, runs out of rounds, or fails.

    Returns:
        dict with keys:
            answer, outcome, success, guesses, time_ms, history, pool_size, error
    """
    secret = canonical_word(secret)
    if not dictionary.is_answer(secret):
        log.warning(f"secret {secret!r} is not among the dictionary answers; "
                    f"the game cannot be won")

    guesser = Guesser(dictionary, legal_guesses=legal_guesses, options=options, table=table)
    t0 = time.perf_counter()
    result = guesser.play(secret_oracle(secret))
    dt = (time.perf_counter() - t0) * 1000.0

    out = result.as_dict()
    out["answer"] = secret
    out["time_ms"] = dt
    return out


def run_batch(
        dictionary: Dictionary,
        secrets: Optional[Sequence[str]] = None,
        *,
        legal_guesses: Optional[Sequence[str]] = None,
        options: Optional[SolverOptions] = None,
        sample: Optional[int] = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. `secrets` defaults to every dictionary answer;
    if `sample` is given only the first K secrets are played.
    """
    options = options or SolverOptions()
    pool = list(secrets) if secrets is not None else dictionary.answer_words()
    if sample is not None:
        pool = pool[:sample]

    # The table depends only on the answer list, which smoothing leaves unchanged.
    table = PatternTable(dictionary.answer_words())

    out: List[Dict] = []
    cases = tqdm(pool, ncols=80, desc="Running", unit="game") if progress else pool
    for secret in cases:
        out.append(run_case(dictionary, secret, legal_guesses=legal_guesses,
                            options=options, table=table))

    if out:
        won = [r for r in out if r["success"]]
        mean = sum(r["guesses"] for r in won) / len(won) if won else float("nan")
        log.info(f"Played {len(out)} game(s): {len(won)} won, "
                 f"mean {mean:.3f} guesses when won, {len(table)} cached pattern rows")
    return out
