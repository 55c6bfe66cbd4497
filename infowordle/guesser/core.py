"""
Guesser: the per-game control loop.

States:
  START -> AWAITING_FEEDBACK -> FILTERING -> AWAITING_FEEDBACK | WON | EXHAUSTED | FAILED

Each round the Guesser picks a guess (fixed opening, forced last candidate,
or rank + policy + tie-break), waits for the feedback pattern, and narrows its
candidate pool. Rounds are strictly sequential; only the ranking inside a
round fans out to worker threads.

Two ways to drive it:
  - stepping: next_guess() / observe(feedback), for an external game;
  - play(feedback_fn): runs the loop to the end and returns a GameResult.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from infowordle.dictionary import Dictionary
from infowordle.engine.entropy import GuessScore, rank
from infowordle.engine.errors import (
    GuesserStateError,
    NoConsistentCandidates,
    SolverError,
    TurnBudgetExceeded,
)
from infowordle.engine.pool import CandidatePool
from infowordle.engine.scoring import ALL_CORRECT, parse_feedback
from infowordle.engine.table import PatternTable
from infowordle.engine.validation import canonical_word, validate_guess
from infowordle.solvers import RankContext, create_policy, get_tie_break
from .options import SolverOptions
from .result import GameResult, Outcome, Round

log = logging.getLogger(__name__)

FeedbackFn = Callable[[str], object]


class GuesserState(str, Enum):
    START = "start"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    WON = "won"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


_TERMINAL = {
    GuesserState.WON: Outcome.WON,
    GuesserState.EXHAUSTED: Outcome.EXHAUSTED,
    GuesserState.FAILED: Outcome.FAILED,
}


def _dedupe(words: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for w in words:
        w = canonical_word(w)
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


class Guesser:
    """
    Plays one game against one secret. Create a new Guesser per game; the
    candidate pool is never shared between games. A PatternTable may be shared
    between Guessers over the same dictionary.
    """

    def __init__(self, dictionary: Dictionary, *,
                 legal_guesses: Optional[Sequence[str]] = None,
                 options: Optional[SolverOptions] = None,
                 table: Optional[PatternTable] = None):
        self.options = options or SolverOptions()
        if self.options.prior == "sigmoid":
            dictionary = dictionary.smoothed()
        self.dictionary = dictionary

        if legal_guesses is None:
            self.legal_guesses = dictionary.all_words()
        else:
            self.legal_guesses = _dedupe(legal_guesses)
        if not self.legal_guesses:
            raise ValueError("legal guess set is empty")

        self.opening: Optional[str] = None
        if self.options.opening is not None:
            if not validate_guess(self.options.opening, set(self.legal_guesses)):
                raise ValueError(f"opening word {self.options.opening!r} is not a legal guess")
            self.opening = canonical_word(self.options.opening)

        if table is None:
            table = PatternTable(dictionary.answer_words())
        elif table.answers != tuple(dictionary.answer_words()):
            raise ValueError("pattern table was built for a different answer list")
        self.table = table

        self.policy = create_policy(self.options.policy)
        self._tie_key = get_tie_break(self.options.tie_break)
        self._prior: Dict[str, float] = dictionary.weights()

        self.pool = CandidatePool.from_dictionary(dictionary)
        self.history: List[Round] = []
        self.state = GuesserState.START
        self.error: Optional[SolverError] = None
        self.last_ranking: Dict[str, GuessScore] = {}
        self._pending: Optional[str] = None

    # ---- state ----

    @property
    def rounds_used(self) -> int:
        return len(self.history)

    @property
    def finished(self) -> bool:
        return self.state in _TERMINAL

    # ---- stepping API ----

    def next_guess(self) -> str:
        """
        The guess to submit this round. Calling it again before observe()
        returns the same word.
        """
        if self.finished:
            if self.error is not None:
                raise self.error
            raise GuesserStateError(f"game is over ({self.state.value})")
        if self.state is GuesserState.AWAITING_FEEDBACK:
            return self._pending

        guess = self._choose()
        self._pending = guess
        self.state = GuesserState.AWAITING_FEEDBACK
        return guess

    def observe(self, feedback) -> GuesserState:
        """
        Record the feedback for the pending guess and narrow the pool.

        Raises:
          InvalidFeedbackShape   : feedback rejected; nothing changes
          NoConsistentCandidates : the pool emptied; the game is FAILED
        """
        if self.state is not GuesserState.AWAITING_FEEDBACK:
            raise GuesserStateError(f"no guess is awaiting feedback ({self.state.value})")
        pattern = parse_feedback(feedback)

        guess = self._pending
        self._pending = None
        self.history.append(Round(guess, pattern))

        if pattern == ALL_CORRECT:
            self.state = GuesserState.WON
            log.debug(f"round {self.rounds_used}: {guess} -> {pattern}, solved")
            return self.state

        self.state = GuesserState.FILTERING
        try:
            self.pool = self.pool.filter(guess, pattern)
        except NoConsistentCandidates as exc:
            exc.history = tuple(self.history)
            self.state = GuesserState.FAILED
            self.error = exc
            log.debug(f"round {self.rounds_used}: {exc}")
            raise

        log.debug(f"round {self.rounds_used}: {guess} -> {pattern}, "
                  f"{len(self.pool)} candidate(s), {self.pool.entropy():.2f} bits left")

        if self.rounds_used >= self.options.max_rounds:
            self.state = GuesserState.EXHAUSTED
            self.error = TurnBudgetExceeded(self.options.max_rounds,
                                            pool_size=len(self.pool),
                                            history=self.history)
        return self.state

    # ---- whole game ----

    def play(self, feedback: FeedbackFn) -> GameResult:
        """
        Run the game to the end. `feedback(guess)` must return the pattern the
        game reports for `guess`.
        """
        while not self.finished:
            guess = self.next_guess()
            try:
                self.observe(feedback(guess))
            except NoConsistentCandidates:
                break
        return self.result()

    def result(self) -> GameResult:
        if not self.finished:
            raise GuesserStateError(f"game is still running ({self.state.value})")
        outcome = _TERMINAL[self.state]
        return GameResult(
            outcome=outcome,
            history=tuple(self.history),
            rounds_used=self.rounds_used,
            pool_size=len(self.pool),
            word=self.history[-1].guess if outcome is Outcome.WON else None,
            error=self.error,
        )

    # ---- selection ----

    def _choose(self) -> str:
        if self.opening is not None and not self.history and self.pool.is_initial:
            return self.opening
        if len(self.pool) == 1:
            return self.pool.words[0]

        legal = self.pool.words if self.options.hard_mode else self.legal_guesses
        self.last_ranking = rank(
            legal, self.pool,
            prior=self._prior,
            table=self.table,
            workers=self.options.workers,
            chunk_size=self.options.chunk_size,
        )
        ctx = RankContext(
            round_index=self.rounds_used,
            pool_size=len(self.pool),
            pool_entropy=self.pool.entropy(),
        )
        guess = self.policy.select(self.last_ranking, ctx, self._tie_key)
        best = self.last_ranking[guess]
        log.debug(f"round {self.rounds_used + 1}: {guess} ({best.entropy:.3f} bits, "
                  f"candidate={best.is_candidate}) among {len(legal)} guesses")
        return guess
