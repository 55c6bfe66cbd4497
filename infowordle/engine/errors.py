"""
Error taxonomy for the solver.

Every error derives from SolverError so callers can catch the whole family.
Errors carry enough context (pool size, last guess/feedback, round history)
to diagnose a game without re-running it. Nothing here is retried.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class SolverError(Exception):
    """Base class for every error raised by infowordle."""


class MalformedEntry(SolverError, ValueError):
    """A dictionary line that does not parse as `<word> <weight>`."""

    def __init__(self, message: str, *, source: str = "<lines>",
                 line_no: Optional[int] = None, line: Optional[str] = None):
        self.source = source
        self.line_no = line_no
        self.line = line
        where = source if line_no is None else f"{source}:{line_no}"
        detail = "" if line is None else f" (line: {line!r})"
        super().__init__(f"{where}: {message}{detail}")


class InvalidWord(SolverError, ValueError):
    """A word that is not exactly 5 ASCII letters."""

    def __init__(self, word):
        self.word = word
        super().__init__(f"not a 5-letter a-z word: {word!r}")


class InvalidFeedbackShape(SolverError, ValueError):
    """Feedback with the wrong length or unrecognized marks."""

    def __init__(self, feedback, reason: str):
        self.feedback = feedback
        super().__init__(f"invalid feedback {feedback!r}: {reason}")


class NoConsistentCandidates(SolverError):
    """
    Feedback eliminated every remaining candidate.

    Either the dictionary does not contain the secret or the feedback was
    misreported; the game cannot continue under the model.
    """

    def __init__(self, guess: str, pattern: str, *, pool_size: int,
                 history: Sequence[Tuple[str, str]] = ()):
        self.guess = guess
        self.pattern = pattern
        self.pool_size = pool_size
        self.history = tuple(history)
        super().__init__(
            f"no candidate is consistent with {guess} -> {pattern} "
            f"(pool had {pool_size} word(s) before filtering)"
        )


class TurnBudgetExceeded(SolverError):
    """The round budget ran out before the secret was found."""

    def __init__(self, max_rounds: int, *, pool_size: int,
                 history: Sequence[Tuple[str, str]] = ()):
        self.max_rounds = max_rounds
        self.pool_size = pool_size
        self.history = tuple(history)
        last = f"; last round {history[-1][0]} -> {history[-1][1]}" if history else ""
        super().__init__(
            f"not solved within {max_rounds} round(s), "
            f"{pool_size} candidate(s) left{last}"
        )


class GuesserStateError(SolverError, RuntimeError):
    """The stepping API was called in a state that does not allow it."""
