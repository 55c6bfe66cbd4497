"""
Wordle-style feedback for a single (guess, secret) pair.

Conventions:
  - 'G'  : correct letter in the correct position
  - 'Y'  : letter present elsewhere in the secret
  - '-'  : letter absent (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     of the secret.
  2) Second pass marks yellows only if the letter still has remaining count.

Patterns also have a compact integer form, `pattern_code`, used to index the
243 possible outcomes: base 3, Correct=0 / Present=1 / Absent=2, first
position most significant. Ascending code order is the fixed iteration order
for entropy accumulation.
"""

from __future__ import annotations

from collections import Counter
from itertools import product
from typing import List, Literal, Sequence, Union

from .errors import InvalidFeedbackShape, InvalidWord

# Type alias for clarity; each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]

WORD_LENGTH = 5

CORRECT = "G"
PRESENT = "Y"
ABSENT = "-"
MARKS = (CORRECT, PRESENT, ABSENT)

ALL_CORRECT = CORRECT * WORD_LENGTH
N_PATTERNS = len(MARKS) ** WORD_LENGTH  # 243

_MARK_VALUE = {CORRECT: 0, PRESENT: 1, ABSENT: 2}

# Feedback arrives from outside in either the G/Y/- alphabet or the
# c(orrect)/m(isplaced)/w(rong) alphabet.
_FEEDBACK_ALIASES = {
    "g": CORRECT, "c": CORRECT,
    "y": PRESENT, "m": PRESENT,
    "-": ABSENT, "w": ABSENT,
}


def score(guess: str, secret: str) -> str:
    """
    Compute the feedback pattern for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret), else InvalidWord

    Examples:
      score("belle", "level") -> "-GYYY"
      score("allee", "level") -> "-YYGY"
    """
    guess = guess.strip().lower()
    secret = secret.strip().lower()
    if len(guess) != len(secret):
        raise InvalidWord(guess if len(guess) != WORD_LENGTH else secret)

    pattern = [ABSENT] * len(guess)

    # Pass 1: greens, and the secret's letters left over for yellows.
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            pattern[i] = CORRECT
        else:
            remaining[s] += 1

    # Pass 2: yellows are capped by the secret's true multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)


def pattern_code(pattern: str) -> int:
    """Integer index of a canonical pattern in [0, 243)."""
    code = 0
    for mark in pattern:
        code = code * 3 + _MARK_VALUE[mark]
    return code


def pattern_from_code(code: int) -> str:
    if not 0 <= code < N_PATTERNS:
        raise ValueError(f"pattern code out of range: {code}")
    marks: List[str] = []
    for _ in range(WORD_LENGTH):
        code, digit = divmod(code, 3)
        marks.append(MARKS[digit])
    return "".join(reversed(marks))


def all_patterns() -> List[str]:
    """All 243 patterns in ascending code order."""
    return ["".join(p) for p in product(MARKS, repeat=WORD_LENGTH)]


def parse_feedback(raw: Union[str, Sequence[str]]) -> str:
    """
    Validate externally supplied feedback and return its canonical pattern.

    Accepts a string or a sequence of single-character marks, case-insensitive,
    in the G/Y/- or C/M/W alphabet. Raises InvalidFeedbackShape otherwise.
    """
    if isinstance(raw, str):
        marks = list(raw.strip())
    else:
        try:
            marks = list(raw)
        except TypeError:
            raise InvalidFeedbackShape(raw, "expected a string or a sequence of marks") from None

    if len(marks) != WORD_LENGTH:
        raise InvalidFeedbackShape(raw, f"expected {WORD_LENGTH} marks, got {len(marks)}")

    out: List[str] = []
    for mark in marks:
        canon = _FEEDBACK_ALIASES.get(mark.lower()) if isinstance(mark, str) else None
        if canon is None:
            raise InvalidFeedbackShape(raw, f"unrecognized mark {mark!r}")
        out.append(canon)
    return "".join(out)
