"""
Word shape checks.

A Word is exactly 5 ASCII letters, compared case-insensitively and stored in
lowercase. `canonical_word` is the single place that enforces this; every
other module relies on it rather than re-checking.
"""

import re
from typing import Iterable

from .errors import InvalidWord
from .scoring import WORD_LENGTH

_WORD_RE = re.compile(rf"[a-z]{{{WORD_LENGTH}}}")


def canonical_word(word) -> str:
    """Return `word` stripped and lowercased, or raise InvalidWord."""
    if not isinstance(word, str):
        raise InvalidWord(word)
    w = word.strip().lower()
    if not _WORD_RE.fullmatch(w):
        raise InvalidWord(word)
    return w


def is_word(word) -> bool:
    try:
        canonical_word(word)
    except InvalidWord:
        return False
    return True


def validate_guess(word, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is a well-formed word present in `allowed`.

    `allowed` may be any iterable; pass a set when calling in a loop.
    """
    if not is_word(word):
        return False
    w = canonical_word(word)
    if isinstance(allowed, (set, frozenset)):
        return w in allowed
    return w in {a.strip().lower() for a in allowed}
