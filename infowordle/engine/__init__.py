from .scoring import score, pattern_code, pattern_from_code, all_patterns, parse_feedback
from .constraints import filter_candidates, is_consistent
from .validation import canonical_word, validate_guess
from .pool import CandidatePool
from .entropy import GuessScore, rank, expected_information
from .table import PatternTable

__all__ = [
    "score", "pattern_code", "pattern_from_code", "all_patterns", "parse_feedback",
    "filter_candidates", "is_consistent", "canonical_word", "validate_guess",
    "CandidatePool", "GuessScore", "rank", "expected_information", "PatternTable",
]
