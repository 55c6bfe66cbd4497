from .core import Guesser, GuesserState
from .options import DEFAULT_MAX_ROUNDS, SolverOptions
from .result import GameResult, Outcome, Round

__all__ = [
    "Guesser", "GuesserState", "SolverOptions", "DEFAULT_MAX_ROUNDS",
    "GameResult", "Outcome", "Round",
]
