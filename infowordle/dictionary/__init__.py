from .loader import Dictionary, Entry, load, parse_entry
from .priors import sigmoid_weights

load_dictionary = load

__all__ = ["Dictionary", "Entry", "load", "load_dictionary", "parse_entry", "sigmoid_weights"]
