from .classifier import DeterministicClassifier, classify
from .guess import DeterministicGuess

__all__ = [
    "DeterministicClassifier",
    "DeterministicGuess",
    "classify",
]
