# affinity_suggester/core/errors.py
"""Exception taxonomy shared by the store, the analyzer and the engine."""


class SuggesterError(Exception):
    """Base class for every error raised by affinity_suggester."""


class InvalidArgumentError(SuggesterError, ValueError):
    """Raised when a configuration value is out of range (e.g. n-gram order < 1)."""


class InvalidStateError(SuggesterError, RuntimeError):
    """
    Raised when an operation is not valid for the current state:
    training with zero transactions, or an analysis whose implication
    points at an n-gram that is missing from the counts.
    """


class CorpusLoadError(SuggesterError, OSError):
    """Raised by the corpus loader when a text file cannot be found or read."""
