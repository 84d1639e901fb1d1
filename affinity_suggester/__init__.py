"""
affinity_suggester

Next-word suggestions from n-gram counts and affinity analysis
(confidence / support of premise => conclusion rules).
"""

from .context import DEFAULT_STOP_WORDS, default_sanitizer
from .core import (
    CorpusLoadError,
    Implication,
    InvalidArgumentError,
    InvalidStateError,
    NGram,
    NGramStore,
    Result,
    StoreConfig,
    SuggesterConfig,
    SuggesterError,
    SuggestionEngine,
    analyze,
)

__all__ = [
    "DEFAULT_STOP_WORDS",
    "default_sanitizer",
    "CorpusLoadError",
    "Implication",
    "InvalidArgumentError",
    "InvalidStateError",
    "NGram",
    "NGramStore",
    "Result",
    "StoreConfig",
    "SuggesterConfig",
    "SuggesterError",
    "SuggestionEngine",
    "analyze",
]

__version__ = "0.1.0"
