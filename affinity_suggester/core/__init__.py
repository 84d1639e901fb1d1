"""
affinity_suggester.core

The core engine powering the suggester.
Contains:
 - n-gram accumulation (NGram, NGramStore)
 - affinity analysis (Implication, Result, analyze)
 - next-word suggestions (SuggestionEngine)
 - the shared error taxonomy
"""

from .errors import CorpusLoadError, InvalidArgumentError, InvalidStateError, SuggesterError
from .ngram_store import NGram, NGramStore, StoreConfig
from .affinity import Implication, Result, analyze
from .suggestion_engine import (
    DEFAULT_BASE_SUGGESTIONS,
    DEFAULT_THRESHOLD,
    SuggesterConfig,
    SuggestionEngine,
)

__all__ = [
    "SuggesterError",
    "InvalidArgumentError",
    "InvalidStateError",
    "CorpusLoadError",
    "NGram",
    "NGramStore",
    "StoreConfig",
    "Implication",
    "Result",
    "analyze",
    "DEFAULT_BASE_SUGGESTIONS",
    "DEFAULT_THRESHOLD",
    "SuggesterConfig",
    "SuggestionEngine",
]
