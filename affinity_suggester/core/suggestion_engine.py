# affinity_suggester/core/suggestion_engine.py
"""
SuggestionEngine - next-word suggestions from affinity analysis of n-grams.

Owns an NGramStore and adds:
 - a transaction (message) count, one per load call
 - a dirty flag, set by every load and cleared by train()
 - the merged implications and the last computed analysis

State machine: untrained -> train() -> trained -> load(...) -> untrained.
train() is a batch recomputation over the store's current n-grams.

Example:
    engine = SuggestionEngine(SuggesterConfig.create(order=2, threshold=0.4, stop_words=()))
    engine.load("the cat sat")
    engine.load("the cat ran")
    engine.train()
    engine.suggestions_for("cat")  # ['ran', 'sat', 'the']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import logging

from affinity_suggester.context import DEFAULT_STOP_WORDS, Sanitizer, default_sanitizer
from affinity_suggester.utils.logger_utils import time_block
from .affinity import Implication, Result, analyze
from .errors import InvalidArgumentError, InvalidStateError
from .ngram_store import GramCounts, NGram, NGramStore, StoreConfig, Word

logger = logging.getLogger(__name__)

DEFAULT_BASE_SUGGESTIONS: Tuple[str, ...] = ("the", "this", "of")
DEFAULT_THRESHOLD = 0.65


@dataclass(frozen=True)
class SuggesterConfig:
    """
    Construction-time settings of a SuggestionEngine.
    store: n-gram order, stop-words and sanitizer
    threshold: a suggestion's confidence must be strictly greater than this
    base_suggestions: fallback words used to pad short suggestion lists
    """
    store: StoreConfig = field(default_factory=StoreConfig)
    threshold: float = DEFAULT_THRESHOLD
    base_suggestions: Sequence[str] = DEFAULT_BASE_SUGGESTIONS

    def __post_init__(self) -> None:
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, Real):
            raise InvalidArgumentError(f"threshold must be a number, got {self.threshold!r}")
        object.__setattr__(self, "threshold", float(self.threshold))
        object.__setattr__(self, "base_suggestions", tuple(self.base_suggestions))

    @classmethod
    def create(
        cls,
        order: int = 2,
        threshold: float = DEFAULT_THRESHOLD,
        base_suggestions: Sequence[str] = DEFAULT_BASE_SUGGESTIONS,
        stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS,
        sanitizer: Sanitizer = default_sanitizer,
    ) -> "SuggesterConfig":
        store = StoreConfig(order=order, stop_words=frozenset(stop_words), sanitizer=sanitizer)
        return cls(store=store, threshold=threshold, base_suggestions=base_suggestions)


class SuggestionEngine:
    """
    Word suggestion engine that runs affinity analysis over its n-gram store
    to predict the next word in a sequence.
    """

    def __init__(self, config: Optional[SuggesterConfig] = None) -> None:
        self.cfg = config or SuggesterConfig()
        self._store = NGramStore(self.cfg.store)
        self._implications: Dict[Implication, int] = {}
        self._analysis: Tuple[Result, ...] = ()
        self._message_count: int = 0
        self._untrained: bool = True

    # ------------------------------------------------------------------
    # Configuration / state
    # ------------------------------------------------------------------
    @property
    def store(self) -> NGramStore:
        return self._store

    @property
    def order(self) -> int:
        return self._store.order

    @property
    def threshold(self) -> float:
        return self.cfg.threshold

    @property
    def base_suggestions(self) -> Tuple[str, ...]:
        return tuple(self.cfg.base_suggestions)

    @property
    def message_count(self) -> int:
        return self._message_count

    @property
    def is_untrained(self) -> bool:
        """True when the store changed since the last train() (or it never ran)."""
        return self._untrained

    # forwarded store views
    @property
    def word_count(self) -> int:
        return self._store.word_count

    @property
    def gram_count(self) -> int:
        return self._store.gram_count

    @property
    def words(self) -> Mapping[Word, int]:
        return self._store.words

    @property
    def grams(self) -> GramCounts:
        return self._store.grams

    @property
    def implications(self) -> Mapping[Implication, int]:
        return MappingProxyType(self._implications)

    @property
    def analysis(self) -> Tuple[Result, ...]:
        """Results of the last train(), highest confidence first."""
        return self._analysis

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, message: Union[str, Iterable[str]]) -> None:
        """
        Load one message (a text blob or a sequence of lines) into the store.
        Every call counts as one transaction, even when the message is too
        short to produce an n-gram.
        """
        if isinstance(message, str):
            self._store.load(message)
        else:
            self._store.ingest(message)
        self._message_count += 1
        self._untrained = True

    def load_many(self, messages: Iterable[str]) -> int:
        """Load each string as its own message; returns how many were loaded."""
        n = 0
        for msg in messages:
            self.load(msg)
            n += 1
        return n

    def clear(self) -> None:
        """Clear the store and every affinity analysis calculation."""
        self._store.clear()
        self._implications.clear()
        self._analysis = ()
        self._message_count = 0
        self._untrained = True

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self) -> None:
        """Recompute implications and the affinity analysis from the current n-grams."""
        if self._message_count == 0:
            raise InvalidStateError("train() called before any message was loaded")

        with time_block("train", logger):
            grams = self._store.grams
            conclusion_index = self.order - 1

            # for every gram {a,b,c,...,d} we create the implication ({a,b,c,...} => d)
            implications: Dict[Implication, int] = {}
            for gram, count in grams.items():
                imp = Implication(gram, conclusion_index)
                implications[imp] = implications.get(imp, 0) + count

            results = analyze(implications, grams, self._message_count)
            self._implications = implications
            self._analysis = tuple(sorted(results, key=Result.sort_key))
            self._untrained = False

        logger.info(
            "trained on %d messages: %d n-grams, %d implications",
            self._message_count, len(grams), len(implications),
        )

    # ------------------------------------------------------------------
    # Suggestions (public API)
    # ------------------------------------------------------------------
    def premise_for(self, text: str) -> NGram:
        """The n-gram a query text is matched against: its last `order` sanitized words."""
        return NGram(self._store.pipeline.query(text, self.order))

    def suggestions_for(
        self,
        text: str,
        threshold: Optional[float] = None,
        base_suggestions: Optional[Sequence[str]] = None,
    ) -> List[Word]:
        """
        Returns possible next words for the given text.

        Only the last `order` words of the text form the premise. A result
        is kept when its premise matches and its confidence is strictly
        greater than the threshold. Results come in analysis order and the
        list is padded from the base suggestions (without de-duplication)
        up to their length. Uses the configured threshold / base suggestions
        unless overridden. Stale if called while untrained.
        """
        limit = self.cfg.threshold if threshold is None else float(threshold)
        base = self.cfg.base_suggestions if base_suggestions is None else tuple(base_suggestions)
        premise = self.premise_for(text)

        out = [
            r.conclusion
            for r in self._analysis
            if r.premise == premise and r.confidence > limit
        ]
        logger.debug("premise %s -> %d suggestions above %.3f", premise, len(out), limit)

        # pad the suggestion results if there weren't enough
        for word in base:
            if len(out) >= len(base):
                break
            out.append(word)
        return out

    def __repr__(self) -> str:
        state = "untrained" if self._untrained else "trained"
        return (
            f"SuggestionEngine(order={self.order}, threshold={self.threshold}, "
            f"messages={self._message_count}, {state})"
        )
