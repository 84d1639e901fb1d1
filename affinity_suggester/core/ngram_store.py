# affinity_suggester/core/ngram_store.py
"""
NGramStore - accumulates sanitized word sequences into fixed-size n-grams.

Responsibilities
- Sanitize, filter and concatenate raw lines into one qualifying word stream.
- Slide a window of `order` words over the stream and count each n-gram.
- Count individual words and keep the running word / window totals.
- Expose read-only, deterministically ordered views of the counts.

N-grams are insertion-ordered sets: a window that repeats a word collapses
to fewer than `order` distinct words. Two n-grams are the same key when
their case-folded word sets are equal, see NGram.key.

Example:
    store = NGramStore(StoreConfig(order=2, stop_words=frozenset()))
    store.ingest(["the cat sat", "the cat ran"])
    store.word_count  # 6
    store.gram_count  # 5
    next(iter(store.grams_by_count()))  # NGram('the', 'cat')
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterable, Iterator, Mapping, Tuple

import logging

from affinity_suggester.context import (
    DEFAULT_STOP_WORDS,
    Sanitizer,
    TokenPipeline,
    default_sanitizer,
)
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Word = str
GramCounts = Mapping["NGram", int]


class NGram:
    """
    Immutable ordered set of distinct words.

    Iteration yields the words in first-seen order. Equality, hashing and
    ordering all go through `key`, the sorted case-folded words, so two
    n-grams built from the same words in a different order or case are
    the same n-gram.
    """

    __slots__ = ("_words", "_key")

    def __init__(self, words: Iterable[Word] = ()):
        # dict preserves insertion order and drops repeats
        self._words: Tuple[Word, ...] = tuple(dict.fromkeys(words))
        self._key: Tuple[str, ...] = tuple(sorted(w.lower() for w in self._words))

    @property
    def words(self) -> Tuple[Word, ...]:
        return self._words

    @property
    def key(self) -> Tuple[str, ...]:
        return self._key

    def copy(self) -> "NGram":
        return NGram(list(self._words))

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> Word:
        return self._words[index]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NGram):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: "NGram") -> bool:
        if not isinstance(other, NGram):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return "NGram(" + ", ".join(repr(w) for w in self._words) + ")"

    def __str__(self) -> str:
        return "{" + ", ".join(self._words) + "}"


@dataclass(frozen=True)
class StoreConfig:
    """
    Construction-time settings of an NGramStore.
    order: number of words per sliding window (>= 1)
    stop_words: exact-match words dropped after sanitizing
    sanitizer: raw token -> cleaned token
    """
    order: int = 2
    stop_words: AbstractSet[str] = field(default=DEFAULT_STOP_WORDS)
    sanitizer: Sanitizer = default_sanitizer

    def __post_init__(self) -> None:
        if isinstance(self.order, bool) or not isinstance(self.order, int):
            raise InvalidArgumentError(f"order must be an int, got {self.order!r}")
        if self.order < 1:
            raise InvalidArgumentError("order cannot be less than 1")
        object.__setattr__(self, "stop_words", frozenset(self.stop_words))


class NGramStore:
    """
    Bag of n-grams loaded from plain text.

    Single-writer: every ingest mutates the counts in place. Readers get
    MappingProxyType snapshots that are rebuilt on each access.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self.cfg = config or StoreConfig()
        self._pipeline = TokenPipeline(self.cfg.sanitizer, self.cfg.stop_words)
        self._words: Counter = Counter()
        self._grams: Dict[NGram, int] = {}
        self._word_count: int = 0
        self._gram_count: int = 0

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def order(self) -> int:
        return self.cfg.order

    @property
    def stop_words(self) -> AbstractSet[str]:
        return self.cfg.stop_words

    @property
    def sanitizer(self) -> Sanitizer:
        return self.cfg.sanitizer

    @property
    def pipeline(self) -> TokenPipeline:
        return self._pipeline

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, text: str) -> None:
        """Fill the store with all the words found in a block of text."""
        self.ingest(text.splitlines())

    def ingest(self, lines: Iterable[str]) -> None:
        """
        Put new n-grams into the store from the given lines.

        Words are sanitized, blank words and stop-words dropped, and the
        lines concatenated into one stream. If fewer than `order` words
        qualify nothing is recorded at all. A plain string is split into
        lines first.
        """
        if isinstance(lines, str):
            lines = lines.splitlines()
        words = self._pipeline.words(lines)
        n = self.cfg.order

        if len(words) < n:
            logger.debug("ingest skipped: %d qualifying words, order %d", len(words), n)
            return

        windows = len(words) - n + 1
        for i in range(windows):
            gram = NGram(words[i:i + n])
            self._grams[gram] = self._grams.get(gram, 0) + 1
        self._gram_count += windows

        self._words.update(words)
        self._word_count += len(words)
        logger.debug("ingested %d words into %d windows", len(words), windows)

    def clear(self) -> None:
        """Clear the store of all its words and n-grams."""
        self._words.clear()
        self._grams.clear()
        self._word_count = 0
        self._gram_count = 0

    def clone(self) -> "NGramStore":
        """Deep copy: the clone shares configuration but no mutable state."""
        other = NGramStore(self.cfg)
        other._words = Counter(self._words)
        other._grams = {gram.copy(): count for gram, count in self._grams.items()}
        other._word_count = self._word_count
        other._gram_count = self._gram_count
        return other

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def gram_count(self) -> int:
        return self._gram_count

    @property
    def words(self) -> Mapping[Word, int]:
        """Unique words with their counts, sorted by word."""
        return MappingProxyType(dict(sorted(self._words.items())))

    @property
    def grams(self) -> GramCounts:
        """Unique n-grams with their counts, sorted by the n-gram key."""
        return MappingProxyType(dict(sorted(self._grams.items(), key=lambda kv: kv[0].key)))

    def grams_by_count(self) -> GramCounts:
        """
        N-grams sorted by count, highest first.
        Ties keep n-gram key order (stable sort over the key-sorted items).
        """
        ordered = sorted(self._grams.items(), key=lambda kv: kv[0].key)
        return MappingProxyType(dict(sorted(ordered, key=lambda kv: kv[1], reverse=True)))

    def __len__(self) -> int:
        return len(self._grams)

    def __repr__(self) -> str:
        return (
            f"NGramStore(order={self.order}, words={self._word_count}, "
            f"grams={self._gram_count}, unique={len(self._grams)})"
        )
