# affinity_suggester/core/affinity.py
"""
Affinity analysis over counted n-grams.

Every n-gram {a, b, ..., d} is partitioned into an Implication
({a, b, ...} => d). For each implication:

    confidence = implication count / count of its premise group
        how often the conclusion follows when the premise shows up; the
        group is every counted n-gram of the same size whose partition at
        the same position yields the same premise (its own n-gram included)
    support    = count of its n-gram / number of transactions
        how likely the whole n-gram shows up at all

Example:
    gram = NGram(["cat", "sat"])
    imp = Implication(gram, 1)        # ({cat} => sat)
    analyze({imp: 1}, {gram: 2}, 4)   # {Result(imp, confidence=0.5, support=0.5)}
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Mapping, Tuple

import logging

from .errors import InvalidStateError
from .ngram_store import NGram, Word

logger = logging.getLogger(__name__)


class Implication:
    """
    A logical implication premise => conclusion made by partitioning one n-gram.

    The conclusion is the word at `conclusion_index` (modulo the n-gram size)
    in the n-gram's iteration order; the premise is every other word with
    order preserved.
    """

    __slots__ = ("union", "premise", "conclusion", "index")

    def __init__(self, gram: NGram, conclusion_index: int):
        if not len(gram):
            raise InvalidStateError("cannot partition an empty n-gram")
        t = conclusion_index % len(gram)
        self.index: int = t
        self.union: NGram = gram
        self.conclusion: Word = gram[t]
        self.premise: NGram = NGram(w for i, w in enumerate(gram) if i != t)

    def _identity(self) -> Tuple[Tuple[str, ...], Tuple[str, ...], str]:
        return self.union.key, self.premise.key, self.conclusion.lower()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Implication):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((self.union.key, self.conclusion.lower()))

    def __repr__(self) -> str:
        return f"Implication(premise={self.premise!r}, conclusion={self.conclusion!r})"

    def __str__(self) -> str:
        return f"{self.premise} => {self.conclusion}"


@dataclass(frozen=True)
class Result:
    """An implication with its confidence and support."""
    implication: Implication
    confidence: float
    support: float

    @property
    def premise(self) -> NGram:
        return self.implication.premise

    @property
    def conclusion(self) -> Word:
        return self.implication.conclusion

    def sort_key(self) -> Tuple[float, str, Tuple[str, ...], float]:
        """Canonical ranking: confidence desc, then conclusion, premise, support desc."""
        return (-self.confidence, self.conclusion.lower(), self.premise.key, -self.support)

    def __str__(self) -> str:
        return f"{self.implication}  (confidence={self.confidence:.3f}, support={self.support:.3f})"


def _premise_groups(grams: Mapping[NGram, int], size: int, index: int) -> Counter:
    totals: Counter = Counter()
    for gram, count in grams.items():
        if len(gram) == size:
            totals[Implication(gram, index).premise] += count
    return totals


def analyze(
    implications: Mapping[Implication, int],
    grams: Mapping[NGram, int],
    transaction_count: int,
) -> FrozenSet[Result]:
    """
    Compute the confidence and support of each implication.

    implications: unique implications and their aggregated counts
    grams: unique n-grams and their counts
    transaction_count: number of transactions (load calls)

    Returns one Result per implication, unordered.
    Raises InvalidStateError if there are no transactions or an
    implication's n-gram is missing from `grams`.
    """
    if transaction_count < 1:
        raise InvalidStateError("cannot analyze without at least one transaction")

    # (n-gram size, conclusion position) -> premise -> windows with that premise
    groups: Dict[Tuple[int, int], Counter] = {}

    results = set()
    for implication, implication_count in implications.items():
        union_count = grams.get(implication.union)
        if union_count is None:
            raise InvalidStateError(f"n-gram {implication.union} of {implication!r} has no count")

        partition = (len(implication.union), implication.index)
        if partition not in groups:
            groups[partition] = _premise_groups(grams, *partition)
        group_count = groups[partition][implication.premise]
        if group_count <= 0:
            raise InvalidStateError(f"premise {implication.premise} of {implication!r} has no windows")

        confidence = implication_count / float(group_count)
        support = union_count / float(transaction_count)
        results.add(Result(implication, confidence, support))

    logger.debug("analyzed %d implications over %d transactions", len(results), transaction_count)
    return frozenset(results)
