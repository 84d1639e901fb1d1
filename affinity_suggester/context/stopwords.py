# affinity_suggester/context/stopwords.py
# words ignored when filling the n-gram store (exact match, post-sanitization)

from typing import FrozenSet

DEFAULT_STOP_WORDS: FrozenSet[str] = frozenset({"the", "in", "a", "an", "to", "am", "is"})
