# affinity_suggester/context/pipeline.py
# turns raw lines / query text into the word streams the store works with

from typing import AbstractSet, Iterable, List

from .normalizer import Sanitizer
from .tokenizer import iter_words, split_words


class TokenPipeline:
    """
    Small pipeline object shared by the store and the suggestion engine:
     - words(lines) -> qualifying training words (sanitized, non-blank, not stop-words)
     - query(text, window) -> the last `window` sanitized, lower-cased query tokens
    """

    def __init__(self, sanitizer: Sanitizer, stop_words: AbstractSet[str]):
        self.sanitizer = sanitizer
        self.stop_words = stop_words

    def words(self, lines: Iterable[str]) -> List[str]:
        out = []
        for raw in iter_words(lines):
            w = self.sanitizer(raw)
            if not w or not w.strip() or w in self.stop_words:
                continue
            out.append(w)
        return out

    def query(self, text: str, window: int) -> List[str]:
        # stop-words are not filtered here, matching how premises are looked up
        toks = split_words((text or "").strip().lower())
        tail = toks[-window:] if window > 0 else []
        return [self.sanitizer(t) for t in tail]
