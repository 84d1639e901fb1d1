# affinity_suggester/context/__init__.py
# tokenizing, cleaning and filtering of raw text

from .pipeline import TokenPipeline  # lines/query text -> word streams
from .normalizer import Sanitizer, default_sanitizer  # token cleaning
from .tokenizer import split_words, iter_words  # whitespace tokenization
from .stopwords import DEFAULT_STOP_WORDS  # words ignored by default

__all__ = [
    "TokenPipeline",
    "Sanitizer",
    "default_sanitizer",
    "split_words",
    "iter_words",
    "DEFAULT_STOP_WORDS",
]
