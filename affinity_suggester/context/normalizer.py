# affinity_suggester/context/normalizer.py
import re
from typing import Callable

Sanitizer = Callable[[str], str]

_strip_re = re.compile(r"[^A-Za-z0-9_-]")  # keep letters, digits, underscores and hyphens


def default_sanitizer(word: str) -> str:
    """Trim a token and drop every character outside [A-Za-z0-9_-]."""
    if not word:
        return ""
    return _strip_re.sub("", word.strip())
