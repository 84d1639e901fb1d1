# affinity_suggester/context/tokenizer.py
# whitespace tokenizer shared by training and querying

from typing import Iterable, Iterator, List


def split_words(line: str) -> List[str]:
    """
    Return the raw whitespace-separated tokens of one line.
    No cleaning happens here, that is the sanitizer's job.
    """
    if not line:
        return []
    return line.split()


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Concatenate the tokens of every line into one ordered stream."""
    for line in lines:
        yield from split_words(line)
