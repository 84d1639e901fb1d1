# corpus_loader.py - reads plain-text corpora from disk into the engine
#
# This is the only place that touches the filesystem for training data.
# Read failures surface as CorpusLoadError, the caller decides whether to
# carry on without data or stop.

import logging
from pathlib import Path
from typing import List, Union

from affinity_suggester.core.errors import CorpusLoadError, InvalidArgumentError
from affinity_suggester.core.suggestion_engine import SuggestionEngine

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_corpus(path: PathLike, skip_lines: int = 0) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines.
    Args:
        path: the plain text file
        skip_lines: number of header lines to drop from the top
    Raises:
        CorpusLoadError if the file cannot be found, read or decoded.
    """
    if skip_lines < 0:
        raise InvalidArgumentError("skip_lines cannot be negative")
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"couldn't read corpus {p}: {e}") from e
    return lines[skip_lines:]


def load_messages(engine: SuggestionEngine, path: PathLike, skip_lines: int = 0) -> int:
    """
    Load every line of a corpus file as its own message (one transaction each).
    Returns the number of messages loaded.
    """
    lines = read_corpus(path, skip_lines)
    n = engine.load_many(lines)
    logger.info("loaded %d messages from %s", n, path)
    return n
