# tests/conftest.py - shared fixtures

import logging

import pytest

from affinity_suggester.core.ngram_store import NGramStore, StoreConfig
from affinity_suggester.core.suggestion_engine import SuggesterConfig, SuggestionEngine


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # setup_logging() detaches the package logger from the root; undo that per test
    yield
    log = logging.getLogger("affinity_suggester")
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()
    log.setLevel(logging.NOTSET)
    log.propagate = True


@pytest.fixture
def bigram_store():
    return NGramStore(StoreConfig(order=2, stop_words=frozenset()))


@pytest.fixture
def make_engine():
    def _make(order=2, threshold=0.65, base=("the", "this", "of"), stop_words=()):
        cfg = SuggesterConfig.create(
            order=order, threshold=threshold, base_suggestions=base, stop_words=stop_words
        )
        return SuggestionEngine(cfg)
    return _make
