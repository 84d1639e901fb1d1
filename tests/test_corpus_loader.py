# tests/test_corpus_loader.py
import pytest

from affinity_suggester.core.errors import CorpusLoadError, InvalidArgumentError
from affinity_suggester.core.suggestion_engine import SuggesterConfig, SuggestionEngine
from affinity_suggester.utils.corpus_loader import load_messages, read_corpus


@pytest.fixture
def corpus(tmp_path):
    p = tmp_path / "messages.txt"
    p.write_text("id,text\nthe cat sat\nthe cat ran\n", encoding="utf-8")
    return p


def test_read_corpus_skips_header(corpus):
    assert read_corpus(corpus, skip_lines=1) == ["the cat sat", "the cat ran"]
    assert len(read_corpus(str(corpus))) == 3


def test_missing_file_raises_corpus_error(tmp_path):
    with pytest.raises(CorpusLoadError) as exc:
        read_corpus(tmp_path / "nope.txt")
    assert isinstance(exc.value, OSError)
    assert isinstance(exc.value.__cause__, OSError)


def test_negative_skip_rejected(corpus):
    with pytest.raises(InvalidArgumentError):
        read_corpus(corpus, skip_lines=-1)


def test_load_messages_one_transaction_per_line(corpus):
    engine = SuggestionEngine(SuggesterConfig.create(stop_words=()))
    assert load_messages(engine, corpus, skip_lines=1) == 2
    assert engine.message_count == 2
    assert engine.gram_count == 4
