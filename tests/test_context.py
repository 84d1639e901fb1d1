# tests/test_context.py
# tokenizer, sanitizer and token pipeline

from affinity_suggester.context import (
    DEFAULT_STOP_WORDS,
    TokenPipeline,
    default_sanitizer,
    iter_words,
    split_words,
)


def test_default_sanitizer_keeps_word_characters():
    assert default_sanitizer("  he!!o-world_1 ") == "heo-world_1"
    assert default_sanitizer("...") == ""
    assert default_sanitizer("") == ""


def test_split_words_on_any_whitespace():
    assert split_words("  a\tb   c \n") == ["a", "b", "c"]
    assert split_words("") == []


def test_iter_words_concatenates_lines():
    assert list(iter_words(["a b", "", "c"])) == ["a", "b", "c"]


def test_pipeline_filters_blank_and_stop_words():
    p = TokenPipeline(default_sanitizer, DEFAULT_STOP_WORDS)
    assert p.words(["the cat, is", "!!! on a mat"]) == ["cat", "on", "mat"]


def test_pipeline_query_lowercases_and_keeps_tail():
    p = TokenPipeline(default_sanitizer, DEFAULT_STOP_WORDS)
    assert p.query("A quick Brown fox!", 2) == ["brown", "fox"]
    assert p.query("fox", 3) == ["fox"]
    assert p.query("   ", 2) == []
