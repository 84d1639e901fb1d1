# tests/test_affinity.py
# Implication partitioning and the confidence / support calculation

import pytest

from affinity_suggester.core.affinity import Implication, Result, analyze
from affinity_suggester.core.errors import InvalidStateError
from affinity_suggester.core.ngram_store import NGram


def test_implication_takes_conclusion_at_index():
    gram = NGram(["a", "b", "c"])
    imp = Implication(gram, 2)
    assert imp.conclusion == "c"
    assert imp.premise.words == ("a", "b")
    assert imp.union is gram


def test_implication_index_wraps_around_gram_size():
    gram = NGram(["a", "b", "c"])
    assert Implication(gram, 5).conclusion == "c"
    first = Implication(gram, 0)
    assert first.conclusion == "a"
    assert first.premise.words == ("b", "c")


def test_unigram_implication_has_empty_premise():
    imp = Implication(NGram(["solo"]), 0)
    assert imp.conclusion == "solo"
    assert len(imp.premise) == 0


def test_implication_equality_uses_union_and_conclusion():
    a = Implication(NGram(["cat", "sat"]), 1)
    b = Implication(NGram(["cat", "sat"]), 1)
    c = Implication(NGram(["cat", "sat"]), 0)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert {a: 1, b: 2} == {a: 2}


def test_analyze_single_implication():
    gram = NGram(["cat", "sat"])
    imp = Implication(gram, 1)
    results = analyze({imp: 1}, {gram: 2}, 4)

    assert len(results) == 1
    (r,) = results
    assert isinstance(r, Result)
    assert r.implication == imp
    assert r.confidence == pytest.approx(0.5)
    assert r.support == pytest.approx(0.5)


def test_confidence_splits_over_shared_premise():
    sat = NGram(["cat", "sat"])
    ran = NGram(["cat", "ran"])
    grams = {sat: 1, ran: 3}
    implications = {Implication(sat, 1): 1, Implication(ran, 1): 3}

    by_word = {r.conclusion: r for r in analyze(implications, grams, 4)}
    assert by_word["sat"].confidence == pytest.approx(0.25)
    assert by_word["ran"].confidence == pytest.approx(0.75)
    assert by_word["sat"].support == pytest.approx(0.25)
    assert by_word["ran"].support == pytest.approx(0.75)


def test_missing_union_fails_fast():
    imp = Implication(NGram(["cat", "sat"]), 1)
    with pytest.raises(InvalidStateError):
        analyze({imp: 1}, {NGram(["dog", "sat"]): 1}, 1)


def test_zero_transactions_rejected():
    gram = NGram(["cat", "sat"])
    with pytest.raises(InvalidStateError):
        analyze({Implication(gram, 1): 1}, {gram: 1}, 0)


def test_result_sort_key_prefers_confidence_then_word():
    gram = NGram(["a", "b"])
    low = Result(Implication(gram, 1), 0.2, 0.1)
    high_b = Result(Implication(gram, 1), 0.9, 0.1)
    high_a = Result(Implication(gram, 0), 0.9, 0.1)
    ordered = sorted([low, high_b, high_a], key=Result.sort_key)
    assert [r.conclusion for r in ordered] == ["a", "b", "b"]
    assert ordered[-1] is low


def test_result_str_shows_rule():
    r = Result(Implication(NGram(["cat", "sat"]), 1), 0.5, 0.25)
    assert str(r) == "{cat} => sat  (confidence=0.500, support=0.250)"


def test_zero_group_count_rejected():
    gram = NGram(["cat", "sat"])
    with pytest.raises(InvalidStateError):
        analyze({Implication(gram, 1): 1}, {gram: 0}, 1)
