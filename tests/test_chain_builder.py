# tests/test_chain_builder.py
import random
from collections import Counter

import pytest

from markov_writer.core.chain_builder import (
    build_chain,
    build_chain_from_text,
    infer_state_size,
    merge_models,
    successor_count,
    tokenize,
)
from markov_writer.core.errors import (
    DeserializationError,
    EmptyModel,
    InsufficientData,
    InvalidConfiguration,
)

from conftest import LONG_CORPUS, SMALL_CORPUS


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("one  two\tthree\n\nfour ") == ["one", "two", "three", "four"]
    assert tokenize("") == []
    assert tokenize("   \n\t") == []


def test_tokenize_keeps_case_and_punctuation():
    assert tokenize("Well, hello THERE.") == ["Well,", "hello", "THERE."]


def test_small_corpus_transitions(small_model):
    assert Counter(small_model["The"]) == Counter(["cat", "dog"])
    assert Counter(small_model["cat"]) == Counter(["sat.", "ran."])
    assert small_model["sat."] == ["The"]
    assert small_model["ran."] == ["A"]
    assert small_model["A"] == ["cat"]
    # last token has no successor, so "ran." only appears once as a key
    assert successor_count(small_model) == len(tokenize(SMALL_CORPUS)) - 1


def test_state_size_two_keys():
    model = build_chain(["a", "b", "c", "a", "b", "d"], 2)
    assert model == {"a b": ["c", "d"], "b c": ["a"], "c a": ["b"]}


def test_duplicates_are_kept():
    model = build_chain(["x", "y", "x", "y", "x", "y"], 1)
    assert model["x"] == ["y", "y", "y"]
    assert model["y"] == ["x", "x"]


@pytest.mark.parametrize("tokens", [[], ["a"], ["a", "b", "c"]])
def test_zero_state_size_rejected(tokens):
    with pytest.raises(InvalidConfiguration):
        build_chain(tokens, 0)


@pytest.mark.parametrize("bad", [-1, 1.5, "2", True])
def test_non_positive_or_non_int_state_size_rejected(bad):
    with pytest.raises(InvalidConfiguration):
        build_chain(["a", "b", "c"], bad)


def test_too_short_corpus():
    with pytest.raises(InsufficientData):
        build_chain(["a", "b"], 2)
    # exactly state_size + 1 tokens is enough for one pair
    assert build_chain(["a", "b", "c"], 2) == {"a b": ["c"]}


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
def test_blank_text_is_insufficient(text):
    with pytest.raises(InsufficientData):
        build_chain_from_text(text, 1)


def test_errors_share_a_base_class():
    with pytest.raises(ValueError):
        build_chain([], 0)


@pytest.mark.parametrize("state_size", [1, 2, 3, 4])
def test_keys_and_lists_hold_invariants(state_size):
    rng = random.Random(state_size)
    words = ["alpha", "Beta", "gamma.", "Delta", "eps"]
    tokens = [rng.choice(words) for _ in range(200)]
    model = build_chain(tokens, state_size)
    assert model
    for state, successors in model.items():
        assert len(state.split()) == state_size
        assert successors
    assert successor_count(model) == len(tokens) - state_size


def test_merge_models_preserves_multisets():
    a = build_chain_from_text("one two one two three", 1)
    b = build_chain_from_text("one two four", 1)
    merged = merge_models(a, b)
    assert Counter(merged["one"]) == Counter(["two", "two", "two"])
    assert Counter(merged["two"]) == Counter(["one", "three", "four"])
    # inputs untouched
    assert a["two"] == ["one", "three"]
    assert b["two"] == ["four"]


def test_merge_of_nothing_is_empty():
    assert merge_models() == {}


def test_infer_state_size():
    assert infer_state_size(build_chain_from_text(LONG_CORPUS, 3)) == 3
    with pytest.raises(EmptyModel):
        infer_state_size({})
    with pytest.raises(DeserializationError):
        infer_state_size({"a b": ["c"], "a": ["b"]})


def test_from_text_checks_state_size_before_data():
    with pytest.raises(InvalidConfiguration):
        build_chain_from_text("", 0)
