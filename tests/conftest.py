# tests/conftest.py - shared corpora and models

import pytest

from markov_writer.core.chain_builder import build_chain_from_text

SMALL_CORPUS = "The cat sat. The dog ran. A cat ran."

LONG_CORPUS = """
The quick brown fox jumps over the lazy dog. The dog barks at the fox.
A fox is quick and the dog is lazy. Every morning the fox runs past the farm
and the dog sleeps in the sun. When the farmer wakes up the dog barks again.
Nobody knows why the fox keeps coming back to the farm.
"""


@pytest.fixture
def small_model():
    return build_chain_from_text(SMALL_CORPUS, 1)


@pytest.fixture
def long_model():
    return build_chain_from_text(LONG_CORPUS, 2)
