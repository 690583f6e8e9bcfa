# chain_builder.py
# word-level Markov chain construction: state (n joined words) -> observed successors.

from __future__ import annotations
from typing import Dict, List, Sequence

from markov_writer.core.errors import (
    DeserializationError,
    EmptyModel,
    InsufficientData,
    InvalidConfiguration,
)
from markov_writer.utils.logger_utils import get_logger

Token = str
State = str
# successor lists keep duplicates; repetition is the frequency weighting
Model = Dict[State, List[Token]]

log = get_logger()


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------
def check_positive(value, name: str) -> int:
    """Reject zero, negative and non-integer sizes before any work is done."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    return value


# ------------------------------------------------------------------
# Tokenization
# ------------------------------------------------------------------
def tokenize(text: str) -> List[Token]:
    """Split on any run of whitespace; tokens are kept verbatim."""
    return text.split()


def join_state(words: Sequence[Token]) -> State:
    return " ".join(words)


# ------------------------------------------------------------------
# Training
# ------------------------------------------------------------------
def build_chain(tokens: Sequence[Token], state_size: int) -> Model:
    """
    Slide a window of `state_size` words over `tokens` and record the word
    that follows each window.

    Raises InvalidConfiguration for a non-positive state size and
    InsufficientData when fewer than state_size + 1 tokens are given.
    """
    check_positive(state_size, "state_size")
    tokens = list(tokens)
    log.debug(f"Collected {len(tokens)} words from input.")
    if len(tokens) < state_size + 1:
        raise InsufficientData(
            f"need at least {state_size + 1} words for state size {state_size}, "
            f"got {len(tokens)}"
        )

    trace = log.is_enabled_for("DEBUG")
    model: Model = {}
    with log.time_block("build_chain"):
        for i in range(state_size, len(tokens)):
            state = join_state(tokens[i - state_size:i])
            model.setdefault(state, []).append(tokens[i])
            if trace:
                log.debug(f"State: '{state}', Next: '{tokens[i]}'")

    log.info(f"Markov chain construction complete. States: {len(model)}")
    return model


def build_chain_from_text(text: str, state_size: int) -> Model:
    """Tokenize raw text and build a chain; blank text counts as too little data."""
    return build_chain(tokenize(text), state_size)


def merge_models(*models: Model) -> Model:
    """
    Combine separately built models (one per file, shard, ...) into one.
    Successor lists are concatenated so each state's multiset is preserved.
    """
    merged: Model = {}
    for model in models:
        for state, successors in model.items():
            merged.setdefault(state, []).extend(successors)
    return merged


# ------------------------------------------------------------------
# Introspection helpers
# ------------------------------------------------------------------
def infer_state_size(model: Model) -> int:
    """Word count shared by every key of `model`."""
    if not model:
        raise EmptyModel("cannot infer a state size from an empty model")
    sizes = {len(state.split(" ")) for state in model}
    if len(sizes) != 1:
        raise DeserializationError(
            f"model keys have inconsistent word counts: {sorted(sizes)}"
        )
    return sizes.pop()


def successor_count(model: Model) -> int:
    return sum(len(v) for v in model.values())
