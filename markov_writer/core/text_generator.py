# text_generator.py - random walk over a built chain

from __future__ import annotations
import random
from typing import List, Optional

from markov_writer.core.chain_builder import Model, Token, check_positive, join_state
from markov_writer.core.start_selector import select_start
from markov_writer.utils.logger_utils import get_logger

log = get_logger()


def generate_words(model: Model, state_size: int, max_words: int,
                   rng: Optional[random.Random] = None) -> List[Token]:
    """
    Walk the chain from a selected start state, one uniform draw per step.

    Stops after `max_words` tokens or at the first state with no recorded
    successors (a dead end is normal termination, not an error). The start
    state is always returned whole, even when max_words < state_size.
    """
    check_positive(state_size, "state_size")
    check_positive(max_words, "max_words")
    rng = rng or random.Random()

    output: List[Token] = select_start(model, state_size, rng).split(" ")
    trace = log.is_enabled_for("DEBUG")

    for i in range(state_size, max_words):
        current = join_state(output[i - state_size:i])
        successors = model.get(current)
        if not successors:
            log.debug(f"No next word found for state '{current}', stopping generation.")
            break
        word = rng.choice(successors)
        if trace:
            log.debug(f"Current state: '{current}', next word chosen: '{word}'")
        output.append(word)

    return output


def generate(model: Model, state_size: int, max_words: int,
             rng: Optional[random.Random] = None) -> str:
    """Generated tokens joined with single spaces."""
    return " ".join(generate_words(model, state_size, max_words, rng))
