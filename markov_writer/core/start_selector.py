# start_selector.py - picks the state generated text opens with

from __future__ import annotations
import random
from typing import List, Optional

from markov_writer.core.chain_builder import Model, State, check_positive
from markov_writer.core.errors import EmptyModel
from markov_writer.utils.logger_utils import get_logger

log = get_logger()


def _starts_upper(text: str) -> bool:
    return text[:1].isupper()


def _last_word(state: State, state_size: int) -> str:
    words = state.split(" ")
    if len(words) >= state_size:
        return words[state_size - 1]
    return words[-1]


def sentence_starters(model: Model) -> List[State]:
    """States whose first character is an uppercase letter."""
    return [state for state in model if _starts_upper(state)]


def select_start(model: Model, state_size: int,
                 rng: Optional[random.Random] = None) -> State:
    """
    Choose a start state that looks like the beginning of a sentence.

    Preference order:
      1. capitalised first word, last word not capitalised (avoids names)
      2. any capitalised first word
      3. any state at all
    Raises EmptyModel when the model has no states.

    The uppercase test only looks at the first character, so words like
    "Well," or non-latin scripts can be misclassified.
    """
    check_positive(state_size, "state_size")
    rng = rng or random.Random()
    if not model:
        raise EmptyModel("model has no states to start generation from")

    starters = sentence_starters(model)
    preferred = [s for s in starters if not _starts_upper(_last_word(s, state_size))]
    log.debug(f"Starter candidates: {len(starters)}, valid starters: {len(preferred)}")

    if preferred:
        starter = rng.choice(preferred)
    elif starters:
        starter = rng.choice(starters)
    else:
        starter = rng.choice(list(model))
    log.debug(f"Starter selected: '{starter}'")
    return starter
