# model_store.py - persistence layer for corpora and built chains

# handles:
# - reading a training corpus as text
# - saving a Markov model as a flat JSON object {state: [successor, ...]}
# - loading it back, validating the shape before the generator sees it

import json
import os
from typing import Any, Optional

from markov_writer.core.chain_builder import Model
from markov_writer.core.errors import DeserializationError, IoError
from markov_writer.utils.logger_utils import get_logger

log = get_logger()


# Corpus ---------------------------------------
def read_text(path: str) -> str:
    """
    Read a UTF-8 text corpus.
    Raises:
        IoError: the file is missing, unreadable or not valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"could not read '{path}': {e}") from e
    log.debug(f"Input text loaded from {path} ({len(text)} characters)")
    return text


# Encoding -------------------------------------
def dumps_model(model: Model) -> str:
    return json.dumps(model, ensure_ascii=False)


def loads_model(data: str, state_size: Optional[int] = None) -> Model:
    """
    Parse and validate a serialized model.
    Args:
        data: JSON text holding an object of string -> list of strings.
        state_size: if given, every key must contain exactly this many words.
    Returns:
        dict: the model, without entries whose successor list was empty.
    """
    try:
        raw: Any = json.loads(data)
    except (json.JSONDecodeError, TypeError) as e:
        raise DeserializationError(f"model is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise DeserializationError(
            f"model must be a JSON object, got {type(raw).__name__}"
        )

    model: Model = {}
    for state, successors in raw.items():
        if not isinstance(successors, list):
            raise DeserializationError(f"successors of '{state}' must be a list")
        if not all(isinstance(w, str) for w in successors):
            raise DeserializationError(f"successors of '{state}' must all be strings")
        if state_size is not None and len(state.split(" ")) != state_size:
            raise DeserializationError(
                f"state '{state}' does not have {state_size} words"
            )
        if not successors:
            # a builder never produces these; skip instead of failing the load
            log.warning(f"Dropping state '{state}' with no successors")
            continue
        model[state] = list(successors)
    return model


# Model files ----------------------------------
def save_model(path: str, model: Model):
    """
    Save the Markov chain model to disk, in JSON format.
    Args:
        path (str): destination file; parent folders are created.
        model (dict): state -> successor list mapping.
    """
    folder = os.path.dirname(path)
    try:
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(dumps_model(model))
    except OSError as e:
        raise IoError(f"could not write model to '{path}': {e}") from e
    log.info(f"Markov model written to '{path}' ({len(model)} states)")


def load_model(path: str, state_size: Optional[int] = None) -> Model:
    """Load a model saved by save_model (see loads_model for validation)."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"could not read model '{path}': {e}") from e
    model = loads_model(data, state_size)
    log.info(f"Loaded Markov model from '{path}' ({len(model)} states)")
    return model
