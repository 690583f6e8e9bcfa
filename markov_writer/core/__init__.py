"""
markov_writer.core

Model construction and text generation. Nothing in here touches files.
"""

from .errors import (
    DeserializationError,
    EmptyModel,
    InsufficientData,
    InvalidConfiguration,
    IoError,
    MarkovError,
)
from .chain_builder import (
    Model,
    build_chain,
    build_chain_from_text,
    infer_state_size,
    merge_models,
    tokenize,
)
from .start_selector import select_start
from .text_generator import generate, generate_words

__all__ = [
    "MarkovError",
    "InvalidConfiguration",
    "InsufficientData",
    "EmptyModel",
    "DeserializationError",
    "IoError",
    "Model",
    "tokenize",
    "build_chain",
    "build_chain_from_text",
    "merge_models",
    "infer_state_size",
    "select_start",
    "generate",
    "generate_words",
]
