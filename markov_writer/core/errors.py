# errors.py - exception types raised by the chain builder, generator and model store

from __future__ import annotations


class MarkovError(Exception):
    """Base class for every error the markov_writer core reports."""


class InvalidConfiguration(MarkovError, ValueError):
    """A state size or word limit that is zero or otherwise unusable."""


class InsufficientData(MarkovError, ValueError):
    """Corpus too short to form a single state + successor pair."""


class EmptyModel(MarkovError, LookupError):
    """No states available to start generation from."""


class DeserializationError(MarkovError, ValueError):
    """Persisted model could not be parsed into a valid mapping."""


class IoError(MarkovError, OSError):
    """Reading or writing a corpus/model file failed."""
