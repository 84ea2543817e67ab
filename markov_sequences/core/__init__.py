"""
markov_sequences.core

The Markov chain engine.
Contains:
 - sliding-window context keys (SequenceKey)
 - ordered successor frequency tables (FrequencyTable)
 - the model mapping contexts to tables (MarkovModel)
 - training, generation and prediction wrappers
"""

from .sequence import SequenceKey
from .table import END, FrequencyTable
from .model import MarkovModel
from .accumulator import Accumulator
from .generator import Generator, default_random_source
from .predictor import Predictor
from .errors import MarkovError, InvalidOrderError, ConfigError

__all__ = [
    "SequenceKey",
    "FrequencyTable",
    "MarkovModel",
    "END",
    "Accumulator",
    "Generator",
    "default_random_source",
    "Predictor",
    "MarkovError",
    "InvalidOrderError",
    "ConfigError",
]
