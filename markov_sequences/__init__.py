"""
markov_sequences

Variable-order Markov chains over arbitrary hashable symbols: train with an
Accumulator, then sample with a Generator or follow the most likely path with
a Predictor.

    model = MarkovModel(order=1)
    acc = Accumulator(model)
    acc.add_sequence(["the", "quick", "brown", "fox"])

    Predictor(model).continuation(10)   # ['the', 'quick', 'brown', 'fox']
"""

from .core import (
    END,
    Accumulator,
    ConfigError,
    FrequencyTable,
    Generator,
    InvalidOrderError,
    MarkovError,
    MarkovModel,
    Predictor,
    SequenceKey,
    default_random_source,
)

__all__ = [
    "END",
    "Accumulator",
    "ConfigError",
    "FrequencyTable",
    "Generator",
    "InvalidOrderError",
    "MarkovError",
    "MarkovModel",
    "Predictor",
    "SequenceKey",
    "default_random_source",
]

__version__ = "0.1.0"
