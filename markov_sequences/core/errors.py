# markov_sequences/core/errors.py
"""
Exceptions raised when a caller breaks a construction or configuration contract.

Training, prediction and sampling never raise: "nothing to return" is None.
"""


class MarkovError(Exception):
    """Base class for all errors raised by markov_sequences."""


class InvalidOrderError(MarkovError, ValueError):
    """Raised when a model order is negative or not an integer."""


class ConfigError(MarkovError, ValueError):
    """Raised when a config key is unknown or a value cannot be coerced."""
