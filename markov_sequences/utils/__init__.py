# markov_sequences/utils/__init__.py

from .config_manager import Config, DEFAULTS
from .logger_utils import Log

__all__ = ["Config", "DEFAULTS", "Log"]
