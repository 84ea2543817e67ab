# markov_sequences/core/accumulator.py
# feeds training sequences into a model one symbol at a time.

from __future__ import annotations

import logging
from typing import Hashable, Iterable, Optional

from .protocols import ModelWriter
from .sequence import SequenceKey
from .table import END

logger = logging.getLogger(__name__)


class Accumulator:
    """
    Training session over a model.

    Tracks the current context, starting empty. Each add() records the symbol
    against the current context and rolls the context forward; end() records
    END and starts a new sequence. Only one Accumulator (or other writer)
    should touch a model at a time.
    """

    def __init__(self, model: ModelWriter) -> None:
        self.model = model
        self.context = SequenceKey.empty()

    def add(self, symbol: Hashable) -> None:
        self.model.add(self.context, symbol)
        self.context = self.model.advance(self.context, symbol)

    def end(self) -> None:
        """Mark the end of the current sequence and reset for the next one."""
        self.model.add(self.context, END)
        self.context = SequenceKey.empty()

    def add_sequence(self, symbols: Iterable[Hashable]) -> None:
        """Add every symbol of a complete sequence, then end() it."""
        n = 0
        for s in symbols:
            self.add(s)
            n += 1
        self.end()
        logger.debug("accumulated sequence of %d symbols", n)

    def predict(self) -> Optional[Hashable]:
        """Most probable next symbol given what has been added so far."""
        return self.model.predict(self.context)
