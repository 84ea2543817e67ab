# markov_sequences/core/model.py
# variable-order Markov model: context window -> successor frequency table.

from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterator, Optional

from .errors import InvalidOrderError
from .sequence import SequenceKey, Symbol
from .table import END, FrequencyTable, SymbolOrEnd

logger = logging.getLogger(__name__)

__all__ = ["MarkovModel", "END"]


class MarkovModel:
    """
    A Markov chain over arbitrary hashable symbols.

    `order` is the number of trailing symbols used as context. Order 1 tracks
    what follows each single symbol, order 2 what follows each pair, and so on.
    Order 0 keeps one unconditional table for the whole model.

    The model only grows: add() creates a table the first time a context is
    seen and bumps counts afterwards. predict(), sample() and advance() never
    change it. There is no locking; callers keep writes and reads apart.
    """

    def __init__(self, order: int) -> None:
        if isinstance(order, bool) or not isinstance(order, int):
            raise InvalidOrderError(f"order must be an int, got {type(order).__name__}")
        if order < 0:
            raise InvalidOrderError(f"order must be >= 0, got {order}")
        self._order = order
        self._tables: Dict[SequenceKey, FrequencyTable] = {}

    @classmethod
    def empty(cls, order: int) -> "MarkovModel":
        return cls(order)

    @property
    def order(self) -> int:
        return self._order

    # Training ------------------------------------------------------------------
    def add(self, context: SequenceKey, value: SymbolOrEnd) -> None:
        """Record that `value` (a symbol or END) followed `context`."""
        table = self._tables.get(context)
        if table is None:
            table = FrequencyTable()
            self._tables[context] = table
            logger.debug("new context %r (%d total)", context, len(self._tables))
        table.add(value)

    def advance(self, context: SequenceKey, symbol: Symbol) -> SequenceKey:
        return context.with_next(symbol, self._order)

    # Prediction ----------------------------------------------------------------
    def predict(self, context: SequenceKey) -> Optional[Hashable]:
        """
        Most frequent successor of `context`.

        None means either the context was never seen or END ranks first;
        the two cases are not told apart.
        """
        table = self._tables.get(context)
        if table is None:
            return None
        return table.most_frequent()

    def sample(self, context: SequenceKey, x: float) -> Optional[Hashable]:
        table = self._tables.get(context)
        if table is None:
            return None
        return table.sample(x)

    # Introspection helpers -----------------------------------------------------
    def table(self, context: SequenceKey) -> Optional[FrequencyTable]:
        return self._tables.get(context)

    def contexts(self) -> Iterator[SequenceKey]:
        return iter(self._tables)

    def __contains__(self, context: object) -> bool:
        return context in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"MarkovModel(order={self._order}, contexts={len(self._tables)})"
