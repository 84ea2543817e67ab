# markov_sequences/core/table.py
"""
FrequencyTable
--------------
Per-context successor counts for a Markov model.

Entries are kept in a list sorted by descending frequency, with a side index
(value -> position) so an add() is a dict lookup plus a short leftward bubble.
Counts only ever grow by one per add(), so at most one entry is out of place
after an increment and a single insertion-sort step restores order.

Ties: an incremented entry only moves past neighbours with strictly lower
frequency. Among equal counts, whichever got there first stays ahead. This is
what makes most_frequent() deterministic for a fixed training order.
"""

from __future__ import annotations

import math
from typing import Dict, Hashable, Iterator, List, Optional, Tuple


class _EndOfSequence:
    """Marker recorded when a training sequence ends at a context."""

    _instance: Optional["_EndOfSequence"] = None

    def __new__(cls) -> "_EndOfSequence":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END"


END = _EndOfSequence()

SymbolOrEnd = Hashable
Entry = Tuple[SymbolOrEnd, int]


def _visible(value: SymbolOrEnd) -> Optional[Hashable]:
    # END is never handed back to callers; it reads as "no symbol"
    return None if value is END else value


class FrequencyTable:
    """
    Successor frequencies for one context, ordered most frequent first.

    Public API:
        add(value)        record one observation (a symbol or END)
        most_frequent()   top-ranked symbol, O(1)
        sample(x)         symbol drawn by cumulative weight for x in [0, 1)
    """

    __slots__ = ("_symbols", "_counts", "_index", "_total")

    def __init__(self) -> None:
        # parallel lists: _symbols[i] has been seen _counts[i] times
        self._symbols: List[SymbolOrEnd] = []
        self._counts: List[int] = []
        self._index: Dict[SymbolOrEnd, int] = {}
        self._total: int = 0

    # Training ------------------------------------------------------------------
    def add(self, value: SymbolOrEnd) -> None:
        pos = self._index.get(value)
        if pos is None:
            self._index[value] = len(self._symbols)
            self._symbols.append(value)
            self._counts.append(1)
        else:
            self._counts[pos] += 1
            self._bubble_left(pos)
        self._total += 1

    def _bubble_left(self, pos: int) -> None:
        symbols, counts = self._symbols, self._counts
        freq = counts[pos]
        j = pos
        while j > 0 and counts[j - 1] < freq:
            symbols[j - 1], symbols[j] = symbols[j], symbols[j - 1]
            counts[j - 1], counts[j] = counts[j], counts[j - 1]
            j -= 1
        # every entry between the new and old slot moved one place
        for i in range(j, pos + 1):
            self._index[symbols[i]] = i

    # Reading -------------------------------------------------------------------
    def most_frequent(self) -> Optional[Hashable]:
        if not self._symbols:
            return None
        return _visible(self._symbols[0])

    def sample(self, x: float) -> Optional[Hashable]:
        """
        Pick an entry with probability proportional to its frequency.

        x is expected in [0, 1). The table is treated as each entry repeated
        `frequency` times in ranked order and index floor(x * total) is read
        out, so sample(0.0) is always the top entry. An x outside [0, 1) is not
        rejected: NaN and negative targets read index 0, and a target at or
        past the total runs off the end and returns None even though the table
        is not empty.
        """
        target = x * self._total
        if math.isnan(target) or target < 0:
            remaining = 0
        elif target >= self._total:
            return None
        else:
            remaining = math.floor(target)
        for value, freq in zip(self._symbols, self._counts):
            if remaining < freq:
                return _visible(value)
            remaining -= freq
        return None

    # Introspection helpers -----------------------------------------------------
    @property
    def total(self) -> int:
        return self._total

    def frequency(self, value: SymbolOrEnd) -> int:
        pos = self._index.get(value)
        return 0 if pos is None else self._counts[pos]

    def entries(self) -> List[Entry]:
        """Ordered (symbol_or_end, frequency) pairs, most frequent first."""
        return list(zip(self._symbols, self._counts))

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries())

    def __repr__(self) -> str:
        return f"FrequencyTable(total={self._total}, entries={self.entries()!r})"
