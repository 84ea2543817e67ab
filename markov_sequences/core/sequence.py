# markov_sequences/core/sequence.py
# bounded sliding window of recent symbols, used as the model's context key.

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator, Tuple

Symbol = Hashable


@dataclass(frozen=True)
class SequenceKey:
    """
    Immutable window over the most recent symbols of a sequence.

    Equality and hashing are structural (by contents, in order), so keys can be
    used directly as dict keys. Nothing ever mutates a key; with_next() returns
    a fresh one.
    """

    symbols: Tuple[Symbol, ...] = ()

    @classmethod
    def empty(cls) -> "SequenceKey":
        return cls(())

    def with_next(self, symbol: Symbol, order: int) -> "SequenceKey":
        """
        Return the window that results from appending `symbol`.

        If the window already holds `order` symbols the oldest one is dropped,
        so the result has length min(len(self) + 1, order). With order 0 every
        result is the empty window.
        """
        if order <= 0:
            return SequenceKey.empty()
        if len(self.symbols) < order:
            kept = self.symbols
        else:
            kept = self.symbols[len(self.symbols) + 1 - order:]
        return SequenceKey(kept + (symbol,))

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols)

    def __repr__(self) -> str:
        return f"SequenceKey({list(self.symbols)!r})"
