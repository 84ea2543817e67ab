# markov_sequences/core/protocols.py
"""
Protocol interfaces for the model surfaces the wrappers rely on.

Accumulator needs the write side, Generator and Predictor only the read side.
Depending on these instead of MarkovModel keeps the wrappers easy to test with
stubs.
"""

from __future__ import annotations

from typing import Callable, Hashable, Optional, Protocol, runtime_checkable

from .sequence import SequenceKey

# zero-argument callable returning floats in [0, 1)
RandomSource = Callable[[], float]


@runtime_checkable
class ModelReader(Protocol):
    """Read-only model surface used by Generator and Predictor."""

    def advance(self, context: SequenceKey, symbol: Hashable) -> SequenceKey:
        ...

    def predict(self, context: SequenceKey) -> Optional[Hashable]:
        ...

    def sample(self, context: SequenceKey, x: float) -> Optional[Hashable]:
        """
        Successor drawn by cumulative frequency weight for x in [0, 1).
        """
        ...


@runtime_checkable
class ModelWriter(Protocol):
    """Mutable model surface used by Accumulator."""

    def add(self, context: SequenceKey, value: Hashable) -> None:
        ...

    def advance(self, context: SequenceKey, symbol: Hashable) -> SequenceKey:
        ...

    def predict(self, context: SequenceKey) -> Optional[Hashable]:
        ...
