# markov_sequences/core/generator.py
# random walks over a trained model.

from __future__ import annotations

import logging
from typing import Hashable, Iterator, Optional

import numpy as np

from .protocols import ModelReader, RandomSource
from .sequence import SequenceKey

logger = logging.getLogger(__name__)


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Uniform [0, 1) floats from a numpy Generator, seeded for reproducibility."""
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


class Generator:
    """
    Generates sequences by sampling a model.

    `rand_source` is called once per symbol and must return values in [0, 1).
    When it is omitted a numpy-backed source seeded with `seed` is used.
    The model is never modified.
    """

    def __init__(
        self,
        model: ModelReader,
        rand_source: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.model = model
        self.rand_source = rand_source or default_random_source(seed)
        self.context = SequenceKey.empty()

    def end(self) -> None:
        """Reset so the next symbol generated starts a new sequence."""
        self.context = SequenceKey.empty()

    def next(self) -> Optional[Hashable]:
        """
        Sample the next symbol. None means the sequence ended (or the context
        is unknown); the context is left alone, call end() before reusing.
        """
        symbol = self.model.sample(self.context, self.rand_source())
        if symbol is None:
            return None
        self.context = self.model.advance(self.context, symbol)
        return symbol

    def generate(self, max_length: Optional[int] = None) -> Iterator[Hashable]:
        """Yield one whole sequence, stopping at END or after max_length symbols."""
        n = 0
        try:
            while max_length is None or n < max_length:
                symbol = self.next()
                if symbol is None:
                    break
                n += 1
                yield symbol
        finally:
            logger.debug("generated %d symbols", n)
            self.end()
