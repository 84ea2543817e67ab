# markov_sequences/core/predictor.py
# deterministic "best guess" continuations from a trained model.

from __future__ import annotations

from typing import Hashable, List, Optional

from .protocols import ModelReader
from .sequence import SequenceKey


class Predictor:
    """
    Follows the most frequent successor at every step.

    Prior symbols can be supplied with given(); next() then extends the
    sequence with predictions. The model is never modified.
    """

    def __init__(self, model: ModelReader) -> None:
        self.model = model
        self.context = SequenceKey.empty()

    def end(self) -> None:
        self.context = SequenceKey.empty()

    def given(self, symbol: Hashable) -> None:
        """Feed a known past symbol without asking for a prediction."""
        self.context = self.model.advance(self.context, symbol)

    def next(self) -> Optional[Hashable]:
        symbol = self.model.predict(self.context)
        if symbol is None:
            return None
        self.context = self.model.advance(self.context, symbol)
        return symbol

    def predict(self) -> Optional[Hashable]:
        """Most probable next symbol, without advancing."""
        return self.model.predict(self.context)

    def continuation(self, max_length: int) -> List[Hashable]:
        # a model can cycle forever (a b a b ...), so the limit is required
        out: List[Hashable] = []
        while len(out) < max_length:
            symbol = self.next()
            if symbol is None:
                break
            out.append(symbol)
        return out
