# markov_sequences/context/__init__.py
# text -> symbol helpers used to build training sequences

from .tokenizer import simple_tokenize, char_tokenize, get_tokenizer, TOKENIZERS

__all__ = [
    "simple_tokenize",
    "char_tokenize",
    "get_tokenizer",
    "TOKENIZERS",
]
