# markov_sequences/context/tokenizer.py
# turns lines of text into symbol sequences for training

from typing import Callable, Dict, List


def simple_tokenize(s: str, lowercase: bool = False) -> List[str]:
    """
    Return list of word tokens. Pure punctuation is dropped, tokens that
    contain at least one alphanumeric character are kept as-is.
    """
    if not s:
        return []
    if lowercase:
        s = s.lower()
    out = []
    for t in s.split():
        t = t.strip()
        if not t:
            continue
        if any(ch.isalnum() for ch in t):
            out.append(t)
    return out


def char_tokenize(s: str, lowercase: bool = False) -> List[str]:
    """One symbol per character, trailing newline removed."""
    if not s:
        return []
    s = s.rstrip("\r\n")
    if lowercase:
        s = s.lower()
    return list(s)


TOKENIZERS: Dict[str, Callable[..., List[str]]] = {
    "words": simple_tokenize,
    "chars": char_tokenize,
}


def get_tokenizer(name: str) -> Callable[..., List[str]]:
    try:
        return TOKENIZERS[name]
    except KeyError:
        raise KeyError(f"unknown tokenizer {name!r}, expected one of {sorted(TOKENIZERS)}") from None
