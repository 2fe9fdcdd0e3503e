from __future__ import annotations
import re

from .config import INPUT_PATTERN, MAX_TEXT_LENGTH, MIN_TEXT_LENGTH, WILDCARD

# ASCII mode: `\s` is only space, \t, \n, \x0b, \f, \r
_ALLOWED = re.compile(INPUT_PATTERN, re.ASCII)

def is_valid_input(text: str,
                   min_len: int = MIN_TEXT_LENGTH,
                   max_len: int = MAX_TEXT_LENGTH) -> bool:
    """Length within [min_len, max_len] and only letters, whitespace, basic punctuation and '*'."""
    if not (min_len <= len(text) <= max_len):
        return False
    return _ALLOWED.fullmatch(text) is not None

def _is_kept(ch: str) -> bool:
    """Letters and the wildcard survive squashing; whitespace/punctuation do not."""
    return ch.isalpha() or ch == WILDCARD

def normalize_input(text: str, squash: bool = False) -> str:
    """
    Lowercase the damaged text for searching.
    With squash=True also drop separators, so "th* c*t." searches as "th*c*t".
    Without it the text goes to the search verbatim and any separator makes it unsolvable.
    """
    s = text.lower()
    if squash:
        s = "".join(ch for ch in s if _is_kept(ch))
    return s

def capitalize_first(sentence: str) -> str:
    if not sentence:
        return sentence
    return sentence[0].upper() + sentence[1:]
