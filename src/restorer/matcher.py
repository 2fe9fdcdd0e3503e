from __future__ import annotations
from collections import Counter
from typing import List

from .config import WILDCARD
from .lexicon import Lexicon

def is_exact_match(word: str, fragment: str) -> bool:
    """Positional: every non-wildcard char of fragment equals the word's char. Lengths must agree."""
    if len(word) != len(fragment):
        return False
    return all(f == WILDCARD or f == w for w, f in zip(word, fragment))

def is_anagram_match(word: str, fragment: str) -> bool:
    """
    Non-positional: the fragment's letters (as a multiset) must all be available
    in the word, and the word's leftover letters must exactly fill the wildcards.
    """
    if len(word) != len(fragment):
        return False
    need = Counter(fragment)
    stars = need.pop(WILDCARD, 0)
    have = Counter(word)

    covered = 0
    for ch, n in need.items():
        if have[ch] < n:
            return False
        covered += n
    return len(word) - covered == stars

def is_word_match(word: str, fragment: str) -> bool:
    if len(word) != len(fragment):
        return False
    return is_exact_match(word, fragment) or is_anagram_match(word, fragment)

def matching_words(fragment: str, lexicon: Lexicon) -> List[str]:
    """
    Lexicon words that can produce `fragment`, ordered by
      1) longer word first
      2) higher weight
      3) lexicographic (keeps the order independent of load order)
    """
    out = [w for w in lexicon.words_of_length(len(fragment)) if is_word_match(w, fragment)]
    out.sort(key=lambda w: (-len(w), -lexicon.weight_of(w), w))
    return out
