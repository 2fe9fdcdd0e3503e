"""
Smart Text Restorer

Rebuilds a plausible sentence from damaged text in which letters were replaced
by the wildcard `*` or words were scrambled into anagrams. The damaged string is
split into dictionary words by a memoized search that scores each split by word
weight, word length and word-to-word (bigram) bonuses.

Main pieces:
    Lexicon      read-only word weights + bigram weights
    Restorer     the segmentation search (Restorer(lexicon).restore(text))
    Engine       loading, validation and normalization around the search

Example Usage:
    from restorer import Lexicon, Restorer

    lex = Lexicon({"the": 10, "cat": 5}, {"the": {"cat": 3}})
    print(Restorer(lex).restore("th*tca"))   # "the cat"
"""

# src/restorer/__init__.py
from .engine import Engine, InvalidInputError
from .lexicon import Lexicon
from .loader import load_lexicon
from .models import Restoration, RestoreResult
from .search import Restorer

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "InvalidInputError",
    "Lexicon",
    "Restorer",
    "Restoration",
    "RestoreResult",
    "load_lexicon",
]
