from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

@dataclass(frozen=True)
class Restoration:
    sentence: str             # chosen words joined by single spaces
    score: int                # total score of the decomposition

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(self.sentence.split())

@dataclass(frozen=True)
class Weighted:
    """Dictionary record `word:weight` (or bare `word`) with a parsed weight."""
    word: str
    weight: int

@dataclass(frozen=True)
class Literal:
    """Dictionary record whose weight did not parse; the whole line is the key."""
    line: str

DictionaryRecord = Union[Weighted, Literal]

@dataclass(frozen=True)
class BigramRecord:
    prev: str
    next: str
    weight: int

@dataclass(frozen=True)
class RestoreResult:
    original: str                   # text as the user typed it
    normalized: str                 # text handed to the search
    restored: Optional[str]         # capitalized sentence, None if unsolvable
    score: Optional[int] = None
    words: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def solved(self) -> bool:
        return self.restored is not None
