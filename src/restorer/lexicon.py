# restorer/lexicon.py
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .config import DEFAULT_WEIGHT

_EMPTY: Mapping[str, int] = MappingProxyType({})


class Lexicon:
    """
    Read-only word weights plus bigram transition weights.

    Built once (see loader.load_lexicon / Lexicon.from_lines) and shared by
    every search; nothing here mutates after __init__.
      - weights: word -> frequency weight
      - bigrams: predecessor -> (successor -> transition weight)
    """

    __slots__ = ("_weights", "_bigrams", "_by_length")

    def __init__(
        self,
        weights: Optional[Mapping[str, int]] = None,
        bigrams: Optional[Mapping[str, Mapping[str, int]]] = None,
    ) -> None:
        self._weights: Mapping[str, int] = MappingProxyType(dict(weights or {}))
        self._bigrams: Mapping[str, Mapping[str, int]] = MappingProxyType(
            {prev: MappingProxyType(dict(nxt)) for prev, nxt in (bigrams or {}).items()}
        )
        # length -> words of that length (fragments only ever match equal lengths)
        by_length: Dict[int, list[str]] = {}
        for w in self._weights:
            by_length.setdefault(len(w), []).append(w)
        self._by_length: Mapping[int, Tuple[str, ...]] = MappingProxyType(
            {n: tuple(ws) for n, ws in by_length.items()}
        )

    @classmethod
    def from_lines(cls, dictionary_lines: Iterable[str] = (),
                   bigram_lines: Iterable[str] = ()) -> "Lexicon":
        """Build from raw dictionary/bigram records (same rules as the file loader)."""
        from .loader import build_bigrams, build_weights
        return cls(build_weights(dictionary_lines), build_bigrams(bigram_lines))

    # ------------- lookups -------------

    def weight_of(self, word: str) -> int:
        return self._weights.get(word, DEFAULT_WEIGHT)

    def bigram_weight(self, prev: str, nxt: str) -> int:
        # empty predecessor = start of sentence, no transition bonus
        if not prev:
            return 0
        return self._bigrams.get(prev, _EMPTY).get(nxt, 0)

    def words_of_length(self, n: int) -> Tuple[str, ...]:
        return self._by_length.get(n, ())

    # ------------- introspection -------------

    @property
    def weights(self) -> Mapping[str, int]:
        return self._weights

    @property
    def bigrams(self) -> Mapping[str, Mapping[str, int]]:
        return self._bigrams

    def bigram_count(self) -> int:
        return sum(len(v) for v in self._bigrams.values())

    def __contains__(self, word: object) -> bool:
        return word in self._weights

    def __len__(self) -> int:
        return len(self._weights)

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __repr__(self) -> str:
        return f"Lexicon(words={len(self)}, bigrams={self.bigram_count()})"
