from __future__ import annotations
from typing import Dict, Optional, Tuple

from . import config as CFG
from .lexicon import Lexicon
from .matcher import matching_words
from .models import Restoration

# (position in text, previously chosen word) -> best restoration of the suffix, or None
Memo = Dict[Tuple[int, str], Optional[Restoration]]

_DONE = Restoration("", 0)


def _choose_better(cur: Optional[Restoration], cand: Restoration) -> Restoration:
    """Strictly greater score replaces; on a tie the earlier candidate stays."""
    if cur is None or cand.score > cur.score:
        return cand
    return cur


class Restorer:
    """
    Rebuilds a damaged string as the highest-scoring sequence of lexicon words.

    The text is consumed as a raw character stream: at each position every
    fragment length from max_word_length down to 1 is tried, each fragment is
    matched against the lexicon (literal or anagram, `*` as wildcard), and the
    rest of the text is solved recursively. Sub-results are memoized on
    (position, previous word) because the bigram bonus depends on the word
    chosen just before.

    Score of one word choice:
        weight_of(word) + len(word) * length_bonus + bigram_weight(prev, word)
    and a sentence scores the sum over its words.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        *,
        max_word_length: int = CFG.MAX_WORD_LENGTH,
        length_bonus: int = CFG.LENGTH_BONUS_MULTIPLIER,
    ) -> None:
        if max_word_length < 1:
            raise ValueError("max_word_length must be >= 1")
        self.lexicon = lexicon
        self.max_word_length = int(max_word_length)
        self.length_bonus = int(length_bonus)

    # ------------- public API -------------

    def restore(self, text: str) -> Optional[str]:
        """Best sentence for `text` (already lowercased), or None if no full decomposition exists."""
        best = self.restore_scored(text)
        return None if best is None else best.sentence

    def restore_scored(self, text: str) -> Optional[Restoration]:
        # fresh memo per call, dropped on return
        memo: Memo = {}
        best = self._search(text, 0, "", memo)
        if best is None:
            return None
        return Restoration(best.sentence.strip(), best.score)

    def word_score(self, prev: str, word: str) -> int:
        lx = self.lexicon
        return lx.weight_of(word) + len(word) * self.length_bonus + lx.bigram_weight(prev, word)

    # ------------- internals -------------

    def _search(self, text: str, pos: int, prev: str, memo: Memo) -> Optional[Restoration]:
        if pos == len(text):
            return _DONE

        key = (pos, prev)
        if key in memo:
            return memo[key]

        best: Optional[Restoration] = None
        for length in range(min(self.max_word_length, len(text) - pos), 0, -1):
            fragment = text[pos:pos + length]
            for cand in matching_words(fragment, self.lexicon):
                rest = self._search(text, pos + length, cand, memo)
                if rest is None:
                    continue
                score = self.word_score(prev, cand) + rest.score
                sentence = f"{cand} {rest.sentence}" if rest.sentence else cand
                best = _choose_better(best, Restoration(sentence, score))

        memo[key] = best
        return best
