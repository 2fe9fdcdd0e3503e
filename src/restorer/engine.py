# restorer/engine.py
from __future__ import annotations

import logging
import os
from typing import Optional

from . import config as CFG
from .lexicon import Lexicon
from .loader import load_lexicon
from .models import RestoreResult
from .normalize import capitalize_first, is_valid_input, normalize_input
from .search import Restorer

log = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when damaged text fails the length/character-set check."""


class Engine:
    """
    Thin orchestration layer that glues together:
      - lexicon loading (dictionary + bigram files) via loader.load_lexicon,
      - input validation/normalization (normalize.py),
      - the segmentation search (search.Restorer).

    Public API (used by CLI/Flask):
      * load(dictionary, bigrams, ...): read files -> freeze Lexicon -> attach Restorer
      * use_lexicon(lexicon):           attach an already built Lexicon
      * restore(text):                  validate -> normalize -> search -> RestoreResult
      * shutdown():                     drop the lexicon
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        max_word_length: Optional[int] = None,
        length_bonus: Optional[int] = None,
        squash: Optional[bool] = None,
    ) -> None:
        self.lexicon: Optional[Lexicon] = None
        self._restorer: Optional[Restorer] = None
        self.max_word_length = CFG.MAX_WORD_LENGTH if max_word_length is None else int(max_word_length)
        self.length_bonus = CFG.LENGTH_BONUS_MULTIPLIER if length_bonus is None else int(length_bonus)
        self.squash = CFG.SQUASH_SEPARATORS if squash is None else bool(squash)

    # /* ~~~ Load dictionary + bigram files and wire up the search ~~~ */
    def load(
        self,
        *,
        dictionary: Optional[str | os.PathLike] = None,   # word or word:weight per line
        bigrams: Optional[str | os.PathLike] = None,      # word1,word2,score per line
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        dictionary = dictionary or CFG.DICTIONARY_PATH
        bigrams = bigrams or CFG.BIGRAM_PATH
        log.info("Loading lexicon: dictionary=%s bigrams=%s", dictionary, bigrams)
        self.use_lexicon(load_lexicon(dictionary, bigrams))

    def use_lexicon(self, lexicon: Lexicon) -> None:
        if len(lexicon) == 0:
            log.warning("Lexicon is empty; every input will be unsolvable")
        self.lexicon = lexicon
        self._restorer = Restorer(
            lexicon,
            max_word_length=self.max_word_length,
            length_bonus=self.length_bonus,
        )
        log.info("Engine ready: words=%d bigrams=%d", len(lexicon), lexicon.bigram_count())

    # ------------- query -------------

    # /* ~~~ Validate, normalize and restore one damaged line ~~~ */
    def restore(self, text: str) -> RestoreResult:
        if self._restorer is None:
            raise RuntimeError("Engine not initialized. Call load() or use_lexicon() first.")
        if not is_valid_input(text):
            raise InvalidInputError(
                "Text must contain only English letters, spaces, punctuation (* allowed), "
                f"length {CFG.MIN_TEXT_LENGTH}-{CFG.MAX_TEXT_LENGTH} characters."
            )

        norm = normalize_input(text, squash=self.squash)
        best = self._restorer.restore_scored(norm) if norm else None
        if best is None:
            log.info("No restoration for %r", norm)
            return RestoreResult(original=text, normalized=norm, restored=None)
        return RestoreResult(
            original=text,
            normalized=norm,
            restored=capitalize_first(best.sentence),
            score=best.score,
            words=best.words,
        )

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._restorer = None
        self.lexicon = None
        log.info("Engine shutdown complete")
