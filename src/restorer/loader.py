from __future__ import annotations
import logging
import os
import re
from typing import Dict, Iterable, List, Optional

from .config import BIGRAM_PATH, DEFAULT_WEIGHT, DICTIONARY_PATH
from .lexicon import Lexicon
from .models import BigramRecord, DictionaryRecord, Literal, Weighted

log = logging.getLogger(__name__)

# signed decimal integer, nothing else (no spaces, no underscores)
_INT = re.compile(r"[+-]?[0-9]+")

def _parse_int(s: str) -> Optional[int]:
    return int(s) if _INT.fullmatch(s) else None

def _split_fields(line: str, sep: str) -> List[str]:
    """Split on `sep`, dropping trailing empty fields (`word:` has one field)."""
    parts = line.split(sep)
    while parts and parts[-1] == "":
        parts.pop()
    return parts

# ------------- record parsing -------------

def parse_dictionary_line(raw: str) -> Optional[DictionaryRecord]:
    """
    Parse one dictionary record.
      "word"        -> Weighted(word, 1)
      "word:12"     -> Weighted(word, 12)
      "word:abc"    -> Literal("word:abc")   (whole line becomes the key, weight 1)
    Returns None for lines to skip: blank, not exactly two colon fields, empty word.
    """
    line = raw.strip().lower()
    if not line:
        return None
    if ":" not in line:
        return Weighted(line, DEFAULT_WEIGHT)

    parts = _split_fields(line, ":")
    if len(parts) != 2:
        return None
    # Fields are trimmed, so "word : 5" is Weighted("word", 5) rather than
    # a literal "word : 5" key with weight 1.
    word, weight = parts[0].strip(), _parse_int(parts[1].strip())
    if weight is None:
        return Literal(line)
    if not word:
        return None
    return Weighted(word, weight)

def parse_bigram_line(raw: str) -> Optional[BigramRecord]:
    """Parse `word1,word2,score`. None when the field count is wrong or score is not an integer."""
    parts = _split_fields(raw.strip(), ",")
    if len(parts) != 3:
        return None
    prev, nxt = parts[0].strip().lower(), parts[1].strip().lower()
    score = _parse_int(parts[2].strip())
    if score is None:
        log.warning("Skipping bigram with non-integer score: %r", raw.rstrip("\r\n"))
        return None
    return BigramRecord(prev, nxt, score)

# ------------- table builders -------------

def build_weights(lines: Iterable[str]) -> Dict[str, int]:
    """Later records for the same word overwrite earlier ones."""
    weights: Dict[str, int] = {}
    for raw in lines:
        rec = parse_dictionary_line(raw)
        if rec is None:
            if raw.strip():
                log.debug("Skipping dictionary line: %r", raw.rstrip("\r\n"))
            continue
        if isinstance(rec, Literal):
            log.debug("Non-integer weight, keeping literal key: %r", rec.line)
            weights[rec.line] = DEFAULT_WEIGHT
        else:
            weights[rec.word] = rec.weight
    return weights

def build_bigrams(lines: Iterable[str]) -> Dict[str, Dict[str, int]]:
    bigrams: Dict[str, Dict[str, int]] = {}
    for raw in lines:
        rec = parse_bigram_line(raw)
        if rec is None:
            continue
        bigrams.setdefault(rec.prev, {})[rec.next] = rec.weight
    return bigrams

# ------------- file loading -------------

def _read_lines(path: str | os.PathLike) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            return [ln.rstrip("\r\n") for ln in f]
    except OSError as e:
        log.error("Error loading %s: %s", path, e)
        return []

def load_dictionary(path: str | os.PathLike = DICTIONARY_PATH) -> Dict[str, int]:
    weights = build_weights(_read_lines(path))
    log.info("Loaded dictionary from %s: words=%d", path, len(weights))
    return weights

def load_bigrams(path: str | os.PathLike = BIGRAM_PATH) -> Dict[str, Dict[str, int]]:
    bigrams = build_bigrams(_read_lines(path))
    log.info("Loaded bigram model from %s: predecessors=%d", path, len(bigrams))
    return bigrams

def load_lexicon(dictionary_path: str | os.PathLike | None = None,
                 bigram_path: str | os.PathLike | None = None) -> Lexicon:
    """
    Read both files and freeze them into a Lexicon.
    A missing/unreadable file is logged and treated as empty.
    """
    weights = load_dictionary(dictionary_path or DICTIONARY_PATH)
    bigrams = load_bigrams(bigram_path or BIGRAM_PATH)
    return Lexicon(weights, bigrams)
