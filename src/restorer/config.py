from __future__ import annotations
from pathlib import Path

# Input bounds for the interactive surface
MIN_TEXT_LENGTH: int = 2
MAX_TEXT_LENGTH: int = 500

# Allowed characters for damaged text (letters, whitespace, punctuation, wildcard)
INPUT_PATTERN: str = r"[a-zA-Z\s.,;:'\"!?\-\*]*"

# Marker standing for "any single character"
WILDCARD: str = "*"

# Search tuning
MAX_WORD_LENGTH: int = 15          # longest fragment tried at each position
LENGTH_BONUS_MULTIPLIER: int = 5   # score per character of a chosen word
DEFAULT_WEIGHT: int = 1            # weight for unannotated dictionary words

# /* ~~~ drop whitespace/punctuation before searching (off = reference behavior) ~~~ */
SQUASH_SEPARATORS: bool = False

# Bundled sample lexicon
DATA_DIR = Path(__file__).resolve().parent / "data"
DICTIONARY_PATH = DATA_DIR / "dictionary.txt"
BIGRAM_PATH = DATA_DIR / "bigrams.csv"

# REPL
EXIT_COMMAND: str = "exit"
NO_SOLUTION_MESSAGE: str = (
    "Error: Not enough words in the dictionary to restore the text. "
    "We are working on expanding the dictionary."
)
