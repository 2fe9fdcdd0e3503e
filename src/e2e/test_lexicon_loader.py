# src/e2e/test_lexicon_loader.py

import logging
from pathlib import Path

import pytest

from restorer.lexicon import Lexicon
from restorer.loader import (
    build_weights,
    load_lexicon,
    parse_bigram_line,
    parse_dictionary_line,
)
from restorer.models import BigramRecord, Literal, Weighted


# ---------- Lexicon ----------

def test_weight_of_defaults_to_one():
    lex = Lexicon({"cat": 5})
    assert lex.weight_of("cat") == 5
    assert lex.weight_of("unknown") == 1


def test_bigram_weight_absent_and_start_of_sentence():
    lex = Lexicon({"the": 1, "cat": 1}, {"the": {"cat": 7}, "": {"cat": 9}})
    assert lex.bigram_weight("the", "cat") == 7
    assert lex.bigram_weight("cat", "the") == 0    # not symmetric
    assert lex.bigram_weight("dog", "cat") == 0
    assert lex.bigram_weight("", "cat") == 0       # empty predecessor = sentence start


def test_lexicon_is_read_only_and_detached_from_source():
    weights = {"cat": 5}
    bigrams = {"the": {"cat": 2}}
    lex = Lexicon(weights, bigrams)
    weights["dog"] = 3
    bigrams["the"]["cat"] = 100

    assert "dog" not in lex
    assert lex.bigram_weight("the", "cat") == 2
    with pytest.raises(TypeError):
        lex.weights["dog"] = 1  # type: ignore[index]
    with pytest.raises(TypeError):
        lex.bigrams["the"]["cat"] = 1  # type: ignore[index]


def test_words_of_length_and_counts():
    lex = Lexicon({"a": 1, "at": 1, "cat": 1, "dog": 1}, {"a": {"cat": 1, "dog": 2}})
    assert sorted(lex.words_of_length(3)) == ["cat", "dog"]
    assert lex.words_of_length(9) == ()
    assert len(lex) == 4
    assert lex.bigram_count() == 2


# ---------- dictionary records ----------

@pytest.mark.parametrize("raw,expected", [
    ("Cat", Weighted("cat", 1)),
    ("  dog:7  ", Weighted("dog", 7)),
    ("fox:-3", Weighted("fox", -3)),
    ("word : 5", Weighted("word", 5)),  # fields around the colon are trimmed
    ("cat :5", Weighted("cat", 5)),
    ("fox:abc", Literal("fox:abc")),     # weight does not parse -> whole line is the key
    ("fox:1.5", Literal("fox:1.5")),
    ("", None),
    ("   ", None),
    ("a:b:c", None),                    # three fields
    ("word:", None),                    # no weight field at all
    (":5", None),                       # no word
])
def test_parse_dictionary_line(raw, expected):
    assert parse_dictionary_line(raw) == expected


def test_build_weights_literal_fallback_and_overwrite():
    weights = build_weights(["cat:2", "fox:abc", "", "cat:9", "Owl"])
    assert weights == {"cat": 9, "fox:abc": 1, "owl": 1}


# ---------- bigram records ----------

def test_parse_bigram_line_trims_fields():
    assert parse_bigram_line(" The , cat ,5") == BigramRecord("the", "cat", 5)


@pytest.mark.parametrize("raw", ["a,b", "a,b,c,d", "", "a,b,"])
def test_parse_bigram_line_wrong_field_count(raw):
    assert parse_bigram_line(raw) is None


def test_parse_bigram_line_non_integer_score_is_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="restorer.loader"):
        assert parse_bigram_line("word1,word2,score") is None
    assert "non-integer score" in caplog.text


# ---------- files ----------

def _seed(tmp: Path) -> tuple[Path, Path]:
    d = tmp / "dictionary.txt"
    d.write_text("The:10\ncat:5\n\nact\nfox:abc\n", encoding="utf-8")
    b = tmp / "bigrams.csv"
    b.write_text("word1,word2,score\nthe,cat,3\nbroken line\nthe,act,x\n", encoding="utf-8")
    return d, b


def test_load_lexicon_from_files(tmp_path: Path):
    d, b = _seed(tmp_path)
    lex = load_lexicon(d, b)
    assert dict(lex.weights) == {"the": 10, "cat": 5, "act": 1, "fox:abc": 1}
    assert lex.bigram_weight("the", "cat") == 3
    assert lex.bigram_weight("the", "act") == 0
    assert lex.bigram_count() == 1


def test_missing_files_are_logged_and_yield_empty_lexicon(tmp_path: Path, caplog):
    with caplog.at_level(logging.ERROR, logger="restorer.loader"):
        lex = load_lexicon(tmp_path / "nope.txt", tmp_path / "nope.csv")
    assert len(lex) == 0 and lex.bigram_count() == 0
    assert "nope.txt" in caplog.text and "nope.csv" in caplog.text


def test_from_lines_matches_file_rules():
    lex = Lexicon.from_lines(["the:10", "cat"], ["the,cat,4"])
    assert lex.weight_of("the") == 10
    assert lex.weight_of("cat") == 1
    assert lex.bigram_weight("the", "cat") == 4
