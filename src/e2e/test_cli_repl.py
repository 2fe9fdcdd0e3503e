import json
from pathlib import Path
import pytest
from restorer.__main__ import main
from restorer.config import NO_SOLUTION_MESSAGE

def _seed(tmp: Path) -> list[str]:
    d = tmp / "dictionary.txt"; d.write_text("the:10\ncat:5\n", encoding="utf-8")
    b = tmp / "bigrams.csv"; b.write_text("the,cat,3\n", encoding="utf-8")
    return ["--dictionary", str(d), "--bigrams", str(b)]

def _feed(monkeypatch, lines):
    it = iter(lines)
    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)

@pytest.mark.e2e
def test_repl_session(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, ["th*tca", "x", "qqq", "EXIT", "never read"])
    assert main(_seed(tmp_path)) == 0
    out = capsys.readouterr().out
    assert "SmartTextRestorer is ready!" in out
    assert "Enter the damaged text (2-500 characters):" in out
    assert "Restored text:\nThe cat" in out
    assert "Invalid input!" in out
    assert NO_SOLUTION_MESSAGE in out
    assert out.rstrip().endswith("Goodbye!")

@pytest.mark.e2e
def test_repl_stops_on_eof(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, [])
    assert main(_seed(tmp_path)) == 0
    assert "Goodbye!" in capsys.readouterr().out

@pytest.mark.e2e
def test_single_query_exit_codes(tmp_path: Path, capsys):
    args = _seed(tmp_path)
    assert main(args + ["--q", "c*tth*"]) == 0
    assert "Cat the" in capsys.readouterr().out
    assert main(args + ["--q", "zzz"]) == 1
    assert NO_SOLUTION_MESSAGE in capsys.readouterr().out

@pytest.mark.e2e
def test_single_query_json(tmp_path: Path, capsys):
    assert main(_seed(tmp_path) + ["--q", "th*tca", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["restored"] == "The cat"
    assert data["words"] == ["the", "cat"]
    assert data["score"] == 48

@pytest.mark.e2e
def test_squash_flag(tmp_path: Path, capsys):
    assert main(_seed(tmp_path) + ["--squash", "--q", "the c*t"]) == 0
    assert "The cat" in capsys.readouterr().out

@pytest.mark.e2e
def test_single_query_json_invalid_input(tmp_path: Path, capsys):
    assert main(_seed(tmp_path) + ["--q", "c4t", "--json"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert "error" in data
