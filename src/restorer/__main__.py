from __future__ import annotations
import argparse, json, os, sys
from dataclasses import asdict

from . import config as CFG
from .engine import Engine, InvalidInputError

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _run_query(eng: Engine, raw: str, as_json: bool) -> bool:
    """Restore one line and print the outcome. Returns True when a sentence was produced."""
    try:
        res = eng.restore(raw)
    except InvalidInputError as e:
        if as_json:
            print(json.dumps({"error": str(e)}, ensure_ascii=False))
        else:
            print(_c(f"Invalid input! {e}", "1;31"))
        return False

    if as_json:
        print(json.dumps(asdict(res), ensure_ascii=False, indent=2))
    elif res.restored is None:
        print(_c(CFG.NO_SOLUTION_MESSAGE, "1;33"))
    else:
        print("\nRestored text:")
        print(_c(res.restored, "1;37"))
    return res.solved

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Smart text restorer REPL (wildcards and anagrams)")
    parser.add_argument("--dictionary", default=None, help="Dictionary file: word or word:weight per line")
    parser.add_argument("--bigrams", default=None, help="Bigram file: word1,word2,score per line")
    parser.add_argument("--squash", action="store_true", help="Ignore spaces/punctuation in the input")
    parser.add_argument("--max-word-length", type=int, default=None)
    parser.add_argument("--q", default=None, help="Single damaged text to restore, then exit")
    parser.add_argument("--json", action="store_true", help="Emit JSON results")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    eng = Engine(squash=args.squash or None, max_word_length=args.max_word_length)
    try:
        eng.load(dictionary=args.dictionary, bigrams=args.bigrams, verbose=args.verbose)

        if args.q is not None:
            return 0 if _run_query(eng, args.q, args.json) else 1

        print(f"SmartTextRestorer is ready! Type '{CFG.EXIT_COMMAND}' to quit.")
        while True:
            print(f"\nEnter the damaged text ({CFG.MIN_TEXT_LENGTH}-{CFG.MAX_TEXT_LENGTH} characters):")
            try:
                raw = input()
            except (EOFError, KeyboardInterrupt):
                print(); break
            if raw.strip().lower() == CFG.EXIT_COMMAND:
                break
            _run_query(eng, raw, args.json)

        print("Exiting SmartTextRestorer. Goodbye!")
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
