#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from thaispell.spellcheck.engine import NorvigSpellChecker
from thaispell.spellcheck.timing import LoggingTimingHook


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Suggest spelling corrections for Thai words."
    )
    parser.add_argument("words", nargs="+", help="Words to check")
    parser.add_argument("--timing", action="store_true", help="Log per-stage timings")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.timing else logging.INFO)

    checker = NorvigSpellChecker.create(timing_hook=LoggingTimingHook() if args.timing else None)
    for word in args.words:
        candidates = checker.spell(word)
        print(f"Candidates for '{word}': {candidates}")
        print(f"Correction: {checker.correct(word)}")


if __name__ == "__main__":
    main()
