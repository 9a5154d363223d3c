"""Interactive helper: suggests guesses by maximizing expected information.

You play Wordle elsewhere; after each guess you type the feedback pattern here.

Feedback format:
- 5 digits of 2 (green), 1 (yellow), 0 (gray), e.g. "02120"
- or 5 letters of g / y / b, e.g. "bygyb"

Usage:
  wordle-engine --words official_allowed_guesses.txt --answers shuffled_real_wordles.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import SolverConfig, add_config_arguments
from .engine import SolverEngine
from .errors import WordleError
from .feedback import parse_pattern
from .logs import make_loggers
from .providers import FileWordListProvider


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip().lower()
    except EOFError:
        return "quit"


def run(engine: SolverEngine, *, top: int = 10, score_first: bool = False) -> int:
    print("\n=== Wordle Entropy Solver ===")
    print(f"Allowed guesses: {len(engine.provider.guess_words)}")
    print(f"Possible answers: {len(engine.provider.answer_words)}")
    print("Feedback input: 5 letters [g,y,b] or digits [2,1,0]. Example: bygyb or 02120")
    print("Type 'quit' to exit, 'reset' to start over.\n")

    turn = 1
    while True:
        n = engine.remaining_words_count()
        if n == 0:
            print("No candidates left. Either the word list doesn't match the game's dictionary,")
            print("or a feedback pattern was mistyped. Type 'reset' to start over.")
        else:
            print(f"Turn {turn} | Remaining candidates: {n}")
            if n <= 20:
                print("Candidates:", " ".join(w.text for w in engine.get_possible_words()))

        best_word = None
        if n:
            try:
                opener = engine.get_best_first_guess()
                if turn == 1 and not score_first and n > 1 and engine.provider.is_valid_guess(opener):
                    best_word = opener
                else:
                    suggestions = engine.get_top_candidates(top)
                    best_word = engine.get_best_guess()
                    print("\nTop suggestions (guess | expected bits):")
                    for w, h in suggestions:
                        print(f"  {w}  |  {h:.4f}")
            except WordleError as e:
                print(f"{e}", file=sys.stderr)
                return 1
            print(f"\nSuggested guess: {best_word}\n")

        if n == 1:
            print(f"There's only one word left, the answer is {best_word}!\n")
            return 0

        guess = _ask("Enter the guess you used (or press Enter to use suggested): ")
        if guess == "quit":
            return 0
        if guess == "reset":
            engine.reset()
            turn = 1
            print("")
            continue
        if guess == "":
            if best_word is None:
                continue
            guess = best_word.text

        pat_s = _ask("Enter the feedback pattern (g/y/b or 2/1/0): ")
        if pat_s == "quit":
            return 0

        try:
            pattern = parse_pattern(pat_s)
            engine.add_guess_result(guess, pattern)
        except WordleError as e:
            print(f"{e}\n")
            continue

        if pattern.is_win():
            print(f"Solved in {turn} turns.\n")
            return 0

        print("")
        turn += 1


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle entropy solver (interactive CLI).")
    ap.add_argument("--words", type=str, default=None,
                    help="Path to allowed guess words (5-letter). One per line.")
    ap.add_argument("--answers", type=str, default=None,
                    help="Path to possible answer words (5-letter). One per line. If omitted, uses --words list.")
    ap.add_argument("--top", type=int, default=10, help="How many suggestions to show each turn.")
    ap.add_argument("--score-first", action="store_true",
                    help="Score the opening guess instead of using the fixed opener.")
    ap.add_argument("--verbose", action="store_true", help="Print solver progress to stderr.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs.")
    add_config_arguments(ap)
    args = ap.parse_args(argv)

    if args.words is None:
        print("No default word list found. Provide one with --words.", file=sys.stderr)
        return 1

    log, log_debug = make_loggers(args.verbose, args.debug)
    try:
        config = SolverConfig.from_args(args)
        provider = FileWordListProvider(args.words, args.answers, log=log)
        engine = SolverEngine(provider, config=config, log=log, log_debug=log_debug)
    except (ValueError, OSError, WordleError) as e:
        print(f"{e}", file=sys.stderr)
        return 1

    return run(engine, top=args.top, score_first=args.score_first)


if __name__ == "__main__":
    raise SystemExit(main())
