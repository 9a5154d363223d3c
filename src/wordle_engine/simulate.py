"""Self-play simulations: run the solver against known secrets and summarise.

Examples:
  wordle-engine-sim --words official_allowed_guesses.txt --answers shuffled_real_wordles.txt --limit 200
  wordle-engine-sim --max-turns 6 --plot results.png

Use --plot to draw a histogram (needs matplotlib, the "plot" extra).
"""

from __future__ import annotations

import argparse
import dataclasses
import os
import statistics
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import tqdm

from .config import SolverConfig, add_config_arguments
from .engine import SolverEngine
from .errors import NoPossibleWords, WordleError
from .game import GameEngine
from .logs import make_loggers
from .providers import FileWordListProvider
from .words import Word, as_word, load_words_from_file


@dataclass(frozen=True)
class GameResult:
    secret: str
    solved: bool
    turns: int
    # possible words still open when the game ended; 0 after contradictory feedback
    final_candidates: int
    first_guess: str

    @property
    def exhausted(self) -> bool:
        return not self.solved and self.final_candidates == 0


def _existing(path: str) -> Optional[str]:
    return path if os.path.isfile(path) else None


def _games(secrets: Sequence[Word], *, show_progress: bool) -> Iterable[Word]:
    if show_progress:
        return tqdm.tqdm(secrets, desc="Simulating", unit="game")
    return secrets


def simulate_game(
    *,
    secret: "Word | str",
    engine: SolverEngine,
    max_turns: int = 6,
    use_first_guess: bool = True,
) -> GameResult:
    """Play one game against `secret`. The engine is reset first."""
    secret = as_word(secret)
    engine.reset()
    game = GameEngine(secret, max_attempts=max_turns)

    opener = engine.get_best_first_guess()
    use_opener = use_first_guess and engine.provider.is_valid_guess(opener)

    first_guess = ""
    for turn in range(1, max_turns + 1):
        try:
            guess = opener if (turn == 1 and use_opener) else engine.get_best_guess()
        except NoPossibleWords:
            return GameResult(
                secret=secret.text,
                solved=False,
                turns=turn,
                final_candidates=0,
                first_guess=first_guess,
            )

        if turn == 1:
            first_guess = guess.text

        feedback = game.make_guess(guess)
        if feedback.is_win():
            return GameResult(
                secret=secret.text,
                solved=True,
                turns=turn,
                final_candidates=engine.remaining_words_count(),
                first_guess=first_guess,
            )

        engine.add_guess_result(guess, feedback)

    return GameResult(
        secret=secret.text,
        solved=False,
        turns=max_turns,
        final_candidates=engine.remaining_words_count(),
        first_guess=first_guess,
    )


def summarize(results: Iterable[GameResult]) -> str:
    """Human-readable report of a batch of simulated games."""
    results = list(results)
    if not results:
        return "No results."

    total = len(results)
    solved = [r for r in results if r.solved]
    failed = [r for r in results if not r.solved]
    exhausted = [r for r in failed if r.exhausted]

    lines: List[str] = [
        f"Games: {total}",
        f"Solved: {len(solved)} ({len(solved) / total * 100:.2f}%)",
        f"Failed: {len(failed)} ({len(failed) / total * 100:.2f}%)",
    ]

    if solved:
        turns = [r.turns for r in solved]
        by_turn = Counter(turns)
        lines.append(f"Avg turns (solved): {statistics.mean(turns):.3f}")
        lines.append(f"Median turns (solved): {statistics.median(turns):.1f}")
        lines.append("Turn distribution (solved): " + ", ".join(f"{t}:{by_turn[t]}" for t in sorted(by_turn)))

    openers = Counter(r.first_guess for r in results if r.first_guess)
    if openers:
        opener, count = openers.most_common(1)[0]
        lines.append(f"Most common first guess: {opener} ({count} / {total})")

    if failed:
        left = [r.final_candidates for r in failed]
        lines.append(f"Words left on failure: avg {statistics.mean(left):.2f}, max {max(left)}")
        lines.append(
            "Failed examples (up to 10): "
            + ", ".join(f"{r.secret} ({r.final_candidates} left)" for r in failed[:10])
        )
    if exhausted:
        lines.append(f"Ran out of candidates: {len(exhausted)} (word list does not cover the secret)")

    return "\n".join(lines)


def plot_results(*, results: List[GameResult], max_turns: int, out_path: str) -> None:
    # Import matplotlib only if plotting is requested.
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    total = len(results)
    solved = [r for r in results if r.solved]
    exhausted = sum(1 for r in results if r.exhausted)
    out_of_turns = total - len(solved) - exhausted

    by_turn = Counter(r.turns for r in solved)
    xs = list(range(1, max_turns + 1))
    fail_x = max_turns + 1

    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.bar(xs, [by_turn.get(t, 0) for t in xs], label="Solved", color="C0")
    ax.bar([fail_x], [out_of_turns], label="Out of turns", color="C3")
    ax.bar([fail_x], [exhausted], bottom=[out_of_turns], label="No candidates left", color="C1")

    ax.set_title("Solver self-play results")
    ax.set_xlabel("Turns to solve")
    ax.set_ylabel("# games")
    ax.set_xticks(xs + [fail_x])
    ax.set_xticklabels([str(t) for t in xs] + ["fail"])

    solved_pct = (len(solved) / total * 100.0) if total else 0.0
    ax.text(
        0.99,
        0.95,
        f"Solved: {len(solved)}/{total} ({solved_pct:.1f}%)",
        transform=ax.transAxes,
        ha="right",
        va="top",
    )

    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run solver self-play simulations and print statistics.")
    ap.add_argument("--words", type=str, default=None, help="Allowed guess list (5-letter words).")
    ap.add_argument("--answers", type=str, default=None, help="Possible answers list (5-letter words).")
    ap.add_argument(
        "--secrets",
        type=str,
        default=None,
        help="Secrets to test (defaults to the answer list).",
    )
    ap.add_argument("--limit", type=int, default=0, help="Limit number of secrets (0 = no limit).")
    ap.add_argument("--max-turns", type=int, default=6, help="Max turns per game.")
    ap.add_argument("--no-opener", action="store_true", help="Score the first guess instead of using the fixed opener.")
    ap.add_argument("--plot", type=str, default=None, help="Write a matplotlib graph to this path (e.g. results.png).")
    ap.add_argument("--verbose", action="store_true", help="Print solver progress to stderr.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs.")
    add_config_arguments(ap)
    args = ap.parse_args(argv)

    log, log_debug = make_loggers(args.verbose, args.debug)

    words_path = args.words or _existing("official_allowed_guesses.txt")
    if not words_path:
        print("No default word list found. Provide --words.", file=sys.stderr)
        return 2
    answers_path = args.answers or _existing("shuffled_real_wordles.txt")

    try:
        config = SolverConfig.from_args(args)
        provider = FileWordListProvider(words_path, answers_path, log=log)
        # per-turn scoring bars would drown the per-game bar
        engine = SolverEngine(
            provider,
            config=dataclasses.replace(config, show_progress=False),
            log=log,
            log_debug=log_debug,
        )
    except (ValueError, OSError, WordleError) as e:
        print(f"{e}", file=sys.stderr)
        return 2

    secrets = load_words_from_file(args.secrets) if args.secrets else list(provider.answer_words)
    if args.limit and args.limit > 0:
        secrets = secrets[: args.limit]

    skipped = 0
    results: List[GameResult] = []

    for secret in _games(secrets, show_progress=config.show_progress):
        if not provider.is_possible_answer(secret):
            skipped += 1
            continue
        results.append(
            simulate_game(
                secret=secret,
                engine=engine,
                max_turns=args.max_turns,
                use_first_guess=not args.no_opener,
            )
        )

    if skipped:
        print(f"Skipped {skipped} secrets not in possible answers.")

    print(summarize(results))

    if args.plot:
        try:
            plot_results(results=results, max_turns=args.max_turns, out_path=args.plot)
            print(f"Wrote plot: {args.plot}")
        except ModuleNotFoundError as e:
            print(f"Plot requested but missing dependency: {e}. Install matplotlib to use --plot.", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
