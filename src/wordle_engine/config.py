"""Solver configuration.

SolverConfig carries every tunable policy knob. The CLIs map their argparse
flags onto it with add_config_arguments() / SolverConfig.from_args().
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

STRATEGIES = ("entropy", "frequency")
METRICS = ("entropy", "information_gain")

DEFAULT_FIRST_GUESS = "adieu"


@dataclass(frozen=True)
class SolverConfig:
    strategy: str = "entropy"
    metric: str = "entropy"
    first_guess: str = DEFAULT_FIRST_GUESS
    # at or below this many possible words, prefer guesses that can still win
    endgame_threshold: int = 3
    workers: int = 1
    # smallest candidate pool worth handing to a process pool
    parallel_threshold: int = 500
    sample_size: int = 10
    show_progress: bool = False

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {STRATEGIES}, got {self.strategy!r}")
        if self.metric not in METRICS:
            raise ValueError(f"metric must be one of {METRICS}, got {self.metric!r}")
        if self.endgame_threshold < 0:
            raise ValueError("endgame_threshold must be >= 0")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.parallel_threshold < 1:
            raise ValueError("parallel_threshold must be >= 1")
        if self.sample_size < 0:
            raise ValueError("sample_size must be >= 0")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SolverConfig":
        return cls(
            strategy=args.strategy,
            metric=args.metric,
            first_guess=args.first_guess or DEFAULT_FIRST_GUESS,
            endgame_threshold=args.endgame_threshold,
            workers=args.workers,
            parallel_threshold=args.parallel_threshold,
            show_progress=not getattr(args, "no_progress", False),
        )


def add_config_arguments(ap: argparse.ArgumentParser) -> None:
    defaults = SolverConfig()
    ap.add_argument("--strategy", choices=STRATEGIES, default=defaults.strategy,
                    help="Guess selection strategy.")
    ap.add_argument("--metric", choices=METRICS, default=defaults.metric,
                    help="Score used to rank guesses (entropy strategy only).")
    ap.add_argument("--first-guess", type=str, default=None,
                    help=f"Opening guess (default: {DEFAULT_FIRST_GUESS}).")
    ap.add_argument("--endgame-threshold", type=int, default=defaults.endgame_threshold,
                    help="With this many candidates or fewer, prefer guesses that could be the answer.")
    ap.add_argument("--workers", type=int, default=defaults.workers,
                    help="Processes used to score large candidate pools.")
    ap.add_argument("--parallel-threshold", type=int, default=defaults.parallel_threshold,
                    help="Minimum candidate pool size before scoring goes parallel.")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
