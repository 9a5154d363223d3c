"""Entropy-based Wordle solving engine."""

from .config import SolverConfig
from .engine import SolverEngine, SolverStatistics, build_engine
from .entropy import (
    entropy,
    entropy_from_counts,
    expected_remaining,
    feedback_index,
    find_max_entropy_guess,
    information_gain,
    score_candidates,
)
from .errors import (
    AlgorithmFailure,
    GameError,
    GameFinished,
    InvalidFormat,
    InvalidGuess,
    NoPossibleWords,
    NoTargetWord,
    WordleError,
)
from .feedback import (
    ALL_CORRECT,
    Feedback,
    FeedbackPattern,
    Guess,
    generate_feedback,
    is_consistent,
    parse_pattern,
)
from .filtering import ConstraintFilter
from .game import GameEngine, GameOutcome
from .providers import FileWordListProvider, StaticWordListProvider, WordListProvider
from .strategy import EntropyStrategy, FrequencyStrategy, SolvingStrategy, build_strategy
from .words import Word, load_words_from_file

__all__ = [
    "ALL_CORRECT",
    "AlgorithmFailure",
    "ConstraintFilter",
    "EntropyStrategy",
    "Feedback",
    "FeedbackPattern",
    "FileWordListProvider",
    "FrequencyStrategy",
    "GameEngine",
    "GameError",
    "GameFinished",
    "GameOutcome",
    "Guess",
    "InvalidFormat",
    "InvalidGuess",
    "NoPossibleWords",
    "NoTargetWord",
    "SolverConfig",
    "SolverEngine",
    "SolverStatistics",
    "SolvingStrategy",
    "StaticWordListProvider",
    "Word",
    "WordListProvider",
    "WordleError",
    "build_engine",
    "build_strategy",
    "entropy",
    "entropy_from_counts",
    "expected_remaining",
    "feedback_index",
    "find_max_entropy_guess",
    "generate_feedback",
    "information_gain",
    "is_consistent",
    "load_words_from_file",
    "parse_pattern",
    "score_candidates",
]
