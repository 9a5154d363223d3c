"""The solver engine: possible words, guess history, and the strategy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import SolverConfig
from .errors import InvalidGuess, NoPossibleWords
from .feedback import FeedbackPattern, Guess
from .filtering import ConstraintFilter
from .logs import LogFn
from .providers import StaticWordListProvider, WordListProvider
from .strategy import SolvingStrategy, build_strategy
from .words import Word, as_word


@dataclass(frozen=True)
class SolverStatistics:
    """Read-only snapshot for display; never fed back into scoring."""

    total_guesses: int = 0
    remaining_words: int = 0
    is_solved: bool = False
    possible_words_sample: Tuple[Word, ...] = ()
    entropy_scores: Tuple[Tuple[Word, float], ...] = ()


class SolverEngine:
    """One puzzle session.

    Feed it (guess, feedback) pairs with add_guess_result(); ask for the
    next guess with get_best_guess(). The candidate pool (answers plus
    allowed guesses, sorted and de-duplicated) is built once here and never
    changes; the possible-word set only shrinks until reset().
    """

    def __init__(
        self,
        provider: WordListProvider,
        strategy: Optional[SolvingStrategy] = None,
        constraint_filter: Optional[ConstraintFilter] = None,
        config: Optional[SolverConfig] = None,
        *,
        log: Optional[LogFn] = None,
        log_debug: Optional[LogFn] = None,
    ):
        self.provider = provider
        if strategy is not None:
            # an injected strategy already carries the scoring config
            if config is not None and config != strategy.config:
                raise ValueError("config does not match the injected strategy's config")
            self.config = strategy.config
        else:
            self.config = config if config is not None else SolverConfig()
        self.strategy = strategy if strategy is not None else build_strategy(self.config, log=log, log_debug=log_debug)
        self.constraint_filter = constraint_filter if constraint_filter is not None else ConstraintFilter()
        self._log = log

        self.candidates: Tuple[Word, ...] = tuple(sorted(set(provider.answer_words) | set(provider.guess_words)))
        self.possible_words: List[Word] = list(provider.answer_words)
        self._history: List[Guess] = []

    def _info(self, msg: str) -> None:
        if self._log is not None:
            self._log(msg)

    @property
    def guess_history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    def add_guess_result(self, word: "Word | str", feedback: "FeedbackPattern | str") -> None:
        """Record one guess and its feedback, then re-filter.

        Raises InvalidFormat / InvalidGuess before touching any state.
        """
        word = as_word(word)
        if not isinstance(feedback, FeedbackPattern):
            feedback = FeedbackPattern.from_code(feedback)
        if not self.provider.is_valid_guess(word):
            raise InvalidGuess(word.text)

        self._history.append(Guess(word, feedback))
        before = len(self.possible_words)
        self.possible_words = self.constraint_filter.filter_words(self.possible_words, self._history)
        self._info(f"solver: '{word}' {feedback.code} filtered candidates {before} -> {len(self.possible_words)}")

    def get_best_guess(self) -> Word:
        if not self.possible_words:
            raise NoPossibleWords()
        if len(self.possible_words) == 1:
            return self.possible_words[0]
        return self.strategy.get_best_guess(self.possible_words, self.candidates)

    def get_best_first_guess(self) -> Word:
        return self.strategy.get_best_first_guess()

    def get_top_candidates(self, limit: int) -> List[Tuple[Word, float]]:
        if not self.possible_words:
            return []
        return self.strategy.get_top_candidates(self.possible_words, self.candidates, limit)

    def remaining_words_count(self) -> int:
        return len(self.possible_words)

    def get_possible_words(self, limit: Optional[int] = None) -> List[Word]:
        if limit is None:
            return list(self.possible_words)
        return self.possible_words[:limit]

    def is_solved(self) -> bool:
        return len(self.possible_words) == 1 and bool(self._history) and self._history[-1].is_winning()

    def reset(self) -> None:
        self.possible_words = list(self.provider.answer_words)
        self._history.clear()
        self.strategy.clear_cache()
        self._info("solver: reset")

    def get_statistics(self, top: int = 0) -> SolverStatistics:
        return SolverStatistics(
            total_guesses=len(self._history),
            remaining_words=len(self.possible_words),
            is_solved=self.is_solved(),
            possible_words_sample=tuple(self.get_possible_words(self.config.sample_size)),
            entropy_scores=tuple(self.get_top_candidates(top)) if top > 0 else (),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(strategy={self.strategy.name}, candidates={len(self.candidates)}, "
            f"possible_words={len(self.possible_words)}, guesses={len(self._history)})"
        )


def build_engine(
    answer_words: Sequence["Word | str"],
    guess_words: Sequence["Word | str"] = (),
    config: Optional[SolverConfig] = None,
    **kwargs,
) -> SolverEngine:
    """Convenience for in-memory word lists."""
    return SolverEngine(StaticWordListProvider(answer_words, guess_words), config=config, **kwargs)
