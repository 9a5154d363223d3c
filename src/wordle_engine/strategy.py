"""Choosing the next guess.

Two strategies ship: EntropyStrategy (the default, one-step greedy on
expected information) and FrequencyStrategy (cheap letter-frequency
heuristic). build_strategy() picks one from a SolverConfig.
"""

from __future__ import annotations

import abc
import hashlib
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from .config import SolverConfig
from .entropy import argmax, score_candidates
from .errors import AlgorithmFailure, NoPossibleWords
from .logs import LogFn
from .words import Word

Scored = List[Tuple[Word, float]]


class SolvingStrategy(abc.ABC):
    name = "base"

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        *,
        log: Optional[LogFn] = None,
        log_debug: Optional[LogFn] = None,
    ):
        self.config = config if config is not None else SolverConfig()
        self._first_guess = Word.parse(self.config.first_guess)
        self._log = log
        self._log_debug = log_debug

    def _dbg(self, msg: str) -> None:
        if self._log_debug is not None:
            self._log_debug(msg)

    @abc.abstractmethod
    def get_best_guess(self, possible_words: Sequence[Word], candidates: Sequence[Word]) -> Word:
        ...

    @abc.abstractmethod
    def get_top_candidates(
        self,
        possible_words: Sequence[Word],
        candidates: Sequence[Word],
        limit: int,
    ) -> Scored:
        ...

    def get_best_first_guess(self) -> Word:
        # fixed opener: scoring the full dictionary gives the same answer every session
        return self._first_guess

    def clear_cache(self) -> None:
        pass

    # shared by every strategy: 0 words is a contradiction, 1 word is the answer
    def _trivial_guess(self, possible_words: Sequence[Word], candidates: Sequence[Word]) -> Optional[Word]:
        if not possible_words:
            raise NoPossibleWords()
        if len(possible_words) == 1:
            return possible_words[0]
        if not candidates:
            raise AlgorithmFailure("No candidates available")
        return None

    def _endgame_pool(self, possible_words: Sequence[Word], candidates: Sequence[Word]) -> Sequence[Word]:
        """With few words left, only consider guesses that could themselves win.

        Falls back to the full pool when no candidate is a possible answer.
        """
        if len(possible_words) > self.config.endgame_threshold:
            return candidates
        possible_set = set(possible_words)
        answer_candidates = [w for w in candidates if w in possible_set]
        if answer_candidates:
            self._dbg(f"strategy: endgame, scoring {len(answer_candidates)} answer candidates only")
            return answer_candidates
        return candidates

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self.config!r})"


class EntropyStrategy(SolvingStrategy):
    """Pick the candidate that maximises the configured metric.

    Score tables are memoised per (metric, candidate list, possible-word
    list), keyed by content hashes of both lists so that two different sets
    of the same size never share an entry.
    """

    name = "entropy"

    def __init__(self, config: Optional[SolverConfig] = None, **kwargs):
        super().__init__(config, **kwargs)
        self._scores: Dict[str, List[float]] = {}

    # in case we need to hash word lists for caching
    def _hash_word_list(self, words: Sequence[Word]) -> str:
        payload = "\n".join(w.text for w in words).encode("utf-8")
        return hashlib.sha256(payload).hexdigest()

    def _cache_key(self, candidates: Sequence[Word], possible_words: Sequence[Word], metric: str) -> str:
        return (
            f"metric={metric}|pool={self._hash_word_list(candidates)}"
            f"|possible={self._hash_word_list(possible_words)}"
        )

    def score(self, candidates: Sequence[Word], possible_words: Sequence[Word]) -> List[float]:
        metric = self.config.metric
        key = self._cache_key(candidates, possible_words, metric)
        cached = self._scores.get(key)
        if cached is not None:
            self._dbg(f"strategy: cache hit for {len(candidates)} candidates")
            return cached

        scores = score_candidates(
            candidates,
            possible_words,
            metric,
            workers=self.config.workers,
            parallel_threshold=self.config.parallel_threshold,
            show_progress=self.config.show_progress,
            log_debug=self._log_debug,
        )
        self._scores[key] = scores
        return scores

    def get_best_guess(self, possible_words: Sequence[Word], candidates: Sequence[Word]) -> Word:
        trivial = self._trivial_guess(possible_words, candidates)
        if trivial is not None:
            return trivial

        pool = self._endgame_pool(possible_words, candidates)
        scores = self.score(pool, possible_words)
        i = argmax(scores)
        if i is None:
            raise AlgorithmFailure("Could not find best guess")

        if self._log is not None:
            self._log(
                f"strategy: best guess '{pool[i]}' ({self.config.metric}={scores[i]:.4f} bits) "
                f"from {len(pool)} candidates vs {len(possible_words)} possible words"
            )
        return pool[i]

    def get_top_candidates(
        self,
        possible_words: Sequence[Word],
        candidates: Sequence[Word],
        limit: int,
    ) -> Scored:
        if not possible_words or not candidates or limit <= 0:
            return []
        scores = self.score(candidates, possible_words)
        # sort is stable, so ties keep candidate order
        scored = sorted(zip(candidates, scores), key=lambda x: x[1], reverse=True)
        return scored[:limit]

    def clear_cache(self) -> None:
        self._scores.clear()


class FrequencyStrategy(SolvingStrategy):
    """Letter-frequency heuristic.

    A word scores the summed frequency of its distinct letters, with
    frequencies taken over the words that are still possible, so the ranking
    follows the puzzle as it narrows. Only possible answers are suggested.
    """

    name = "frequency"

    @staticmethod
    def score_word(word: Word, letter_counts: Counter, total: int) -> float:
        # integer sum first so equal-scoring words compare equal exactly
        if not total:
            return 0.0
        return sum(letter_counts[ch] for ch in set(word.text)) / total

    def _scored(self, possible_words: Sequence[Word], candidates: Sequence[Word]) -> Scored:
        letter_counts = Counter(ch for w in possible_words for ch in w.text)
        total = sum(letter_counts.values())
        possible_set = set(possible_words)
        pool = [w for w in candidates if w in possible_set] or list(candidates)
        return [(w, self.score_word(w, letter_counts, total)) for w in pool]

    def get_best_guess(self, possible_words: Sequence[Word], candidates: Sequence[Word]) -> Word:
        trivial = self._trivial_guess(possible_words, candidates)
        if trivial is not None:
            return trivial

        scored = self._scored(possible_words, candidates)
        i = argmax([s for _, s in scored])
        if i is None:
            raise AlgorithmFailure("Could not find best guess")
        return scored[i][0]

    def get_top_candidates(
        self,
        possible_words: Sequence[Word],
        candidates: Sequence[Word],
        limit: int,
    ) -> Scored:
        if not possible_words or not candidates or limit <= 0:
            return []
        scored = sorted(self._scored(possible_words, candidates), key=lambda x: x[1], reverse=True)
        return scored[:limit]


STRATEGIES = {
    EntropyStrategy.name: EntropyStrategy,
    FrequencyStrategy.name: FrequencyStrategy,
}


def build_strategy(
    config: Optional[SolverConfig] = None,
    *,
    log: Optional[LogFn] = None,
    log_debug: Optional[LogFn] = None,
) -> SolvingStrategy:
    config = config if config is not None else SolverConfig()
    return STRATEGIES[config.strategy](config, log=log, log_debug=log_debug)
