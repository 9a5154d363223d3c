"""Shrinking the possible-word set from the guess history."""

from __future__ import annotations

from typing import List, Sequence

from .feedback import Guess, is_consistent
from .words import Word


class ConstraintFilter:
    """Keeps the words that would have produced every recorded feedback.

    Cost is len(words) * len(history) feedback computations; history is at
    most a handful of guesses, so there is nothing to index.
    """

    def satisfies_constraints(self, word: Word, history: Sequence[Guess]) -> bool:
        return is_consistent(word, history)

    def filter_words(self, words: Sequence[Word], history: Sequence[Guess]) -> List[Word]:
        # order preserving
        return [w for w in words if self.satisfies_constraints(w, history)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
