"""Word list providers.

The engine only needs two lists and a membership test; where the words come
from is the provider's business. Lists must be fully loaded before the
engine is built.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Tuple

from .errors import AlgorithmFailure
from .logs import LogFn
from .words import Word, as_words, load_words_from_file, unique_words


class WordListProvider:
    """Answer words plus the (larger) accepted guess vocabulary.

    The guess vocabulary always contains every answer word.
    """

    def __init__(self, answer_words: Iterable["Word | str"], guess_words: Iterable["Word | str"] = ()):
        self._answers: Tuple[Word, ...] = tuple(unique_words(as_words(answer_words)))
        self._guesses: Tuple[Word, ...] = tuple(unique_words(list(self._answers) + as_words(guess_words)))
        self._guess_set: FrozenSet[Word] = frozenset(self._guesses)
        self._answer_set: FrozenSet[Word] = frozenset(self._answers)

    @property
    def answer_words(self) -> Tuple[Word, ...]:
        return self._answers

    @property
    def guess_words(self) -> Tuple[Word, ...]:
        return self._guesses

    def is_valid_guess(self, word: Word) -> bool:
        return word in self._guess_set

    def is_possible_answer(self, word: Word) -> bool:
        return word in self._answer_set

    def __repr__(self) -> str:
        return f"{type(self).__name__}(answers={len(self._answers)}, guesses={len(self._guesses)})"


class StaticWordListProvider(WordListProvider):
    """In-memory lists. If no guess list is given, answers double as guesses."""


class FileWordListProvider(WordListProvider):
    """Plain text word lists, one word per line.

    Lines that aren't 5 ASCII letters are skipped. If `answers_path` is
    omitted the guess list doubles as the answer list.
    """

    def __init__(
        self,
        words_path: str,
        answers_path: Optional[str] = None,
        *,
        log: Optional[LogFn] = None,
    ):
        allowed = load_words_from_file(words_path)
        answers = load_words_from_file(answers_path) if answers_path else allowed
        if not allowed:
            raise AlgorithmFailure(f"Loaded 0 usable words from {words_path}. Check the file.")
        if not answers:
            raise AlgorithmFailure(f"Loaded 0 usable answers from {answers_path}. Check the file.")
        super().__init__(answers, allowed)
        self.words_path = words_path
        self.answers_path = answers_path
        if log is not None:
            log(f"words: loaded allowed={len(self.guess_words)} answers={len(self.answer_words)}")
