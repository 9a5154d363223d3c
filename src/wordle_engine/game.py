"""A minimal game: a hidden target that scores guesses.

Used for self-play in the simulator; the solver itself never sees the
target.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import GameFinished, NoTargetWord
from .feedback import FeedbackPattern, Guess, generate_feedback
from .words import Word, as_word

MAX_ATTEMPTS = 6


@dataclass(frozen=True)
class GameOutcome:
    """in_progress, won or failed; `word` is set only when won."""

    status: str = "in_progress"
    attempts: int = 0
    word: Optional[Word] = None
    reason: str = ""

    def is_finished(self) -> bool:
        return self.status != "in_progress"

    def is_won(self) -> bool:
        return self.status == "won"


class GameEngine:
    def __init__(self, target: "Word | str | None" = None, max_attempts: int = MAX_ATTEMPTS):
        self.max_attempts = max_attempts
        self._target: Optional[Word] = None
        self._history: List[Guess] = []
        self._outcome = GameOutcome()
        if target is not None:
            self.set_target(target)

    @property
    def target(self) -> Optional[Word]:
        return self._target

    @property
    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    @property
    def attempts(self) -> int:
        return len(self._history)

    @property
    def result(self) -> GameOutcome:
        return self._outcome

    def is_finished(self) -> bool:
        return self._outcome.is_finished()

    def set_target(self, word: "Word | str") -> None:
        # starts a fresh game
        self._target = as_word(word)
        self._history = []
        self._outcome = GameOutcome()

    def make_guess(self, guess: "Word | str") -> FeedbackPattern:
        if self.is_finished():
            raise GameFinished()
        if self._target is None:
            raise NoTargetWord()

        guess = as_word(guess)
        feedback = generate_feedback(guess, self._target)
        self._history.append(Guess(guess, feedback))

        if feedback.is_win():
            self._outcome = GameOutcome("won", self.attempts, word=self._target)
        elif self.attempts >= self.max_attempts:
            self._outcome = GameOutcome("failed", self.attempts, reason="Maximum attempts exceeded")
        else:
            self._outcome = GameOutcome("in_progress", self.attempts)
        return feedback
