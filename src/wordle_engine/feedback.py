"""Wordle feedback: the colour rule, the pattern type, and its wire format.

Feedback format on the wire is 5 digits over {0,1,2}, position-aligned with
the guess:
- 2 = green  (Correct: right letter, right place)
- 1 = yellow (Present: letter is elsewhere in the word)
- 0 = gray   (Absent)

The interactive helper also accepts g/y/b letters, see parse_pattern().
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .errors import InvalidFormat
from .words import WORD_LENGTH, Word

PATTERN_COUNT = 3 ** WORD_LENGTH  # 243


class Feedback(enum.IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @classmethod
    def from_code(cls, ch: str) -> "Feedback":
        if ch not in ("0", "1", "2"):
            raise InvalidFormat(f"Invalid feedback code: {ch!r}")
        return cls(int(ch))

    @property
    def code(self) -> str:
        return str(int(self))

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Feedback.CORRECT: "\U0001F7E9",
    Feedback.PRESENT: "\U0001F7E8",
    Feedback.ABSENT: "⬜",
}


# core of the colour rule, on raw strings; returns digits in {0,1,2}
def score_letters(guess: str, target: str) -> List[int]:
    res = [0] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # first pass: greens consume their target position
    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            res[i] = 2
            used[i] = True

    # second pass: yellows, leftmost unconsumed match only
    for i in range(WORD_LENGTH):
        if res[i]:
            continue
        g_ch = guess[i]
        for j in range(WORD_LENGTH):
            if not used[j] and target[j] == g_ch:
                res[i] = 1
                used[j] = True
                break

    return res


def digits_to_index(digits: Sequence[int]) -> int:
    # base-3, little-endian over position
    return digits[0] + 3 * digits[1] + 9 * digits[2] + 27 * digits[3] + 81 * digits[4]


@dataclass(frozen=True)
class FeedbackPattern:
    """Five Feedback values for one guess."""

    values: Tuple[Feedback, ...]

    def __post_init__(self):
        if len(self.values) != WORD_LENGTH:
            raise InvalidFormat(f"Feedback pattern must have {WORD_LENGTH} entries, got {len(self.values)}")
        try:
            values = tuple(Feedback(v) for v in self.values)
        except ValueError as e:
            raise InvalidFormat(f"Invalid feedback value in {self.values!r}") from e
        object.__setattr__(self, "values", values)

    @classmethod
    def from_code(cls, code: str) -> "FeedbackPattern":
        if not isinstance(code, str) or len(code) != WORD_LENGTH:
            raise InvalidFormat(f"Code string must be exactly {WORD_LENGTH} characters, got {code!r}")
        return cls(tuple(Feedback.from_code(ch) for ch in code))

    @classmethod
    def from_index(cls, index: int) -> "FeedbackPattern":
        if not 0 <= index < PATTERN_COUNT:
            raise InvalidFormat(f"Feedback index must be in [0, {PATTERN_COUNT}), got {index}")
        digits = []
        for _ in range(WORD_LENGTH):
            index, d = divmod(index, 3)
            digits.append(d)
        return cls(tuple(digits))

    @property
    def code(self) -> str:
        return "".join(f.code for f in self.values)

    @property
    def index(self) -> int:
        return digits_to_index(self.values)

    def is_win(self) -> bool:
        return all(f is Feedback.CORRECT for f in self.values)

    def __getitem__(self, i: int) -> Feedback:
        return self.values[i]

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return WORD_LENGTH

    def __str__(self) -> str:
        return "".join(f.symbol for f in self.values)


ALL_CORRECT = FeedbackPattern((Feedback.CORRECT,) * WORD_LENGTH)


# parse_pattern converts a string like 'bygyb' or '02120' into a FeedbackPattern
def parse_pattern(s: str) -> FeedbackPattern:
    s = s.strip().lower()
    if re.fullmatch(r"[gyb]{5}", s):
        m = {"b": 0, "y": 1, "g": 2}
        return FeedbackPattern(tuple(m[ch] for ch in s))
    if re.fullmatch(r"[012]{5}", s):
        return FeedbackPattern.from_code(s)
    raise InvalidFormat("Pattern must be 5 chars of [g,y,b] or [0,1,2]. Example: 'bygyb' or '02120'.")


@dataclass(frozen=True)
class Guess:
    word: Word
    feedback: FeedbackPattern

    def is_winning(self) -> bool:
        return self.feedback.is_win()


def generate_feedback(guess: Word, target: Word) -> FeedbackPattern:
    """Colour `guess` against `target` the way the real game does.

    Repeated letters are the tricky part: greens are taken first, then each
    remaining guess letter claims the leftmost unclaimed matching letter of
    the target. Guessing "epees" against "teeth" gives 10200; the third "e"
    finds nothing left to claim.
    """
    return FeedbackPattern(tuple(score_letters(guess.text, target.text)))


def is_consistent(word: Word, history: Iterable[Guess]) -> bool:
    """True when `word` would have produced every recorded feedback."""
    for guess in history:
        if generate_feedback(guess.word, word) != guess.feedback:
            return False
    return True
