"""The Word value type and plain-text word list loading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .errors import InvalidFormat

WORD_LENGTH = 5

_LOWERCASE = frozenset("abcdefghijklmnopqrstuvwxyz")


@dataclass(frozen=True, order=True)
class Word:
    """An immutable 5-letter lowercase ASCII word.

    Ordering is plain string ordering, which for [a-z] is byte order, so
    sorted word lists can be bisected.
    """

    text: str

    def __post_init__(self):
        if not isinstance(self.text, str) or len(self.text) != WORD_LENGTH:
            raise InvalidFormat(
                f"Word must be exactly {WORD_LENGTH} characters, got {self.text!r}"
            )
        if not _LOWERCASE.issuperset(self.text):
            raise InvalidFormat(f"Word must contain only lowercase ASCII letters, got {self.text!r}")

    @classmethod
    def parse(cls, text: str) -> "Word":
        """Parse user input: surrounding whitespace is dropped, case is folded."""
        if not isinstance(text, str):
            raise InvalidFormat(f"Word must be a string, got {type(text).__name__}")
        s = text.strip()
        if len(s) != WORD_LENGTH or not (s.isascii() and s.isalpha()):
            raise InvalidFormat(f"Invalid word format: '{text}'. Must be exactly {WORD_LENGTH} letters.")
        return cls(s.lower())

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return WORD_LENGTH

    def __getitem__(self, i: int) -> str:
        return self.text[i]

    def __iter__(self):
        return iter(self.text)


def as_word(value: "Word | str") -> Word:
    return value if isinstance(value, Word) else Word.parse(value)


def as_words(values: Iterable["Word | str"]) -> List[Word]:
    return [as_word(v) for v in values]


# dedupe while keeping first-seen order
def unique_words(words: Iterable[Word]) -> List[Word]:
    return list(dict.fromkeys(words))


# load_words_from_file loads a list of 5-letter words from a file, one per line
def load_words_from_file(path: str) -> List[Word]:
    words: List[Word] = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            w = line.strip().lower()
            if len(w) == WORD_LENGTH and w.isascii() and w.isalpha():
                words.append(Word(w))
    return unique_words(words)
