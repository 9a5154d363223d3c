import pytest

from wordle_engine import Word, build_engine

SMALL_ANSWERS = ["apple", "about", "bread", "crane"]


def words(*texts):
    return [Word(t) for t in texts]


@pytest.fixture
def small_answers():
    return words(*SMALL_ANSWERS)


@pytest.fixture
def engine():
    return build_engine(SMALL_ANSWERS)


@pytest.fixture
def three_words():
    return words("apple", "bread", "crane")
