import pytest

from wordle_engine import AlgorithmFailure, FileWordListProvider, StaticWordListProvider, Word


def test_static_provider_guesses_include_answers():
    p = StaticWordListProvider(["crane", "apple"], ["adieu", "crane"])
    assert p.answer_words == (Word("crane"), Word("apple"))
    assert p.guess_words == (Word("crane"), Word("apple"), Word("adieu"))
    assert p.is_valid_guess(Word("adieu"))
    assert p.is_valid_guess(Word("apple"))
    assert not p.is_valid_guess(Word("zesty"))
    assert p.is_possible_answer(Word("apple"))
    assert not p.is_possible_answer(Word("adieu"))


def test_file_provider(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("adieu\nCRANE\napple\n", encoding="utf-8")
    answers = tmp_path / "answers.txt"
    answers.write_text("crane\n", encoding="utf-8")

    p = FileWordListProvider(str(words), str(answers))
    assert p.answer_words == (Word("crane"),)
    assert set(p.guess_words) == {Word("adieu"), Word("crane"), Word("apple")}


def test_file_provider_without_answers_uses_words(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("adieu\ncrane\n", encoding="utf-8")
    p = FileWordListProvider(str(words))
    assert p.answer_words == p.guess_words


def test_file_provider_rejects_empty_lists(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("toolong\n", encoding="utf-8")
    with pytest.raises(AlgorithmFailure):
        FileWordListProvider(str(words))
