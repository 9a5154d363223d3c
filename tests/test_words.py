import pytest

from wordle_engine import InvalidFormat, Word, load_words_from_file


def test_parse_normalizes_case_and_whitespace():
    assert Word.parse("  CrAnE\n") == Word("crane")
    assert str(Word.parse("ABOUT")) == "about"


@pytest.mark.parametrize("bad", ["", "abcd", "abcdef", "ab1de", "ab de", "cafés", "ab-de"])
def test_parse_rejects_malformed(bad):
    with pytest.raises(InvalidFormat):
        Word.parse(bad)


def test_constructor_does_not_normalize():
    with pytest.raises(InvalidFormat):
        Word("Crane")


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        Word.parse("toolong")


def test_ordering_and_hashing():
    ws = [Word("crane"), Word("about"), Word("bread"), Word("about")]
    assert sorted(set(ws)) == [Word("about"), Word("bread"), Word("crane")]
    assert Word("apple") < Word("apply")


def test_indexing():
    w = Word("crane")
    assert w[0] == "c"
    assert list(w) == ["c", "r", "a", "n", "e"]
    assert len(w) == 5


def test_load_words_from_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("Apple\nabout\nxyz\n\nbread\napple\nab1de\nlonger\n", encoding="utf-8")
    assert load_words_from_file(str(p)) == [Word("apple"), Word("about"), Word("bread")]
