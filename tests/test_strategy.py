import math

import pytest

from wordle_engine import (
    AlgorithmFailure,
    EntropyStrategy,
    FrequencyStrategy,
    NoPossibleWords,
    SolverConfig,
    Word,
    build_strategy,
)

from conftest import words

# sorted pool: adieu, apple, bread, crane, fuzzy
POOL = words("adieu", "apple", "bread", "crane", "fuzzy")


def test_no_possible_words_is_a_contradiction():
    with pytest.raises(NoPossibleWords):
        EntropyStrategy().get_best_guess([], POOL)


def test_single_possible_word_is_returned_without_scoring():
    s = EntropyStrategy()
    assert s.get_best_guess(words("crane"), POOL) == Word("crane")
    assert s._scores == {}


def test_empty_candidate_pool_is_an_algorithm_failure(three_words):
    with pytest.raises(AlgorithmFailure):
        EntropyStrategy().get_best_guess(three_words, [])


def test_endgame_prefers_possible_answers(three_words):
    # every word here splits the three apart; the endgame rule skips adieu
    s = EntropyStrategy(SolverConfig(endgame_threshold=3))
    assert s.get_best_guess(three_words, POOL) == Word("apple")


def test_endgame_threshold_is_configurable(three_words):
    s = EntropyStrategy(SolverConfig(endgame_threshold=0))
    assert s.get_best_guess(three_words, POOL) == Word("adieu")


def test_endgame_falls_back_to_full_pool(three_words):
    s = EntropyStrategy(SolverConfig(endgame_threshold=3))
    assert s.get_best_guess(three_words, words("fuzzy", "adieu")) == Word("adieu")


def test_information_gain_metric(three_words):
    s = EntropyStrategy(SolverConfig(metric="information_gain", endgame_threshold=0))
    assert s.get_best_guess(three_words, POOL) == Word("adieu")


def test_best_first_guess_is_a_constant():
    assert EntropyStrategy().get_best_first_guess() == Word("adieu")
    s = EntropyStrategy(SolverConfig(first_guess="SLATE"))
    assert s.get_best_first_guess() == Word("slate")


def test_top_candidates_sorted_and_truncated(three_words):
    s = EntropyStrategy()
    top = s.get_top_candidates(three_words, POOL, 10)
    assert [w.text for w, _ in top] == ["adieu", "apple", "bread", "crane", "fuzzy"]
    assert top[0][1] == pytest.approx(math.log2(3))
    assert top[-1][1] == pytest.approx(0.0)
    assert len(s.get_top_candidates(three_words, POOL, 2)) == 2
    assert s.get_top_candidates([], POOL, 5) == []
    assert s.get_top_candidates(three_words, POOL, 0) == []


def test_cache_is_keyed_by_content_not_size():
    s = EntropyStrategy(SolverConfig(endgame_threshold=0))
    s.get_top_candidates(words("apple", "bread"), POOL, 3)
    s.get_top_candidates(words("apple", "crane"), POOL, 3)
    assert len(s._scores) == 2
    s.get_top_candidates(words("apple", "bread"), POOL, 3)
    assert len(s._scores) == 2


def test_clear_cache(three_words):
    s = EntropyStrategy(SolverConfig(endgame_threshold=0))
    s.get_best_guess(three_words, POOL)
    assert s._scores
    s.clear_cache()
    assert s._scores == {}


def test_parallel_strategy_matches_sequential(small_answers):
    pool = sorted(set(small_answers + POOL))
    seq = EntropyStrategy(SolverConfig(endgame_threshold=0))
    par = EntropyStrategy(SolverConfig(endgame_threshold=0, workers=2, parallel_threshold=1))
    assert par.get_best_guess(small_answers, pool) == seq.get_best_guess(small_answers, pool)


def test_frequency_strategy(three_words):
    # letters over apple/bread/crane: bread and crane both score 10/15, bread first
    s = FrequencyStrategy()
    assert s.get_best_guess(three_words, POOL) == Word("bread")
    top = s.get_top_candidates(three_words, POOL, 3)
    assert [w.text for w, _ in top] == ["bread", "crane", "apple"]
    assert top[0][1] == pytest.approx(10 / 15)
    assert top[2][1] == pytest.approx(9 / 15)


def test_frequency_strategy_trivial_cases():
    s = FrequencyStrategy()
    with pytest.raises(NoPossibleWords):
        s.get_best_guess([], POOL)
    assert s.get_best_guess(words("crane"), POOL) == Word("crane")


def test_build_strategy():
    assert isinstance(build_strategy(), EntropyStrategy)
    assert isinstance(build_strategy(SolverConfig(strategy="frequency")), FrequencyStrategy)
