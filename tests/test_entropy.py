import math

import pytest

from wordle_engine import (
    Word,
    entropy,
    entropy_from_counts,
    expected_remaining,
    feedback_index,
    find_max_entropy_guess,
    generate_feedback,
    information_gain,
    score_candidates,
)
from wordle_engine.entropy import argmax, bucket_counts

from conftest import words


def test_feedback_index_matches_pattern(small_answers):
    pool = small_answers + words("adieu", "sheet", "crepe", "teeth", "epees")
    for g in pool:
        for t in pool:
            assert feedback_index(g, t) == generate_feedback(g, t).index


def test_bucket_counts_sum_to_population(three_words):
    counts = bucket_counts(Word("adieu"), three_words)
    assert len(counts) == 243
    assert sum(counts) == 3


def test_entropy_from_counts():
    assert entropy_from_counts([1, 1, 0, 1, 1], 4) == pytest.approx(2.0)
    assert entropy_from_counts([], 0) == 0.0


def test_entropy_of_even_split(three_words):
    # adieu colours apple, bread and crane three different ways
    assert entropy(Word("adieu"), three_words) == pytest.approx(math.log2(3))


def test_entropy_when_everything_lands_in_one_bucket(three_words):
    assert entropy(Word("fuzzy"), three_words) == 0.0


def test_entropy_is_zero_for_tiny_sets():
    assert entropy(Word("adieu"), []) == 0.0
    assert entropy(Word("adieu"), [Word("apple")]) == 0.0


def test_entropy_bounds(small_answers):
    guesses = small_answers + words("adieu", "fuzzy", "slate")
    for n in range(1, len(small_answers) + 1):
        possible = small_answers[:n]
        for g in guesses:
            h = entropy(g, possible)
            assert -1e-12 <= h <= math.log2(n) + 1e-9


def test_information_gain(three_words):
    assert information_gain(Word("adieu"), three_words) == pytest.approx(math.log2(3))
    assert information_gain(Word("fuzzy"), three_words) == pytest.approx(0.0)
    assert information_gain(Word("adieu"), []) == 0.0
    assert information_gain(Word("adieu"), [Word("apple")]) == 0.0


def test_expected_remaining(three_words):
    assert expected_remaining(Word("adieu"), three_words) == pytest.approx(1.0)
    assert expected_remaining(Word("fuzzy"), three_words) == pytest.approx(3.0)
    assert expected_remaining(Word("adieu"), []) == 0.0


def test_find_max_entropy_guess_first_wins_ties(three_words):
    # adieu and crane both split the three words completely
    assert find_max_entropy_guess(words("fuzzy", "adieu", "crane"), three_words) == Word("adieu")
    assert find_max_entropy_guess(words("fuzzy", "crane", "adieu"), three_words) == Word("crane")


def test_find_max_entropy_guess_empty_inputs(three_words):
    assert find_max_entropy_guess([], three_words) is None
    assert find_max_entropy_guess(words("adieu"), []) is None


def test_argmax_lowest_index_wins():
    assert argmax([1.0, 3.0, 3.0, 2.0]) == 1
    assert argmax([]) is None


def test_score_candidates_keeps_input_order(three_words):
    cands = words("fuzzy", "adieu", "crane")
    scores = score_candidates(cands, three_words, "entropy")
    assert scores == pytest.approx([0.0, math.log2(3), math.log2(3)])


def test_score_candidates_unknown_metric(three_words):
    with pytest.raises(ValueError):
        score_candidates(words("adieu"), three_words, "vibes")


@pytest.mark.parametrize("metric", ["entropy", "information_gain"])
def test_parallel_scoring_matches_sequential(small_answers, metric):
    cands = small_answers + words("adieu", "fuzzy", "slate", "sheet", "teeth", "crepe")
    sequential = score_candidates(cands, small_answers, metric)
    parallel = score_candidates(cands, small_answers, metric, workers=3, parallel_threshold=1)
    assert parallel == sequential
    assert argmax(parallel) == argmax(sequential)
