"""Scoring guesses by how well they split the possible-word set.

Every score here starts from the same partition: for a guess, bucket every
still-possible word by the feedback pattern it would produce. Patterns are
kept as their base-3 index (0..242) so a bucket is just a list slot.
"""

from __future__ import annotations

import math
import multiprocessing
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import tqdm

from .feedback import PATTERN_COUNT, digits_to_index, score_letters
from .logs import LogFn
from .words import Word

Metric = Callable[[Word, Sequence[Word]], float]


def feedback_index(guess: Word, target: Word) -> int:
    """Same as generate_feedback(guess, target).index, without building the pattern."""
    return digits_to_index(score_letters(guess.text, target.text))


def bucket_counts(guess: Word, possible_words: Iterable[Word]) -> List[int]:
    counts = [0] * PATTERN_COUNT
    g = guess.text
    for w in possible_words:
        counts[digits_to_index(score_letters(g, w.text))] += 1
    return counts


# compute Shannon entropy from counts
# H(X) = - sum(p(x) * log2(p(x))) over all x in X
# here X is the set of possible feedback patterns for a guess
# and the inputs are counts of how many secrets yield each pattern
def entropy_from_counts(counts: Iterable[int], total: int) -> float:
    """Shannon entropy in bits, from bucket counts"""
    if total <= 0:
        return 0.0
    h = 0.0
    for c in counts:
        if c:
            p = c / total
            h -= p * math.log2(p)
    return h


def entropy(guess: Word, possible_words: Sequence[Word]) -> float:
    """Entropy (bits) of the feedback distribution `guess` induces.

    0.0 when there is at most one possible word. Bounded above by
    log2(len(possible_words)) and by log2(243).
    """
    n = len(possible_words)
    if n <= 1:
        return 0.0
    return entropy_from_counts(bucket_counts(guess, possible_words), n)


def information_gain(guess: Word, possible_words: Sequence[Word]) -> float:
    """Expected drop in log2 of the possible-set size after playing `guess`.

    log2(n) - E[log2(bucket size)], where a word lands in a bucket of size c
    with probability c / n.
    """
    n = len(possible_words)
    if n == 0:
        return 0.0
    expected_log_size = 0.0
    for c in bucket_counts(guess, possible_words):
        if c:
            expected_log_size += (c / n) * math.log2(c)
    return math.log2(n) - expected_log_size


def expected_remaining(guess: Word, possible_words: Sequence[Word]) -> float:
    # average size of the bucket the answer falls into: sum(c^2) / n
    n = len(possible_words)
    if n == 0:
        return 0.0
    return sum(c * c for c in bucket_counts(guess, possible_words)) / n


METRICS: Dict[str, Metric] = {
    "entropy": entropy,
    "information_gain": information_gain,
}


def get_metric(name: str) -> Metric:
    try:
        return METRICS[name]
    except KeyError:
        raise ValueError(f"Unknown metric {name!r}; expected one of {sorted(METRICS)}") from None


def argmax(scores: Sequence[float]) -> Optional[int]:
    # strict '>' so the lowest index wins ties
    best_i: Optional[int] = None
    best = 0.0
    for i, s in enumerate(scores):
        if best_i is None or s > best:
            best_i, best = i, s
    return best_i


def _chunks(words: Sequence[Word], parts: int) -> List[Tuple[Word, ...]]:
    # contiguous slices, so concatenating results restores input order
    size = max(1, math.ceil(len(words) / parts))
    return [tuple(words[i:i + size]) for i in range(0, len(words), size)]


def _score_chunk(task: Tuple[str, Tuple[Word, ...], Tuple[Word, ...]]) -> List[float]:
    metric_name, chunk, possible_words = task
    metric = get_metric(metric_name)
    return [metric(g, possible_words) for g in chunk]


def score_candidates(
    candidates: Sequence[Word],
    possible_words: Sequence[Word],
    metric: str = "entropy",
    *,
    workers: int = 1,
    parallel_threshold: int = 500,
    show_progress: bool = False,
    log_debug: Optional[LogFn] = None,
) -> List[float]:
    """Score every candidate against the possible words, in input order.

    Large pools are split into contiguous chunks and scored in a process
    pool; both inputs are read-only for the whole pass, so the parallel
    result is the same list the sequential loop would produce.
    """
    fn = get_metric(metric)
    if not candidates:
        return []

    if workers > 1 and len(candidates) >= parallel_threshold:
        possible = tuple(possible_words)
        chunks = _chunks(candidates, workers)
        if log_debug is not None:
            log_debug(
                f"entropy: scoring {len(candidates)} candidates x {len(possible)} words "
                f"in {len(chunks)} chunks ({metric})"
            )
        with multiprocessing.Pool(processes=min(workers, len(chunks))) as pool:
            parts = pool.map(_score_chunk, [(metric, chunk, possible) for chunk in chunks])
        return [s for part in parts for s in part]

    iterator = tqdm.tqdm(candidates, desc="Scoring guesses", unit="word") if show_progress else candidates
    return [fn(g, possible_words) for g in iterator]


def find_max_entropy_guess(candidates: Sequence[Word], possible_words: Sequence[Word]) -> Optional[Word]:
    """Highest-entropy candidate; the first one wins ties. None on empty input."""
    if not candidates or not possible_words:
        return None
    i = argmax(score_candidates(candidates, possible_words, "entropy"))
    return None if i is None else candidates[i]
