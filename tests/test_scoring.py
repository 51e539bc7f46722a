"""
Tests for Scoring & Running Best
================================
Tests for number_score(), score_assignment(), RecordTracker and
keep_records() in numeralkit/generators/scoring.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from numeralkit.phonemes import Phoneme
from numeralkit.generators.scoring import (
    CandidateNumber,
    CandidateNumbers,
    RecordTracker,
    keep_records,
    number_score,
    score_assignment,
)
from numeralkit.generators.slots import Number

P, T, K, S, A, E = Phoneme.P, Phoneme.T, Phoneme.K, Phoneme.S, Phoneme.A, Phoneme.E


def scored(score):
    return CandidateNumbers(score=score, numbers=())


class TestNumberScore:
    """Tests for number_score()."""

    def test_sums_both_consonants(self):
        assert number_score({P: 1.0, T: 0.5}, Number(P, A, T)) == pytest.approx(1.5)

    def test_missing_key_counts_zero(self):
        assert number_score({P: 1.0}, Number(P, A, K)) == pytest.approx(1.0)
        assert number_score({}, Number(P, A, K)) == 0.0


class TestScoreAssignment:
    """Tests for score_assignment()."""

    def test_total_is_sum_of_slots(self):
        weights = {0: {P: 0.4, T: 0.1}, 1: {K: 0.3}}
        result = score_assignment(weights, [Number(P, A, T), Number(K, E, S)])
        assert [c.score for c in result.numbers] == pytest.approx([0.5, 0.3])
        assert result.score == pytest.approx(0.8)
        assert result.score == pytest.approx(sum(c.score for c in result.numbers))

    def test_slot_weights_are_per_digit(self):
        """The same consonant weighs differently in different slots."""
        weights = {0: {P: 1.0}, 1: {P: 0.0, T: 2.0}}
        result = score_assignment(weights, [Number(T, A, K), Number(P, A, T)])
        assert [c.score for c in result.numbers] == pytest.approx([0.0, 2.0])

    def test_missing_slot_scores_zero(self):
        result = score_assignment({}, [Number(P, A, T)])
        assert result.score == 0.0

    def test_assignment_property(self):
        numbers = [Number(P, A, T), Number(T, E, P)]
        result = score_assignment({}, numbers)
        assert result.assignment == tuple(numbers)
        assert isinstance(result.numbers[0], CandidateNumber)


class TestRecordTracker:
    """Tests for the running-best filter."""

    def test_first_candidate_is_record(self):
        tracker = RecordTracker()
        assert tracker.offer(scored(0.0))
        assert tracker.best == 0.0

    def test_lower_score_rejected(self):
        tracker = RecordTracker()
        tracker.offer(scored(2.0))
        assert not tracker.offer(scored(1.0))
        assert tracker.best == 2.0
        assert len(tracker.records) == 1

    def test_ties_kept(self):
        tracker = RecordTracker()
        tracker.offer(scored(1.0))
        assert tracker.offer(scored(1.0))
        assert len(tracker.records) == 2

    def test_starting_best(self):
        """A tracker can continue from a known best."""
        tracker = RecordTracker(best=5.0)
        assert not tracker.offer(scored(4.0))
        assert tracker.offer(scored(5.0))

    def test_keep_records_monotonic(self):
        scores = [1.0, 0.5, 1.0, 3.0, 2.0, 3.0, 4.0, 0.0]
        kept = [c.score for c in keep_records(scored(s) for s in scores)]
        assert kept == [1.0, 1.0, 3.0, 3.0, 4.0]
        assert kept == sorted(kept)

    def test_keep_records_is_lazy(self):
        """Only as many candidates are pulled as needed."""
        pulled = []

        def source():
            for s in [1.0, 2.0, 0.0, 3.0]:
                pulled.append(s)
                yield scored(s)

        records = keep_records(source())
        assert next(records).score == 1.0
        assert pulled == [1.0]
