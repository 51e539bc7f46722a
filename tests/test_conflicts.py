"""
Tests for Duplicate Avoidance
=============================
Tests for find_conflict() and is_valid_assignment() in
numeralkit/generators/conflicts.py.
"""

import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from numeralkit.phonemes import Phoneme
from numeralkit.generators.conflicts import (
    Conflict,
    ConflictKind,
    find_conflict,
    is_valid_assignment,
)
from numeralkit.generators.slots import Number

P, T, K, S, M, A, E = (Phoneme.P, Phoneme.T, Phoneme.K, Phoneme.S, Phoneme.M,
                       Phoneme.A, Phoneme.E)


class TestFindConflict:
    """Tests for find_conflict()."""

    def test_no_conflict(self):
        numbers = [Number(P, A, T), Number(T, E, P), Number(K, A, S)]
        assert find_conflict(numbers) is None

    def test_first_consonant_clash(self):
        """A repeated opening consonant is a FIRST conflict."""
        numbers = [Number(P, A, T), Number(K, E, S), Number(P, A, M)]
        assert find_conflict(numbers) == Conflict(2, ConflictKind.FIRST, P, 0)

    def test_second_consonant_clash(self):
        """A repeated closing consonant is a SECOND conflict."""
        numbers = [Number(P, A, T), Number(K, E, T)]
        conflict = find_conflict(numbers)
        assert conflict == Conflict(1, ConflictKind.SECOND, T, 0)
        assert not conflict.carries

    def test_cross_position_reuse_allowed(self):
        """A consonant may open one word and close another."""
        numbers = [Number(P, A, T), Number(T, E, P)]
        assert find_conflict(numbers) is None

    def test_both_positions_reports_first(self):
        """Clashing on both consonants is reported as FIRST."""
        numbers = [Number(P, A, T), Number(P, E, T)]
        conflict = find_conflict(numbers)
        assert conflict.kind is ConflictKind.FIRST
        assert conflict.carries

    def test_lowest_slot_wins(self):
        """The leftmost conflicting slot is reported."""
        numbers = [Number(P, A, T), Number(K, E, T), Number(P, A, S)]
        assert find_conflict(numbers).slot == 1

    def test_start_skips_prefix_checks(self):
        """Slots below start still count as taken but are not re-checked."""
        numbers = [Number(P, A, T), Number(K, E, T), Number(P, A, S)]
        conflict = find_conflict(numbers, start=2)
        assert conflict == Conflict(2, ConflictKind.FIRST, P, 0)

    def test_start_zero_behaves_as_one(self):
        numbers = [Number(P, A, T), Number(P, E, K)]
        assert find_conflict(numbers, start=0) == find_conflict(numbers, start=1)

    def test_single_slot(self):
        assert find_conflict([Number(P, A, T)]) is None


class TestIsValidAssignment:
    """Tests for is_valid_assignment()."""

    def test_valid(self):
        assert is_valid_assignment([Number(P, A, T), Number(T, E, P)])

    def test_repeated_first(self):
        assert not is_valid_assignment([Number(P, A, T), Number(P, E, K)])

    def test_repeated_second(self):
        assert not is_valid_assignment([Number(P, A, T), Number(K, E, T)])

    def test_self_pair(self):
        assert not is_valid_assignment([Number(P, A, P)])
