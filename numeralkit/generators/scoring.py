#!/usr/bin/env python3
"""
Scoring & Running Best
======================
Scores assignments from per-digit consonant weights and keeps only the ones
that match or beat every assignment kept before them.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from numeralkit.phonemes import Phoneme
from numeralkit.generators.slots import Number


@dataclass(frozen=True)
class CandidateNumber:
    """A Number with its slot score."""
    score: float
    number: Number

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True)
class CandidateNumbers:
    """A full scored assignment, indexed by digit."""
    score: float
    numbers: Tuple[CandidateNumber, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"{', '.join(str(c) for c in self.numbers)} | {self.score}"

    @property
    def assignment(self) -> Tuple[Number, ...]:
        return tuple(c.number for c in self.numbers)


def number_score(weights: Mapping[Phoneme, float], number: Number) -> float:
    """Weight of the first consonant plus weight of the second; absent keys count 0."""
    return weights.get(number.first_consonant, 0.0) + weights.get(number.second_consonant, 0.0)


def score_assignment(
    weights: Mapping[int, Mapping[Phoneme, float]],
    numbers: Sequence[Number],
) -> CandidateNumbers:
    """Score every slot and total them."""
    scored = tuple(
        CandidateNumber(score=number_score(weights.get(slot, {}), number), number=number)
        for slot, number in enumerate(numbers)
    )
    return CandidateNumbers(score=sum(c.score for c in scored), numbers=scored)


class RecordTracker:
    """
    Running maximum over kept assignments.

    Ties with the current best are kept too, so the kept scores never
    decrease and the last one kept is the best seen.
    """

    def __init__(self, best: Optional[float] = None):
        self.best = best
        self.records: List[CandidateNumbers] = []

    def offer(self, candidate: CandidateNumbers) -> bool:
        """Keep ``candidate`` if it is a record. Returns True if kept."""
        if self.best is not None and candidate.score < self.best:
            return False
        self.best = candidate.score
        self.records.append(candidate)
        return True


def keep_records(
    candidates: Iterable[CandidateNumbers],
    tracker: Optional[RecordTracker] = None,
) -> Iterator[CandidateNumbers]:
    """Yield the candidates that set or tie the running best."""
    tracker = tracker if tracker is not None else RecordTracker()
    for candidate in candidates:
        if tracker.offer(candidate):
            yield candidate


__all__ = [
    'CandidateNumber',
    'CandidateNumbers',
    'number_score',
    'score_assignment',
    'RecordTracker',
    'keep_records',
]
