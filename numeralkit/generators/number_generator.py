#!/usr/bin/env python3
"""
Number Generator
================
Searches CVC words for the digits 0-9 such that no consonant opens two
digit-words and no consonant closes two.

The odometer proposes assignments; each proposal is scanned for a repeated
consonant and, on a clash, the clashing slot is stepped directly past it
(skipping its whole row for a first-consonant clash). Valid assignments are
scored and only running records are kept, so memory stays flat however
large the search space is.

Usage:
    from numeralkit.generators import NumberGenerator

    gen = NumberGenerator.from_recipe(recipe)
    result = gen.search(max_steps=100_000)
    print(result.best)
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from numeralkit.config import SearchConfig
from numeralkit.errors import ConfigurationError
from numeralkit.phonemes import Phoneme
from numeralkit.recipe import Recipe
from numeralkit.weights import DIGITS, CandidateWeights, candidate_consonants, candidate_weights
from numeralkit.generators.conflicts import ConflictKind, find_conflict
from numeralkit.generators.odometer import Odometer
from numeralkit.generators.scoring import CandidateNumbers, RecordTracker, score_assignment
from numeralkit.generators.slots import Number

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class SearchStats:
    """Counters for one search run."""
    states: int = 0              # Tentative assignments examined
    first_conflicts: int = 0
    second_conflicts: int = 0
    assignments: int = 0         # Valid assignments found
    records: int = 0
    state_space: int = 0         # Size of the unpruned cross-product
    stop_reason: str = ""        # 'exhausted', 'max_steps', 'max_records'

    @property
    def exhausted(self) -> bool:
        return self.stop_reason == 'exhausted'

    def to_dict(self) -> dict:
        return {
            'states': self.states,
            'first_conflicts': self.first_conflicts,
            'second_conflicts': self.second_conflicts,
            'assignments': self.assignments,
            'records': self.records,
            'state_space': self.state_space,
            'stop_reason': self.stop_reason,
        }


@dataclass
class SearchResult:
    """Records in discovery order plus run statistics."""
    records: List[CandidateNumbers] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def best(self) -> Optional[CandidateNumbers]:
        """The last record, which is the best assignment seen."""
        return self.records[-1] if self.records else None


# =============================================================================
# Enumeration
# =============================================================================

def enumerate_valid(
    odometer: Odometer,
    stats: Optional[SearchStats] = None,
    max_steps: int = 0,
    full_rescan: bool = False,
) -> Iterator[Tuple[Number, ...]]:
    """
    Yield the conflict-free assignments of ``odometer`` in counting order.

    After each step the scan restarts at the lowest slot that changed: the
    slots before it are untouched and were already free of clashes. With
    ``full_rescan`` it restarts at slot 1 instead; both give the same output.

    ``max_steps`` bounds the number of tentative assignments examined
    (0 = unbounded). ``stats.stop_reason`` says why the generator ended.
    """
    stats = stats if stats is not None else SearchStats()
    if odometer.exhausted:
        stats.stop_reason = 'exhausted'
        return

    scan_from = 1
    while True:
        if max_steps and stats.states >= max_steps:
            stats.stop_reason = 'max_steps'
            return
        stats.states += 1

        conflict = find_conflict(odometer.numbers, 1 if full_rescan else scan_from)
        if conflict is None:
            stats.assignments += 1
            yield odometer.numbers
            moved = odometer.advance()
        else:
            if conflict.kind is ConflictKind.FIRST:
                stats.first_conflicts += 1
            else:
                stats.second_conflicts += 1
            moved = odometer.resolve(conflict)

        if moved is None:
            stats.stop_reason = 'exhausted'
            return
        scan_from = max(moved, 1)


# =============================================================================
# Generator
# =============================================================================

class NumberGenerator:
    """
    Best-scoring CVC numerals for digits 0-9.

    Parameters
    ----------
    weights : mapping of digit -> CandidateWeights
        Consonant weights per digit
    candidates : list of consonant lists, optional
        Search consonants per digit; by default derived from ``weights``
        according to ``config.candidates``
    config : SearchConfig, optional
        Search settings; defaults come from app.yaml
    """

    def __init__(
        self,
        weights: Mapping[int, CandidateWeights],
        candidates: Optional[Sequence[Sequence[Phoneme]]] = None,
        config: Optional[SearchConfig] = None,
    ):
        self.config = config or SearchConfig()
        self.weights: Dict[int, CandidateWeights] = dict(weights)
        if candidates is None:
            candidates = candidate_consonants(self.weights, self.config.candidates)
        if len(candidates) != len(DIGITS):
            raise ConfigurationError(
                f"Expected candidates for {len(DIGITS)} digits, got {len(candidates)}"
            )
        self.candidates: List[List[Phoneme]] = [sorted(set(c)) for c in candidates]
        self.vowels: Tuple[Phoneme, ...] = self.config.vowel_cycle
        self.words: List[CandidateNumbers] = []

    @classmethod
    def from_recipe(cls, recipe: Recipe, config: Optional[SearchConfig] = None) -> "NumberGenerator":
        """Prepare weights from a recipe and build a generator."""
        return cls(candidate_weights(recipe), config=config)

    def vowel_for(self, slot: int) -> Phoneme:
        return self.vowels[slot % len(self.vowels)]

    @property
    def state_space(self) -> int:
        """Size of the unpruned cross-product of consonant pairs."""
        return math.prod(len(c) * (len(c) - 1) for c in self.candidates)

    def odometer(self) -> Odometer:
        """A fresh odometer over this generator's candidates."""
        return Odometer(self.candidates, self.vowels)

    def assignments(
        self,
        stats: Optional[SearchStats] = None,
        max_steps: Optional[int] = None,
    ) -> Iterator[Tuple[Number, ...]]:
        """Valid assignments in discovery order."""
        if stats is not None:
            stats.state_space = self.state_space
        return enumerate_valid(
            self.odometer(),
            stats=stats,
            max_steps=self.config.max_steps if max_steps is None else max_steps,
            full_rescan=self.config.full_rescan,
        )

    def scored(
        self,
        stats: Optional[SearchStats] = None,
        max_steps: Optional[int] = None,
    ) -> Iterator[CandidateNumbers]:
        """Valid assignments with their scores."""
        for numbers in self.assignments(stats=stats, max_steps=max_steps):
            yield score_assignment(self.weights, numbers)

    def search(
        self,
        max_steps: Optional[int] = None,
        max_records: Optional[int] = None,
        tracker: Optional[RecordTracker] = None,
    ) -> SearchResult:
        """
        Run the search and keep the running records.

        Parameters
        ----------
        max_steps : int, optional
            Tentative assignments to examine (0 = unbounded)
        max_records : int, optional
            Stop after this many records (0 = unbounded)
        tracker : RecordTracker, optional
            Running-best state to continue from

        Returns
        -------
        SearchResult
            Records in discovery order; ``result.best`` is the last one
        """
        max_records = self.config.max_records if max_records is None else max_records
        tracker = tracker if tracker is not None else RecordTracker()
        stats = SearchStats(state_space=self.state_space)
        result = SearchResult(stats=stats)

        logger.debug(
            f"Searching {stats.state_space} states; "
            f"candidates per digit: {[len(c) for c in self.candidates]}"
        )
        for candidate in self.scored(stats=stats, max_steps=max_steps):
            if not tracker.offer(candidate):
                continue
            result.records.append(candidate)
            stats.records += 1
            if self.config.log_records:
                logger.info(f"Record {stats.records}: {candidate}")
            if max_records and stats.records >= max_records:
                stats.stop_reason = 'max_records'
                break

        logger.debug(f"Search finished: {stats.to_dict()}")
        self.words = result.records
        return result


__all__ = [
    'SearchStats',
    'SearchResult',
    'enumerate_valid',
    'NumberGenerator',
]
