#!/usr/bin/env python3
"""
Numeral Generators
==================
The constrained search behind numeral words:
- slots: per-digit consonant pair iterator
- odometer: mixed-radix composition of the slot iterators
- conflicts: repeated-consonant detection
- scoring: assignment scores and the running-best filter
- number_generator: the search itself
"""

from .slots import Number, SlotPairIterator
from .odometer import Odometer
from .conflicts import (
    Conflict,
    ConflictKind,
    find_conflict,
    is_valid_assignment,
)
from .scoring import (
    CandidateNumber,
    CandidateNumbers,
    RecordTracker,
    keep_records,
    number_score,
    score_assignment,
)
from .number_generator import (
    NumberGenerator,
    SearchResult,
    SearchStats,
    enumerate_valid,
)

__all__ = [
    # Slots
    'Number',
    'SlotPairIterator',
    # Odometer
    'Odometer',
    # Conflicts
    'Conflict',
    'ConflictKind',
    'find_conflict',
    'is_valid_assignment',
    # Scoring
    'CandidateNumber',
    'CandidateNumbers',
    'RecordTracker',
    'keep_records',
    'number_score',
    'score_assignment',
    # Search
    'NumberGenerator',
    'SearchResult',
    'SearchStats',
    'enumerate_valid',
]
