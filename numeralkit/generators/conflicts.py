#!/usr/bin/env python3
"""
Duplicate Avoidance
===================
Finds the first slot whose consonant repeats one used by a lower slot.

First consonants and second consonants are tracked independently: a
phoneme may open one digit-word and close another, but may not open two
or close two.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from numeralkit.phonemes import Phoneme
from numeralkit.generators.slots import Number


class ConflictKind(Enum):
    """Which position collided."""
    FIRST = "first"
    SECOND = "second"


@dataclass(frozen=True)
class Conflict:
    """A consonant at ``slot`` that ``earlier_slot`` already uses in the same position."""
    slot: int
    kind: ConflictKind
    consonant: Phoneme
    earlier_slot: int

    @property
    def carries(self) -> bool:
        """
        Whether resolution skips the slot's whole row.

        Every remaining pair in the row keeps the clashing first consonant,
        so only a first-consonant clash justifies a carry.
        """
        return self.kind is ConflictKind.FIRST


def find_conflict(numbers: Sequence[Number], start: int = 1) -> Optional[Conflict]:
    """
    Scan slots ``start``.. left to right for a repeated consonant.

    Slots below ``start`` are assumed to be free of conflicts among
    themselves; they are only used as the set of consonants already taken.
    A Number clashing on both consonants is reported as a FIRST conflict.
    """
    start = max(start, 1)
    first_seen = {}
    second_seen = {}
    for slot, number in enumerate(numbers):
        if slot >= start:
            if number.first_consonant in first_seen:
                return Conflict(slot, ConflictKind.FIRST, number.first_consonant,
                                first_seen[number.first_consonant])
            if number.second_consonant in second_seen:
                return Conflict(slot, ConflictKind.SECOND, number.second_consonant,
                                second_seen[number.second_consonant])
        first_seen.setdefault(number.first_consonant, slot)
        second_seen.setdefault(number.second_consonant, slot)
    return None


def is_valid_assignment(numbers: Sequence[Number]) -> bool:
    """True if no consonant opens or closes two numbers and none pairs with itself."""
    firsts = [n.first_consonant for n in numbers]
    seconds = [n.second_consonant for n in numbers]
    return (
        len(set(firsts)) == len(firsts)
        and len(set(seconds)) == len(seconds)
        and all(n.first_consonant != n.second_consonant for n in numbers)
    )


__all__ = ['ConflictKind', 'Conflict', 'find_conflict', 'is_valid_assignment']
