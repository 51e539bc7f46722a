#!/usr/bin/env python3
"""
Slot Pair Iterator
==================
Enumerates (first, second) consonant pairs for one digit slot in row-major
order: the second index moves fastest, and pairing a consonant with itself
is skipped.

    it = SlotPairIterator([P, T, K], vowel=A)
    it.next()      # (P, T)
    it.next()      # (P, K)
    it.next()      # (T, P)
    it.carry_up()  # skip the rest of the T row
    it.next()      # (K, P)
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from numeralkit.phonemes import Phoneme


@dataclass(frozen=True, order=True)
class Number:
    """A CVC digit-word."""
    first_consonant: Phoneme
    vowel: Phoneme
    second_consonant: Phoneme

    def __str__(self) -> str:
        return f"{self.first_consonant}{self.vowel}{self.second_consonant}"

    @property
    def phonemes(self) -> Tuple[Phoneme, Phoneme, Phoneme]:
        return (self.first_consonant, self.vowel, self.second_consonant)


class SlotPairIterator:
    """
    Cursor over the consonant pairs of one slot.

    The cursor (first, second) always points at the next position to try.
    Fewer than two consonants means the iterator is exhausted from the start.
    """

    def __init__(self, consonants: Sequence[Phoneme], vowel: Phoneme):
        self.consonants: Tuple[Phoneme, ...] = tuple(consonants)
        self.vowel = vowel
        self.first = 0
        self.second = 0

    def __repr__(self) -> str:
        return (
            f"SlotPairIterator({''.join(str(c) for c in self.consonants)!r}, "
            f"vowel={self.vowel}, first={self.first}, second={self.second})"
        )

    def __len__(self) -> int:
        """Number of pairs a full pass yields."""
        n = len(self.consonants)
        return n * (n - 1)

    @property
    def exhausted(self) -> bool:
        return self.first >= len(self.consonants)

    def next(self) -> Optional[Tuple[Phoneme, Phoneme]]:
        """Next (first, second) pair, or None once every row is used up."""
        n = len(self.consonants)
        while self.first < n:
            if self.second >= n:
                self.second = 0
                self.first += 1
                continue
            if self.first == self.second:
                self.second += 1
                continue
            pair = (self.consonants[self.first], self.consonants[self.second])
            self.second += 1
            return pair
        return None

    def next_number(self) -> Optional[Number]:
        """Next pair wrapped as a Number with this slot's vowel."""
        pair = self.next()
        if pair is None:
            return None
        return Number(pair[0], self.vowel, pair[1])

    def carry_up(self):
        """Abandon the current first consonant; move to the next row."""
        self.first += 1
        self.second = 0

    def reload(self):
        """Restart from the first pair."""
        self.first = 0
        self.second = 0


__all__ = ['Number', 'SlotPairIterator']
