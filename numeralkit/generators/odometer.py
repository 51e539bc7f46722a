#!/usr/bin/env python3
"""
Multi-Slot Odometer
===================
Composes one SlotPairIterator per slot into a mixed-radix counter. The last
slot turns fastest; when it runs out it restarts and carries into the slot
before it, and so on down to slot 0. Slot 0 running out ends the count for
good.

The odometer owns its iterators outright (a fixed list indexed by slot),
and carries with a loop rather than recursion.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from numeralkit.errors import ConfigurationError
from numeralkit.phonemes import Phoneme
from numeralkit.generators.conflicts import Conflict
from numeralkit.generators.slots import Number, SlotPairIterator

logger = logging.getLogger(__name__)


class Odometer:
    """
    Mixed-radix counter over per-slot consonant pairs.

    Parameters
    ----------
    candidates : sequence of sequences of Phoneme
        Ordered, deduplicated consonants for each slot
    vowels : sequence of Phoneme
        Slot i uses ``vowels[i % len(vowels)]``
    """

    def __init__(self, candidates: Sequence[Sequence[Phoneme]], vowels: Sequence[Phoneme]):
        if not candidates:
            raise ConfigurationError("Odometer needs at least one slot")
        if not vowels:
            raise ConfigurationError("Vowel list must not be empty")
        self._slots: List[SlotPairIterator] = [
            SlotPairIterator(consonants, vowels[i % len(vowels)])
            for i, consonants in enumerate(candidates)
        ]
        self._numbers: List[Optional[Number]] = [None] * len(self._slots)
        self.exhausted = False
        self.prime()

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def numbers(self) -> Tuple[Number, ...]:
        """The current Number of every slot."""
        return tuple(self._numbers)

    @property
    def radices(self) -> List[int]:
        """Pairs per slot."""
        return [len(slot) for slot in self._slots]

    @property
    def state_space(self) -> int:
        """Size of the unpruned cross-product."""
        return math.prod(self.radices)

    def slot(self, index: int) -> SlotPairIterator:
        return self._slots[index]

    def prime(self):
        """Restart every slot at its first pair."""
        for index, slot in enumerate(self._slots):
            slot.reload()
            number = slot.next_number()
            if number is None:
                logger.debug(f"Slot {index} cannot form a pair; nothing to enumerate")
                self.exhausted = True
                self._numbers = [None] * len(self._slots)
                return
            self._numbers[index] = number

    def _restart(self, index: int):
        slot = self._slots[index]
        slot.reload()
        self._numbers[index] = slot.next_number()

    def advance(self, slot: Optional[int] = None, carry: bool = False) -> Optional[int]:
        """
        Move ``slot`` (default: the fastest slot) to its next pair.

        With ``carry`` the slot first skips the rest of its current row. A
        slot that runs out restarts and passes the step to the slot before
        it. Every slot after the one that finally moved is restarted.

        Returns
        -------
        int or None
            The slot that moved, or None once slot 0 has run out.
        """
        if self.exhausted:
            return None
        index = len(self._slots) - 1 if slot is None else slot
        if carry:
            self._slots[index].carry_up()

        while True:
            number = self._slots[index].next_number()
            if number is not None:
                self._numbers[index] = number
                break
            if index == 0:
                self.exhausted = True
                return None
            index -= 1

        for faster in range(index + 1, len(self._slots)):
            self._restart(faster)
        return index

    def resolve(self, conflict: Conflict) -> Optional[int]:
        """
        Step past a conflict.

        A first-consonant clash carries the conflicting slot to its next row;
        a second-consonant clash moves it to its next pair.
        """
        return self.advance(conflict.slot, carry=conflict.carries)


__all__ = ['Odometer']
