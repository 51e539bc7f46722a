#!/usr/bin/env python3
"""
Phoneme Inventory
=================
Coarse phoneme categories used to build numeral words, plus the IPA
segmentation and Latin spelling tables loaded from ``ipa.yaml``.

Usage:
    from numeralkit.phonemes import Phoneme, parse_phonemes, ipa_to_phonemes

    parse_phonemes("sifr")            # [S, I, F, R]
    ipa_to_phonemes("ˈzɪə.ɹəʊ")       # [Z, I, E, R, E, U]
    phonemes_to_loan([Phoneme.C, Phoneme.A])   # "ca"
"""

import logging
import unicodedata
from enum import Enum
from functools import lru_cache, total_ordering
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import yaml

from numeralkit.errors import ConfigurationError

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent


# =============================================================================
# Phoneme Tokens
# =============================================================================

@total_ordering
class Phoneme(Enum):
    """A coarse sound category. Ordered by declaration."""
    # Consonants
    P = "P"
    B = "B"
    T = "T"
    D = "D"
    K = "K"
    G = "G"
    M = "M"
    N = "N"
    R = "R"
    F = "F"
    V = "V"
    S = "S"
    Z = "Z"
    C = "C"
    J = "J"
    X = "X"
    H = "H"
    L = "L"
    Y = "Y"
    W = "W"
    # Vowels
    A = "A"
    E = "E"
    I = "I"
    O = "O"
    U = "U"

    def __lt__(self, other):
        if not isinstance(other, Phoneme):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_vowel(self) -> bool:
        return self in _VOWEL_SET

    @property
    def is_consonant(self) -> bool:
        return self not in _VOWEL_SET


_ORDER = {p: i for i, p in enumerate(Phoneme)}

VOWELS: Tuple[Phoneme, ...] = (Phoneme.A, Phoneme.E, Phoneme.I, Phoneme.O, Phoneme.U)
_VOWEL_SET = frozenset(VOWELS)
CONSONANTS: Tuple[Phoneme, ...] = tuple(p for p in Phoneme if p not in _VOWEL_SET)


def phoneme_from_symbol(symbol: str) -> Phoneme:
    """Look up a phoneme by its symbol (case-insensitive)."""
    try:
        return Phoneme(str(symbol).strip().upper())
    except ValueError:
        raise ConfigurationError(f"Unknown phoneme symbol: {symbol!r}") from None


def parse_phonemes(text: str) -> List[Phoneme]:
    """
    Parse a loanword written in phoneme symbols.

    Whitespace and hyphens are ignored, so "s i f r", "sifr" and "si-fr"
    all give [S, I, F, R].
    """
    return [phoneme_from_symbol(ch) for ch in text if not ch.isspace() and ch != '-']


def parse_vowel_list(symbols: Iterable[str]) -> Tuple[Phoneme, ...]:
    """Parse an ordered vowel list, rejecting consonants and empty lists."""
    vowels = tuple(phoneme_from_symbol(s) for s in symbols)
    if not vowels:
        raise ConfigurationError("Vowel list must not be empty")
    consonants = [str(v) for v in vowels if v.is_consonant]
    if consonants:
        raise ConfigurationError(f"Vowel list contains consonants: {', '.join(consonants)}")
    return vowels


# =============================================================================
# IPA Tables
# =============================================================================

@lru_cache(maxsize=4)
def _load_yaml(filename: str) -> Dict:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        return {}
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_ipa_table() -> Tuple[Dict[str, Tuple[Phoneme, ...]], int, frozenset]:
    """
    Load the IPA segment table.

    Returns (segments, longest segment length, ignored marks).
    """
    raw = _load_yaml('ipa.yaml')
    segments = {
        str(key): tuple(parse_phonemes(str(value)))
        for key, value in (raw.get('segments') or {}).items()
    }
    if not segments:
        raise ConfigurationError("ipa.yaml defines no segments")
    longest = max(len(key) for key in segments)
    ignore = frozenset(str(mark) for mark in raw.get('ignore') or [])
    return segments, longest, ignore


@lru_cache(maxsize=1)
def load_spelling() -> Dict[Phoneme, str]:
    """Load the phoneme -> Latin spelling table."""
    raw = _load_yaml('ipa.yaml').get('spelling') or {}
    spelling = {phoneme_from_symbol(k): str(v) for k, v in raw.items()}
    missing = [str(p) for p in Phoneme if p not in spelling]
    if missing:
        raise ConfigurationError(f"ipa.yaml spelling is missing: {', '.join(missing)}")
    return spelling


def reload_tables():
    """Clear cached tables (after editing ipa.yaml)."""
    _load_yaml.cache_clear()
    load_ipa_table.cache_clear()
    load_spelling.cache_clear()


def _strip_diacritics(ipa: str) -> str:
    decomposed = unicodedata.normalize('NFD', ipa)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def ipa_to_phonemes(ipa: str) -> List[Phoneme]:
    """
    Segment an IPA transcription into coarse phonemes.

    Greedy longest match against the segment table. Stress, length and
    syllable marks are dropped; unknown characters are skipped.
    """
    segments, longest, ignore = load_ipa_table()
    text = _strip_diacritics(ipa.lower())
    result: List[Phoneme] = []
    pos = 0
    while pos < len(text):
        for size in range(min(longest, len(text) - pos), 0, -1):
            chunk = text[pos:pos + size]
            if chunk in segments:
                result.extend(segments[chunk])
                pos += size
                break
        else:
            ch = text[pos]
            if ch not in ignore:
                logger.debug(f"Skipping unknown IPA character {ch!r} in {ipa!r}")
            pos += 1
    return result


def phonemes_to_loan(phonemes: Iterable[Phoneme]) -> str:
    """Spell phonemes in Latin letters."""
    spelling = load_spelling()
    return ''.join(spelling[p] for p in phonemes)


__all__ = [
    'Phoneme',
    'CONSONANTS',
    'VOWELS',
    'phoneme_from_symbol',
    'parse_phonemes',
    'parse_vowel_list',
    'load_ipa_table',
    'load_spelling',
    'reload_tables',
    'ipa_to_phonemes',
    'phonemes_to_loan',
]
