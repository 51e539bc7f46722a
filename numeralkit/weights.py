#!/usr/bin/env python3
"""
Weight Preparation
==================
Turns a recipe into per-digit consonant weights.

Every language gets a regular weight, its share of the total population.
A digit's weight for a phoneme is the sum of the regular weights of the
languages whose word for that digit contains the phoneme. A phoneme that
occurs twice in one loanword still counts that language once.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence

from numeralkit.errors import ConfigurationError
from numeralkit.phonemes import CONSONANTS, Phoneme
from numeralkit.recipe import Recipe, SuperLanguage

logger = logging.getLogger(__name__)

DIGITS = tuple(range(10))

CandidateWeights = Mapping[Phoneme, float]

CANDIDATE_MODES = ('weighted', 'all')


def weight_sum(super_languages: Iterable[SuperLanguage]) -> float:
    """Sum of all populations."""
    return sum(sl.population for sl in super_languages)


def regular_weights(super_languages: Sequence[SuperLanguage]) -> Dict[str, float]:
    """Map each language to population / total population."""
    total = weight_sum(super_languages)
    if total <= 0:
        raise ConfigurationError("Total population must be positive")
    return {sl.language: sl.population / total for sl in super_languages}


def parse_digit(meaning: str) -> int:
    """Parse a digit label ("0".."9")."""
    try:
        digit = int(str(meaning).strip())
    except ValueError:
        raise ConfigurationError(f"Digit label is not an integer: {meaning!r}") from None
    if digit not in DIGITS:
        raise ConfigurationError(f"Digit label out of range 0-9: {meaning!r}")
    return digit


def candidate_weights(recipe: Recipe) -> Dict[int, CandidateWeights]:
    """
    Build consonant weights for every digit 0-9.

    Digits the recipe does not mention get an empty mapping. Vowels are
    dropped, so no mapping ever has a vowel key.

    Raises
    ------
    ConfigurationError
        On a bad digit label, a digit listed twice, an origin whose language
        has no population, or an origin without a loan.
    """
    weights = regular_weights(recipe.super_languages)
    result: Dict[int, CandidateWeights] = {}

    for super_word in recipe.super_words:
        digit = parse_digit(super_word.meaning)
        if digit in result:
            raise ConfigurationError(f"Digit {digit} is listed twice")

        slot: Dict[Phoneme, float] = {}
        for origin in super_word.origins:
            if origin.language not in weights:
                raise ConfigurationError(
                    f"No population for language '{origin.language}' (digit {digit})"
                )
            if not origin.loan:
                raise ConfigurationError(
                    f"Origin '{origin.language}' of digit {digit} has no loan phonemes"
                )
            for phoneme in set(origin.loan):
                if phoneme.is_vowel:
                    continue
                slot[phoneme] = slot.get(phoneme, 0.0) + weights[origin.language]
        result[digit] = MappingProxyType(slot)

    for digit in DIGITS:
        if digit not in result:
            logger.warning(f"Recipe has no word for digit {digit}")
            result[digit] = MappingProxyType({})
    return dict(sorted(result.items()))


def candidate_consonants(
    weights: Mapping[int, CandidateWeights],
    mode: str = 'weighted',
) -> List[List[Phoneme]]:
    """
    Sorted, deduplicated candidate consonants per digit.

    ``weighted`` keeps the consonants that appear in the digit's weights;
    ``all`` offers the full consonant inventory to every digit.
    """
    if mode not in CANDIDATE_MODES:
        raise ConfigurationError(
            f"Unknown candidate mode '{mode}'. Available: {', '.join(CANDIDATE_MODES)}"
        )
    if not CONSONANTS:
        raise ConfigurationError("Consonant inventory is empty")

    candidates = []
    for digit in DIGITS:
        if mode == 'all':
            consonants = sorted(CONSONANTS)
        else:
            consonants = sorted(p for p in weights.get(digit, {}) if p.is_consonant)
        if len(consonants) < 2:
            logger.warning(
                f"Digit {digit} has {len(consonants)} candidate consonant(s); "
                f"no assignment can be built"
            )
        candidates.append(consonants)
    return candidates


__all__ = [
    'DIGITS',
    'CandidateWeights',
    'CANDIDATE_MODES',
    'weight_sum',
    'regular_weights',
    'parse_digit',
    'candidate_weights',
    'candidate_consonants',
]
