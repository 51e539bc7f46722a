#!/usr/bin/env python3
"""
Recipe Loading
==============
A recipe lists the source languages with their populations and, for each
digit, the words those languages use for it.

Format (YAML, or JSON since YAML is a superset):

    languages:
      - {language: en, population: 1452}
      - {language: es, population: 559}
    words:
      - meaning: "0"
        origins:
          - {language: en, word: zero, ipa: "ˈzɪəɹəʊ"}
          - {language: es, word: cero, loan: "sero"}

``loan`` is written in phoneme symbols. When it is missing it is derived
from ``ipa``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from numeralkit.errors import ConfigurationError
from numeralkit.phonemes import Phoneme, ipa_to_phonemes, parse_phonemes

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class SuperLanguage:
    """A source language and the population that speaks it."""
    language: str
    population: float


@dataclass
class Origin:
    """One language's word for a meaning."""
    language: str
    word: str = ""
    ipa: Optional[str] = None
    loan: Optional[List[Phoneme]] = None


@dataclass
class SuperWord:
    """A meaning (a digit label for numerals) and its source words."""
    meaning: str
    origins: List[Origin] = field(default_factory=list)


@dataclass
class Recipe:
    """Source languages plus the words to derive from them."""
    super_languages: List[SuperLanguage] = field(default_factory=list)
    super_words: List[SuperWord] = field(default_factory=list)

    def populations(self) -> Dict[str, float]:
        """Map language code -> population."""
        return {sl.language: sl.population for sl in self.super_languages}

    def complement(self) -> "Recipe":
        """
        Return a copy where every origin has a loan.

        Loans missing from the recipe are segmented from the IPA field.

        Raises
        ------
        ConfigurationError
            If an origin has neither a loan nor an IPA transcription, or its
            IPA holds no phonemes.
        """
        words = []
        for super_word in self.super_words:
            origins = []
            for origin in super_word.origins:
                if origin.loan is None:
                    if not origin.ipa:
                        raise ConfigurationError(
                            f"Origin '{origin.language}' of '{super_word.meaning}' "
                            f"has neither loan nor ipa"
                        )
                    origin = replace(origin, loan=ipa_to_phonemes(origin.ipa))
                    if not origin.loan:
                        raise ConfigurationError(
                            f"Origin '{origin.language}' of '{super_word.meaning}' "
                            f"has no phonemes in ipa '{origin.ipa}'"
                        )
                    logger.debug(
                        f"{super_word.meaning}/{origin.language}: "
                        f"{origin.ipa} -> {''.join(str(p) for p in origin.loan)}"
                    )
                origins.append(origin)
            words.append(SuperWord(meaning=super_word.meaning, origins=origins))
        return Recipe(super_languages=list(self.super_languages), super_words=words)


# =============================================================================
# Parsing
# =============================================================================

def _require(data: Dict[str, Any], key: str, context: str) -> Any:
    if not isinstance(data, dict):
        raise ConfigurationError(f"{context} must be a mapping")
    value = data.get(key)
    if value is None:
        raise ConfigurationError(f"{context}.{key} must be set")
    return value


def _parse_language(data: Dict[str, Any], index: int) -> SuperLanguage:
    context = f"languages[{index}]"
    language = str(_require(data, 'language', context))
    population = _require(data, 'population', context)
    try:
        population = float(population)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{context}.population must be a number") from None
    if population < 0:
        raise ConfigurationError(f"{context}.population must not be negative")
    return SuperLanguage(language=language, population=population)


def _parse_origin(data: Dict[str, Any], context: str) -> Origin:
    language = str(_require(data, 'language', context))
    loan = data.get('loan')
    if isinstance(loan, bool):
        # YAML reads bare yes/no/on/off as booleans
        raise ConfigurationError(f"{context}.loan must be quoted")
    if loan is not None:
        if isinstance(loan, (list, tuple)):
            loan = parse_phonemes(''.join(str(s) for s in loan))
        else:
            loan = parse_phonemes(str(loan))
    ipa = data.get('ipa')
    return Origin(
        language=language,
        word=str(data.get('word') or ''),
        ipa=str(ipa) if ipa is not None else None,
        loan=loan,
    )


def _parse_word(data: Dict[str, Any], index: int) -> SuperWord:
    context = f"words[{index}]"
    meaning = str(_require(data, 'meaning', context))
    origins = data.get('origins') or []
    if not isinstance(origins, list):
        raise ConfigurationError(f"{context}.origins must be a list")
    return SuperWord(
        meaning=meaning,
        origins=[_parse_origin(o, f"{context}.origins[{i}]") for i, o in enumerate(origins)],
    )


def parse_recipe(data: Dict[str, Any]) -> Recipe:
    """Build a Recipe from already-loaded YAML/JSON data."""
    if not isinstance(data, dict):
        raise ConfigurationError("Recipe must be a mapping with 'languages' and 'words'")
    languages = data.get('languages') or []
    words = data.get('words') or []
    if not isinstance(languages, list) or not isinstance(words, list):
        raise ConfigurationError("Recipe 'languages' and 'words' must be lists")

    super_languages = [_parse_language(item, i) for i, item in enumerate(languages)]
    seen = set()
    for sl in super_languages:
        if sl.language in seen:
            raise ConfigurationError(f"Language '{sl.language}' is listed twice")
        seen.add(sl.language)

    return Recipe(
        super_languages=super_languages,
        super_words=[_parse_word(item, i) for i, item in enumerate(words)],
    )


def load_recipe(path) -> Recipe:
    """
    Load and complement a recipe file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ConfigurationError
        If the recipe is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Recipe not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse recipe {path}: {e}") from e
    recipe = parse_recipe(data or {})
    logger.info(
        f"Loaded recipe {path}: {len(recipe.super_languages)} languages, "
        f"{len(recipe.super_words)} words"
    )
    return recipe.complement()


__all__ = [
    'SuperLanguage',
    'Origin',
    'SuperWord',
    'Recipe',
    'parse_recipe',
    'load_recipe',
]
