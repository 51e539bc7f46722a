#!/usr/bin/env python3
"""
NumeralKit - Numeral Word Generator
===================================

Builds CVC words for the digits 0-9 of an artificial language from
loanwords of weighted natural languages, so that no two digits share an
opening consonant or a closing consonant.

Quick Start
-----------
    from numeralkit import NumeralKit

    kit = NumeralKit.from_recipe("recipe.yaml")

    # Inspect per-digit consonant weights
    kit.weights[3]

    # Search (bounded)
    result = kit.search(max_steps=200_000)
    print(result.best)

Modules
-------
    numeralkit.phonemes   - Phoneme inventory, IPA segmentation, spelling
    numeralkit.recipe     - Recipe loading
    numeralkit.weights    - Per-digit consonant weights
    numeralkit.generators - The constrained search
    numeralkit.report     - Tables and Markdown export
    numeralkit.config     - Search settings

CLI Usage
---------
    python -m numeralkit generate
    python -m numeralkit weights recipe.yaml
    python -m numeralkit spell "ˈzɪəɹəʊ"
"""

__version__ = "0.2.0"
__author__ = "NumeralKit"

from typing import Dict, List, Optional

from .errors import ConfigurationError
from .config import SearchConfig, default_recipe_path
from .phonemes import (
    Phoneme,
    CONSONANTS,
    VOWELS,
    ipa_to_phonemes,
    parse_phonemes,
    phonemes_to_loan,
)
from .recipe import Origin, Recipe, SuperLanguage, SuperWord, load_recipe
from .weights import CandidateWeights, candidate_consonants, candidate_weights
from .generators import (
    CandidateNumber,
    CandidateNumbers,
    Number,
    NumberGenerator,
    RecordTracker,
    SearchResult,
    SearchStats,
)


# =============================================================================
# Main Interface
# =============================================================================

class NumeralKit:
    """
    Unified interface for numeral generation.

    Example:
        kit = NumeralKit.from_recipe("recipe.yaml")
        result = kit.search(max_steps=100_000)
        for record in result.records:
            print(record)
    """

    def __init__(self, recipe: Recipe, config: Optional[SearchConfig] = None):
        self.recipe = recipe
        self.config = config or SearchConfig()
        self._generator: Optional[NumberGenerator] = None

    @classmethod
    def from_recipe(cls, path=None, config: Optional[SearchConfig] = None) -> "NumeralKit":
        """Load a recipe file (default: ``recipe.default_path`` in app.yaml)."""
        return cls(load_recipe(path or default_recipe_path()), config=config)

    @property
    def generator(self) -> NumberGenerator:
        """The number generator, built on first use."""
        if self._generator is None:
            self._generator = NumberGenerator.from_recipe(self.recipe, config=self.config)
        return self._generator

    @property
    def weights(self) -> Dict[int, CandidateWeights]:
        return self.generator.weights

    @property
    def candidates(self) -> List[List[Phoneme]]:
        return self.generator.candidates

    def search(
        self,
        max_steps: Optional[int] = None,
        max_records: Optional[int] = None,
    ) -> SearchResult:
        """Run the search; see NumberGenerator.search."""
        return self.generator.search(max_steps=max_steps, max_records=max_records)

    def best(self, max_steps: Optional[int] = None) -> Optional[CandidateNumbers]:
        """Best assignment found within ``max_steps``."""
        return self.search(max_steps=max_steps).best


__all__ = [
    # Main interface
    'NumeralKit',
    '__version__',
    # Errors and config
    'ConfigurationError',
    'SearchConfig',
    # Phonemes
    'Phoneme',
    'CONSONANTS',
    'VOWELS',
    'ipa_to_phonemes',
    'parse_phonemes',
    'phonemes_to_loan',
    # Recipe and weights
    'Origin',
    'Recipe',
    'SuperLanguage',
    'SuperWord',
    'load_recipe',
    'CandidateWeights',
    'candidate_consonants',
    'candidate_weights',
    # Search
    'CandidateNumber',
    'CandidateNumbers',
    'Number',
    'NumberGenerator',
    'RecordTracker',
    'SearchResult',
    'SearchStats',
]
