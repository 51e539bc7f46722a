"""
Tests for Recipe Loading
========================
Tests for parsing, complementing and loading recipes in
numeralkit/recipe.py.
"""

import json
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from numeralkit.config import default_recipe_path
from numeralkit.errors import ConfigurationError
from numeralkit.phonemes import Phoneme, parse_phonemes
from numeralkit.recipe import Origin, Recipe, SuperWord, load_recipe, parse_recipe


RECIPE_DATA = {
    'languages': [
        {'language': 'en', 'population': 1452},
        {'language': 'es', 'population': 548},
    ],
    'words': [
        {'meaning': '2', 'origins': [
            {'language': 'en', 'word': 'two', 'ipa': 'tuː'},
            {'language': 'es', 'word': 'dos', 'loan': 'dos'},
        ]},
    ],
}


class TestParseRecipe:
    """Tests for parse_recipe()."""

    def test_parses_languages_and_words(self):
        recipe = parse_recipe(RECIPE_DATA)
        assert recipe.populations() == {'en': 1452.0, 'es': 548.0}
        assert recipe.super_words[0].meaning == '2'
        assert recipe.super_words[0].origins[1].loan == parse_phonemes('dos')
        assert recipe.super_words[0].origins[0].loan is None

    def test_loan_as_list(self):
        data = {'languages': [{'language': 'en', 'population': 1}],
                'words': [{'meaning': '1', 'origins': [{'language': 'en', 'loan': ['W', 'A', 'N']}]}]}
        assert parse_recipe(data).super_words[0].origins[0].loan == parse_phonemes('wan')

    def test_boolean_loan_rejected(self):
        data = {'languages': [{'language': 'en', 'population': 1}],
                'words': [{'meaning': '1', 'origins': [{'language': 'en', 'loan': False}]}]}
        with pytest.raises(ConfigurationError, match="quoted"):
            parse_recipe(data)

    def test_missing_population(self):
        with pytest.raises(ConfigurationError, match="population"):
            parse_recipe({'languages': [{'language': 'en'}], 'words': []})

    def test_negative_population(self):
        with pytest.raises(ConfigurationError):
            parse_recipe({'languages': [{'language': 'en', 'population': -1}], 'words': []})

    def test_duplicate_language(self):
        data = {'languages': [{'language': 'en', 'population': 1}] * 2, 'words': []}
        with pytest.raises(ConfigurationError, match="twice"):
            parse_recipe(data)

    def test_unknown_loan_symbol(self):
        data = {'languages': [{'language': 'en', 'population': 1}],
                'words': [{'meaning': '1', 'origins': [{'language': 'en', 'loan': 'q'}]}]}
        with pytest.raises(ConfigurationError, match="Unknown phoneme"):
            parse_recipe(data)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            parse_recipe(["languages"])

    def test_origin_not_a_mapping(self):
        data = {'languages': [{'language': 'en', 'population': 1}],
                'words': [{'meaning': '0', 'origins': ['en']}]}
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            parse_recipe(data)


class TestComplement:
    """Tests for Recipe.complement()."""

    def test_fills_loan_from_ipa(self):
        recipe = parse_recipe(RECIPE_DATA).complement()
        assert recipe.super_words[0].origins[0].loan == [Phoneme.T, Phoneme.U]

    def test_keeps_existing_loan(self):
        recipe = parse_recipe(RECIPE_DATA).complement()
        assert recipe.super_words[0].origins[1].loan == parse_phonemes('dos')

    def test_does_not_mutate_original(self):
        original = parse_recipe(RECIPE_DATA)
        original.complement()
        assert original.super_words[0].origins[0].loan is None

    def test_neither_loan_nor_ipa(self):
        recipe = Recipe(super_words=[SuperWord('1', [Origin('en')])])
        with pytest.raises(ConfigurationError, match="neither"):
            recipe.complement()

    def test_ipa_with_only_marks(self):
        """Stress, syllable and length marks alone give no phonemes."""
        recipe = Recipe(super_words=[SuperWord('1', [Origin('en', ipa='ˈ.ː')])])
        with pytest.raises(ConfigurationError, match="no phonemes"):
            recipe.complement()


class TestLoadRecipe:
    """Tests for load_recipe()."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "recipe.yaml"
        path.write_text(
            "languages:\n"
            "  - {language: en, population: 10}\n"
            "words:\n"
            "  - meaning: \"0\"\n"
            "    origins:\n"
            "      - {language: en, word: zero, ipa: \"ˈzɪəɹəʊ\"}\n",
            encoding='utf-8',
        )
        recipe = load_recipe(path)
        assert recipe.super_words[0].origins[0].loan[0] is Phoneme.Z

    def test_load_json(self, tmp_path):
        path = tmp_path / "recipe.json"
        path.write_text(json.dumps(RECIPE_DATA, ensure_ascii=False), encoding='utf-8')
        recipe = load_recipe(path)
        assert all(o.loan for w in recipe.super_words for o in w.origins)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_recipe(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("languages: [\n", encoding='utf-8')
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            load_recipe(path)

    def test_bundled_recipe(self):
        """The shipped recipe covers all ten digits."""
        recipe = load_recipe(default_recipe_path())
        assert sorted(int(w.meaning) for w in recipe.super_words) == list(range(10))
        assert len(recipe.super_languages) == 12
