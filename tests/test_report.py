"""
Tests for Reports and Profiling
===============================
Tests for numeralkit/report.py and numeralkit/profiler.py.
"""

import json
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from numeralkit.phonemes import CONSONANTS, Phoneme
from numeralkit.config import SearchConfig
from numeralkit.generators import NumberGenerator, Number, SearchResult
from numeralkit.profiler import SearchProfiler
from numeralkit.report import (
    export_markdown,
    format_assignment,
    records_to_dict,
    render_markdown,
    spell,
    weights_table,
)


@pytest.fixture
def result():
    candidates = [[CONSONANTS[2 * i], CONSONANTS[2 * i + 1]] for i in range(10)]
    weights = {i: {c[0]: 0.5, c[1]: 0.25} for i, c in enumerate(candidates)}
    config = SearchConfig(max_steps=0, max_records=2, log_records=False)
    return NumberGenerator(weights, candidates=candidates, config=config).search()


class TestFormatting:
    """Tests for spelling and one-line formatting."""

    def test_spell(self):
        assert spell(Number(Phoneme.C, Phoneme.A, Phoneme.X)) == "cax"

    def test_format_assignment(self, result):
        line = format_assignment(result.best)
        words, score = line.split(" | ")
        assert len(words.split(", ")) == 10
        assert float(score) == pytest.approx(7.5)


class TestWeightsTable:
    """Tests for weights_table()."""

    def test_rows_sorted_by_weight(self):
        weights = {1: {Phoneme.P: 0.1, Phoneme.T: 0.3}, 0: {Phoneme.K: 0.2}}
        assert weights_table(weights) == [(0, 'K', 0.2), (1, 'T', 0.3), (1, 'P', 0.1)]


class TestExport:
    """Tests for JSON and Markdown export."""

    def test_records_to_dict(self, result):
        data = records_to_dict(result)
        json.dumps(data)
        assert len(data['records']) == 2
        first = data['records'][0]['numbers'][0]
        assert first['digit'] == 0
        assert first['phonemes'] == "PAB"
        assert first['spelling'] == "pab"
        assert data['stats']['stop_reason'] == 'max_records'

    def test_render_markdown(self, result):
        text = render_markdown(result)
        assert "## Best" in text
        assert "Total score: 7.500000" in text

    def test_render_empty(self):
        text = render_markdown(SearchResult())
        assert "No valid assignment" in text

    def test_export_creates_dirs(self, result, tmp_path):
        path = export_markdown(result, tmp_path / "out" / "numerals.md", top=1)
        assert path.exists()
        assert path.read_text(encoding='utf-8').count("|pab") == 2


class TestProfiler:
    """Tests for SearchProfiler."""

    def test_disabled_records_nothing(self):
        profiler = SearchProfiler(enabled=False)
        with profiler.stage("search") as stage:
            stage.items = 5
        assert profiler.report() == ""
        assert not profiler.stages

    def test_enabled_records_stage(self, tmp_path):
        profiler = SearchProfiler(enabled=True)
        profiler.start()
        with profiler.stage("search") as stage:
            stage.items = 5
        assert profiler.stages["search"].count == 1
        assert profiler.stages["search"].items == 5
        assert "PROFILING REPORT" in profiler.report()

        path = tmp_path / "profile.json"
        profiler.save_json(str(path))
        assert "search" in json.loads(path.read_text())['stages']
