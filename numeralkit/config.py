#!/usr/bin/env python3
"""
Configuration Management
========================
Search settings, filled from ``configs/app.yaml`` where not given.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from numeralkit.errors import ConfigurationError
from numeralkit.phonemes import Phoneme, parse_vowel_list
from numeralkit.settings import get_setting, resolve_path
from numeralkit.weights import CANDIDATE_MODES


@dataclass
class SearchConfig:
    """Configuration for one search run."""
    vowels: Optional[Sequence] = None          # Vowel cycle, symbols or Phonemes
    candidates: Optional[str] = None           # 'weighted' or 'all'
    max_steps: Optional[int] = None            # States visited; 0 = unbounded
    max_records: Optional[int] = None          # Records kept; 0 = unbounded
    full_rescan: Optional[bool] = None         # Scan from slot 1 after every step
    log_records: Optional[bool] = None         # Log each new record at INFO

    def __post_init__(self):
        cfg = get_setting("search", {}) or {}
        if self.vowels is None:
            self.vowels = cfg.get("vowels")
        if self.candidates is None:
            self.candidates = cfg.get("candidates")
        if self.max_steps is None:
            self.max_steps = cfg.get("max_steps")
        if self.max_records is None:
            self.max_records = cfg.get("max_records")
        if self.full_rescan is None:
            self.full_rescan = cfg.get("full_rescan")
        if self.log_records is None:
            self.log_records = cfg.get("log_records")

        missing = [
            name for name, value in (
                ("vowels", self.vowels),
                ("candidates", self.candidates),
                ("max_steps", self.max_steps),
                ("max_records", self.max_records),
                ("full_rescan", self.full_rescan),
                ("log_records", self.log_records),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"search settings missing in app.yaml: {', '.join(missing)}")

        self.vowels = parse_vowel_list(str(v) for v in self.vowels)
        if self.candidates not in CANDIDATE_MODES:
            raise ConfigurationError(
                f"Unknown candidate mode '{self.candidates}'. "
                f"Available: {', '.join(CANDIDATE_MODES)}"
            )
        if self.max_steps < 0 or self.max_records < 0:
            raise ConfigurationError("max_steps and max_records must not be negative")

    @property
    def vowel_cycle(self) -> Tuple[Phoneme, ...]:
        return tuple(self.vowels)


def default_recipe_path():
    """Recipe path from app.yaml, resolved against the project root."""
    return resolve_path(get_setting("recipe.default_path", "numeralkit/data/recipe.yaml"))


def export_directory():
    """Directory for exported reports, relative to the working directory."""
    return resolve_path(get_setting("export.directory", "export"), base=Path.cwd())


__all__ = [
    'SearchConfig',
    'default_recipe_path',
    'export_directory',
]
