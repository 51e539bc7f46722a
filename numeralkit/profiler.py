#!/usr/bin/env python3
"""
Search Profiler
===============
Lightweight stage timing for a numeral search run.

Usage:
    numeralkit generate --profiling
    numeralkit generate --profiling --profile-output profile.json
"""

import json
import statistics
import time
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StageStats:
    """Timings for one profiled stage."""
    times: list = field(default_factory=list)
    items: int = 0

    @property
    def total(self) -> float:
        return sum(self.times)

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def mean(self) -> float:
        return statistics.mean(self.times) if self.times else 0

    @property
    def per_item(self) -> float:
        return self.total / self.items if self.items else 0

    def to_dict(self) -> dict:
        return {
            'total_seconds': self.total,
            'count': self.count,
            'items': self.items,
            'mean_seconds': self.mean,
            'per_item_us': self.per_item * 1_000_000,
        }


class SearchProfiler:
    """
    Profiler for recipe loading, weight preparation and the search.

    Example:
        profiler = SearchProfiler(enabled=True)
        profiler.start()

        with profiler.stage("weights"):
            gen = NumberGenerator.from_recipe(recipe)

        with profiler.stage("search") as stage:
            result = gen.search()
            stage.items = result.stats.states

        print(profiler.report())
    """

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.stages: dict[str, StageStats] = defaultdict(StageStats)
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def start(self):
        """Start the profiling session."""
        if self.enabled:
            self.start_time = time.perf_counter()

    def stop(self):
        """Stop the profiling session."""
        if self.enabled:
            self.end_time = time.perf_counter()

    @property
    def total_time(self) -> float:
        """Total elapsed time."""
        if not self.start_time:
            return 0
        end = self.end_time or time.perf_counter()
        return end - self.start_time

    @contextmanager
    def stage(self, name: str):
        """
        Time a stage.

        Yields a counter object; set its ``items`` to the number of units the
        stage processed (states visited, words loaded) for per-item timing.
        """
        counter = _ItemCounter()
        if not self.enabled:
            yield counter
            return

        start = time.perf_counter()
        try:
            yield counter
        finally:
            elapsed = time.perf_counter() - start
            self.stages[name].times.append(elapsed)
            self.stages[name].items += counter.items

    def report(self) -> str:
        """Render a plain-text timing table."""
        if not self.enabled or not self.stages:
            return ""

        self.stop()
        total = self.total_time

        lines = [
            "",
            "=" * 60,
            "PROFILING REPORT",
            "=" * 60,
            f"Total time: {total:.3f}s",
            "",
        ]
        header = f"{'Stage':<16} {'Total':>9} {'%':>6} {'Calls':>6} {'Items':>10} {'Per-item':>10}"
        lines.append(header)
        lines.append("-" * len(header))

        for name, stats in sorted(self.stages.items(), key=lambda x: -x[1].total):
            pct = (stats.total / total) * 100 if total > 0 else 0
            per_item_str = f"{stats.per_item * 1_000_000:.1f}us" if stats.items > 0 else "-"
            lines.append(
                f"{name:<16} {stats.total:>8.3f}s {pct:>5.1f}% "
                f"{stats.count:>6} {stats.items:>10} {per_item_str:>10}"
            )
        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Export profiling data as a dictionary (for JSON export)."""
        self.stop()
        return {
            'total_seconds': self.total_time,
            'stages': {name: stats.to_dict() for name, stats in self.stages.items()},
        }

    def save_json(self, path: str):
        """Save profiling data to a JSON file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


class _ItemCounter:
    items: int = 0


__all__ = ['StageStats', 'SearchProfiler']
