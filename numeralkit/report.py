#!/usr/bin/env python3
"""
Reports and export for search results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from numeralkit.phonemes import Phoneme, phonemes_to_loan
from numeralkit.generators.number_generator import SearchResult
from numeralkit.generators.scoring import CandidateNumbers
from numeralkit.generators.slots import Number


def spell(number: Number) -> str:
    """Latin spelling of a digit-word."""
    return phonemes_to_loan(number.phonemes)


def format_assignment(candidate: CandidateNumbers) -> str:
    """One line: spelled words 0-9 and the total score."""
    words = ", ".join(spell(c.number) for c in candidate.numbers)
    return f"{words} | {candidate.score:.6f}"


def weights_table(weights: Mapping[int, Mapping[Phoneme, float]]) -> List[tuple]:
    """
    Rows of (digit, consonant, weight), heaviest consonant first per digit.

    Diagnostic only.
    """
    rows = []
    for digit in sorted(weights):
        ordered = sorted(weights[digit].items(), key=lambda kv: (-kv[1], kv[0]))
        for phoneme, weight in ordered:
            rows.append((digit, str(phoneme), round(weight, 6)))
    return rows


def records_to_dict(result: SearchResult) -> Dict[str, Any]:
    """JSON-ready view of a search result."""
    return {
        'records': [
            {
                'score': record.score,
                'numbers': [
                    {
                        'digit': digit,
                        'phonemes': str(c.number),
                        'spelling': spell(c.number),
                        'score': c.score,
                    }
                    for digit, c in enumerate(record.numbers)
                ],
            }
            for record in result.records
        ],
        'stats': result.stats.to_dict(),
    }


def render_markdown(result: SearchResult, top: Optional[int] = None) -> str:
    """Markdown report: best assignment, then the latest records."""
    lines = ["# Numerals", ""]
    best = result.best
    if best is None:
        lines.append("No valid assignment was found.")
    else:
        lines += ["## Best", "", "|Digit|Word|Phonemes|Score|", "|:-:|:-:|:-:|:-:|"]
        for digit, c in enumerate(best.numbers):
            lines.append(f"|{digit}|{spell(c.number)}|{c.number}|{c.score:.6f}|")
        lines += ["", f"Total score: {best.score:.6f}", ""]

        records = list(reversed(result.records))
        if top:
            records = records[:top]
        lines += ["## Records", "", "|Words|Score|", "|:-:|:-:|"]
        for record in records:
            words = " ".join(spell(c.number) for c in record.numbers)
            lines.append(f"|{words}|{record.score:.6f}|")
        lines.append("")

    stats = result.stats
    lines += [
        "## Search",
        "",
        f"States examined: {stats.states}",
        f"Valid assignments: {stats.assignments}",
        f"Conflicts (first/second): {stats.first_conflicts}/{stats.second_conflicts}",
        f"Stopped: {stats.stop_reason}",
        "",
    ]
    return "\n".join(lines)


def export_markdown(result: SearchResult, path, top: Optional[int] = None) -> Path:
    """Write the Markdown report, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_markdown(result, top=top), encoding='utf-8')
    return path


__all__ = [
    'spell',
    'format_assignment',
    'weights_table',
    'records_to_dict',
    'render_markdown',
    'export_markdown',
]
