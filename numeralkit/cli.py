#!/usr/bin/env python3
"""
NumeralKit CLI
==============
Command-line interface for numeral generation.

Usage:
    numeralkit generate recipe.yaml --max-steps 500000
    numeralkit weights recipe.yaml
    numeralkit phonemes
    numeralkit spell "ˈzɪəɹəʊ" "ˈsero"
"""

import argparse
import json
import sys

from numeralkit import __version__

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def success(self, msg: str):
        if not self.quiet:
            print(f"OK: {msg}")

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                         for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def build_config(args):
    """SearchConfig from CLI flags, falling back to app.yaml."""
    from numeralkit.config import SearchConfig

    return SearchConfig(
        vowels=args.vowels.split(',') if getattr(args, 'vowels', None) else None,
        candidates='all' if getattr(args, 'all_consonants', False) else None,
        full_rescan=True if getattr(args, 'full_rescan', False) else None,
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Search numeral words and print the records."""
    from numeralkit import NumeralKit
    from numeralkit.config import export_directory
    from numeralkit.profiler import SearchProfiler
    from numeralkit.settings import get_setting
    from numeralkit.report import export_markdown, format_assignment, records_to_dict

    profiler = SearchProfiler(enabled=args.profiling)
    profiler.start()

    with profiler.stage("recipe"):
        kit = NumeralKit.from_recipe(args.recipe, config=build_config(args))
    with profiler.stage("weights") as stage:
        candidates = kit.candidates
        stage.items = sum(len(c) for c in candidates)

    with profiler.stage("search") as stage:
        result = kit.search(max_steps=args.max_steps, max_records=args.max_records)
        stage.items = result.stats.states

    if args.json:
        print(json.dumps(records_to_dict(result), indent=2, ensure_ascii=False))
    else:
        out.print(f"Candidates per digit: {' '.join(str(len(c)) for c in candidates)}")
        for record in result.records:
            out.print(format_assignment(record))
        stats = result.stats
        out.print(
            f"\n{stats.records} record(s), {stats.assignments} valid assignment(s), "
            f"{stats.states} state(s) examined, stopped: {stats.stop_reason}"
        )
        if result.best is None:
            out.print("No valid assignment found.")

    output = args.output
    if args.export and not output:
        output = export_directory() / "numerals.md"
    if output:
        top = args.top if args.top is not None else get_setting("export.top", 10)
        path = export_markdown(result, output, top=top)
        out.success(f"Report written to {path}")

    if args.profiling:
        out.print(profiler.report())
        if args.profile_output:
            profiler.save_json(args.profile_output)
            out.success(f"Profile written to {args.profile_output}")
    return 0


def cmd_weights(args, out: Output):
    """Show per-digit consonant weights."""
    from numeralkit.recipe import load_recipe
    from numeralkit.report import weights_table
    from numeralkit.weights import candidate_weights

    weights = candidate_weights(load_recipe(args.recipe))
    rows = weights_table(weights)
    if args.json:
        data = {str(d): {p: w for dd, p, w in rows if dd == d} for d in weights}
        print(json.dumps(data, indent=2))
        return 0
    out.table(['Digit', 'Consonant', 'Weight'], rows)
    return 0


def cmd_phonemes(args, out: Output):
    """List the phoneme inventory."""
    from numeralkit.phonemes import CONSONANTS, VOWELS, load_spelling

    spelling = load_spelling()
    out.print(f"Consonants ({len(CONSONANTS)}): " + ' '.join(f"{p}={spelling[p]}" for p in CONSONANTS))
    out.print(f"Vowels ({len(VOWELS)}):     " + ' '.join(f"{p}={spelling[p]}" for p in VOWELS))
    return 0


def cmd_spell(args, out: Output):
    """Segment IPA and spell the result."""
    from numeralkit.phonemes import ipa_to_phonemes, phonemes_to_loan

    rows = []
    for ipa in args.ipa:
        phonemes = ipa_to_phonemes(ipa)
        rows.append((ipa, ' '.join(str(p) for p in phonemes), phonemes_to_loan(phonemes)))
    out.table(['IPA', 'Phonemes', 'Spelling'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    from numeralkit.config import default_recipe_path
    from numeralkit.logging_config import configure_logging

    parser = argparse.ArgumentParser(
        prog='numeralkit',
        description='NumeralKit - Numeral Word Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate
  %(prog)s generate recipe.yaml --max-steps 500000 --output export/numerals.md
  %(prog)s generate --all-consonants --max-records 5 --json
  %(prog)s weights recipe.yaml
  %(prog)s spell "ˈzɪəɹəʊ"
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')

    subparsers = parser.add_subparsers(dest='command', help='Commands')
    recipe_default = str(default_recipe_path())

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Search numeral words')
    p.add_argument('recipe', nargs='?', default=recipe_default, help='Recipe file (YAML or JSON)')
    p.add_argument('--max-steps', type=int, help='States to examine (0 = unbounded; default from app.yaml)')
    p.add_argument('--max-records', type=int, help='Stop after this many records')
    p.add_argument('--vowels', help='Comma-separated vowel cycle (e.g., A,E,I,O,U)')
    p.add_argument('--all-consonants', action='store_true',
                   help='Offer every consonant to every digit')
    p.add_argument('--full-rescan', action='store_true',
                   help='Re-scan from the first slot after every step')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    p.add_argument('--output', '-o', help='Write a Markdown report to this path')
    p.add_argument('--export', action='store_true',
                   help='Write the Markdown report to the export directory')
    p.add_argument('--top', type=int, help='Records in the report (default from app.yaml)')
    p.add_argument('--profiling', action='store_true', help='Time each stage')
    p.add_argument('--profile-output', help='Save profiling data to JSON file')

    # --- weights ---
    p = subparsers.add_parser('weights', aliases=['w'], help='Show per-digit consonant weights')
    p.add_argument('recipe', nargs='?', default=recipe_default, help='Recipe file (YAML or JSON)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- phonemes ---
    subparsers.add_parser('phonemes', help='List the phoneme inventory')

    # --- spell ---
    p = subparsers.add_parser('spell', help='Segment IPA and spell it')
    p.add_argument('ipa', nargs='+', help='IPA transcription(s)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging('DEBUG' if args.verbose else None)

    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'w': 'weights',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=getattr(args, 'quiet', False))

    commands = {
        'generate': cmd_generate,
        'weights': cmd_weights,
        'phonemes': cmd_phonemes,
        'spell': cmd_spell,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
