#!/usr/bin/env python3
"""
Typogly CLI
===========
Command-line interface for scrambling text.

Usage:
    typogly scramble "According to research at Cambridge" --seed 42
    typogly scramble --file essay.txt --preset half
    cat essay.txt | typogly scramble --min-length 6
    typogly presets
"""

import argparse
import logging
import sys
from pathlib import Path

from typogly import __version__

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

    def result(self, text: str):
        """Write command output; never suppressed by --quiet."""
        sys.stdout.write(text)
        if not text.endswith('\n'):
            sys.stdout.write('\n')

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                         for i, h in enumerate(headers)]

        # Header
        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        # Rows
        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def read_input(args) -> str:
    """Text from positional arguments, --file, or stdin (in that order)."""
    if args.text:
        return ' '.join(args.text)
    if args.file:
        path = Path(args.file)
        if not path.is_file():
            raise ValueError(f"File not found: {args.file}")
        return path.read_text(encoding='utf-8')
    return sys.stdin.read()


def options_from_args(args) -> dict:
    """Collect the option flags that were actually given."""
    opts = {}
    if args.seed is not None:
        opts['seed'] = args.seed
    if args.min_length is not None:
        opts['min_length'] = args.min_length
    if args.probability is not None:
        opts['scramble_probability'] = args.probability
    if args.no_preserve_case:
        opts['preserve_case'] = False
    return opts


def format_options(options: dict) -> str:
    if not options:
        return '(defaults)'
    return ', '.join(f"{k}={v}" for k, v in sorted(options.items()))


# =============================================================================
# Commands
# =============================================================================

def cmd_scramble(args, out: Output):
    """Scramble text."""
    from typogly import create_scrambler

    scrambler = create_scrambler(args.preset)
    text = read_input(args)
    out.result(scrambler(text, options_from_args(args)))
    return 0


def cmd_presets(args, out: Output):
    """List configured presets."""
    from typogly import list_presets

    presets = list_presets()
    if not presets:
        out.print("No presets configured.")
        return 0

    rows = [[name, p['description'], format_options(p['options'])]
            for name, p in sorted(presets.items())]
    out.table(['Preset', 'Description', 'Options'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='typogly',
        description='Typogly - Readable Text Scrambling',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s scramble "Hello wonderful world" --seed 42
  %(prog)s scramble --file essay.txt --preset half
  cat essay.txt | %(prog)s scramble --min-length 6 --no-preserve-case
  %(prog)s presets
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- scramble ---
    p = subparsers.add_parser('scramble', aliases=['s'], help='Scramble text')
    p.add_argument('text', nargs='*', help='Text to scramble (default: read stdin)')
    p.add_argument('--file', '-f', help='Read text from file')
    p.add_argument('--seed', '-s', type=int, help='Seed for reproducible output')
    p.add_argument('--min-length', '-m', type=int, help='Minimum letters for a word to be scrambled')
    p.add_argument('--probability', '-p', type=float, help='Chance of scrambling each word (0-1)')
    p.add_argument('--no-preserve-case', action='store_true', help='Let case travel with shuffled letters')
    p.add_argument('--preset', help='Named preset from app.yaml')

    # --- presets ---
    subparsers.add_parser('presets', aliases=['ls'], help='List option presets')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    # Handle aliases
    cmd_map = {
        's': 'scramble',
        'ls': 'presets',
    }
    command = cmd_map.get(args.command, args.command)

    # Output handler
    out = Output(quiet=args.quiet)

    # Dispatch
    commands = {
        'scramble': cmd_scramble,
        'presets': cmd_presets,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (ValueError, TypeError, OSError) as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
