"""colour-by-value — Deterministic cell styling derived from cell values.

Usage: colour-by-value <mode> <out_dir> <workbook> [options]

Every value maps to the same background colour, text colour and emphasis
on every run, on every machine, without storing anything. Modes are
auto-discovered from colour_by_value/modes/. Each mode module's docstring
is its documentation. Run `colour-by-value help <mode>` for full docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-by-value looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import os
import sys
from pathlib import Path

from colour_by_value import registry
from colour_by_value.core.env import load_env, setting
from colour_by_value.core.hashing import HASH_STRATEGIES, get_strategy
from colour_by_value.core.palette import parse_hex
from colour_by_value.core.report import format_json, format_text
from colour_by_value.core.sheet import Workbook, coerce_text
from colour_by_value.core.style import DISCRETE, FORMATTED, RANDOM, derive_style
from colour_by_value.core.types import HostError, Report


def _build_parser() -> argparse.ArgumentParser:
    modes = registry.all_modes()

    epilog = (
        'Examples:\n'
        '  colour-by-value discrete ./out people.xlsx --sheet Staff --range A2:A200\n'
        '  colour-by-value formatted ./out log.csv\n'
        '  colour-by-value random ./out tags.xlsx --range B:B --bold\n'
        '  colour-by-value condition ./out log.xlsx --when contains --target error --bg "#FECACA"\n'
        '  colour-by-value census ./out people.xlsx --range A:A --json\n'
        '  colour-by-value preview ./out people.xlsx --style random\n'
        '  colour-by-value probe Apple Banana 42\n'
        '  colour-by-value help discrete\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  COLOUR_BY_VALUE_HASH   default hash strategy (md5, sha1, sha256, blake2b)\n'
        '  COLOUR_BY_VALUE_SHEET  default sheet name\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-by-value',
        description='Deterministic cell styling derived from cell values.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='mode', help='Mode to run')

    # Auto-register each mode as a subcommand using its module docstring
    for name, mode in sorted(modes.items()):
        short_help = mode.doc.splitlines()[0] if mode.doc else mode.help

        p = sub.add_parser(name, help=short_help)
        p.add_argument('out_dir', help='Directory for the styled workbook and previews')
        p.add_argument('workbook', help='Path to .xlsx, .xlsm or .csv file')
        p.add_argument('-s', '--sheet', default=None, help='Sheet name (default: active sheet)')
        p.add_argument(
            '-r',
            '--range',
            dest='range_spec',
            default=None,
            help='Cell range, e.g. A1:C10 (default: used range)',
        )
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('--hash', default=None, choices=sorted(HASH_STRATEGIES), help='Hash strategy (default: md5)')
        p.add_argument('-b', '--bold', action='store_true', help='random mode: embolden every non-empty cell')
        p.add_argument(
            '--style',
            default=None,
            choices=[DISCRETE, FORMATTED, RANDOM],
            help='preview mode: style to render',
        )
        p.add_argument(
            '-w',
            '--when',
            default=None,
            help='condition mode: comparison, e.g. contains, number-greater, date-less (default: equals)',
        )
        p.add_argument('-t', '--target', default=None, help='condition mode: value to compare against')
        p.add_argument('--bg', default=None, help='condition mode: background for matches (hex or palette name)')
        p.add_argument('--fg', default=None, help='condition mode: text colour for matches')
        p.add_argument('--no-save', action='store_true', help='Do not write the styled workbook')
        p.add_argument('--fail-on-error', action='store_true', help='Exit 1 if any cell value could not be styled')

    # `help` subcommand: full module docstring for a mode
    help_parser = sub.add_parser('help', help='Print full docs for a mode')
    help_parser.add_argument('command', nargs='?', help='Mode name')

    # `probe` subcommand: styles for literal values
    probe_parser = sub.add_parser('probe', help='Print the discrete, formatted and random styles for values')
    probe_parser.add_argument('values', nargs='+', help='Values to style')
    probe_parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    probe_parser.add_argument(
        '--hash',
        default=None,
        choices=sorted(HASH_STRATEGIES),
        help='Hash strategy (default: md5)',
    )
    probe_parser.add_argument('-b', '--bold', action='store_true', help='Embolden the random style')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a mode."""
    modes = registry.all_modes()

    if command is None:
        print('Available modes:\n')
        for name, mode in sorted(modes.items()):
            short = mode.doc.splitlines()[0] if mode.doc else mode.help
            print(f'  {name:<12} {short}')
        print('\nRun: colour-by-value help <mode> for full docs.')
        return

    if command not in modes:
        print(f'Unknown mode: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(modes))}', file=sys.stderr)
        sys.exit(1)

    doc = modes[command].doc
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _probe(args: argparse.Namespace) -> None:
    """Derive all three styles for literal command-line values."""
    hasher = get_strategy(args.hash)
    report = Report(workbook_path='(probe)')
    for i, text in enumerate(args.values, start=1):
        key = f'#{i}'
        value = coerce_text(text)
        report.set_value(key, value)
        for mode_name in (DISCRETE, FORMATTED, RANDOM):
            style = derive_style(value, mode_name, hasher, bold=args.bold)
            report.add(key, mode_name, style.as_dict())
        if style.is_unstyled:
            report.record_skipped(key)
        else:
            report.record_styled(key)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


def _output_path(out_dir: str, workbook: str) -> str:
    return os.path.join(out_dir, f'{Path(workbook).stem}.styled.xlsx')


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colour-by-value: loaded {env_path}', file=sys.stderr)

    if not args.mode:
        parser.print_help()
        sys.exit(1)

    if args.mode == 'help':
        _print_help(getattr(args, 'command', None))
        return

    # Settings from the environment fill in what the command line left out
    args.hash = args.hash or setting('HASH')
    try:
        get_strategy(args.hash)
    except KeyError as e:
        print(f'Error: {e.args[0]}', file=sys.stderr)
        sys.exit(1)

    if args.mode == 'probe':
        _probe(args)
        return

    args.sheet = args.sheet or setting('SHEET')

    for colour in (args.bg, args.fg):
        if colour is None:
            continue
        try:
            parse_hex(colour)
        except ValueError as e:
            print(f'Error: {e}', file=sys.stderr)
            sys.exit(1)

    if not os.path.isfile(args.workbook):
        print(f'Error: workbook not found: {args.workbook}', file=sys.stderr)
        sys.exit(1)

    # Host failures are reported, never raised to the user
    try:
        book = Workbook.load(args.workbook)
        cell_range = book.get_range(args.sheet, args.range_spec)
    except HostError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    cells = cell_range.cells()
    report = Report(
        workbook_path=args.workbook,
        sheet=cell_range.worksheet.title,
        range_spec=cell_range.spec,
    )

    mode = registry.get(args.mode)
    mode.execute(cells, report, args)

    if mode.mutates and not args.no_save:
        try:
            report.output_path = book.save(_output_path(args.out_dir, args.workbook))
        except HostError as e:
            print(f'Error: {e}', file=sys.stderr)
            sys.exit(1)
        print(f'colour-by-value: saved {report.output_path}', file=sys.stderr)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    if args.fail_on_error and report.error_count:
        print(f'\nFAIL: {report.error_count} cell(s) could not be styled', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
