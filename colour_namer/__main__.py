"""colour-namer: Name colours and derive darker/lighter variations.

Usage: colour-namer <command> [colours...] [options]

Commands are auto-discovered from colour_namer/commands/.
Each command module's docstring is its documentation.
Run `colour-namer help <command>` for full module docs.

Colours come from the command line (hex, with or without '#'), or from a
host selection message via --selection (use '-' for stdin).

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-namer looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from colour_namer import registry
from colour_namer.core.dictionary import ColourDictionary, default_dictionary, load_dictionary
from colour_namer.core.env import dictionary_path, load_env, swatch_size
from colour_namer.core.report import format_json, format_text
from colour_namer.core.selection import load_selection
from colour_namer.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colour_namer.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colour-namer name '#ff1010'\n"
        "  colour-namer variations '#ff0000' 3366cc\n"
        '  colour-namer all --selection selection.json --json\n'
        "  colour-namer swatch '#ff0000' --out-dir ./swatches\n"
        "  colour-namer info '#ff0000' --dictionary names.csv\n"
        '  colour-namer help variations\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  COLOUR_NAMER_DICTIONARY   .json or .csv colour-name dictionary\n'
        '  COLOUR_NAMER_SWATCH_SIZE  swatch chip size in pixels (default 120)\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-namer',
        description='Name colours and derive darker/lighter variations.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('colours', nargs='*', help='Hex colours, e.g. #ff0000 or 3366cc')
        p.add_argument('-s', '--selection', metavar='PATH', help="Host selection message JSON ('-' for stdin)")
        p.add_argument('-d', '--dictionary', metavar='PATH', help='Colour-name dictionary (.json or .csv)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-o', '--out-dir', default='.', help='Output directory for swatch PNGs (default: .)')
        p.add_argument('-c', '--chip-size', type=int, default=None, metavar='N', help='Swatch chip size in pixels')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<12} {_short_help(name, cmd.help)}')
        print('\nRun: colour-namer help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _load_dictionary(args: argparse.Namespace) -> ColourDictionary:
    """Dictionary from --dictionary or COLOUR_NAMER_DICTIONARY, else the bundled CSS colours."""
    path = dictionary_path(args.dictionary)
    if path is None:
        return default_dictionary()
    dictionary = load_dictionary(path)
    print(f'colour-namer: loaded {len(dictionary)} names from {path}', file=sys.stderr)
    return dictionary


def _load_colours(args: argparse.Namespace) -> list[str]:
    """Colours from the command line, followed by those in the selection message."""
    colours = list(args.colours)
    if args.selection:
        colours.extend(load_selection(args.selection))
    return colours


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'colour-namer: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        dictionary = _load_dictionary(args)
        colours = _load_colours(args)
        swatch_size(args.chip_size)  # rejects a non-positive --chip-size
    except (OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if not colours:
        print('Error: no colours given (pass hex values or --selection)', file=sys.stderr)
        sys.exit(1)

    report = Report(dictionary_source=dictionary.source, dictionary_size=len(dictionary))

    cmd = registry.get(args.command)
    cmd.execute(colours, dictionary, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
