"""rgba-kit — parse, convert, mix and compare RGBA colours from the shell.

Usage: rgba-kit <command> [args] [options]

Commands are auto-discovered from rgba_kit/commands/.
Each command module's docstring is its documentation.
Run `rgba-kit help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, rgba-kit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys
from typing import NoReturn

from rgba_kit import registry
from rgba_kit.core.env import SettingsError, load_settings
from rgba_kit.core.errors import ColorFormatError
from rgba_kit.core.report import format_json, format_text
from rgba_kit.core.types import Report


def _short_help(name: str, fallback: str) -> str:
    doc = registry.module_doc(name)
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  rgba-kit inspect '#2563eb' 'rgba(10, 20, 30, 0.5)'\n"
        "  rgba-kit contrast '#64748b' '#ffffff' --min-ratio 4.5\n"
        "  rgba-kit mix '#ff0000' '#0000ff' --strength 0.25\n"
        "  rgba-kit fill 'rgba(0, 0, 0, 0.5)' --background '#0f172a'\n"
        "  rgba-kit transform whiten '#2563eb' -s 0.3\n"
        '  rgba-kit sample screenshot.png --json\n'
        "  rgba-kit swatch '#2563eb80' ./tmp/swatch.png\n"
        '  rgba-kit help contrast\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  RGBA_KIT_BACKGROUND  default background for fill/swatch\n'
        '  RGBA_KIT_MIN_RATIO   default --min-ratio for contrast\n'
        '  RGBA_KIT_JSON        1/true/yes for JSON output by default\n'
    )
    parser = argparse.ArgumentParser(
        prog='rgba-kit',
        description='Parse, convert, mix and compare RGBA colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `help` subcommand prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: rgba-kit help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.module_doc(topic)
    print(doc if doc else f'(No module docs for {topic!r})')


def _fail(message: str, status: int) -> NoReturn:
    print(f'rgba-kit: error: {message}', file=sys.stderr)
    sys.exit(status)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    try:
        settings, env_path = load_settings(env_file=args.env_file)
    except SettingsError as e:
        _fail(str(e), 2)
    if env_path:
        print(f'rgba-kit: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(report, args, settings)
    except ColorFormatError as e:
        _fail(str(e), 2)
    except FileNotFoundError as e:
        _fail(str(e), 1)

    if args.json or settings.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # Gate after output so the report is visible even on failure
    if report.fail_count:
        sys.exit(1)


if __name__ == '__main__':
    main()
