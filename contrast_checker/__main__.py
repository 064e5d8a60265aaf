"""contrast-tool — WCAG contrast auditing for OKLCH design tokens.

Usage: contrast-tool <command> [options]

Commands are auto-discovered from contrast_checker/commands/.
Each command module's docstring is its documentation.
Run `contrast-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, contrast-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

Exit codes: 0 ok, 1 gated failure (critical contrast failures), 2 bad input.
"""

import argparse
import importlib
import logging
import sys

from contrast_checker import registry
from contrast_checker.core.env import load_env
from contrast_checker.core.types import ContrastError

logger = logging.getLogger('contrast_checker')


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'contrast_checker.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  contrast-tool audit\n'
        '  contrast-tool audit theme.json --markdown --out contrast-audit-report.md\n'
        '  contrast-tool audit theme.json --json --critical coral --critical-context dark\n'
        "  contrast-tool contrast '#be6e5f' '#1e1c1a'\n"
        "  contrast-tool suggest '#777777' '#ffffff' --level AA\n"
        "  contrast-tool convert 'oklch(58% 0.08 200)'\n"
        '  contrast-tool swatches ./tmp theme.json\n'
        '  contrast-tool help audit\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  CONTRAST_AUDIT_FILE, CONTRAST_CRITICAL_MARKER, CONTRAST_CRITICAL_CONTEXT,\n'
        '  CONTRAST_WORKERS, CONTRAST_SUGGEST_STEP, CONTRAST_SUGGEST_MAX_ITERATIONS\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrast-tool',
        description='WCAG contrast auditing for OKLCH design tokens.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: contrast-tool help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'contrast-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(args.topic)

    cmd = registry.get(args.command)
    try:
        return cmd.execute(args)
    except (ContrastError, ValueError) as exc:
        # bad colour, bad case file, bad setting
        logger.debug('%s failed', args.command, exc_info=True)
        print(f'contrast-tool {args.command}: {exc}', file=sys.stderr)
        return 2
    except OSError as exc:
        print(f'contrast-tool {args.command}: {exc}', file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
