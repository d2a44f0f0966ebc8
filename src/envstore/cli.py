"""Command line inspection of env files.

Usage:
    envstore files [--dir DIR]
    envstore get KEY [--dir DIR] [--env NAME] [--require KEY ...]
                     [--preference PREF] [--decoder simple|dotenv|json]
    envstore show [--dir DIR] [--env NAME] [--values]

    --dir may also be given before the command.

Examples:
    # Which env files does the current directory hold?
    envstore files

    # Value of USER, preferring the process environment
    envstore get USER --preference native_first

    # Check that the prod file defines everything the app needs
    envstore show --env prod --require DATABASE_URL --require SECRET_KEY

Exit codes:
    0  success
    1  load failure, or key not found
    2  usage error
"""

import argparse
import sys
from typing import List, Optional

from envstore.decoding import DECODERS
from envstore.discovery import discover_env_files
from envstore.exceptions import EnvStoreError
from envstore.preference import EnvPreference
from envstore.settings import get_settings
from envstore.store import EnvironmentStore

MASK = "****"


def _preference(text: str) -> EnvPreference:
    try:
        return EnvPreference.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _load_store(args: argparse.Namespace) -> EnvironmentStore:
    store = EnvironmentStore()
    if args.preference is not None:
        store.preference = args.preference
    store.load(
        directory=args.dir,
        selector=args.env,
        required_keys=args.require or (),
        decoder=DECODERS[args.decoder],
    )
    return store


def cmd_files(directory: Optional[str]) -> int:
    """List discovered env files as ``selector<TAB>path``."""
    settings = get_settings()
    search_dir = directory or settings.resolve_search_dir()
    try:
        index = discover_env_files(search_dir, settings.marker)
    except EnvStoreError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1

    if not index:
        print(f"No env files found in {search_dir}")
        return 0

    for selector in sorted(index):
        print(f"{selector!r}\t{index[selector]}")
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    """Print the value of one key after loading."""
    try:
        store = _load_store(args)
    except EnvStoreError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    value = store.get(args.key)
    if value is None:
        print(f"ERROR: Key '{args.key}' not found", file=sys.stderr)
        return 1

    print(value)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the keys of the loaded file, values masked unless requested."""
    try:
        store = _load_store(args)
    except EnvStoreError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"# selector: {store.selector!r}")
    print(f"# source: {store.source}")
    for key in sorted(store.environment):
        value = store.environment[key] if args.values else MASK
        print(f"{key}={value}")
    return 0


def _add_dir_argument(parser: argparse.ArgumentParser) -> None:
    # SUPPRESS keeps a subcommand from overwriting --dir given before it
    parser.add_argument(
        "--dir",
        default=argparse.SUPPRESS,
        help="Directory containing env files (default: $ENVSTORE_DIR or cwd)",
    )


def _add_load_arguments(parser: argparse.ArgumentParser) -> None:
    _add_dir_argument(parser)
    parser.add_argument(
        "--env",
        help="Env name to load (default: $DOTENV, then 'default')",
    )
    parser.add_argument(
        "--require",
        action="append",
        metavar="KEY",
        help="Key that must be defined; may be repeated",
    )
    parser.add_argument(
        "--preference",
        type=_preference,
        help="Lookup precedence: " + ", ".join(p.value for p in EnvPreference),
    )
    parser.add_argument(
        "--decoder",
        choices=sorted(DECODERS),
        default="simple",
        help="File decoder (default: simple)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envstore",
        description="Inspect and validate env files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--dir",
        help="Directory containing env files (default: $ENVSTORE_DIR or cwd)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    files_parser = subparsers.add_parser("files", help="List discovered env files")
    _add_dir_argument(files_parser)

    get_parser = subparsers.add_parser("get", help="Print the value of a key")
    get_parser.add_argument("key", help="Key to look up")
    _add_load_arguments(get_parser)

    show_parser = subparsers.add_parser("show", help="Print the keys of the loaded file")
    show_parser.add_argument(
        "--values",
        action="store_true",
        help="Print values instead of masking them",
    )
    _add_load_arguments(show_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    try:
        if args.command == "files":
            return cmd_files(args.dir)
        elif args.command == "get":
            return cmd_get(args)
        elif args.command == "show":
            return cmd_show(args)
    except EnvStoreError as e:
        # Settings errors surface before any command runs
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
