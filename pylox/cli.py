"""
Command-line interface for pylox.

Runs a Lox script when given a path, or starts an interactive prompt when
given none.
"""

import argparse
import logging
import sys
from typing import Optional

from .core import ScriptReadError, Session
from .utils.settings import DEFAULT_SETTINGS, EX_OK, Settings

USAGE = "Usage: pylox [script]"


class UsageError(Exception):
    """Exception raised for a malformed command line."""


class LoxArgumentParser(argparse.ArgumentParser):
    """Argument parser that leaves misuse to main() instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = LoxArgumentParser(
        prog="pylox",
        description="pylox: a scanner front end for the Lox language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m pylox                 start an interactive prompt
  python -m pylox hello.lox       run a script
  python -m pylox -v hello.lox    run a script with debug logging
        """
    )

    # Any count is accepted here; main() enforces at most one
    parser.add_argument(
        "script",
        nargs="*",
        help="Lox script to run (omit for an interactive prompt)"
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding of the script file (default: platform default)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "-V", "--version",
        action="store_true",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version flag.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"pylox version {__version__}")
    print(f"Author: {__author__}")
    return EX_OK


def handle_script(args: argparse.Namespace, settings: Settings) -> int:
    """Run a script file.

    Args:
        args: Parsed command-line arguments
        settings: Driver settings

    Returns:
        int: Exit code
    """
    session = Session(settings=settings)
    try:
        return session.run_file(args.script[0])
    except ScriptReadError as e:
        print(f"[pylox] Error: {e}", file=sys.stderr)
        return settings.exit_no_input


def handle_prompt(settings: Settings) -> int:
    """Run the interactive prompt.

    Returns:
        int: Exit code
    """
    session = Session(settings=settings)
    return session.run_prompt()


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"{USAGE} ({e})")
        return DEFAULT_SETTINGS.exit_usage
    settings = Settings(encoding=args.encoding)

    if args.version:
        return handle_version(args)

    configure_logging(args.verbose)

    if len(args.script) > 1:
        print(USAGE)
        return settings.exit_usage
    elif len(args.script) == 1:
        return handle_script(args, settings)
    else:
        return handle_prompt(settings)


if __name__ == "__main__":
    sys.exit(main())
