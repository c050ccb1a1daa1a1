"""
Command Line Interface for Yabber.

Provides CLI commands for entry path un-rooting, DS2 regulation decryption,
game detection and delimited file lists.
"""

import argparse
import sys
from typing import List, Optional

from yabber.cli_commands import COMMANDS
from yabber.common.config import YabberSettings
from yabber.common.constants import ExitCodes
from yabber.common.logging_config import configure_logging, get_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='yabber',
        description='Path-safety and regulation helpers for FromSoftware containers'
    )
    parser.add_argument('--log-level', help='Override YABBER_LOG_LEVEL')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    configure_logging(parsed_args.log_level or YabberSettings().log_level())
    get_logger(__name__).debug("Running command %s", parsed_args.command)

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
