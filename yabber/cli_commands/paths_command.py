"""Entry path commands for the yabber CLI."""

from yabber.cli_helpers import exit_with_error, map_exception_to_exit_code
from yabber.common.constants import ExitCodes
from yabber.common.errors import PathTraversalError
from yabber.core.paths import find_common_root, unroot_entry_paths


class PathsCommand:
    """Handles `unroot` and `common-root`."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add path command parsers to subparsers."""
        unroot_parser = subparsers.add_parser(
            'unroot', help='Print the safe relative output path of each entry path'
        )
        unroot_parser.add_argument('paths', nargs='+', help='Entry paths from one container')
        unroot_parser.add_argument('--skip-unsafe', action='store_true',
                                   help='Skip unsafe entries instead of failing')
        unroot_parser.set_defaults(func=PathsCommand.unroot)

        root_parser = subparsers.add_parser('common-root', help='Print the common root of a set of paths')
        root_parser.add_argument('paths', nargs='+', help='Paths to compare')
        root_parser.set_defaults(func=PathsCommand.common_root)

    @staticmethod
    def unroot(args) -> None:
        """Print sanitized entry paths, one per line."""
        try:
            for relative in unroot_entry_paths(args.paths, skip_unsafe=args.skip_unsafe).values():
                print(relative)
        except Exception as exc:
            exit_code = map_exception_to_exit_code(exc)
            if isinstance(exc, PathTraversalError):
                message = f"Refusing to extract {exc.path!r}: {exc}"
            else:
                message = f"Could not un-root paths: {exc}"
            exit_with_error(message, exit_code or ExitCodes.INVALID_INPUT)

    @staticmethod
    def common_root(args) -> None:
        print(find_common_root(args.paths))
