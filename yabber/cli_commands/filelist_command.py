"""Delimited file list commands for the yabber CLI."""

import sys

from yabber.common.constants import ExitCodes
from yabber.core.delimited import join_delimited, split_delimited


class FilelistCommand:
    """Handles `filelist join` and `filelist split`."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('filelist', help='Join or split escaped comma-delimited file lists')
        actions = parser.add_subparsers(dest='filelist_action', help='File list actions')

        join_parser = actions.add_parser('join', help='Join items into one field')
        join_parser.add_argument('items', nargs='*', help='Items to join')

        split_parser = actions.add_parser('split', help='Split a field into items, one per line')
        split_parser.add_argument('field', help='Joined field')

        parser.set_defaults(func=FilelistCommand.execute)

    @staticmethod
    def execute(args) -> None:
        if args.filelist_action == 'join':
            print(join_delimited(args.items))
        elif args.filelist_action == 'split':
            for item in split_delimited(args.field):
                print(item)
        else:
            print("Please specify a file list action: join or split")
            sys.exit(ExitCodes.OK)
