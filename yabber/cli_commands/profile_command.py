"""Game detection command for the yabber CLI."""

from yabber.cli_helpers import exit_with_error, map_exception_to_exit_code
from yabber.common.config import YabberSettings
from yabber.common.constants import ExitCodes
from yabber.core.profiles import RepackSession, supported_game_names


class ProfileCommand:
    """Handles `detect-game`."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('detect-game', help='Determine the game of an unpacked PARAM BND')
        parser.add_argument('directory', help='Unpacked BND4 directory')
        parser.add_argument('--game', choices=supported_game_names(), type=str.upper,
                            help='Skip detection and use this game')
        parser.set_defaults(func=ProfileCommand.execute)

    @staticmethod
    def execute(args) -> None:
        settings = YabberSettings()
        try:
            session = RepackSession.open(
                args.directory,
                game=args.game or settings.game(),
                descriptor_name=settings.descriptor_name(),
            )
            print(session.game.value)
        except Exception as exc:
            exit_code = map_exception_to_exit_code(exc)
            exit_with_error(str(exc), exit_code or ExitCodes.UNRESOLVED_PROFILE)
