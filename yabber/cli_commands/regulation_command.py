"""DS2 regulation encryption commands for the yabber CLI."""

from pathlib import Path

from yabber.cli_helpers import exit_with_error, map_exception_to_exit_code
from yabber.common.config import YabberSettings
from yabber.common.constants import ExitCodes, REGULATION_HEADER_SIZE
from yabber.common.errors import DecryptionError, FormatError
from yabber.common.logging_config import get_logger
from yabber.core.backup import backup_file
from yabber.core.regulation import encrypt_regulation, unlock_regulation_file


class RegulationCommand:
    """Handles `decrypt-regulation` and `encrypt-regulation`."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add regulation command parsers to subparsers."""
        decrypt_parser = subparsers.add_parser(
            'decrypt-regulation', help='Decrypt a DS2 enc_regulation file to a plain BND4'
        )
        decrypt_parser.add_argument('input', help='Encrypted regulation file')
        decrypt_parser.add_argument('-o', '--output', help='Output path (default: <input>.bnd)')
        decrypt_parser.set_defaults(func=RegulationCommand.decrypt)

        encrypt_parser = subparsers.add_parser(
            'encrypt-regulation', help='Encrypt a plain BND4 using the header of an original regulation'
        )
        encrypt_parser.add_argument('input', help='Plain BND4 file')
        encrypt_parser.add_argument('--header-from', required=True,
                                    help='Original encrypted regulation supplying the header')
        encrypt_parser.add_argument('-o', '--output', required=True, help='Output path')
        encrypt_parser.set_defaults(func=RegulationCommand.encrypt)

    @staticmethod
    def decrypt(args) -> None:
        """Decrypt a regulation file."""
        source = Path(args.input)
        target = Path(args.output) if args.output else source.with_name(source.name + '.bnd')
        try:
            plaintext = unlock_regulation_file(source)
            RegulationCommand._write(target, plaintext)
            print(f"Decrypted {source} to {target}")
        except Exception as exc:
            RegulationCommand._fail(exc, source)

    @staticmethod
    def encrypt(args) -> None:
        """Encrypt a plain BND4 behind an existing regulation header."""
        source = Path(args.input)
        try:
            with open(args.header_from, 'rb') as f:
                header = f.read(REGULATION_HEADER_SIZE)
            data = encrypt_regulation(source.read_bytes(), header)
            RegulationCommand._write(Path(args.output), data)
            print(f"Encrypted {source} to {args.output}")
        except Exception as exc:
            RegulationCommand._fail(exc, source)

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        if YabberSettings().backups_enabled():
            backup_file(target)
        target.write_bytes(data)
        get_logger(__name__).debug("Wrote %d bytes to %s", len(data), target)

    @staticmethod
    def _fail(exc: Exception, source: Path) -> None:
        exit_code = map_exception_to_exit_code(exc)
        if isinstance(exc, FormatError):
            message = f"{source} is not a DS2 regulation file: {exc}"
        elif isinstance(exc, DecryptionError):
            message = f"Could not decrypt {source} (wrong key or corrupt file): {exc}"
        elif isinstance(exc, OSError):
            message = f"Could not access {exc.filename or source}: {exc.strerror or exc}"
        else:
            message = f"Regulation command failed: {exc}"
        exit_with_error(message, exit_code or ExitCodes.DECRYPTION_ERROR)
