"""Shared CLI helpers for yabber commands."""

import sys
from typing import Optional

from yabber.common.constants import ExitCodes
from yabber.common.errors import (
    DecryptionError,
    FormatError,
    PathTraversalError,
    UnresolvedProfileError,
)


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to yabber exit codes."""
    if isinstance(exc, PathTraversalError):
        return ExitCodes.PATH_TRAVERSAL
    if isinstance(exc, FormatError):
        return ExitCodes.FORMAT_ERROR
    if isinstance(exc, DecryptionError):
        return ExitCodes.DECRYPTION_ERROR
    if isinstance(exc, UnresolvedProfileError):
        return ExitCodes.UNRESOLVED_PROFILE
    if isinstance(exc, OSError):
        return ExitCodes.IO_ERROR
    if isinstance(exc, ValueError):
        return ExitCodes.INVALID_INPUT
    return None
