"""
Custom exception classes for Yabber.
"""

from typing import Optional


class YabberError(Exception):
    """Base exception class for Yabber errors."""
    pass


class PathTraversalError(YabberError):
    """Raised when an entry path would escape the extraction root."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class EmptyEntryPathError(PathTraversalError):
    """Raised when nothing is left of an entry path after sanitizing it."""
    pass


class FormatError(YabberError):
    """Raised when an input file is too short or malformed to decrypt."""

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


class DecryptionError(YabberError):
    """Raised when decrypting or parsing an encrypted container fails."""

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


class UnresolvedProfileError(YabberError):
    """Raised when the game format dialect for a session cannot be determined."""
    pass
