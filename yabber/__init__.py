"""Yabber - path safety and regulation helpers for FromSoftware containers.

Provides:
* Entry path un-rooting and sanitizing for unpack/repack
* DS2 regulation decryption
* Game profile detection for PARAM repacking
* Escaped comma-delimited string lists
* Thin CLI wrapper (`yabber`)
"""

from ._version import __version__
from .common.errors import (  # noqa: F401
    DecryptionError,
    EmptyEntryPathError,
    FormatError,
    PathTraversalError,
    UnresolvedProfileError,
    YabberError,
)
from .common.logging_config import configure_logging  # noqa: F401
from .core.backup import backup_file  # noqa: F401
from .core.delimited import DelimitedCodec, join_delimited, split_delimited  # noqa: F401
from .core.paths import find_common_root, sanitize_entry_path, unroot_entry_paths  # noqa: F401
from .core.profiles import GameType, RepackSession, resolve_game_profile  # noqa: F401
from .core.regulation import unlock_regulation, unlock_regulation_file  # noqa: F401

__all__ = [
	"__version__",
	"configure_logging",
	"YabberError",
	"PathTraversalError",
	"EmptyEntryPathError",
	"FormatError",
	"DecryptionError",
	"UnresolvedProfileError",
	"backup_file",
	"DelimitedCodec",
	"join_delimited",
	"split_delimited",
	"find_common_root",
	"sanitize_entry_path",
	"unroot_entry_paths",
	"GameType",
	"RepackSession",
	"resolve_game_profile",
	"unlock_regulation",
	"unlock_regulation_file",
]

__author__ = "Yabber contributors"
