"""
Backup of files before they are overwritten.

The first time a path is about to be written, an existing file there is moved
to ``<path>.bak``. An existing backup is never replaced, and a path is only
handled once per process so later writes to the same output do not move the
freshly written file away.
"""

from pathlib import Path
from threading import Lock
from typing import Optional, Set, Union

from yabber.common.constants import BACKUP_SUFFIX
from yabber.common.logging_config import get_logger

_log = get_logger(__name__)
_lock = Lock()
_handled: Set[Path] = set()


def backup_path_for(path: Union[str, Path]) -> Path:
    path = Path(path)
    return path.with_name(path.name + BACKUP_SUFFIX)


def backup_file(path: Union[str, Path]) -> Optional[Path]:
    """
    Move ``path`` to its ``.bak`` sibling if it exists and has no backup yet.

    Returns:
        The backup path if a rename happened, otherwise None
    """
    path = Path(path)
    key = path.absolute()
    with _lock:
        if key in _handled:
            return None
        _handled.add(key)

        backup = backup_path_for(path)
        if not path.exists() or backup.exists():
            return None
        path.rename(backup)

    _log.info("Backed up %s to %s", path, backup)
    return backup


def reset_backup_state() -> None:
    """Forget which paths were handled in this process."""
    with _lock:
        _handled.clear()


__all__ = ["backup_file", "backup_path_for", "reset_backup_state"]
