"""
Entry path helpers for unpacking and repacking containers.

Container entries carry author-controlled paths such as
``N:\\FDP\\data\\INTERROOT_win64\\param\\gameparam\\foo.param`` or
``..\\..\\regulation.bin``. Before anything is written to disk they are
un-rooted: the batch-wide common root is removed, then the remainder is
tokenized on ``\\`` and ``/`` so drive markers, leading traversal runs and
UNC-style separator runs can be dropped segment by segment.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

from yabber.common.errors import EmptyEntryPathError, PathTraversalError
from yabber.common.logging_config import get_logger

_SEPARATOR_RX = re.compile(r'[\\/]')
_DRIVE_MARKER_RX = re.compile(r'^[A-Za-z]:$')
_DRIVE_PREFIX_RX = re.compile(r'^[A-Za-z]:')
_LEADING_SKIPPABLE = frozenset(('', '.', '..'))
_DEFAULT_SEPARATOR = '\\'

_log = get_logger(__name__)


def find_common_root(paths: Sequence[str]) -> str:
    """
    Find the common directory root of a batch of paths.

    The longest shared character prefix is truncated down to the last slash or
    backslash, so the root never ends in the middle of a segment.

    Args:
        paths: Non-empty sequence of paths

    Returns:
        The shared root without its trailing separator, or an empty string
    """
    paths = list(paths)
    if not paths:
        raise ValueError("Cannot find a common root of an empty path list")

    prefix = os.path.commonprefix(paths)
    index = max(prefix.rfind('\\'), prefix.rfind('/'))
    if index == -1:
        return ''
    return prefix[:index]


def split_segments(path: str) -> List[str]:
    """Split a path on both separator styles, keeping empty segments."""
    return _SEPARATOR_RX.split(path)


def sanitize_entry_path(path: str, root: str = '') -> str:
    """
    Turn a container entry path into a relative path safe to write under an
    extraction root.

    Args:
        path: Entry path as stored in the container
        root: Common root to remove from the front of ``path``

    Returns:
        The relative path, joined with the first separator style found in it

    Raises:
        ValueError: If ``root`` is not a prefix of ``path``
        PathTraversalError: If a ``..`` segment would climb above the entry
            root or a drive marker appears past the start
        EmptyEntryPathError: If nothing remains after sanitizing
    """
    if root and not path.startswith(root):
        raise ValueError(f"Root {root!r} is not a prefix of {path!r}")

    remainder = path[len(root):]
    separator_match = _SEPARATOR_RX.search(remainder)
    separator = separator_match.group(0) if separator_match else _DEFAULT_SEPARATOR

    segments = split_segments(remainder)
    if _DRIVE_MARKER_RX.match(segments[0]):
        segments = segments[1:]

    start = 0
    while start < len(segments) and segments[start] in _LEADING_SKIPPABLE:
        start += 1

    resolved: List[str] = []
    for segment in segments[start:]:
        if segment in ('', '.'):
            continue
        if segment == '..':
            if not resolved:
                raise PathTraversalError(
                    f"The path {path!r} attempts to extract to a different folder.",
                    path=path,
                )
            resolved.pop()
            continue
        if _DRIVE_PREFIX_RX.match(segment):
            raise PathTraversalError(
                f"The path {path!r} contains a drive marker in segment {segment!r}.",
                path=path,
            )
        resolved.append(segment)

    if not resolved:
        raise EmptyEntryPathError(f"The path {path!r} is empty after sanitizing.", path=path)

    return separator.join(resolved)


def unroot_entry_paths(paths: Iterable[str], *, skip_unsafe: bool = False) -> Dict[str, str]:
    """
    Strip the common root from a batch of entry paths.

    Args:
        paths: Entry paths from one container
        skip_unsafe: Log and drop unsafe entries instead of raising

    Returns:
        Mapping of original path to sanitized relative path, in input order
    """
    paths = list(paths)
    root = find_common_root(paths)
    _log.debug("Common root for %d entries: %r", len(paths), root)

    result: Dict[str, str] = {}
    claimed: Dict[str, str] = {}
    for path in paths:
        if path in result:
            _log.warning("Duplicate entry path %r", path)
            continue
        try:
            relative = sanitize_entry_path(path, root)
        except PathTraversalError as exc:
            if not skip_unsafe:
                raise
            _log.warning("Skipping unsafe entry path %r: %s", path, exc)
            continue
        if relative in claimed:
            _log.warning(
                "Entry paths %r and %r both map to %r", claimed[relative], path, relative
            )
        else:
            claimed[relative] = path
        result[path] = relative
    return result


def resolve_output_path(extraction_root: Union[str, Path], entry_path: str) -> Path:
    """Join a sanitized entry path beneath ``extraction_root``, refusing escapes."""
    root = Path(extraction_root).resolve()
    target = root.joinpath(*split_segments(entry_path)).resolve()
    if root not in target.parents:
        raise PathTraversalError(
            f"Unsafe entry path detected: {entry_path!r} resolves outside {str(root)!r}",
            path=entry_path,
        )
    return target


__all__ = [
    "find_common_root",
    "sanitize_entry_path",
    "split_segments",
    "unroot_entry_paths",
    "resolve_output_path",
]
