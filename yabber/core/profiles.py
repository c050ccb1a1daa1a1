"""
Game profile detection for PARAM repacking.

PARAM layouts differ between titles, so a repack session needs to know which
game it is working on. The profile is resolved once, when the session is
opened, and then carried around on a `RepackSession`:

* an explicit game name (CLI flag / ``YABBER_GAME``) wins;
* otherwise the BND4 descriptor written at unpack time is inspected;
* otherwise the user is asked to pick from the supported list.
"""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from yabber.common.constants import (
    DEFAULT_DESCRIPTOR_NAME,
    DESCRIPTOR_FILENAME_FIELD,
    DESCRIPTOR_ROOT,
    ELDEN_RING_REGULATION_NAME,
)
from yabber.common.errors import UnresolvedProfileError
from yabber.common.logging_config import get_logger

InputSource = Callable[[str], str]

_log = get_logger(__name__)


class GameType(enum.Enum):
    """Supported titles; values are the names users type."""

    BB = "BB"
    DES = "DES"
    DS1 = "DS1"
    DS1R = "DS1R"
    DS2 = "DS2"
    DS2S = "DS2S"
    DS3 = "DS3"
    ER = "ER"
    SDT = "SDT"


def supported_game_names() -> list:
    return [game.value for game in GameType]


def parse_game_type(name: Optional[str]) -> GameType:
    """Map a user supplied game name (case-insensitive) to a `GameType`."""
    key = (name or "").strip().upper()
    if not key:
        raise UnresolvedProfileError("No game was given.")
    try:
        return GameType(key)
    except ValueError:
        raise UnresolvedProfileError(
            f"Unknown game {name!r}. Supported games: {', '.join(supported_game_names())}"
        ) from None


def detect_game_from_descriptor(descriptor_path: Union[str, Path]) -> Optional[GameType]:
    """
    Infer the game from an unpacked BND4 descriptor.

    Returns:
        The detected game, or None when the descriptor is missing, unreadable
        or does not identify a game
    """
    descriptor_path = Path(descriptor_path)
    if not descriptor_path.is_file():
        return None

    try:
        root = ET.parse(descriptor_path).getroot()
    except ET.ParseError as e:
        _log.warning("Ignoring malformed descriptor %s: %s", descriptor_path, e)
        return None

    if root.tag != DESCRIPTOR_ROOT:
        return None
    filename = root.findtext(DESCRIPTOR_FILENAME_FIELD)
    if filename is not None and filename.strip() == ELDEN_RING_REGULATION_NAME:
        return GameType.ER
    return None


def prompt_for_game(input_fn: Optional[InputSource] = None) -> GameType:
    """Ask the user to pick a game; empty or unknown input is fatal."""
    print("Could not determine param game version.")
    print("Please input a game from the following list:")
    print(", ".join(supported_game_names()))
    try:
        answer = (input_fn or input)("Game: ")
    except EOFError:
        answer = ""
    try:
        return parse_game_type(answer)
    except UnresolvedProfileError:
        raise UnresolvedProfileError("Could not determine PARAM type.") from None


def resolve_game_profile(
    directory: Union[str, Path],
    input_fn: Optional[InputSource] = None,
    *,
    descriptor_name: str = DEFAULT_DESCRIPTOR_NAME,
) -> GameType:
    """
    Work out which game an unpacked directory belongs to.

    Args:
        directory: Unpacked BND4 directory holding the descriptor
        input_fn: Line reader used when the descriptor is inconclusive
        descriptor_name: Descriptor file name inside ``directory``

    Raises:
        UnresolvedProfileError: If no game could be determined
    """
    game = detect_game_from_descriptor(Path(directory) / descriptor_name)
    if game is None:
        game = prompt_for_game(input_fn)
    _log.info("Determined game for Paramdex: %s", game.value)
    return game


@dataclass(frozen=True)
class RepackSession:
    """The game profile and source directory for one repack run."""

    directory: Path
    game: GameType

    @classmethod
    def open(
        cls,
        directory: Union[str, Path],
        game: Union[GameType, str, None] = None,
        input_fn: Optional[InputSource] = None,
        *,
        descriptor_name: str = DEFAULT_DESCRIPTOR_NAME,
    ) -> "RepackSession":
        """Create a session, resolving the game only if none was given."""
        if isinstance(game, GameType):
            resolved = game
        elif game:
            resolved = parse_game_type(game)
        else:
            resolved = resolve_game_profile(directory, input_fn, descriptor_name=descriptor_name)
        return cls(directory=Path(directory), game=resolved)


__all__ = [
    "GameType",
    "InputSource",
    "RepackSession",
    "detect_game_from_descriptor",
    "parse_game_type",
    "prompt_for_game",
    "resolve_game_profile",
    "supported_game_names",
]
