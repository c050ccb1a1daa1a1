"""
Dark Souls II regulation decryption.

``enc_regulation.bnd.dcx`` is an AES-128-CTR encrypted BND4. The file starts
with a 32-byte header; its first 11 bytes seed the counter block::

    iv[0]     = 0x80
    iv[1:12]  = header[0:11]
    iv[12:15] = 0
    iv[15]    = 0x01

The whole IV is used as a 128-bit big-endian counter. Everything from offset
32 onwards is ciphertext.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional, Union

from Crypto.Cipher import AES
from Crypto.Util import Counter

from yabber.common.constants import (
    DS2_REGULATION_KEY,
    REGULATION_HEADER_SIZE,
    REGULATION_IV_SOURCE_LENGTH,
)
from yabber.common.errors import DecryptionError, FormatError
from yabber.common.logging_config import get_logger

ContainerParser = Callable[[bytes], Any]

_log = get_logger(__name__)


def build_regulation_iv(data: bytes) -> bytes:
    """Build the 16-byte counter block from the start of a regulation file."""
    if len(data) < REGULATION_IV_SOURCE_LENGTH:
        raise FormatError(
            f"Need at least {REGULATION_IV_SOURCE_LENGTH} bytes to build the IV, got {len(data)}"
        )
    iv = bytearray(16)
    iv[0] = 0x80
    iv[1:1 + REGULATION_IV_SOURCE_LENGTH] = data[:REGULATION_IV_SOURCE_LENGTH]
    iv[15] = 0x01
    return bytes(iv)


def _new_cipher(iv: bytes, key: bytes = DS2_REGULATION_KEY):
    counter = Counter.new(128, initial_value=int.from_bytes(iv, 'big'))
    return AES.new(key, AES.MODE_CTR, counter=counter)


def unlock_regulation(
    data: bytes,
    parser: Optional[ContainerParser] = None,
    *,
    filename: Optional[str] = None,
) -> Any:
    """
    Decrypt a DS2 regulation file and hand the plaintext to ``parser``.

    Args:
        data: Raw file contents, header included
        parser: Container reader for the plaintext (e.g. a BND4 reader);
            the plaintext bytes are returned when omitted
        filename: Name used in error messages

    Raises:
        FormatError: If the input is shorter than the header
        DecryptionError: If decryption or parsing of the plaintext fails
    """
    if len(data) < REGULATION_HEADER_SIZE:
        raise FormatError(
            f"Regulation file is {len(data)} bytes, expected at least {REGULATION_HEADER_SIZE}",
            filename=filename,
        )

    iv = build_regulation_iv(data)
    _log.debug("Regulation IV for %s: %s", filename or "<bytes>", iv.hex())
    ciphertext = bytes(data[REGULATION_HEADER_SIZE:])

    try:
        plaintext = _new_cipher(iv).decrypt(ciphertext)
        if parser is None:
            return plaintext
        return parser(plaintext)
    except Exception as exc:
        raise DecryptionError(
            f"Failed to decrypt regulation{' ' + filename if filename else ''}: {exc}",
            filename=filename,
        ) from exc


def unlock_regulation_file(path: Union[str, Path], parser: Optional[ContainerParser] = None) -> Any:
    """Read ``path`` and decrypt it with `unlock_regulation`."""
    path = Path(path)
    data = path.read_bytes()
    return unlock_regulation(data, parser, filename=str(path))


def encrypt_regulation(plaintext: bytes, header: bytes) -> bytes:
    """
    Re-encrypt a regulation BND4 behind an existing 32-byte header.

    The header is reused verbatim so the IV the game derives matches.
    """
    if len(header) != REGULATION_HEADER_SIZE:
        raise FormatError(
            f"Regulation header must be {REGULATION_HEADER_SIZE} bytes, got {len(header)}"
        )
    iv = build_regulation_iv(header)
    return bytes(header) + _new_cipher(iv).encrypt(plaintext)


__all__ = [
    "ContainerParser",
    "build_regulation_iv",
    "unlock_regulation",
    "unlock_regulation_file",
    "encrypt_regulation",
]
