"""
Constants and exit codes for Yabber.
"""


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    PATH_TRAVERSAL = 1
    FORMAT_ERROR = 2
    DECRYPTION_ERROR = 3
    UNRESOLVED_PROFILE = 4
    IO_ERROR = 5
    INVALID_INPUT = 6


# Side-channel descriptor written next to an unpacked BND4
DEFAULT_DESCRIPTOR_NAME = '_yabber-bnd4.xml'
DESCRIPTOR_ROOT = 'bnd4'
DESCRIPTOR_FILENAME_FIELD = 'filename'
ELDEN_RING_REGULATION_NAME = 'regulation.bin'

BACKUP_SUFFIX = '.bak'

# Dark Souls II enc_regulation container
DS2_REGULATION_KEY = bytes([
    0x40, 0x17, 0x81, 0x30, 0xDF, 0x0A, 0x94, 0x54,
    0x33, 0x09, 0xE1, 0x71, 0xEC, 0xBF, 0x25, 0x4C,
])
REGULATION_HEADER_SIZE = 32
REGULATION_IV_SOURCE_LENGTH = 11

DELIMITER_CHAR = ','
ESCAPE_CHAR = '/'
