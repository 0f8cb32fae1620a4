"""
Bubble Babble Decoding

Inverts the standard encoding from ``algorithms``. The rolling checksum
is replayed while decoding: a vowel whose value cannot come from the
running checksum means the string was mistyped or corrupted, and a
DecodeError is raised instead of returning wrong bytes.
"""

from .algorithms import next_checksum
from .config import (
    CHECKSUM_SEED,
    CLOSING_CONSONANT_INDEX,
    CONSONANTS,
    FRAME_CHAR,
    SEPARATOR,
    VOWELS,
)
from .errors import DecodeError


def _vowel_index(encoded: str, pos: int) -> int:
    index = VOWELS.find(encoded[pos])
    if index < 0:
        raise DecodeError(f"Expected a vowel at position {pos}, got {encoded[pos]!r}")
    return index


def _consonant_index(encoded: str, pos: int) -> int:
    index = CONSONANTS.find(encoded[pos])
    if index < 0:
        raise DecodeError(
            f"Expected a consonant at position {pos}, got {encoded[pos]!r}"
        )
    if index == CLOSING_CONSONANT_INDEX:
        raise DecodeError(f"Misplaced {encoded[pos]!r} at position {pos}")
    return index


def _decode_byte(encoded: str, pos: int, checksum: int) -> int:
    # Reverse of vowel, consonant, vowel for one byte
    high = (_vowel_index(encoded, pos) - checksum) % 6
    middle = _consonant_index(encoded, pos + 1)
    low = (_vowel_index(encoded, pos + 2) - checksum // 6) % 6

    if high > 3 or low > 3:
        raise DecodeError(f"Checksum mismatch near position {pos}")

    return (high << 6) | (middle << 2) | low


def decode(encoded: str) -> bytes:
    """
    Decode a standard Bubble Babble string back to bytes.

    Surrounding whitespace is ignored and uppercase letters are accepted.

    Args:
        encoded: Bubble Babble string such as ``xexax``

    Returns:
        The original bytes

    Raises:
        DecodeError: If the string is malformed or fails its checksum
    """
    if not isinstance(encoded, str):
        raise DecodeError(f"Encoded value must be a string, got {type(encoded).__name__}")

    encoded = encoded.strip().lower()

    if len(encoded) < 5 or (len(encoded) - 5) % 6:
        raise DecodeError(f"Invalid encoded length {len(encoded)}")
    if encoded[0] != FRAME_CHAR or encoded[-1] != FRAME_CHAR:
        raise DecodeError(f"Encoded string must start and end with {FRAME_CHAR!r}")

    full_rounds = (len(encoded) - 5) // 6
    checksum = CHECKSUM_SEED
    decoded = bytearray()

    for i in range(full_rounds):
        pos = 1 + 6 * i
        if encoded[pos + 4] != SEPARATOR:
            raise DecodeError(f"Expected {SEPARATOR!r} at position {pos + 4}")

        b1 = _decode_byte(encoded, pos, checksum)
        b2 = (_consonant_index(encoded, pos + 3) << 4) | _consonant_index(
            encoded, pos + 5
        )
        decoded.append(b1)
        decoded.append(b2)
        checksum = next_checksum(checksum, b1, b2)

    pos = 1 + 6 * full_rounds
    if encoded[pos + 1] == FRAME_CHAR:
        # Even length: the closing group only carries the checksum
        if (
            _vowel_index(encoded, pos) != checksum % 6
            or _vowel_index(encoded, pos + 2) != checksum // 6
        ):
            raise DecodeError(f"Checksum mismatch near position {pos}")
    else:
        decoded.append(_decode_byte(encoded, pos, checksum))

    return bytes(decoded)


def is_valid(encoded: str) -> bool:
    """Return True if the string decodes cleanly."""
    try:
        decode(encoded)
        return True
    except DecodeError:
        return False
