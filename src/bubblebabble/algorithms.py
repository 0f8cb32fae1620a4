"""
Core Bubble Babble Algorithms

This module contains the standard Bubble Babble encoding (Antti Huima,
2011), the form printed by ``ssh-keygen -B`` for key fingerprints.

Algorithm Overview:
1. Start the rolling checksum at 1
2. For each byte pair (b1, b2):
   - b1 becomes vowel, consonant, vowel (its two high bits and two low
     bits are folded with the checksum, the middle four bits are plain)
   - b2 becomes two consonants, one per nibble, split by a dash
   - checksum = (checksum * 5 + b1 * 7 + b2) % 36
3. Close with either the trailing odd byte (vowel, consonant, vowel) or,
   for even lengths, vowel[checksum % 6] + 'x' + vowel[checksum // 6]
4. Frame the whole string with 'x' on both ends

Every group of symbols after the first depends on the checksum of all
preceding bytes, so a transcription error in one position is likely to
show up as an impossible vowel further on.

Output length is a pure function of input length: N bytes always give
N // 2 + 1 dash-separated words and 6 * (N // 2) + 5 characters.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import (
    BLOCK_SEED,
    CHECKSUM_MODULUS,
    CHECKSUM_SEED,
    CLOSING_CONSONANT_INDEX,
    CONSONANTS,
    FRAME_CHAR,
    SEPARATOR,
    VOWELS,
)
from .errors import InvalidArgumentError

ByteInput = Union[bytes, bytearray, memoryview, Iterable[int]]


def as_bytes(data: ByteInput) -> bytes:
    """
    Normalize caller input to an immutable ``bytes`` object.

    Args:
        data: bytes-like object or an iterable of ints in range 0..255

    Returns:
        The input as bytes

    Raises:
        InvalidArgumentError: If the input is text or holds non-byte values
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        raise InvalidArgumentError(
            "Text input is not a byte sequence; encode it first (e.g. .encode('utf-8'))"
        )
    if isinstance(data, int):
        # bytes(n) would silently mean n zero bytes
        raise InvalidArgumentError(
            f"Input is not a byte sequence, got {type(data).__name__}"
        )
    try:
        return bytes(data)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Input is not a sequence of byte values: {e}")


def next_checksum(checksum: int, b1: int, b2: int) -> int:
    """Advance the rolling checksum over one byte pair."""
    return (checksum * 5 + b1 * 7 + b2) % CHECKSUM_MODULUS


def _byte_symbols(byte: int, checksum: int) -> str:
    # vowel, consonant, vowel; only the vowels carry the checksum
    return (
        VOWELS[(((byte >> 6) & 3) + checksum) % 6]
        + CONSONANTS[(byte >> 2) & 15]
        + VOWELS[((byte & 3) + checksum // 6) % 6]
    )


def _pair_symbols(b1: int, b2: int, checksum: int) -> str:
    return (
        _byte_symbols(b1, checksum)
        + CONSONANTS[(b2 >> 4) & 15]
        + CONSONANTS[b2 & 15]
    )


def _closing_symbols(trailing: Optional[int], checksum: int) -> str:
    if trailing is not None:
        return _byte_symbols(trailing, checksum)
    return (
        VOWELS[checksum % 6]
        + CONSONANTS[CLOSING_CONSONANT_INDEX]
        + VOWELS[checksum // 6]
    )


def iter_rounds(
    data: bytes, block_size: Optional[int] = None
) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(checksum, tile)`` for every round of an encoding pass.

    Full rounds yield 5-symbol tiles (vowel, consonant, vowel, consonant,
    consonant). The last round always yields the 3-symbol closing group.

    When ``block_size`` is given the checksum chain restarts from
    BLOCK_SEED after every byte pair that ends a block. The caller is
    responsible for passing an even, positive block size.

    Args:
        data: Input bytes
        block_size: Optional block length for the stable variant

    Yields:
        Tuple of (checksum in effect for the round, tile string)
    """
    checksum = CHECKSUM_SEED
    full_pairs = len(data) // 2

    for i in range(full_pairs):
        b1 = data[2 * i]
        b2 = data[2 * i + 1]
        yield checksum, _pair_symbols(b1, b2, checksum)

        if block_size is not None and (2 * i + 2) % block_size == 0:
            checksum = BLOCK_SEED
        else:
            checksum = next_checksum(checksum, b1, b2)

    trailing = data[-1] if len(data) % 2 else None
    yield checksum, _closing_symbols(trailing, checksum)


def render_tiles(tiles: List[str]) -> str:
    """
    Join round tiles into the framed output string.

    A full tile ``VCVCC`` is written ``VCVC-C``; the closing tile is
    appended as-is and the result is wrapped in the framing character.
    """
    parts = [FRAME_CHAR]
    for tile in tiles[:-1]:
        parts.append(tile[:4] + SEPARATOR + tile[4])
    parts.append(tiles[-1])
    parts.append(FRAME_CHAR)
    return "".join(parts)


def encode_tiles(data: ByteInput) -> List[str]:
    """
    Return the per-round tiles of the standard encoding, without framing.

    Args:
        data: Input bytes

    Returns:
        List of N // 2 five-symbol tiles followed by one closing tile
    """
    return [tile for _, tile in iter_rounds(as_bytes(data))]


def encode(data: ByteInput) -> str:
    """
    Encode bytes as a standard Bubble Babble string.

    This is total over all byte sequences, including the empty one.

    Args:
        data: Input bytes

    Returns:
        Bubble Babble string, e.g. ``xexax`` for empty input

    Examples:
        >>> encode(b"")
        'xexax'
        >>> encode(b"Pineapple")
        'xigak-nyryk-humil-bosek-sonax'
    """
    return render_tiles(encode_tiles(data))


def encode_with_steps(data: ByteInput) -> Tuple[str, List[str]]:
    """
    Encode bytes and return a trace of every round.

    Args:
        data: Input bytes

    Returns:
        Tuple of (encoded_string, execution_steps)
    """
    data = as_bytes(data)
    steps = []
    tiles = []

    steps.append(f"Initial data: {len(data)} bytes")
    steps.append(f"Initial checksum: {CHECKSUM_SEED}")

    for index, (checksum, tile) in enumerate(iter_rounds(data)):
        tiles.append(tile)
        if len(tile) == 5:
            pair = data[2 * index : 2 * index + 2]
            steps.append(
                f"Round {index + 1}: bytes {pair.hex()} checksum {checksum} -> '{tile}'"
            )
        elif len(data) % 2:
            steps.append(
                f"Round {index + 1}: trailing byte {data[-1]:02x} "
                f"checksum {checksum} -> '{tile}'"
            )
        else:
            steps.append(f"Round {index + 1}: closing checksum {checksum} -> '{tile}'")

    encoded = render_tiles(tiles)
    steps.append(f"Final encoding: {encoded}")

    return encoded, steps


def verify_encoding(data: ByteInput, expected: str) -> bool:
    """
    Verify that data produces the expected Bubble Babble string.

    Args:
        data: Input bytes
        expected: Expected encoded string

    Returns:
        True if verification succeeds, False otherwise
    """
    try:
        return encode(data) == expected
    except InvalidArgumentError:
        return False


def extract_words(encoded: str) -> List[str]:
    """
    Split an encoded string into its dash-separated words.

    Args:
        encoded: Bubble Babble string

    Returns:
        List of words, framing characters included
    """
    return encoded.split(SEPARATOR)


def get_length_info(length: int) -> Dict[str, Any]:
    """
    Get the output shape for an input of the given length.

    Args:
        length: Number of input bytes

    Returns:
        Dictionary with round counts, word count and output length

    Raises:
        InvalidArgumentError: If length is negative or not an int
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidArgumentError("Input length must be a non-negative integer")

    full_rounds = length // 2
    odd = length % 2 == 1

    return {
        "input_length": length,
        "full_rounds": full_rounds,
        "has_trailing_byte": odd,
        "rounds": full_rounds + 1,
        "words": full_rounds + 1,
        "separators": full_rounds,
        "output_length": 6 * full_rounds + 5,
    }
