"""
Stable Babble (Fixed-Block Formatter)

Encodes structured binary data such as IP address octets. The input is
split into blocks of ``block_size`` bytes and the rolling checksum
restarts at every block boundary, so each block's words only depend on
that block's bytes. With the default block size of 2 every word is
stable: the same byte pair always produces the same word.

The rendered string is compacted for reading aloud:
- consecutive identical words collapse into one, prefixed by the count
- the all-zero word ``babab`` is written ``wa``

Example:
    ::1 (fifteen zero octets, then 0x01) -> xebab-7wa-caxax
"""

from itertools import groupby
from typing import List

from .algorithms import ByteInput, as_bytes, extract_words, iter_rounds, render_tiles
from .config import DEFAULT_BLOCK_SIZE, SEPARATOR, ZERO_TOKEN, ZERO_WORD
from .errors import InvalidArgumentError
from .lib.log import get_logger, log

logger = get_logger("stable")


def validate_block_size(block_size: int) -> int:
    """
    Check that a block size can hold whole byte pairs.

    Args:
        block_size: Requested block length in bytes

    Returns:
        The block size, unchanged

    Raises:
        InvalidArgumentError: If block_size is not a positive even integer
    """
    if isinstance(block_size, bool) or not isinstance(block_size, int):
        raise InvalidArgumentError(
            f"Block size must be an integer, got {type(block_size).__name__}"
        )
    if block_size <= 0:
        raise InvalidArgumentError(f"Block size must be positive, got {block_size}")
    if block_size % 2:
        raise InvalidArgumentError(
            f"Block size must be even so byte pairs do not straddle blocks, got {block_size}"
        )
    return block_size


def stable_tiles(data: ByteInput, block_size: int = DEFAULT_BLOCK_SIZE) -> List[str]:
    """
    Return the per-round tiles of the stable encoding.

    Tiles of one block never depend on bytes of another block.

    Args:
        data: Input bytes
        block_size: Block length in bytes (positive, even)

    Returns:
        List of five-symbol tiles followed by one closing tile
    """
    data = as_bytes(data)
    validate_block_size(block_size)
    return [tile for _, tile in iter_rounds(data, block_size=block_size)]


def compress_words(words: List[str]) -> List[str]:
    """
    Collapse runs of identical words and shorten the all-zero word.

    Args:
        words: Dash-separated words of a rendered string

    Returns:
        Compacted word list, e.g. ["xebab", "7wa", "caxax"]
    """
    compressed = []
    for word, run in groupby(words):
        count = sum(1 for _ in run)
        if word == ZERO_WORD:
            word = ZERO_TOKEN
        compressed.append(f"{count}{word}" if count > 1 else word)
    return compressed


def encode_blocks(data: ByteInput, block_size: int = DEFAULT_BLOCK_SIZE) -> str:
    """
    Encode bytes as stable babble with a checksum chain per block.

    Args:
        data: Input bytes
        block_size: Block length in bytes (positive, even)

    Returns:
        Compacted stable babble string

    Raises:
        InvalidArgumentError: If block_size is not a positive even integer

    Examples:
        >>> encode_blocks(bytes(15) + b"\\x01", 2)
        'xebab-7wa-caxax'
    """
    tiles = stable_tiles(data, block_size)
    words = extract_words(render_tiles(tiles))
    compressed = compress_words(words)

    log(
        logger,
        "debug",
        "Encoded stable babble",
        block_size=block_size,
        rounds=len(tiles),
        words=len(words),
        compressed_words=len(compressed),
    )

    return SEPARATOR.join(compressed)


def encode_stable(data: ByteInput) -> str:
    """Encode bytes as stable babble with the default block size."""
    return encode_blocks(data, DEFAULT_BLOCK_SIZE)
