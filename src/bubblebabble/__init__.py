"""
Bubble Babble Binary Data Encoding

This library converts bytes into pronounceable, checksum-protected strings
of lowercase letters and dashes, the form OpenSSH uses for
``ssh-keygen -B`` key fingerprints.

Main Features:
- Standard Bubble Babble encoding with a rolling checksum in every word
- Strict decoding that rejects mistyped or corrupted strings
- Stable babble: per-block checksums and repeat compaction for
  structured data such as IP addresses
- Key fingerprint and address helpers
- Length and step introspection for documentation and debugging

Example Usage:
    from bubblebabble import encode, decode, encode_blocks

    encode(b"")                      # xexax
    encode(b"Pineapple")             # xigak-nyryk-humil-bosek-sonax
    decode("xigak-nyryk-humil-bosek-sonax")  # b"Pineapple"

    # IPv6 ::1 in stable form
    encode_blocks(bytes(15) + b"\\x01", 2)  # xebab-7wa-caxax

See Also:
    The Bubble Babble Binary Data Encoding, Antti Huima, 2011
"""

# Core algorithm functions
from .algorithms import (
    as_bytes,
    encode,
    encode_tiles,
    encode_with_steps,
    verify_encoding,
    extract_words,
    get_length_info,
    next_checksum,
)

# Fixed-block formatter
from .stable import (
    encode_blocks,
    encode_stable,
    stable_tiles,
    compress_words,
    validate_block_size,
)

# Decoding
from .decoding import decode, is_valid

# Fingerprints and addresses
from .lib.fingerprint import (
    digest,
    fingerprint,
    load_public_key_blob,
    address_octets,
    encode_address,
)

from .errors import BubbleBabbleError, InvalidArgumentError, DecodeError

# Public API
__all__ = [
    # Core functions
    "as_bytes",
    "encode",
    "encode_tiles",
    "encode_with_steps",
    "verify_encoding",
    "extract_words",
    "get_length_info",
    "next_checksum",
    # Fixed-block formatter
    "encode_blocks",
    "encode_stable",
    "stable_tiles",
    "compress_words",
    "validate_block_size",
    # Decoding
    "decode",
    "is_valid",
    # Fingerprints and addresses
    "digest",
    "fingerprint",
    "load_public_key_blob",
    "address_octets",
    "encode_address",
    # Errors
    "BubbleBabbleError",
    "InvalidArgumentError",
    "DecodeError",
]

__version__ = "0.1.0"
__author__ = "bubblebabble team"
__description__ = "Bubble Babble binary-to-text encoding with stable babble for addresses"
