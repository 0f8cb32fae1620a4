"""
Fingerprint and address helpers built on the encoders.

OpenSSH prints key fingerprints in Bubble Babble as the encoding of the
SHA-1 digest of the raw key blob (``ssh-keygen -B``). Addresses are
encoded from their packed network-order octets, in stable form by
default so that each 16-bit group reads the same wherever it appears.
"""

import base64
import binascii
import hashlib
import ipaddress
from typing import Union

import blake3

from bubblebabble.algorithms import ByteInput, as_bytes, encode
from bubblebabble.config import DEFAULT_DIGEST, SUPPORTED_DIGESTS
from bubblebabble.errors import InvalidArgumentError
from bubblebabble.lib.log import get_logger, log
from bubblebabble.stable import encode_stable

logger = get_logger("fingerprint")

AddressInput = Union[str, bytes, ipaddress.IPv4Address, ipaddress.IPv6Address]


def digest(data: ByteInput, algorithm: str = DEFAULT_DIGEST) -> bytes:
    """
    Hash data with one of the supported digest algorithms.

    Args:
        data: Bytes to hash
        algorithm: One of "sha1", "sha256", "md5", "blake3"

    Returns:
        Raw digest bytes

    Raises:
        InvalidArgumentError: If the algorithm is not supported
    """
    data = as_bytes(data)
    if not isinstance(algorithm, str):
        raise InvalidArgumentError(
            f"Digest name must be a string, got {type(algorithm).__name__}"
        )
    algorithm = algorithm.lower()

    if algorithm not in SUPPORTED_DIGESTS:
        raise InvalidArgumentError(
            f"Unknown digest '{algorithm}'. Valid digests: {list(SUPPORTED_DIGESTS)}"
        )

    if algorithm == "blake3":
        return blake3.blake3(data).digest()
    return hashlib.new(algorithm, data).digest()


def fingerprint(key_blob: ByteInput, algorithm: str = DEFAULT_DIGEST) -> str:
    """
    Bubble Babble fingerprint of a key blob.

    Args:
        key_blob: Raw public key bytes (not the base64 text)
        algorithm: Digest algorithm, sha1 by default like OpenSSH

    Returns:
        Bubble Babble encoding of the digest
    """
    key_digest = digest(key_blob, algorithm)
    log(
        logger,
        "debug",
        "Computed key digest",
        algorithm=algorithm,
        digest_bytes=len(key_digest),
    )
    return encode(key_digest)


def load_public_key_blob(text: str) -> bytes:
    """
    Extract the key blob from an OpenSSH public key line.

    Accepts ``<type> <base64> [comment]`` as found in ``id_ed25519.pub``
    or ``authorized_keys`` (without options). Blank lines and ``#``
    comments before the key are skipped.

    Args:
        text: Public key file contents

    Returns:
        Decoded key blob

    Raises:
        InvalidArgumentError: If no parsable key line is found
    """
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        fields = line.split()
        if len(fields) < 2:
            raise InvalidArgumentError("Public key line must be '<type> <base64> [comment]'")

        try:
            blob = base64.b64decode(fields[1], validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidArgumentError(f"Public key data is not valid base64: {e}")

        # The blob starts with a length-prefixed copy of the key type
        type_length = int.from_bytes(blob[:4], "big")
        key_type = blob[4 : 4 + type_length]
        if key_type != fields[0].encode("ascii", "replace"):
            raise InvalidArgumentError(
                f"Public key blob does not match declared type '{fields[0]}'"
            )
        return blob

    raise InvalidArgumentError("No public key found in input")


def address_octets(address: AddressInput) -> bytes:
    """
    Packed network-order octets of an IPv4 or IPv6 address.

    Args:
        address: Address text ("::1", "192.0.2.1"), packed bytes or an
            ipaddress object

    Returns:
        4 or 16 bytes

    Raises:
        InvalidArgumentError: If the address cannot be parsed
    """
    try:
        return ipaddress.ip_address(address).packed
    except ValueError as e:
        raise InvalidArgumentError(str(e))


def encode_address(address: AddressInput, stable: bool = True) -> str:
    """
    Bubble Babble form of an IP address.

    Args:
        address: Address to encode
        stable: Use stable babble (default) instead of the checksummed form

    Returns:
        Encoded address, e.g. ``xebab-7wa-caxax`` for ``::1``
    """
    octets = address_octets(address)
    if stable:
        return encode_stable(octets)
    return encode(octets)
