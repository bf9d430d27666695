"""
Checksummed text encodings for identifiers.

CB58 is the canonical human-readable form of every Avalanche identifier::

    text = base58(payload || sha256(payload)[:4])

Decoding reverses the steps and recomputes the checksum. The checksum is
exactly 4 bytes (not a full digest) and the alphabet is the Bitcoin one;
both must match any peer implementation bit for bit.

The hex variant carries the same checksum behind a `0x` prefix and is
accepted by Avalanche tooling wherever a hex payload is expected.

References:
    - https://support.avax.network/en/articles/4587395-what-is-cb58
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/utils/formatting
"""

from __future__ import annotations

from ..hashing import checksum
from ..types.constants import CHECKSUM_LEN
from ..types.exceptions import ChecksumMismatchError, IdDecodeError
from .base58 import Base58


def _split_checksum(decoded: bytes, codec: str) -> bytes:
    """Verify and strip the trailing checksum of a decoded payload."""
    if len(decoded) < CHECKSUM_LEN:
        raise IdDecodeError(
            codec, f"input is {len(decoded)} bytes, shorter than the {CHECKSUM_LEN}-byte checksum"
        )

    payload, supplied = decoded[:-CHECKSUM_LEN], decoded[-CHECKSUM_LEN:]
    expected = checksum(payload)
    if supplied != expected:
        raise ChecksumMismatchError(codec, expected=expected, actual=supplied)
    return payload


def encode_cb58_with_checksum(data: bytes) -> str:
    """Encode `data` as CB58: Base58 over the payload plus its 4-byte checksum."""
    return Base58.encode(data + checksum(data))


def decode_cb58_with_checksum(text: str) -> bytes:
    """
    Decode a CB58 string and return the verified payload.

    Raises:
        IdDecodeError: If the text is not Base58 or is too short.
        ChecksumMismatchError: If the checksum does not match the payload.
    """
    return _split_checksum(Base58.decode(text), "cb58")


def encode_hex_with_checksum(data: bytes) -> str:
    """Encode `data` as `0x`-prefixed hex of the payload plus its 4-byte checksum."""
    return "0x" + (data + checksum(data)).hex()


def decode_hex_with_checksum(text: str) -> bytes:
    """
    Decode a `0x`-prefixed checksummed hex string and return the verified payload.

    The prefix is optional on input.

    Raises:
        IdDecodeError: If the text is not valid hex or is too short.
        ChecksumMismatchError: If the checksum does not match the payload.
    """
    try:
        decoded = bytes.fromhex(text.removeprefix("0x"))
    except ValueError as e:
        raise IdDecodeError("hex", str(e)) from e
    return _split_checksum(decoded, "hex")
