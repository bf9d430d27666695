"""
Hash primitives used by identifier encoding and derivation.

Two pipelines are used across the package:

- CB58 checksum: the first 4 bytes of sha256 over the payload.
- Short address: ripemd160(sha256(data)), the 20-byte digest that turns
  certificate (or public key) bytes into a node or short identifier.

RIPEMD-160 comes from pycryptodome rather than `hashlib`, since OpenSSL 3
builds no longer expose it through `hashlib.new`.

References:
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/utils/hashing
"""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160

from .types.constants import CHECKSUM_LEN


def compute_sha256(data: bytes) -> bytes:
    """Return the 32-byte sha256 digest of `data`."""
    return hashlib.sha256(data).digest()


def compute_ripemd160(data: bytes) -> bytes:
    """Return the 20-byte RIPEMD-160 digest of `data`."""
    return RIPEMD160.new(data).digest()


def checksum(data: bytes, length: int = CHECKSUM_LEN) -> bytes:
    """
    Return the first `length` bytes of sha256 over `data`.

    Avalanche text encodings always use 4 bytes; the parameter exists for
    callers that verify against truncated digests of other widths.
    """
    return compute_sha256(data)[:length]


def bytes_to_short_address_bytes(data: bytes) -> bytes:
    """
    Compute the short address of `data`: ripemd160(sha256(data)).

    Args:
        data: Raw bytes, e.g. a DER-encoded certificate.

    Returns:
        Exactly 20 bytes.
    """
    return compute_ripemd160(compute_sha256(data))
