"""
Big-endian byte packing.

Avalanche wire messages are packed as a flat sequence of fixed-width,
big-endian fields. Only the shapes identifiers need are covered here:

- u32: 4 bytes, used as the length prefix of a packed sequence
- u64: 8 bytes, used for the tags of a prefixed sub-identifier
- raw bytes: written as-is (identifiers are fixed-width, so no prefix)

Example: packing tags [1, 2] followed by a 32-byte id::

    00 00 00 00 00 00 00 01 | 00 00 00 00 00 00 00 02 | <32 id bytes>

References:
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/utils/wrappers#Packer
"""

from __future__ import annotations

import operator
from typing import SupportsIndex

from .types.constants import U32_LEN, U64_LEN
from .types.exceptions import PackerError


def _check_range(value: SupportsIndex, bits: int) -> int:
    int_value = operator.index(value)
    if not (0 <= int_value < (2**bits)):
        raise OverflowError(f"{int_value} is out of range for u{bits}")
    return int_value


class Packer:
    """Append-only big-endian writer."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def pack_u32(self, value: SupportsIndex) -> None:
        """Append `value` as a 4-byte big-endian unsigned integer."""
        self._buf += _check_range(value, 32).to_bytes(U32_LEN, "big")

    def pack_u64(self, value: SupportsIndex) -> None:
        """Append `value` as an 8-byte big-endian unsigned integer."""
        self._buf += _check_range(value, 64).to_bytes(U64_LEN, "big")

    def pack_bytes(self, data: bytes) -> None:
        """Append `data` without a length prefix."""
        self._buf += data

    def take_bytes(self) -> bytes:
        """Return the packed bytes and reset the packer."""
        out = bytes(self._buf)
        self._buf.clear()
        return out


class Unpacker:
    """Sequential big-endian reader over an immutable buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self._offset

    def _take(self, n: int, operation: str) -> bytes:
        if n > self.remaining:
            raise PackerError(operation, expected_bytes=n, actual_bytes=self.remaining)
        chunk = self._data[self._offset : self._offset + n]
        self._offset += n
        return chunk

    def unpack_u32(self) -> int:
        """Read a 4-byte big-endian unsigned integer."""
        return int.from_bytes(self._take(U32_LEN, "unpack_u32"), "big")

    def unpack_u64(self) -> int:
        """Read an 8-byte big-endian unsigned integer."""
        return int.from_bytes(self._take(U64_LEN, "unpack_u64"), "big")

    def unpack_bytes(self, n: int) -> bytes:
        """Read exactly `n` raw bytes."""
        return self._take(n, "unpack_bytes")
