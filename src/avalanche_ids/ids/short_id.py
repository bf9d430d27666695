"""
20-byte address-like identifier.

References:
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/ids#ShortID
"""

from __future__ import annotations

from typing import Final

from ..hashing import bytes_to_short_address_bytes
from ..types.constants import SHORT_ID_LEN
from .base import BaseId
from .collections import BaseIdList


class ShortId(BaseId):
    """Fixed-width identifier of exactly 20 bytes."""

    LENGTH = SHORT_ID_LEN

    @classmethod
    def from_public_key_bytes(cls, public_key: bytes) -> ShortId:
        """Derive the short id (address) of serialized public key bytes."""
        return cls(bytes_to_short_address_bytes(public_key))


class ShortIds(BaseIdList[ShortId]):
    """Ordered sequence of `ShortId`."""

    ELEMENT_TYPE = ShortId


EMPTY_SHORT_ID: Final = ShortId.empty()
"""The all-zero short id."""
