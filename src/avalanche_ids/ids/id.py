"""
32-byte general-purpose identifier.

Ids name transactions, blocks, chains, subnets and assets. Child ids can be
derived from a parent id and a sequence of u64 tags without any registry
(see `Id.prefix`), e.g. the id of a transaction's n-th output.

References:
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/ids#ID
"""

from __future__ import annotations

from typing import Final, SupportsIndex

from ..hashing import compute_sha256
from ..packer import Packer
from ..types.constants import ID_LEN
from .base import BaseId
from .collections import BaseIdList


class Id(BaseId):
    """Fixed-width identifier of exactly 32 bytes."""

    LENGTH = ID_LEN

    def prefix(self, *prefixes: SupportsIndex) -> Id:
        """
        Derive a child id from this id and a sequence of u64 tags.

        The tags are packed big-endian (8 bytes each), in order, followed by
        the 32 raw bytes of this id; the child is the sha256 of that buffer.

        Raises:
            OverflowError: If a tag is outside [0, 2**64 - 1].
            TypeError: If a tag is not an integer (floats are not truncated).
        """
        packer = Packer()
        for pfx in prefixes:
            packer.pack_u64(pfx)
        packer.pack_bytes(bytes(self))
        return Id(compute_sha256(packer.take_bytes()))


class Ids(BaseIdList[Id]):
    """Ordered sequence of `Id`."""

    ELEMENT_TYPE = Id


EMPTY_ID: Final = Id.empty()
"""The all-zero id."""
