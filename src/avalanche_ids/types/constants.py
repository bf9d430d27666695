"""Constants used throughout the library."""

from __future__ import annotations

from typing import Final

ID_LEN: Final = 32
"""The number of bytes in a general-purpose identifier."""

SHORT_ID_LEN: Final = 20
"""The number of bytes in a short (address-like) identifier."""

NODE_ID_LEN: Final = 20
"""The number of bytes in a node identifier."""

NODE_ID_ENCODE_PREFIX: Final = "NodeID-"
"""Literal prefix of the canonical text form of a node identifier."""

CHECKSUM_LEN: Final = 4
"""The number of sha256 bytes appended to a payload before text encoding."""

U32_LEN: Final = 4
"""Packed width of an unsigned 32-bit integer."""

U64_LEN: Final = 8
"""Packed width of an unsigned 64-bit integer."""
