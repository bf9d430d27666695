"""Text encodings for identifiers."""

from .base58 import Base58
from .cb58 import (
    decode_cb58_with_checksum,
    decode_hex_with_checksum,
    encode_cb58_with_checksum,
    encode_hex_with_checksum,
)

__all__ = [
    "Base58",
    "decode_cb58_with_checksum",
    "decode_hex_with_checksum",
    "encode_cb58_with_checksum",
    "encode_hex_with_checksum",
]
