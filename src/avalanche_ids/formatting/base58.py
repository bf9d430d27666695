"""
Base58 encoding/decoding (Bitcoin-style alphabet).

Base58 excludes visually ambiguous characters (0, O, I, l) and has no
padding character. Leading zero bytes are preserved as leading "1"
characters, which is why the all-zero id encodes to 32 "1"s followed by
its checksum.
"""

from __future__ import annotations

from typing import Final

from ..types.exceptions import IdDecodeError


class Base58:
    """
    Base58 codec over the Bitcoin alphabet.

    The alphabet is: 123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz
    """

    ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    """Base58 alphabet (Bitcoin style, excludes 0, O, I, l)."""

    _INDEX: Final[dict[str, int]] = {char: i for i, char in enumerate(ALPHABET)}

    @classmethod
    def encode(cls, data: bytes) -> str:
        """
        Encode bytes as Base58 string.

        Leading zero bytes become leading '1' characters.

        Args:
            data: Bytes to encode.

        Returns:
            Base58-encoded string.
        """
        # Count leading zeros (become leading '1's)
        leading_zeros = len(data) - len(data.lstrip(b"\x00"))

        # Convert to big integer and then to base58
        num = int.from_bytes(data, "big")
        result: list[str] = []

        while num > 0:
            num, remainder = divmod(num, 58)
            result.append(cls.ALPHABET[remainder])

        # Add leading '1's and reverse
        result.extend([cls.ALPHABET[0]] * leading_zeros)
        return "".join(reversed(result))

    @classmethod
    def decode(cls, s: str) -> bytes:
        """
        Decode Base58 string to bytes.

        Leading '1' characters become leading zero bytes.

        Args:
            s: Base58-encoded string.

        Returns:
            Decoded bytes.

        Raises:
            IdDecodeError: If string contains invalid characters.
        """
        leading_ones = len(s) - len(s.lstrip(cls.ALPHABET[0]))

        num = 0
        for char in s:
            index = cls._INDEX.get(char)
            if index is None:
                raise IdDecodeError("base58", f"invalid character {char!r}")
            num = num * 58 + index

        if num == 0:
            result = b""
        else:
            result = num.to_bytes((num.bit_length() + 7) // 8, "big")

        return b"\x00" * leading_ones + result
