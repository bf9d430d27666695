"""
Fixed-width identifier base type.

Every identifier is an immutable `bytes` subclass of exactly `LENGTH`
bytes. Shorter inputs are right-padded with zeros; longer inputs are a
caller error. The canonical text form is CB58, optionally behind a
literal prefix (`TEXT_PREFIX`).

Equality, ordering and hashing are all derived from one comparator over
the full fixed-width buffer. Two different identifier types never compare
equal, even when they share a byte layout (`ShortId` and `NodeId`).
"""

from __future__ import annotations

import functools
import math
from typing import Any, ClassVar, Final, Iterable

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from ..formatting import decode_cb58_with_checksum, encode_cb58_with_checksum
from ..types.constants import CHECKSUM_LEN
from ..types.exceptions import IdConstructionError, IdDecodeError

_BASE58_CHARS_PER_BYTE: Final = math.log(256) / math.log(58)
"""Upper bound on Base58 characters needed per encoded byte."""


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        # bytes.fromhex handles empty string and validates hex characters
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    raise TypeError(f"Cannot build identifier bytes from {type(value).__name__}")


def _compare(a: bytes, b: bytes) -> int:
    """Unsigned lexicographic comparison: -1, 0 or 1."""
    return (a > b) - (a < b)


class BaseId(bytes):
    """
    A base class for fixed-width identifiers that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes every instance holds.
      - `TEXT_PREFIX`: literal prepended to the CB58 body (may be empty).
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    TEXT_PREFIX: ClassVar[str] = ""
    """Literal prefix of the canonical text form."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create a new identifier, zero-padding short input.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            IdConstructionError: If the input exceeds `LENGTH` bytes.
            TypeError: If `value` is an identifier of a different type.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")
        if isinstance(value, BaseId) and not isinstance(value, cls):
            raise TypeError(
                f"Cannot build {cls.__name__} from {type(value).__name__}; "
                "convert explicitly from raw bytes"
            )

        b = _coerce_to_bytes(value)
        if len(b) > cls.LENGTH:
            raise IdConstructionError(cls.__name__, expected=cls.LENGTH, actual=len(b))
        return super().__new__(cls, b.ljust(cls.LENGTH, b"\x00"))

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Build an identifier from at most `LENGTH` raw bytes, zero right-padded."""
        return cls(data)

    @classmethod
    @functools.cache
    def empty(cls) -> Self:
        """Return the shared all-zero identifier of this type."""
        return cls(b"")

    def is_empty(self) -> bool:
        """Return whether every byte is zero."""
        return self == type(self).empty()

    def to_bytes(self) -> bytes:
        """Return the raw fixed-width bytes."""
        return bytes(self)

    def to_string(self) -> str:
        """Return the canonical text form: `TEXT_PREFIX` + CB58."""
        return self.TEXT_PREFIX + encode_cb58_with_checksum(bytes(self))

    @classmethod
    def max_text_length(cls) -> int:
        """Longest CB58 body (without `TEXT_PREFIX`) of a `LENGTH`-byte payload."""
        return math.ceil((cls.LENGTH + CHECKSUM_LEN) * _BASE58_CHARS_PER_BYTE)

    @classmethod
    def from_string(cls, text: str) -> Self:
        """
        Parse the canonical text form.

        `TEXT_PREFIX` is stripped when present but never required.

        Raises:
            IdDecodeError: If the input is not a string, is longer than any
                valid text form, is not valid CB58, or the payload is too long.
            ChecksumMismatchError: If the embedded checksum is wrong.
        """
        if not isinstance(text, str):
            raise IdDecodeError(cls.__name__, f"expected text, got {type(text).__name__}")
        if cls.TEXT_PREFIX:
            text = text.removeprefix(cls.TEXT_PREFIX)

        # Base58 decoding is quadratic; bound untrusted input first.
        max_chars = cls.max_text_length()
        if len(text) > max_chars:
            raise IdDecodeError(
                cls.__name__, f"text is {len(text)} characters, longer than {max_chars}"
            )

        payload = decode_cb58_with_checksum(text)
        if len(payload) > cls.LENGTH:
            raise IdDecodeError(
                cls.__name__, f"payload is {len(payload)} bytes, expected at most {cls.LENGTH}"
            )
        return cls(payload)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        This schema defines how identifiers bind inside documents:
        1. If the input is already an instance of the class, accept it.
        2. Otherwise, the input must be the canonical text form.
        3. For serialization (e.g., to JSON), emit the canonical text form.
        """

        def validate(value: str) -> BaseId:
            """Parse text, reporting decode failures as validation errors."""
            try:
                return cls.from_string(value)
            except IdDecodeError as e:
                raise ValueError(str(e)) from e

        from_text_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(validate),
            ]
        )

        return core_schema.json_or_python_schema(
            json_schema=from_text_schema,
            python_schema=core_schema.union_schema(
                [
                    # Case 1: The value is already the correct type.
                    core_schema.is_instance_schema(cls),
                    # Case 2: The value needs to be parsed from text.
                    from_text_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Return a string representation showing the canonical text."""
        tname = type(self).__name__
        return f"{tname}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return _compare(bytes(self), bytes(other)) == 0  # type: ignore[arg-type]

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _compare(bytes(self), bytes(other)) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _compare(bytes(self), bytes(other)) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _compare(bytes(self), bytes(other)) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _compare(bytes(self), bytes(other)) >= 0  # type: ignore[arg-type]

    def __hash__(self) -> int:
        """Return the hash of the type and the full byte buffer."""
        return hash((type(self), bytes(self)))
