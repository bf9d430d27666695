"""Exception hierarchy for identifier construction, decoding and loading."""

from __future__ import annotations

from pathlib import Path


class IdsError(Exception):
    """
    Base exception for all identifier-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class IdConstructionError(IdsError):
    """
    Raised when raw input is longer than an identifier's nominal length.

    This is a caller logic error: values that reach a constructor must
    already be bounded by the caller.

    Attributes:
        type_name: The identifier type being constructed.
        expected: The nominal length of the type.
        actual: The length of the rejected input.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{type_name} accepts at most {expected} bytes, got {actual}")


class IdDecodeError(IdsError):
    """
    Raised when a canonical text form cannot be decoded.

    Attributes:
        type_name: The type (or codec) being decoded.
        detail: Description of what went wrong.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Failed to decode {type_name}: {detail}")


class ChecksumMismatchError(IdDecodeError):
    """
    Raised when the checksum embedded in a text form does not match its payload.

    Attributes:
        expected: Checksum recomputed from the payload.
        actual: Checksum carried by the text form.
    """

    def __init__(self, type_name: str, *, expected: bytes, actual: bytes) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            type_name,
            f"invalid input checksum (expected {expected.hex()}, got {actual.hex()})",
        )


class CertificateLoadError(IdsError):
    """
    Raised when a node identifier cannot be loaded from a certificate.

    Attributes:
        path: The certificate path, if the input came from a file.
        detail: Description of what went wrong.
    """

    def __init__(self, detail: str, *, path: str | Path | None = None) -> None:
        self.path = None if path is None else str(path)
        self.detail = detail

        if self.path is not None:
            msg = f"cert path {self.path} {detail}"
        else:
            msg = f"certificate {detail}"

        super().__init__(msg)


class SchemaBindingError(IdsError):
    """
    Raised when a required identifier in a structured document is missing or invalid.

    Attributes:
        type_name: The identifier type (or document type) being bound.
        field_name: The offending field, if known.
        detail: Description of what went wrong.
    """

    def __init__(
        self,
        type_name: str,
        detail: str,
        *,
        field_name: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.field_name = field_name
        self.detail = detail

        msg = f"{type_name}: {detail}"
        if field_name:
            msg = f"{msg} (field '{field_name}')"

        super().__init__(msg)


class PackerError(IdsError):
    """
    Raised when packed input ends before a value could be read.

    Attributes:
        operation: The unpack operation that failed.
        expected_bytes: Number of bytes the operation needed.
        actual_bytes: Number of bytes left in the buffer.
    """

    def __init__(self, operation: str, *, expected_bytes: int, actual_bytes: int) -> None:
        self.operation = operation
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes
        super().__init__(
            f"{operation}: needed {expected_bytes} bytes, only {actual_bytes} remaining"
        )
