"""Shared base models, constants and exceptions."""

from .base import IdsModel, StrictBaseModel
from .constants import (
    CHECKSUM_LEN,
    ID_LEN,
    NODE_ID_ENCODE_PREFIX,
    NODE_ID_LEN,
    SHORT_ID_LEN,
)
from .exceptions import (
    CertificateLoadError,
    ChecksumMismatchError,
    IdConstructionError,
    IdDecodeError,
    IdsError,
    PackerError,
    SchemaBindingError,
)

__all__ = [
    "IdsModel",
    "StrictBaseModel",
    # Constants
    "CHECKSUM_LEN",
    "ID_LEN",
    "NODE_ID_ENCODE_PREFIX",
    "NODE_ID_LEN",
    "SHORT_ID_LEN",
    # Exceptions
    "IdsError",
    "IdConstructionError",
    "IdDecodeError",
    "ChecksumMismatchError",
    "CertificateLoadError",
    "SchemaBindingError",
    "PackerError",
]
