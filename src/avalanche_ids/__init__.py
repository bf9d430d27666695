"""Canonical Avalanche identifiers: Id, ShortId and NodeId."""

from .formatting import decode_cb58_with_checksum, encode_cb58_with_checksum
from .ids import (
    EMPTY_ID,
    EMPTY_NODE_ID,
    EMPTY_SHORT_ID,
    Id,
    Ids,
    NodeId,
    NodeIds,
    ShortId,
    ShortIds,
    deserialize_id,
    load_document,
    must_deserialize_id,
)
from .types import (
    CertificateLoadError,
    ChecksumMismatchError,
    IdConstructionError,
    IdDecodeError,
    IdsError,
    SchemaBindingError,
)

__all__ = [
    "Id",
    "ShortId",
    "NodeId",
    "Ids",
    "ShortIds",
    "NodeIds",
    "EMPTY_ID",
    "EMPTY_SHORT_ID",
    "EMPTY_NODE_ID",
    "encode_cb58_with_checksum",
    "decode_cb58_with_checksum",
    "deserialize_id",
    "must_deserialize_id",
    "load_document",
    # Exceptions
    "IdsError",
    "IdConstructionError",
    "IdDecodeError",
    "ChecksumMismatchError",
    "CertificateLoadError",
    "SchemaBindingError",
]
