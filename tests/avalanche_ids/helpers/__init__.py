"""Test helpers for identifier unit tests."""

from .certificates import (
    expected_node_id_bytes,
    make_private_key_pem,
    make_self_signed_certificate,
    pem_body_der,
)
from .vectors import (
    ID_VECTOR_BYTES,
    ID_VECTOR_TEXT,
    NODE_ID_VECTOR_TEXT,
    SHORT_ID_VECTOR_BYTES,
    SHORT_ID_VECTOR_TEXT,
    ZERO_ID_TEXT,
)

__all__ = [
    "expected_node_id_bytes",
    "make_private_key_pem",
    "make_self_signed_certificate",
    "pem_body_der",
    "ID_VECTOR_BYTES",
    "ID_VECTOR_TEXT",
    "NODE_ID_VECTOR_TEXT",
    "SHORT_ID_VECTOR_BYTES",
    "SHORT_ID_VECTOR_TEXT",
    "ZERO_ID_TEXT",
]
