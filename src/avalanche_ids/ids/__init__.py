"""Identifier types, collections and derivation."""

from .base import BaseId
from .binding import deserialize_id, load_document, must_deserialize_id
from .certificate import load_certificate_der, read_certificate_der
from .collections import BaseIdList
from .id import EMPTY_ID, Id, Ids
from .node_id import EMPTY_NODE_ID, NodeId, NodeIds
from .short_id import EMPTY_SHORT_ID, ShortId, ShortIds

__all__ = [
    # Base types
    "BaseId",
    "BaseIdList",
    # Identifiers
    "Id",
    "ShortId",
    "NodeId",
    "EMPTY_ID",
    "EMPTY_SHORT_ID",
    "EMPTY_NODE_ID",
    # Collections
    "Ids",
    "ShortIds",
    "NodeIds",
    # Certificates
    "load_certificate_der",
    "read_certificate_der",
    # Document binding
    "deserialize_id",
    "must_deserialize_id",
    "load_document",
]
