"""
20-byte node identifier.

A node id names a network participant. It has the same layout as a
`ShortId` but is a distinct type with its own text form,
`NodeID-<cb58>`. It is derived from the node's staking certificate::

    node_id = ripemd160(sha256(certificate_der))

References:
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/ids#NodeID
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/node#Node.Initialize
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from ..hashing import bytes_to_short_address_bytes
from ..types.constants import NODE_ID_ENCODE_PREFIX, NODE_ID_LEN
from .base import BaseId
from .certificate import load_certificate_der, read_certificate_der
from .collections import BaseIdList
from .short_id import ShortId

logger = logging.getLogger(__name__)


class NodeId(BaseId):
    """Fixed-width identifier of exactly 20 bytes, rendered as `NodeID-<cb58>`."""

    LENGTH = NODE_ID_LEN
    TEXT_PREFIX = NODE_ID_ENCODE_PREFIX

    @classmethod
    def from_cert_file(cls, cert_file_path: str | Path) -> NodeId:
        """
        Load a node id from a PEM-encoded X.509 certificate file.

        The first PEM block must be the certificate.

        Raises:
            CertificateLoadError: If the file is missing or does not start with a certificate.
        """
        logger.info("loading node ID from certificate %s", cert_file_path)
        return cls.from_cert_raw(read_certificate_der(cert_file_path))

    @classmethod
    def from_cert_pem(cls, pem: bytes) -> NodeId:
        """Derive a node id from in-memory PEM certificate contents."""
        return cls.from_cert_raw(load_certificate_der(pem))

    @classmethod
    def from_cert_raw(cls, cert_raw: bytes) -> NodeId:
        """
        Derive a node id from the raw DER bytes of a certificate.

        Applies sha256 then ripemd160 to the bytes; no parsing is done.
        """
        node_id = cls(bytes_to_short_address_bytes(cert_raw))
        logger.debug("derived %s from %d certificate bytes", node_id, len(cert_raw))
        return node_id

    def short_id(self) -> ShortId:
        """Reinterpret the same 20 bytes as a `ShortId`."""
        return ShortId(bytes(self))


class NodeIds(BaseIdList[NodeId]):
    """Ordered sequence of `NodeId`."""

    ELEMENT_TYPE = NodeId


EMPTY_NODE_ID: Final = NodeId.empty()
"""The all-zero node id."""
