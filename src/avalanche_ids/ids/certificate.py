"""
Staking certificate loading.

A node's identity is its TLS staking certificate. Only the first PEM block
of a certificate file is considered, and it must be an X.509 certificate:
a file that starts with a private key is rejected even if a certificate
follows it. The raw DER bytes of that certificate (Go's
`tls.Certificate.Leaf.Raw`) are what node ids are derived from.

References:
    - https://pkg.go.dev/github.com/ava-labs/avalanchego/staking
"""

from __future__ import annotations

import base64
import logging
import re
from pathlib import Path
from typing import Final

from cryptography import x509

from ..types.exceptions import CertificateLoadError

logger = logging.getLogger(__name__)

_PEM_BLOCK: Final = re.compile(
    rb"-----BEGIN (?P<label>[^-\r\n]+)-----(?P<body>.*?)-----END (?P=label)-----",
    re.DOTALL,
)
"""A complete PEM block; the END label must match the BEGIN label."""

CERTIFICATE_LABELS: Final = frozenset({"CERTIFICATE", "X509 CERTIFICATE"})
"""PEM labels accepted as an X.509 certificate."""

PRIVATE_KEY_LABELS: Final = frozenset({"PRIVATE KEY", "RSA PRIVATE KEY", "EC PRIVATE KEY"})
"""PEM labels of private keys (PKCS#8, PKCS#1 and SEC1)."""


def first_pem_block(pem: bytes) -> tuple[str, bytes] | None:
    """
    Find the first PEM block in `pem`.

    Returns:
        The block label and its base64 body with all whitespace removed,
        or `None` if `pem` holds no complete block.
    """
    match = _PEM_BLOCK.search(pem)
    if match is None:
        return None
    label = match.group("label").decode("ascii", "replace")
    return label, b"".join(match.group("body").split())


def load_certificate_der(pem: bytes, *, path: str | Path | None = None) -> bytes:
    """
    Extract the DER bytes of the certificate in the first PEM block of `pem`.

    The bytes are returned exactly as carried in the PEM body, never
    re-encoded, so node ids match peers hashing the raw leaf certificate.

    Args:
        pem: PEM-encoded file contents.
        path: Source path, used only for error messages and logs.

    Raises:
        CertificateLoadError: If the first block is not a parsable certificate.
    """
    first = first_pem_block(pem)
    if first is None:
        raise CertificateLoadError("found no cert", path=path)
    label, body = first

    if label in PRIVATE_KEY_LABELS:
        logger.warning("cert path %s has unexpected private key", path or "<in-memory>")
        raise CertificateLoadError("found no cert (first PEM item is a private key)", path=path)
    if label not in CERTIFICATE_LABELS:
        raise CertificateLoadError(f"found no cert (first PEM item is {label!r})", path=path)

    try:
        der = base64.b64decode(body, validate=True)
        # Parsed only to check the body is a certificate.
        x509.load_der_x509_certificate(der)
    except ValueError as e:
        raise CertificateLoadError(f"has an invalid certificate: {e}", path=path) from e

    return der


def read_certificate_der(path: str | Path) -> bytes:
    """
    Read a PEM certificate file and return the DER bytes of its certificate.

    Raises:
        CertificateLoadError: If the file does not exist or holds no certificate first.
    """
    cert_path = Path(path)
    if not cert_path.exists():
        raise CertificateLoadError("does not exist", path=path)

    try:
        contents = cert_path.read_bytes()
    except OSError as e:
        raise CertificateLoadError(f"could not be read: {e}", path=path) from e

    return load_certificate_der(contents, path=path)
