"""
X.509 loader adapter — PEM/DER parsing via cryptography (PyCA).

Turns the embedded PEM literal into a CertificateFixture value object and
re-parses DER bytes into a typed certificate on demand.

Parse failures are NOT caught here: a malformed embedded constant must
abort import of the package rather than surface later in a test.
"""

from __future__ import annotations

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.serialization import Encoding

from cert_fixtures.domain.models import CertificateFixture


def fixture_from_certificate(cert: x509.Certificate, pem: str) -> CertificateFixture:
    """Extract DER bytes and metadata from a parsed certificate."""
    return CertificateFixture(
        pem=pem,
        der=cert.public_bytes(Encoding.DER),
        subject=cert.subject.rfc4514_string(),
        issuer=cert.issuer.rfc4514_string(),
        serial_number=hex(cert.serial_number),
        sha256_fingerprint=cert.fingerprint(hashes.SHA256()).hex(),
    )


def load_pem_fixture(pem: str) -> CertificateFixture:
    """
    Parse a PEM certificate literal into a CertificateFixture.

    Raises ValueError (from cryptography) if the literal is not a valid
    PEM-armoured X.509 certificate.
    """
    cert = x509.load_pem_x509_certificate(pem.encode("ascii"))
    return fixture_from_certificate(cert, pem)


def parse_der(der_bytes: bytes) -> x509.Certificate:
    """Parse DER bytes into a cryptography Certificate."""
    return x509.load_der_x509_certificate(der_bytes)
