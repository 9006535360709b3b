"""
Domain models — the embedded certificate as an immutable value object.

CertificateFixture carries the PEM text exactly as embedded, the DER
encoding derived from it, and a few metadata fields useful for assertions
in tests. It is created once at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CertificateFixture:
    """
    A parsed X.509 certificate fixture.

    `der` holds the canonical binary encoding; `pem` the textual armour it
    was loaded from. Both are excluded from repr to keep test output short.
    """

    pem: str = field(repr=False)
    der: bytes = field(repr=False)
    subject: str
    issuer: str
    serial_number: str
    sha256_fingerprint: str

    def __post_init__(self) -> None:
        if not self.der:
            raise ValueError("CertificateFixture requires non-empty DER bytes")

    @property
    def size(self) -> int:
        return len(self.der)
