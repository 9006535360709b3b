"""
CertificateFixtureProvider — one embedded certificate, many representations.

  certificate()        → DER bytes of the embedded constant
  certificate_io()     → read handle on the companion file (caller closes it)
  bytes_to_io(parts)   → hex pieces decoded into an in-memory stream
  bytes(parts)         → hex pieces decoded into a byte buffer

The embedded constant is shared and read-only, so one provider (or many)
can be used from several threads without locking. Handles returned to the
caller are never tracked here.
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import BinaryIO

from cryptography import x509

from cert_fixtures.adapters import companion_file
from cert_fixtures.adapters.x509_loader import parse_der
from cert_fixtures.config import DEFAULT_RESOURCE_DIR, FixtureSettings
from cert_fixtures.domain.hexcodec import decode_hex_parts
from cert_fixtures.domain.models import CertificateFixture
from cert_fixtures.embedded import CERTIFICATE


class CertificateFixtureProvider:
    """
    Serve the embedded certificate and hex conversions to test code.

    `resource_dir` locates the companion file; it defaults to the `res/`
    directory shipped next to this package.
    """

    def __init__(
        self,
        resource_dir: Path = DEFAULT_RESOURCE_DIR,
        certificate_filename: str = companion_file.CERTIFICATE_FILENAME,
        fixture: CertificateFixture = CERTIFICATE,
    ) -> None:
        self._resource_dir = Path(resource_dir)
        self._certificate_filename = certificate_filename
        self._fixture = fixture

    @classmethod
    def from_settings(cls, settings: FixtureSettings) -> CertificateFixtureProvider:
        return cls(
            resource_dir=settings.resource_dir,
            certificate_filename=settings.certificate_filename,
        )

    @property
    def certificate_path(self) -> Path:
        """Absolute location of the companion file."""
        return self._resource_dir / self._certificate_filename

    # ─────────────────────── Embedded certificate ───────────────────────

    def certificate(self) -> bytes:
        """DER encoding of the embedded certificate. Identical on every call."""
        return self._fixture.der

    def certificate_pem(self) -> str:
        return self._fixture.pem

    def certificate_fixture(self) -> CertificateFixture:
        return self._fixture

    def certificate_x509(self) -> x509.Certificate:
        """Parsed form of the embedded certificate (a fresh object each call)."""
        return parse_der(self._fixture.der)

    # ─────────────────────── Companion file ───────────────────────

    def certificate_io(self) -> BinaryIO:
        """
        Open the companion file for reading.

        Raises FileNotFoundError if it is missing. The handle is returned
        unmanaged: close it, or use it as a context manager:

            with provider.certificate_io() as stream:
                der = stream.read()
        """
        return companion_file.open_certificate_file(self.certificate_path)

    def companion_der(self) -> bytes:
        """
        Companion file content normalised to DER (DER or PEM accepted on disk).

        Raises FileNotFoundError if the file is missing, or
        CertificateEncodingError if it holds no certificate.
        """
        return companion_file.read_certificate_der(self.certificate_path)

    def companion_matches(self) -> bool:
        """True if the companion file holds the same certificate as the constant."""
        return self.companion_der() == self._fixture.der

    def write_companion(self) -> Path:
        """(Re)generate the companion file from the embedded constant."""
        return companion_file.write_certificate_file(
            self._resource_dir,
            self._fixture,
            filename=self._certificate_filename,
        )

    # ─────────────────────── Hex conversions ───────────────────────

    def bytes_to_io(self, hex_parts: Iterable[str]) -> BinaryIO:
        """Decode concatenated hex pieces and wrap them in an in-memory stream."""
        return io.BytesIO(decode_hex_parts(hex_parts))

    def bytes(self, hex_parts: Iterable[str]) -> bytes:
        """
        Decode concatenated hex pieces into raw bytes.

        Pieces are joined in order, so ["de", "adbeef"] and ["deadbeef"]
        decode to the same buffer. Raises HexFormatError on odd length or
        non-hex characters.
        """
        return decode_hex_parts(hex_parts)


@lru_cache(maxsize=1)
def default_provider() -> CertificateFixtureProvider:
    """Provider configured from the environment, built on first use."""
    return CertificateFixtureProvider.from_settings(FixtureSettings())
