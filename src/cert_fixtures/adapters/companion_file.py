"""
Companion file adapter — the on-disk copy of the embedded certificate.

The companion file is expected to be DER. Reading it back for comparison
also accepts PEM armour, detected with asn1crypto, so a fixture directory
regenerated by hand with openssl still works.

  open_certificate_file  → raw read handle, owned by the caller
  read_certificate_der   → bytes normalised to DER
  write_certificate_file → (re)generate the companion file
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

import structlog
from asn1crypto import pem

from cert_fixtures.adapters.x509_loader import parse_der
from cert_fixtures.domain.errors import CertificateEncodingError
from cert_fixtures.domain.models import CertificateFixture

log = structlog.get_logger()

CERTIFICATE_FILENAME = "certificate.cer"


def open_certificate_file(path: Path) -> BinaryIO:
    """
    Open the companion file read-only in binary mode.

    Raises FileNotFoundError if the file is absent. The caller is
    responsible for closing the returned handle.
    """
    handle = path.open("rb")
    log.debug("fixture.companion_opened", path=str(path))
    return handle


def to_der(data: bytes) -> bytes:
    """
    Normalise certificate bytes to DER.

    PEM input is unarmoured; DER input is returned unchanged once it has been
    checked to parse as an X.509 certificate.
    """
    if pem.detect(data):
        try:
            type_name, _headers, der_bytes = pem.unarmor(data)
        except ValueError as e:
            raise CertificateEncodingError(f"Malformed PEM armour: {e}") from e
        if type_name != "CERTIFICATE":
            raise CertificateEncodingError(
                f"Expected a CERTIFICATE PEM block, got {type_name!r}"
            )
        log.debug("fixture.companion_encoding", encoding="pem")
    else:
        der_bytes = data
        log.debug("fixture.companion_encoding", encoding="der")

    try:
        parse_der(der_bytes)
    except ValueError as e:
        raise CertificateEncodingError(f"Data is not a DER X.509 certificate: {e}") from e
    return der_bytes


def read_certificate_der(path: Path) -> bytes:
    """Read the companion file and return its DER encoding."""
    return to_der(path.read_bytes())


def write_certificate_file(
    directory: Path,
    fixture: CertificateFixture,
    filename: str = CERTIFICATE_FILENAME,
) -> Path:
    """
    Write the DER encoding of `fixture` to `directory / filename`.

    Creates the directory if needed and overwrites an existing file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_bytes(fixture.der)
    log.info(
        "fixture.companion_written",
        path=str(path),
        size=fixture.size,
        sha256=fixture.sha256_fingerprint,
    )
    return path
