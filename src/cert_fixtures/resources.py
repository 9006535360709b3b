"""
Module-level shortcuts onto the default CertificateFixtureProvider.

    from cert_fixtures import resources

    der = resources.certificate()
    raw = resources.bytes(["30", "03", "020101"])

`bytes` deliberately shares its name with the builtin; import the module,
not the name.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO

from cert_fixtures.provider import default_provider


def certificate() -> bytes:
    return default_provider().certificate()


def certificate_io() -> BinaryIO:
    return default_provider().certificate_io()


def bytes_to_io(hex_parts: Iterable[str]) -> BinaryIO:
    return default_provider().bytes_to_io(hex_parts)


def bytes(hex_parts: Iterable[str]) -> bytes:  # noqa: A001
    return default_provider().bytes(hex_parts)
