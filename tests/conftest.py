"""
Shared test fixtures and helpers for the cert-fixtures test suite.

Provides the shipped resource directory, providers bound to it or to a
scratch directory, and the well-known facts about the embedded certificate.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from cert_fixtures.adapters import companion_file
from cert_fixtures.config import DEFAULT_RESOURCE_DIR
from cert_fixtures.provider import CertificateFixtureProvider, default_provider

RES_DIR = DEFAULT_RESOURCE_DIR

# Facts about the embedded certificate, checked independently with openssl.
EXPECTED_DER_LENGTH = 833
EXPECTED_DER_PREFIX = bytes.fromhex("3082033d30820225")
EXPECTED_SUBJECT = "CN=EE2,DC=ruby-lang,DC=org"
EXPECTED_ISSUER = "CN=CA,DC=ruby-lang,DC=org"
EXPECTED_SHA256 = "b699eba0a974cc2758d2a023866cbb7adeecff53a4d3e65954620322d651f80d"


@pytest.fixture()
def res_dir() -> Path:
    """Return the resource directory shipped inside the package."""
    return RES_DIR


@pytest.fixture()
def provider() -> CertificateFixtureProvider:
    """A provider reading the shipped companion file."""
    return CertificateFixtureProvider()


@pytest.fixture()
def empty_provider(tmp_path: Path) -> CertificateFixtureProvider:
    """A provider pointed at an empty directory (no companion file)."""
    return CertificateFixtureProvider(resource_dir=tmp_path)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Strip CERT_FIXTURES_* variables and reset the cached default provider."""
    for name in ("RESOURCE_DIR", "CERTIFICATE_FILENAME", "LOG_LEVEL"):
        monkeypatch.delenv(f"CERT_FIXTURES_{name}", raising=False)
    default_provider.cache_clear()
    yield monkeypatch
    default_provider.cache_clear()


@pytest.fixture()
def fresh_structlog(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """
    Reset structlog around a test that configures it.

    configure_structlog caches loggers on first use, and a cached module-level
    logger keeps the stdout it was first bound to. The companion file adapter
    gets a throwaway logger for the test so its real one is never cached.
    """
    structlog.reset_defaults()
    monkeypatch.setattr(companion_file, "log", structlog.get_logger())
    yield
    structlog.reset_defaults()
