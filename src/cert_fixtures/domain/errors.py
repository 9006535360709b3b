"""
Exception hierarchy for cert_fixtures.

Errors are raised where the failure is detected and propagate to the caller.
A missing companion file surfaces as the builtin FileNotFoundError and is
never wrapped.
"""

from __future__ import annotations


class FixtureError(Exception):
    """Base class for every error raised by cert_fixtures."""


class HexFormatError(FixtureError, ValueError):
    """Hex input has an odd length or contains a non-hex character."""


class CertificateEncodingError(FixtureError, ValueError):
    """Certificate data on disk is neither DER nor PEM certificate content."""
