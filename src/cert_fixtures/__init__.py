"""
cert_fixtures — an embedded X.509 certificate for test suites.

Provides one fixed certificate in several representations (DER bytes,
PEM text, a file handle on an on-disk DER copy) plus helpers that turn
hex-digit strings into byte buffers and streams.
"""

__version__ = "0.1.0"
