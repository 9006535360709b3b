"""
Application entry point — regenerates the companion certificate file.

Responsibilities:
  1. Load and validate configuration from environment
  2. Configure structlog for structured logging
  3. Write the DER encoding of the embedded certificate into the
     configured resource directory

Run as `cert-fixtures` (console script) or `python -m cert_fixtures.main`.
Point CERT_FIXTURES_RESOURCE_DIR elsewhere to materialise the file into
another test tree.
"""

from __future__ import annotations

import logging
import sys

import structlog

from cert_fixtures import __version__
from cert_fixtures.config import FixtureSettings
from cert_fixtures.provider import CertificateFixtureProvider


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for structured, human-readable console logging.

    Unknown level names fall back to INFO.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def main() -> None:
    """Load settings and write the companion certificate file."""
    try:
        settings = FixtureSettings()
    except Exception as e:
        print(f"FATAL: Configuration error: {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    log.info(
        "app.starting",
        version=__version__,
        log_level=settings.log_level,
        resource_dir=str(settings.resource_dir),
    )

    provider = CertificateFixtureProvider.from_settings(settings)
    try:
        path = provider.write_companion()
    except OSError as e:
        log.error("app.write_failed", path=str(provider.certificate_path), error=str(e))
        sys.exit(1)

    log.info("app.done", path=str(path), matches=provider.companion_matches())


if __name__ == "__main__":
    main()
