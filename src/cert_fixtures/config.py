"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so a test run can point the companion file lookup
at another directory without touching code:

  CERT_FIXTURES_RESOURCE_DIR=/tmp/fixtures pytest

Load order (highest priority first):
  1. Environment variables (CERT_FIXTURES_ prefix)
  2. .env file at the project root
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cert_fixtures.adapters.companion_file import CERTIFICATE_FILENAME

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

DEFAULT_RESOURCE_DIR = Path(__file__).parent / "res"


class FixtureSettings(BaseSettings):
    """Where the companion certificate file lives, and how loudly to log."""

    model_config = SettingsConfigDict(
        env_prefix="CERT_FIXTURES_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    resource_dir: Path = Field(
        default=DEFAULT_RESOURCE_DIR,
        description="Directory holding the companion certificate file",
    )
    certificate_filename: str = Field(
        default=CERTIFICATE_FILENAME,
        min_length=1,
        description="Companion certificate filename inside resource_dir",
    )
    log_level: str = Field(default="INFO")

    @field_validator("resource_dir")
    @classmethod
    def validate_resource_dir(cls, value: Path) -> Path:
        """Reject a path that names an existing regular file."""
        if value.is_file():
            raise ValueError(f"resource_dir must be a directory, got file: {value}")
        return value

    @field_validator("certificate_filename")
    @classmethod
    def validate_certificate_filename(cls, value: str) -> str:
        """Only a bare filename is allowed, without directory components."""
        if Path(value).name != value or value in (".", ".."):
            raise ValueError(
                f"certificate_filename must be a bare filename, got {value!r}"
            )
        return value

    @property
    def certificate_path(self) -> Path:
        return self.resource_dir / self.certificate_filename
