"""
Configuration - Paths and merge policy, read from CONFVAULT_* variables.

Example:
    CONFVAULT_STAGING_DIR=/var/lib/archiver/secrets.d
    CONFVAULT_STORE_PATH=/var/lib/archiver/secrets.tsv
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class VaultSettings(BaseSettings):
    """Settings for one archiving run."""

    model_config = SettingsConfigDict(env_prefix="CONFVAULT_", extra="ignore")

    staging_dir: Path = Field(description="Per-run staging directory (wiped at run start)")
    store_path: Path = Field(description="Durable store file")

    malformed_records: Literal["skip", "fail"] = Field(
        default="skip", description="What to do with staging lines that have no tab"
    )
    sort_output: bool = Field(default=True, description="Write store entries sorted by identifier")
    retain_previous: bool = Field(
        default=True, description="Carry entries of the previous store into the merge"
    )
    store_mode: int = Field(default=0o600, description="File mode of the durable store")
    log_level: str = Field(default="WARNING", description="Log level for configure_logging()")

    @field_validator("staging_dir", "store_path")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        return Path(v).expanduser()

    @field_validator("store_mode", mode="before")
    @classmethod
    def parse_store_mode(cls, v) -> int:
        # Modes are octal, as with chmod: "0600" and "600" both mean 0o600
        if isinstance(v, str):
            try:
                v = int(v.strip(), 8)
            except ValueError:
                raise ValueError(f"Invalid octal file mode: {v}")
        if not isinstance(v, int) or isinstance(v, bool) or not 0 <= v <= 0o777:
            raise ValueError(f"File mode out of range: {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic stderr handler for script use."""
    logging.basicConfig(level=getattr(logging, (level or "WARNING").upper()), format=LOG_FORMAT)
