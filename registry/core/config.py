"""
Configuration helpers for the account registry.

Only the command line entry points consult these settings; EmailManager and
the JSON storage always receive explicit paths.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = "accounts.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_file: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: str) -> Path:
        raw = (value or "").strip()
        return Path(raw or default)

    return Settings(
        data_file=_path(os.getenv("EMAIL_REGISTRY_DATA_FILE"), DEFAULT_DATA_FILE),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )
