from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from redirector.logging_conf import LEVELS

__all__ = [
    "Settings",
    "get_log_level_from_env",
    "get_paths_file_from_env",
    "get_strict_load_from_env",
]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def get_paths_file_from_env() -> Path | None:
    """Return REDIRECT_PATHS_FILE as a path, or None if unset or blank."""
    raw = os.getenv("REDIRECT_PATHS_FILE", "").strip()
    return Path(raw) if raw else None


def get_log_level_from_env() -> str:
    """Return LOG_LEVEL upper-cased, defaulting to INFO."""
    raw = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if raw not in LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LEVELS)}")
    return raw


def get_strict_load_from_env() -> bool:
    """Return REDIRECT_STRICT_LOAD, defaulting to True."""
    raw = os.getenv("REDIRECT_STRICT_LOAD", "true").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError("REDIRECT_STRICT_LOAD must be a boolean (true/false/1/0/yes/no/on/off)")


@dataclass(frozen=True)
class Settings:
    """Startup configuration for the redirect application."""

    paths_file: Path | None = None
    strict_load: bool = True
    log_level: str = "INFO"
    app_version: str = "0.1.0"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            paths_file=get_paths_file_from_env(),
            strict_load=get_strict_load_from_env(),
            log_level=get_log_level_from_env(),
            app_version=os.getenv("APP_VERSION", "0.1.0"),
        )
