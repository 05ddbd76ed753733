"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (BOOKREVIEWS_*)
- Settings are immutable dataclasses
- Single source of truth for all configurable values

EXTENSIBILITY:
- To add another storage backend: add its connection settings here
  and a matching ReviewRepository implementation
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class DatabaseSettings:
    """SQLite storage settings."""

    path: str = field(
        default_factory=lambda: os.getenv("BOOKREVIEWS_DB_PATH", "bookreviews.db")
    )


@dataclass(frozen=True)
class ServerSettings:
    """uvicorn server settings."""

    host: str = field(default_factory=lambda: os.getenv("BOOKREVIEWS_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _env_int("BOOKREVIEWS_PORT", 8000))
    reload: bool = field(default_factory=lambda: _env_bool("BOOKREVIEWS_RELOAD", False))
    log_level: str = field(
        default_factory=lambda: os.getenv("BOOKREVIEWS_LOG_LEVEL", "info").lower()
    )


@dataclass(frozen=True)
class ApiSettings:
    """HTTP surface settings."""

    # Every review route hangs off this path
    resource_root: str = field(
        default_factory=lambda: os.getenv("BOOKREVIEWS_RESOURCE_ROOT", "/BookReviews")
    )

    def __post_init__(self):
        # "BookReviews", "/BookReviews/" -> "/BookReviews"; "/" -> "" (serve at the app root)
        root = self.resource_root.strip().strip("/")
        object.__setattr__(self, "resource_root", f"/{root}" if root else "")


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from book_reviews.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.database.path)
    """

    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    server: ServerSettings = field(default_factory=ServerSettings)
    api: ApiSettings = field(default_factory=ApiSettings)

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        if not 0 < self.server.port < 65536:
            issues.append(f"WARNING: BOOKREVIEWS_PORT out of range: {self.server.port}")

        if self.server.log_level not in LOG_LEVELS:
            issues.append(
                f"WARNING: Unknown BOOKREVIEWS_LOG_LEVEL '{self.server.log_level}'. "
                f"Use one of: {', '.join(LOG_LEVELS)}."
            )

        if self.database.path == ":memory:":
            # A connection is opened per operation, so nothing would survive.
            issues.append(
                "WARNING: BOOKREVIEWS_DB_PATH is ':memory:'. "
                "Reviews will not persist between requests."
            )
        elif not Path(self.database.path).parent.exists():
            issues.append(
                f"WARNING: Database directory not found: {Path(self.database.path).parent}"
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
