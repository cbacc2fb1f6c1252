"""Configuration management for booksearch.

Loads configuration from environment variables and provides defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_PRIMARY_URL = "https://api2.isbndb.com"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Application configuration."""

    # Primary catalog (ISBNdb or a proxy in front of it)
    isbndb_api_key: Optional[str]
    primary_base_url: str

    # Secondary catalog
    google_books_api_key: Optional[str]

    # HTTP
    timeout: float  # seconds

    # Search behaviour
    offline_fallback: bool

    # Logging
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            isbndb_api_key=os.environ.get("ISBNDB_API_KEY") or None,
            primary_base_url=os.environ.get(
                "BOOKSEARCH_PRIMARY_URL", DEFAULT_PRIMARY_URL
            ).rstrip("/"),
            google_books_api_key=os.environ.get("GOOGLE_BOOKS_API_KEY") or None,
            timeout=float(os.environ.get("BOOKSEARCH_TIMEOUT", "10")),
            offline_fallback=os.environ.get(
                "BOOKSEARCH_OFFLINE_FALLBACK", "false"
            ).strip().lower() in _TRUTHY,
            log_level=os.environ.get("BOOKSEARCH_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if self.timeout <= 0:
            errors.append(f"Timeout must be positive, got {self.timeout}")

        if not self.primary_base_url.startswith(("http://", "https://")):
            errors.append(f"Invalid primary catalog URL: {self.primary_base_url}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def has_primary_key(self) -> bool:
        """Check if an ISBNdb API key is present."""
        return bool(self.isbndb_api_key)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
