"""
Environment configuration loader with validation for the charter backend.
"""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any

from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Reference airport table shipped with the backend
DEFAULT_AIRPORTS_FILE = Path(__file__).resolve().parent.parent.parent / "data" / "airports.csv"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class CharterConfig(BaseModel):
    """Configuration model for the charter backend with validation."""

    # Database Configuration
    database_url: Optional[str] = Field(
        default=None,
        description="Database connection URL (None lets DatabaseConfig build one)",
    )

    # Reference data
    airports_file: str = Field(
        default=str(DEFAULT_AIRPORTS_FILE), description="Airport reference file (CSV or OpenFlights .dat)"
    )
    airport_search_limit: int = Field(
        default=10, ge=1, le=100, description="Maximum airports returned by a search"
    )

    # API server
    api_host: str = Field(default="127.0.0.1", description="REST API bind address")
    api_port: int = Field(default=8000, ge=1, le=65535, description="REST API port")

    # Runtime
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


def load_config(env_file: Optional[str] = None) -> CharterConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        CharterConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    config_data: Dict[str, Any] = {
        "database_url": os.getenv("DATABASE_URL") or None,
        "airports_file": os.getenv("AIRPORTS_FILE", str(DEFAULT_AIRPORTS_FILE)),
        "airport_search_limit": int(os.getenv("AIRPORT_SEARCH_LIMIT", "10")),
        "api_host": os.getenv("API_HOST", "127.0.0.1"),
        "api_port": int(os.getenv("API_PORT", "8000")),
        "debug": os.getenv("CHARTER_DEBUG", "false").lower() in ("true", "1", "yes", "on"),
        "log_level": os.getenv("CHARTER_LOG_LEVEL", "INFO"),
    }

    try:
        return CharterConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")


def configure_logging(level: str = "INFO") -> None:
    """Apply the process-wide logging format and level."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    logger.debug(f"Logging configured at {level.upper()}")


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the form timestamps are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are assumed to be UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


# Global configuration instance
_config: Optional[CharterConfig] = None


def get_config() -> CharterConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        CharterConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
        logger.info(
            f"Configuration loaded (airports={_config.airports_file}, "
            f"log_level={_config.log_level}, debug={_config.debug})"
        )
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
