#!/usr/bin/env python3
"""
Configuration Management for cardsync

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production) with
appropriate logging for each.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_YNAB_BASE_URL = "https://api.ynab.com/v1"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(Exception):
    """Raised when required settings are missing or their entry was cancelled."""

    pass


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class YNABConfig:
    """YNAB API configuration."""

    api_token: str | None = None
    budget_id: str | None = None
    account_id: str | None = None
    base_url: str = DEFAULT_YNAB_BASE_URL
    timeout: int = 30


@dataclass
class SyncConfig:
    """Matching and commit defaults."""

    date_tolerance: bool = False
    # Attach deterministic import ids to created transactions
    use_import_ids: bool = False


@dataclass
class Config:
    """
    Main configuration class for cardsync.

    Loads configuration from environment variables with secure defaults.
    """

    environment: Environment

    data_dir: Path
    settings_file: Path
    reports_dir: Path

    ynab: YNABConfig
    sync: SyncConfig

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("CARDSYNC_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_cardsync"
            data_dir = Path(os.getenv("CARDSYNC_DATA_DIR", str(default_test_dir))).expanduser().resolve()
        else:
            data_dir = Path(os.getenv("CARDSYNC_DATA_DIR", "./data")).expanduser().resolve()

        reports_dir = data_dir / "reports"
        for directory in [data_dir, reports_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        ynab = YNABConfig(
            api_token=os.getenv("YNAB_API_TOKEN") or None,
            budget_id=os.getenv("YNAB_BUDGET_ID") or None,
            account_id=os.getenv("YNAB_ACCOUNT_ID") or None,
            base_url=os.getenv("YNAB_BASE_URL", DEFAULT_YNAB_BASE_URL),
            timeout=int(os.getenv("YNAB_TIMEOUT", "30")),
        )

        sync = SyncConfig(
            date_tolerance=_parse_bool(os.getenv("CARDSYNC_DATE_TOLERANCE", "false")),
            use_import_ids=_parse_bool(os.getenv("CARDSYNC_IMPORT_IDS", "false")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            settings_file=Path(os.getenv("CARDSYNC_SETTINGS_FILE", str(data_dir / "settings.json"))),
            reports_dir=reports_dir,
            ynab=ynab,
            sync=sync,
            debug=_parse_bool(os.getenv("DEBUG", "false")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if self.ynab.timeout <= 0:
            errors.append("YNAB timeout must be positive")

        if not self.ynab.base_url.startswith(("http://", "https://")):
            errors.append(f"YNAB base URL must be http(s): {self.ynab.base_url}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = logging.DEBUG if self.debug else getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # httpx logs every request at INFO
        if self.environment != Environment.DEVELOPMENT:
            logging.getLogger("httpx").setLevel(logging.WARNING)
            logging.getLogger("httpcore").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list[str]:
        """Get list of field names that contain sensitive data."""
        return ["ynab.api_token"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if (
                        not include_sensitive
                        and full_field_name in self.get_sensitive_fields()
                        and nested_value is not None
                    ):
                        nested_dict[nested_name] = "***REDACTED***"
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Raises:
        ConfigurationError: If the environment produces an invalid configuration
    """
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
