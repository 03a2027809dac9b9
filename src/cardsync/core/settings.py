#!/usr/bin/env python3
"""
YNAB Connection Settings

The three values needed to talk to YNAB: a personal access token, the budget
id and the id of the card's account. They are persisted as a small JSON file
in the data directory; environment variables take precedence over the file.
Validity is only checked as "non-empty" here; a bad token surfaces as an API
error on the first YNAB call.
"""

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from .config import Config
from .json_utils import read_json, write_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Credentials and identifiers for the target YNAB account."""

    token: str
    budget_id: str
    account_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        return cls(
            token=str(data.get("token") or ""),
            budget_id=str(data.get("budget_id") or ""),
            account_id=str(data.get("account_id") or ""),
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def missing_fields(self) -> list[str]:
        """Names of fields that are empty."""
        return [name for name, value in asdict(self).items() if not value.strip()]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def redacted(self) -> dict[str, str]:
        """Dictionary form safe for display."""
        data = self.to_dict()
        if data["token"]:
            data["token"] = "***REDACTED***"
        return data


def load_settings(path: str | Path) -> Settings | None:
    """
    Load stored settings.

    Returns:
        Settings, or None when the file is missing or not a JSON object
    """
    path = Path(path)
    if not path.exists():
        return None

    try:
        data = read_json(path)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return None

    return Settings.from_dict(data)


def save_settings(settings: Settings, path: str | Path) -> None:
    """Persist settings, readable by the current user only."""
    path = Path(path)
    write_json(path, settings.to_dict())
    os.chmod(path, 0o600)
    logger.info("Saved settings to %s", path)


def clear_settings(path: str | Path) -> bool:
    """Delete stored settings. Returns True if a file was removed."""
    path = Path(path)
    if path.exists():
        path.unlink()
        return True
    return False


def resolve_settings(config: Config) -> Settings:
    """
    Combine stored settings with environment overrides.

    Any YNAB_API_TOKEN / YNAB_BUDGET_ID / YNAB_ACCOUNT_ID value from the
    configuration replaces the stored one. The result may be incomplete.
    """
    stored = load_settings(config.settings_file) or Settings(token="", budget_id="", account_id="")

    return Settings(
        token=config.ynab.api_token or stored.token,
        budget_id=config.ynab.budget_id or stored.budget_id,
        account_id=config.ynab.account_id or stored.account_id,
    )
