#!/usr/bin/env python3
"""
Unit tests for stored YNAB settings.
"""

import json
import stat

import pytest

from cardsync.core.config import reload_config
from cardsync.core.settings import (
    Settings,
    clear_settings,
    load_settings,
    resolve_settings,
    save_settings,
)


class TestSettingsModel:
    """Test the Settings value type."""

    def test_complete(self):
        """Test a fully populated settings value."""
        settings = Settings(token="t", budget_id="b", account_id="a")

        assert settings.is_complete()
        assert settings.missing_fields() == []

    def test_missing_fields_treat_whitespace_as_empty(self):
        """Test blank values count as missing."""
        settings = Settings(token="  ", budget_id="b", account_id="")

        assert not settings.is_complete()
        assert settings.missing_fields() == ["token", "account_id"]

    def test_from_dict_tolerates_missing_and_null(self):
        """Test partial dictionaries."""
        settings = Settings.from_dict({"token": "t", "budget_id": None})

        assert settings == Settings(token="t", budget_id="", account_id="")

    def test_redacted(self):
        """Test the token is hidden for display."""
        redacted = Settings(token="secret", budget_id="b", account_id="a").redacted()

        assert redacted == {"token": "***REDACTED***", "budget_id": "b", "account_id": "a"}
        assert Settings(token="", budget_id="b", account_id="a").redacted()["token"] == ""


class TestSettingsPersistence:
    """Test saving, loading and clearing the settings file."""

    def test_save_and_load(self, temp_dir):
        """Test settings survive a save/load cycle with owner-only permissions."""
        path = temp_dir / "nested" / "settings.json"
        settings = Settings(token="t", budget_id="b", account_id="a")

        save_settings(settings, path)

        assert load_settings(path) == settings
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_load_missing_file(self, temp_dir):
        """Test a missing file loads as None."""
        assert load_settings(temp_dir / "absent.json") is None

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
    def test_load_unusable_file(self, temp_dir, content, caplog):
        """Test unreadable or non-object files are ignored with a warning."""
        path = temp_dir / "settings.json"
        path.write_text(content)

        assert load_settings(path) is None
        assert "Ignoring" in caplog.text

    def test_load_non_utf8_file(self, temp_dir, caplog):
        """Test a file that is not valid UTF-8 is ignored with a warning."""
        path = temp_dir / "settings.json"
        path.write_bytes(b"\xff\xfe{")

        assert load_settings(path) is None
        assert "Ignoring" in caplog.text

    def test_clear(self, temp_dir):
        """Test clearing removes the file once."""
        path = temp_dir / "settings.json"
        save_settings(Settings(token="t", budget_id="b", account_id="a"), path)

        assert clear_settings(path) is True
        assert not path.exists()
        assert clear_settings(path) is False


class TestResolveSettings:
    """Test combining stored settings with environment overrides."""

    def test_environment_overrides_stored(self, monkeypatch):
        """Test env values win and stored values fill the gaps."""
        monkeypatch.delenv("YNAB_BUDGET_ID")
        monkeypatch.delenv("YNAB_ACCOUNT_ID")
        config = reload_config()
        stored = Settings(token="stored", budget_id="stored-budget", account_id="")
        save_settings(stored, config.settings_file)

        settings = resolve_settings(config)

        assert settings == Settings(token="test-token", budget_id="stored-budget", account_id="")
        assert settings.missing_fields() == ["account_id"]

    def test_nothing_stored(self, monkeypatch):
        """Test resolution without a settings file."""
        for name in ("YNAB_API_TOKEN", "YNAB_BUDGET_ID", "YNAB_ACCOUNT_ID"):
            monkeypatch.delenv(name)

        settings = resolve_settings(reload_config())

        assert settings.missing_fields() == ["token", "budget_id", "account_id"]

    def test_stored_file_contents(self):
        """Test the stored file is plain JSON with the three fields."""
        config = reload_config()
        save_settings(Settings(token="t", budget_id="b", account_id="a"), config.settings_file)

        expected = {"token": "t", "budget_id": "b", "account_id": "a"}
        assert json.loads(config.settings_file.read_text()) == expected
