#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import pytest
from click.testing import CliRunner

from cardsync.cli.main import main
from cardsync.core.config import get_config
from cardsync.core.settings import Settings, load_settings, save_settings


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        """Test cardsync --help shows all registered subcommands."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Card Activity to YNAB Reconciliation" in result.output
        for command in ["sync", "match", "settings", "config", "version"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        """Test cardsync version displays version and author."""
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "cardsync v0.1.0" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self):
        """Test cardsync config displays current configuration."""
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Settings File:" in result.output
        assert "Date Tolerance: False" in result.output
        assert "test-token" not in result.output

    def test_invalid_command_shows_error(self):
        """Test that invalid command shows helpful error."""
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "No such command" in result.output

    def test_verbose_flag_enables_verbose_output(self):
        """Test --verbose flag prints environment details before the command."""
        result = self.runner.invoke(main, ["--verbose", "config"])

        assert result.exit_code == 0
        assert "Data directory:" in result.output
        assert "Current Configuration:" in result.output

    def test_config_env_override_changes_environment(self):
        """Test --config-env flag overrides environment."""
        result = self.runner.invoke(main, ["--config-env", "production", "config"])

        assert result.exit_code == 0
        assert "Environment: production" in result.output

    def test_debug_flag(self):
        """Test --debug reloads configuration at DEBUG level."""
        result = self.runner.invoke(main, ["--debug", "config"])

        assert result.exit_code == 0
        assert "Debug logging enabled" in result.output
        assert "Log Level: DEBUG" in result.output

    def test_invalid_configuration_reported(self, monkeypatch):
        """Test configuration errors are reported as CLI errors."""
        monkeypatch.setenv("YNAB_TIMEOUT", "-1")

        result = self.runner.invoke(main, ["--config-env", "test", "config"])

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output

    def test_subcommand_help_accessible(self):
        """Test that subcommand help is accessible."""
        for subcommand in ["sync", "match", "settings"]:
            result = self.runner.invoke(main, [subcommand, "--help"])
            assert result.exit_code == 0
            assert "Usage:" in result.output


@pytest.mark.integration
class TestSettingsCommand:
    """Test `cardsync settings`."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_prompts_and_saves(self):
        """Test interactive entry stores all three values."""
        result = self.runner.invoke(main, ["settings"], input="new-token\nbudget-2\naccount-3\n")

        assert result.exit_code == 0, result.output
        assert "Settings saved" in result.output
        assert "new-token" not in result.output
        assert load_settings(get_config().settings_file) == Settings(
            token="new-token", budget_id="budget-2", account_id="account-3"
        )

    def test_existing_values_are_defaults(self):
        """Test pressing enter keeps stored values."""
        stored = Settings(token="old-token", budget_id="budget-1", account_id="account-1")
        save_settings(stored, get_config().settings_file)

        result = self.runner.invoke(main, ["settings"], input="\n\naccount-9\n")

        assert result.exit_code == 0, result.output
        assert load_settings(get_config().settings_file) == Settings(
            token="old-token", budget_id="budget-1", account_id="account-9"
        )

    def test_show_redacts_token(self):
        """Test --show never prints the token."""
        save_settings(Settings(token="secret", budget_id="b", account_id="a"), get_config().settings_file)

        result = self.runner.invoke(main, ["settings", "--show"])

        assert result.exit_code == 0
        assert "token: ***REDACTED***" in result.output
        assert "budget_id: b" in result.output
        assert "secret" not in result.output

    def test_show_without_file(self):
        """Test --show with nothing stored."""
        result = self.runner.invoke(main, ["settings", "--show"])

        assert result.exit_code == 0
        assert "No stored settings." in result.output

    def test_reset(self):
        """Test --reset removes the stored file."""
        config = get_config()
        save_settings(Settings(token="t", budget_id="b", account_id="a"), config.settings_file)

        result = self.runner.invoke(main, ["settings", "--reset"])

        assert result.exit_code == 0
        assert "Removed" in result.output
        assert not config.settings_file.exists()
