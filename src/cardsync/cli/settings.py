#!/usr/bin/env python3
"""
Settings CLI - YNAB Token, Budget and Account

Stores the values cardsync needs to reach the card's YNAB account.
"""

import click

from ..core.config import Config, ConfigurationError, get_config
from ..core.settings import Settings, clear_settings, load_settings, resolve_settings, save_settings


def prompt_for_settings(defaults: Settings | None = None) -> Settings:
    """
    Ask the operator for each setting.

    Raises:
        ConfigurationError: If the prompt is cancelled or a value is left empty
    """
    defaults = defaults or Settings(token="", budget_id="", account_id="")

    try:
        token = click.prompt(
            "YNAB API token",
            default=defaults.token or None,
            hide_input=True,
            show_default=False,
        )
        budget_id = click.prompt("Budget ID", default=defaults.budget_id or None)
        account_id = click.prompt("Account ID (card account)", default=defaults.account_id or None)
    except click.Abort:
        raise ConfigurationError("Settings configuration cancelled") from None

    settings = Settings(token=token.strip(), budget_id=budget_id.strip(), account_id=account_id.strip())
    missing = settings.missing_fields()
    if missing:
        raise ConfigurationError(f"Settings incomplete, missing: {', '.join(missing)}")
    return settings


def ensure_settings(config: Config, interactive: bool = True) -> Settings:
    """
    Return complete settings, prompting for and saving them if needed.

    Args:
        config: Application configuration
        interactive: Prompt when settings are incomplete

    Raises:
        ConfigurationError: If settings are incomplete and cannot be completed
    """
    settings = resolve_settings(config)
    if settings.is_complete():
        return settings

    if not interactive:
        raise ConfigurationError(
            f"YNAB settings missing: {', '.join(settings.missing_fields())}. Run 'cardsync settings' first."
        )

    click.echo("YNAB settings are not configured yet.")
    settings = prompt_for_settings(settings)
    save_settings(settings, config.settings_file)
    return settings


@click.command("settings")
@click.option("--show", is_flag=True, help="Show stored settings (token redacted)")
@click.option("--reset", is_flag=True, help="Delete stored settings")
@click.pass_context
def settings_command(ctx: click.Context, show: bool, reset: bool) -> None:
    """
    Configure the YNAB token, budget and account.

    Examples:
      cardsync settings
      cardsync settings --show
    """
    config = (ctx.obj or {}).get("config") or get_config()

    if reset:
        if clear_settings(config.settings_file):
            click.echo(f"Removed {config.settings_file}")
        else:
            click.echo("No stored settings.")
        return

    if show:
        stored = load_settings(config.settings_file)
        if stored is None:
            click.echo("No stored settings.")
            return
        click.echo(f"Settings file: {config.settings_file}")
        for name, value in stored.redacted().items():
            click.echo(f"  {name}: {value or '(empty)'}")
        return

    try:
        settings = prompt_for_settings(load_settings(config.settings_file))
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    save_settings(settings, config.settings_file)
    click.echo(f"✅ Settings saved to {config.settings_file}")
