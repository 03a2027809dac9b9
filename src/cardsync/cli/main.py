#!/usr/bin/env python3
"""
Main CLI Entry Point for cardsync

Provides the command-line interface for reconciling card activity with YNAB.
"""

import logging
import os

import click

from ..core.config import ConfigurationError, get_config, reload_config
from .settings import settings_command
from .sync import match, sync


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    cardsync - Card Activity to YNAB Reconciliation

    Copies item descriptions from a saved card activity page into matching
    YNAB transactions and creates the ones YNAB is missing.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["CARDSYNC_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("cardsync").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from cardsync import __author__, __version__

    click.echo(f"cardsync v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Settings File: {config_obj.settings_file}")
    click.echo(f"  Reports Directory: {config_obj.reports_dir}")
    click.echo(f"  YNAB API: {config_obj.ynab.base_url}")
    click.echo(f"  Date Tolerance: {config_obj.sync.date_tolerance}")
    click.echo(f"  Import IDs: {config_obj.sync.use_import_ids}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


main.add_command(sync)
main.add_command(match)
main.add_command(settings_command)


if __name__ == "__main__":
    main()
