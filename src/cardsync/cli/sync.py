#!/usr/bin/env python3
"""
Sync CLI - Reconcile Card Activity with YNAB

Commands:
- sync: scrape a saved activity page, match against YNAB, review, commit
- match: match against an exported YNAB transactions file and write a report
"""

import asyncio
from datetime import datetime
from pathlib import Path

import click

from ..card.parser import ParseError, parse_card_transactions
from ..card.scraper import load_card_entries
from ..core.config import Config, ConfigurationError, get_config
from ..core.json_utils import write_json
from ..core.settings import Settings, resolve_settings
from ..sync.flow import SyncSession, fetch_session
from ..sync.matcher import match_transactions
from ..sync.selection import ReviewState, Selection, select
from ..ynab.client import YnabApiError, YnabClient
from ..ynab.commit import CommitError, CommitResult, commit_selection
from ..ynab.loader import filter_transactions_by_account, load_transactions
from .review import render_result, review_session
from .settings import ensure_settings


def create_client(config: Config, settings: Settings) -> YnabClient:
    """Build the YNAB client for a run."""
    return YnabClient(
        token=settings.token,
        budget_id=settings.budget_id,
        base_url=config.ynab.base_url,
        timeout=config.ynab.timeout,
    )


async def _fetch(entries: list, config: Config, settings: Settings, current_year: int | None) -> SyncSession:
    async with create_client(config, settings) as client:
        return await fetch_session(entries, client, settings, current_year=current_year)


async def _commit(
    config: Config, settings: Settings, selection: Selection, use_import_ids: bool
) -> CommitResult:
    async with create_client(config, settings) as client:
        return await commit_selection(client, selection, settings.account_id, use_import_ids=use_import_ids)


def _success_message(result: CommitResult) -> str:
    if result.updated and result.created:
        message = f"Updated {result.updated} and created {result.created} transaction(s) successfully."
    elif result.updated:
        message = f"Updated {result.updated} transaction(s) successfully."
    elif result.created:
        message = f"Created {result.created} new transaction(s) successfully."
    else:
        message = "No transactions were written."
    if result.duplicates:
        message += f" Skipped {result.duplicates} already imported transaction(s)."
    return message


@click.command()
@click.option(
    "--html",
    "html_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Saved card activity page",
)
@click.option(
    "--date-tolerance/--no-date-tolerance",
    default=None,
    help="Allow ±1 day date differences when matching",
)
@click.option("--yes", "-y", is_flag=True, help="Commit all proposed edits without interactive review")
@click.option("--dry-run", is_flag=True, help="Review edits but do not write to YNAB")
@click.option(
    "--import-ids/--no-import-ids",
    default=None,
    help="Attach deterministic import ids to created transactions",
)
@click.option("--current-year", type=int, help="Year of the newest activity row (default: this year)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def sync(
    ctx: click.Context,
    html_file: Path,
    date_tolerance: bool | None,
    yes: bool,
    dry_run: bool,
    import_ids: bool | None,
    current_year: int | None,
    verbose: bool,
) -> None:
    """
    Reconcile a saved card activity page with YNAB.

    Examples:
      cardsync sync --html ~/Downloads/activity.html
      cardsync sync --html activity.html --date-tolerance --dry-run
    """
    config = (ctx.obj or {}).get("config") or get_config()
    date_tolerance = config.sync.date_tolerance if date_tolerance is None else date_tolerance
    use_import_ids = config.sync.use_import_ids if import_ids is None else import_ids
    verbose = verbose or (ctx.obj or {}).get("verbose", False)

    try:
        settings = ensure_settings(config)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    entries = load_card_entries(html_file)
    if verbose:
        click.echo(f"Activity page: {html_file}")
        click.echo(f"Rows found: {len(entries)}")
        click.echo(f"Budget: {settings.budget_id}  Account: {settings.account_id}")

    try:
        session = asyncio.run(_fetch(entries, config, settings, current_year))
    except ParseError as e:
        raise click.ClickException(f"Could not parse card activity: {e}") from e
    except YnabApiError as e:
        raise click.ClickException(f"Could not fetch YNAB transactions: {e}") from e

    if session.is_empty:
        click.echo("No card transactions found on the page.")
        return

    if verbose:
        click.echo(
            f"Matching {len(session.card_transactions)} card transaction(s) against "
            f"{len(session.ynab_transactions)} YNAB transaction(s) since {session.earliest_date}"
        )

    if yes:
        result = session.match(date_tolerance=date_tolerance)
        state = ReviewState.all_selected(result)
        render_result(result, state)
        selection = select(result, state)
    else:
        reviewed = review_session(session, date_tolerance=date_tolerance)
        if reviewed is None:
            click.echo("Cancelled. Nothing was written to YNAB.")
            return
        _, selection = reviewed

    if selection.is_empty:
        click.echo("✅ YNAB is already up to date.")
        return

    if dry_run:
        click.echo(
            f"\n💡 Dry run: would update {selection.update_count} "
            f"and create {selection.new_count} transaction(s)."
        )
        return

    try:
        commit_result = asyncio.run(_commit(config, settings, selection, use_import_ids))
    except CommitError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.ClickException(
            "Some edits were applied before the failure. Re-run sync to review what remains."
        ) from e

    click.echo(f"✅ {_success_message(commit_result)}")


@click.command()
@click.option(
    "--html",
    "html_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Saved card activity page",
)
@click.option(
    "--ynab-json",
    "ynab_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Exported YNAB transactions JSON",
)
@click.option("--account-id", help="YNAB account to match against (default: from settings)")
@click.option("--date-tolerance/--no-date-tolerance", default=None, help="Allow ±1 day date differences")
@click.option("--output", "output_file", type=click.Path(dir_okay=False, path_type=Path), help="Report file")
@click.option("--current-year", type=int, help="Year of the newest activity row (default: this year)")
@click.pass_context
def match(
    ctx: click.Context,
    html_file: Path,
    ynab_file: Path,
    account_id: str | None,
    date_tolerance: bool | None,
    output_file: Path | None,
    current_year: int | None,
) -> None:
    """
    Match a saved activity page against exported YNAB transactions.

    Nothing is written to YNAB; the classification is saved as a JSON report.

    Example:
      cardsync match --html activity.html --ynab-json transactions.json
    """
    config = (ctx.obj or {}).get("config") or get_config()
    date_tolerance = config.sync.date_tolerance if date_tolerance is None else date_tolerance
    account_id = account_id or resolve_settings(config).account_id or None

    try:
        card_transactions = parse_card_transactions(load_card_entries(html_file), current_year=current_year)
    except ParseError as e:
        raise click.ClickException(f"Could not parse card activity: {e}") from e

    if not card_transactions:
        click.echo("No card transactions found on the page.")
        return

    ynab_transactions = filter_transactions_by_account(
        load_transactions(ynab_file),
        account_id=account_id,
        since_date=card_transactions[-1].date,
    )

    result = match_transactions(card_transactions, ynab_transactions, date_tolerance=date_tolerance)
    render_result(result, ReviewState.all_selected(result))

    if output_file is None:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        output_file = config.reports_dir / f"{timestamp}_match.json"

    write_json(
        output_file,
        {
            "metadata": {
                "activity_page": str(html_file),
                "ynab_file": str(ynab_file),
                "account_id": account_id,
                "since_date": card_transactions[-1].date.to_iso_string(),
            },
            **result.to_dict(),
        },
    )
    click.echo(f"\n✅ Report saved to {output_file}")
