#!/usr/bin/env python3
"""
Terminal Review of Proposed Edits

Shows a MatchingResult and lets the operator include or exclude individual
edits, switch date tolerance (which re-runs matching) and confirm or cancel.
All state lives in the ReviewState value threaded through the loop.
"""

import click

from ..sync.flow import SyncSession
from ..sync.models import MatchingResult
from ..sync.selection import ReviewState, Selection, select

HELP_TEXT = """Commands:
  c            confirm and commit the selected edits
  q            cancel without writing anything
  t            toggle ±1 day date tolerance and re-run matching
  u N / n N    toggle update N / new transaction N
  u all|none   select all / no updates (same for n)
  ?            show this help"""


def _short(text: str | None, width: int = 40) -> str:
    if not text:
        return "(none)"
    flat = " / ".join(line.strip() for line in text.splitlines() if line.strip())
    return flat if len(flat) <= width else flat[: width - 1] + "…"


def _checkbox(selected: bool) -> str:
    return "[x]" if selected else "[ ]"


def render_result(result: MatchingResult, state: ReviewState) -> None:
    """Print the classified result with the current selection."""
    selection = select(result, state)

    click.echo()
    if result.transactions_to_update:
        click.secho(
            f"Transactions to update "
            f"({selection.update_count} of {len(result.transactions_to_update)} selected)",
            bold=True,
        )
        for index, update in enumerate(result.transactions_to_update):
            card_tx = update.card_transaction
            click.echo(
                f"  {_checkbox(index in state.included_updates)} u{index + 1:<3} {card_tx.date}  "
                f"{card_tx.amount.abs()!s:>10}  {card_tx.payee[:24]:<24}  "
                f"{_short(update.old_memo)} -> {_short(update.memo)}"
            )
    else:
        click.echo("No transactions need updating.")

    if result.unmatched_card_transactions:
        click.echo()
        click.secho(
            f"New transactions ({selection.new_count} of {len(result.unmatched_card_transactions)} selected, "
            f"total {selection.total_new_amount})",
            bold=True,
        )
        for index, card_tx in enumerate(result.unmatched_card_transactions):
            click.echo(
                f"  {_checkbox(index in state.included_new)} n{index + 1:<3} {card_tx.date}  "
                f"{card_tx.amount.abs()!s:>10}  {card_tx.payee[:24]:<24}  {card_tx.status:<10} "
                f"{_short(card_tx.description)}"
            )

    if result.unmatched_ynab_transactions:
        click.echo()
        click.secho(
            f"YNAB transactions with no card match "
            f"({len(result.unmatched_ynab_transactions)}, informational)",
            dim=True,
        )
        for ynab_tx in result.unmatched_ynab_transactions:
            click.echo(
                f"        {ynab_tx.date}  {ynab_tx.amount.abs()!s:>10}  "
                f"{(ynab_tx.payee_name or '')[:24]:<24}  {_short(ynab_tx.memo)}"
            )

    if result.skipped_payments:
        click.echo()
        click.secho(f"Skipped payments ({len(result.skipped_payments)})", dim=True)
        for payment in result.skipped_payments:
            click.echo(f"        {payment.date}  {payment.amount.abs()!s:>10}")

    click.echo()
    click.echo(f"Date tolerance: {'on' if result.date_tolerance else 'off'}")
    click.echo(f"Confirm will apply {selection.update_count} update(s) and {selection.new_count} new.")


def _apply_toggle(command: str, argument: str, result: MatchingResult, state: ReviewState) -> ReviewState:
    """Apply a `u`/`n` command. Raises click.BadParameter on bad input."""
    size = len(result.transactions_to_update) if command == "u" else len(result.unmatched_card_transactions)

    if argument in ("all", "none"):
        include = argument == "all"
        if command == "u":
            return state.with_all_updates(result, include)
        return state.with_all_new(result, include)

    if not argument.isdigit() or not 1 <= int(argument) <= size:
        raise click.BadParameter(f"expected a number from 1 to {size}, 'all' or 'none'")

    index = int(argument) - 1
    return state.toggle_update(index) if command == "u" else state.toggle_new(index)


def review_session(
    session: SyncSession, date_tolerance: bool = False
) -> tuple[MatchingResult, Selection] | None:
    """
    Interactively review a session's proposed edits.

    Args:
        session: Parsed and fetched inputs
        date_tolerance: Initial tolerance setting

    Returns:
        (result, approved selection), or None if the operator cancelled.
        The selection is empty when the result has nothing to change.
    """
    result = session.match(date_tolerance=date_tolerance)
    state = ReviewState.all_selected(result)
    render_result(result, state)

    # Tolerance cannot add changes when every row already matched
    if not result.has_changes:
        return result, select(result, state)

    while True:
        raw = click.prompt("Action (? for help)", default="c", show_default=True).strip().lower()
        command, _, argument = raw.partition(" ")
        argument = argument.strip()

        if command == "c":
            selection = select(result, state)
            if selection.is_empty:
                click.echo("Nothing selected.")
                continue
            return result, selection
        elif command == "q":
            return None
        elif command == "t":
            result = session.match(date_tolerance=not result.date_tolerance)
            state = ReviewState.all_selected(result)
        elif command in ("u", "n"):
            try:
                state = _apply_toggle(command, argument, result, state)
            except click.BadParameter as e:
                click.echo(f"Invalid selection: {e.message}")
                continue
        elif command == "?":
            click.echo(HELP_TEXT)
            continue
        else:
            click.echo(f"Unknown command: {raw!r}. Type ? for help.")
            continue

        render_result(result, state)
