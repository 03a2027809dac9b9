#!/usr/bin/env python3
"""
Commit Approved Edits to YNAB

Applies an operator-approved Selection: memo updates first, in list order,
then new transactions oldest first so they reach YNAB in chronological order.
Each edit is one awaited API call. There is no batching and no rollback; the
first failure stops the commit and reports how much had already been applied.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..card.models import CardTransaction
from ..sync.selection import Selection
from .client import YnabApiError, YnabClient
from .models import CLEARED, UNCLEARED

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitResult:
    """Counts of applied edits."""

    updated: int = 0
    created: int = 0
    # Creates YNAB skipped because the import id already existed
    duplicates: int = 0

    @property
    def total(self) -> int:
        return self.updated + self.created


class CommitError(Exception):
    """
    Raised when a YNAB write fails part-way through a commit.

    Edits counted in `applied` were written and remain in YNAB.
    """

    def __init__(self, applied: CommitResult, cause: YnabApiError):
        super().__init__(
            f"Commit stopped after {applied.updated} update(s) and {applied.created} creation(s): {cause}"
        )
        self.applied = applied
        self.cause = cause


def build_create_payload(
    card_tx: CardTransaction, account_id: str, use_import_id: bool = False
) -> dict[str, Any]:
    """
    YNAB transaction body for a card transaction with no YNAB counterpart.

    Args:
        card_tx: Unmatched card transaction
        account_id: YNAB account to create it in
        use_import_id: Attach the deterministic import id

    Returns:
        Transaction payload in YNAB sign convention
    """
    payload: dict[str, Any] = {
        "account_id": account_id,
        "date": card_tx.date.to_ynab_format(),
        "amount": card_tx.ynab_amount.to_milliunits(),
        "payee_name": card_tx.payee,
        "memo": card_tx.memo,
        "cleared": CLEARED if card_tx.is_posted else UNCLEARED,
    }
    if use_import_id:
        payload["import_id"] = card_tx.import_id
    return payload


async def commit_selection(
    client: YnabClient,
    selection: Selection,
    account_id: str,
    use_import_ids: bool = False,
) -> CommitResult:
    """
    Write the selected edits to YNAB.

    Args:
        client: Open YNAB client
        selection: Approved updates and new transactions
        account_id: YNAB account for new transactions
        use_import_ids: Attach deterministic import ids to new transactions

    Returns:
        CommitResult with counts of applied edits

    Raises:
        CommitError: On the first failed write; earlier writes stay applied
    """
    updated = 0
    created = 0
    duplicates = 0

    try:
        for update in selection.updates:
            logger.info("Updating transaction %s with new memo", update.id)
            await client.update_transaction(update.id, update.to_payload())
            updated += 1

        # Card activity is newest first; create oldest first
        for card_tx in reversed(selection.new_transactions):
            payload = build_create_payload(card_tx, account_id, use_import_id=use_import_ids)
            logger.info("Creating new transaction for %s on %s", card_tx.payee, payload["date"])
            if await client.create_transaction(payload) is None:
                duplicates += 1
            else:
                created += 1
    except YnabApiError as e:
        applied = CommitResult(updated=updated, created=created, duplicates=duplicates)
        logger.error("Commit failed: %s", e)
        raise CommitError(applied, e) from e

    logger.info("Updated %d and created %d transaction(s)", updated, created)
    return CommitResult(updated=updated, created=created, duplicates=duplicates)
