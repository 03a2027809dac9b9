#!/usr/bin/env python3
"""
Sync Session

Ties the pieces of one reconciliation run together: parse the scraped rows,
fetch the YNAB transactions they could correspond to, and match on demand.
The session holds only materialized inputs; every call to `match` builds a
fresh MatchingResult.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..card.models import CardTransaction, RawCardEntry
from ..card.parser import parse_card_transactions
from ..core.dates import FinancialDate
from ..core.settings import Settings
from ..ynab.client import YnabClient
from ..ynab.models import YnabTransaction
from .matcher import match_transactions
from .models import MatchingResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncSession:
    """Inputs of one run: card activity and the YNAB transactions it may match."""

    card_transactions: tuple[CardTransaction, ...]
    ynab_transactions: tuple[YnabTransaction, ...]

    @property
    def earliest_date(self) -> FinancialDate | None:
        """Date of the oldest card transaction (last on the page)."""
        if not self.card_transactions:
            return None
        return self.card_transactions[-1].date

    @property
    def is_empty(self) -> bool:
        return not self.card_transactions

    def match(self, date_tolerance: bool = False) -> MatchingResult:
        """Classify the session's transactions from scratch."""
        return match_transactions(
            self.card_transactions, self.ynab_transactions, date_tolerance=date_tolerance
        )


async def fetch_session(
    entries: Sequence[RawCardEntry],
    client: YnabClient,
    settings: Settings,
    current_year: int | None = None,
) -> SyncSession:
    """
    Parse scraped rows and fetch the matching window from YNAB.

    YNAB is queried from the earliest card date onward and restricted to the
    configured account. Nothing is fetched when the page has no rows.

    Args:
        entries: Raw activity rows, newest first
        client: Open YNAB client
        settings: Target account settings
        current_year: Year of the newest row (default: this year)

    Raises:
        ParseError: If any row cannot be parsed (before any request is made)
        YnabApiError: If the fetch fails
    """
    card_transactions = parse_card_transactions(entries, current_year=current_year)
    if not card_transactions:
        logger.info("No card activity found; nothing to fetch")
        return SyncSession(card_transactions=(), ynab_transactions=())

    since_date = card_transactions[-1].date
    ynab_transactions = await client.list_transactions(since_date, account_id=settings.account_id)

    return SyncSession(
        card_transactions=tuple(card_transactions),
        ynab_transactions=tuple(ynab_transactions),
    )
