#!/usr/bin/env python3
"""
Card to YNAB Transaction Matching

Pairs card activity with YNAB transactions by amount and date and classifies
every record. Matching is pure: it reads its inputs, never mutates them and
performs no I/O.

Rules:
- Payments are skipped outright; they are not expenses to mirror.
- Exact match: YNAB amount is the negated card amount and the dates are equal.
- Date tolerance (optional): same amount, YNAB date one day before or after.
- The first YNAB transaction in list order wins; there is no secondary key.
- A matched pair yields an update only when the memo would change.
"""

import logging
from collections.abc import Sequence

from ..card.models import CardTransaction
from ..ynab.models import YnabTransaction
from .models import MatchingResult, TransactionUpdate

logger = logging.getLogger(__name__)


class TransactionMatcher:
    """Matches card transactions against one account's YNAB transactions."""

    def __init__(self, date_tolerance: bool = False):
        """
        Initialize the matcher.

        Args:
            date_tolerance: Also accept YNAB dates one day either side
        """
        self.date_tolerance = date_tolerance

    def match(
        self,
        card_transactions: Sequence[CardTransaction],
        ynab_transactions: Sequence[YnabTransaction],
    ) -> MatchingResult:
        """
        Classify all card and YNAB transactions.

        Args:
            card_transactions: Card activity, newest first
            ynab_transactions: YNAB transactions for the card's account

        Returns:
            MatchingResult partitioning both inputs
        """
        transactions_to_update: list[TransactionUpdate] = []
        unmatched_card: list[CardTransaction] = []
        skipped_payments: list[CardTransaction] = []
        matched_count = 0
        claimed_by: dict[str, int] = {}

        for index, card_tx in enumerate(card_transactions):
            if card_tx.is_payment:
                skipped_payments.append(card_tx)
                continue

            ynab_tx = self._find_exact_match(card_tx, ynab_transactions)
            if ynab_tx is None and self.date_tolerance:
                ynab_tx = self._find_tolerance_match(card_tx, ynab_transactions)

            if ynab_tx is None:
                logger.debug("No match for %s %s on %s", card_tx.payee, card_tx.amount, card_tx.date)
                unmatched_card.append(card_tx)
                continue

            matched_count += 1
            if ynab_tx.id in claimed_by:
                logger.warning(
                    "YNAB transaction %s is matched by card rows %d and %d",
                    ynab_tx.id,
                    claimed_by[ynab_tx.id],
                    index,
                )
            claimed_by.setdefault(ynab_tx.id, index)

            new_memo = card_tx.memo
            if ynab_tx.memo != new_memo:
                transactions_to_update.append(
                    TransactionUpdate(
                        id=ynab_tx.id,
                        memo=new_memo,
                        card_transaction=card_tx,
                        ynab_transaction=ynab_tx,
                    )
                )
            else:
                logger.debug("Memo already current for YNAB transaction %s", ynab_tx.id)

        unmatched_ynab = [
            ynab_tx
            for ynab_tx in ynab_transactions
            if not any(self._is_exact_pair(card_tx, ynab_tx) for card_tx in card_transactions)
        ]

        logger.info(
            "Matching (tolerance %s): %d matched, %d updates, %d new, "
            "%d unmatched in YNAB, %d payments skipped",
            "on" if self.date_tolerance else "off",
            matched_count,
            len(transactions_to_update),
            len(unmatched_card),
            len(unmatched_ynab),
            len(skipped_payments),
        )

        return MatchingResult(
            transactions_to_update=tuple(transactions_to_update),
            unmatched_card_transactions=tuple(unmatched_card),
            unmatched_ynab_transactions=tuple(unmatched_ynab),
            skipped_payments=tuple(skipped_payments),
            matched_count=matched_count,
            date_tolerance=self.date_tolerance,
        )

    @staticmethod
    def _is_exact_pair(card_tx: CardTransaction, ynab_tx: YnabTransaction) -> bool:
        return ynab_tx.amount == card_tx.ynab_amount and ynab_tx.date == card_tx.date

    def _find_exact_match(
        self, card_tx: CardTransaction, ynab_transactions: Sequence[YnabTransaction]
    ) -> YnabTransaction | None:
        """First YNAB transaction with the negated amount on the same date."""
        for ynab_tx in ynab_transactions:
            if self._is_exact_pair(card_tx, ynab_tx):
                logger.debug("Exact match: card %s -> YNAB %s", card_tx.payee, ynab_tx.id)
                return ynab_tx
        return None

    def _find_tolerance_match(
        self, card_tx: CardTransaction, ynab_transactions: Sequence[YnabTransaction]
    ) -> YnabTransaction | None:
        """First YNAB transaction with the negated amount dated one day off."""
        day_before = card_tx.date.shift_days(-1)
        day_after = card_tx.date.shift_days(1)

        for ynab_tx in ynab_transactions:
            if ynab_tx.amount != card_tx.ynab_amount:
                continue
            if ynab_tx.date == day_before or ynab_tx.date == day_after:
                logger.debug(
                    "Date tolerance match: card %s on %s -> YNAB %s on %s",
                    card_tx.payee,
                    card_tx.date,
                    ynab_tx.id,
                    ynab_tx.date,
                )
                return ynab_tx
        return None


def match_transactions(
    card_transactions: Sequence[CardTransaction],
    ynab_transactions: Sequence[YnabTransaction],
    date_tolerance: bool = False,
) -> MatchingResult:
    """
    Match card activity against YNAB transactions.

    Convenience wrapper around TransactionMatcher.

    Args:
        card_transactions: Card activity, newest first
        ynab_transactions: YNAB transactions for the card's account
        date_tolerance: Also accept YNAB dates one day either side

    Returns:
        MatchingResult partitioning both inputs
    """
    return TransactionMatcher(date_tolerance=date_tolerance).match(card_transactions, ynab_transactions)
