#!/usr/bin/env python3
"""
Matching Result Models

The classification produced by the matcher. Results are immutable and are
rebuilt from scratch whenever matching options change.
"""

from dataclasses import dataclass
from typing import Any

from ..card.models import CardTransaction
from ..ynab.models import YnabTransaction


@dataclass(frozen=True)
class TransactionUpdate:
    """A matched YNAB transaction whose memo should be replaced."""

    id: str
    memo: str
    card_transaction: CardTransaction
    ynab_transaction: YnabTransaction

    @property
    def old_memo(self) -> str | None:
        return self.ynab_transaction.memo

    def to_payload(self) -> dict[str, Any]:
        """Partial transaction body for the YNAB update call."""
        return {"memo": self.memo}

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "updates": self.to_payload(),
            "old_memo": self.old_memo,
            "card_transaction": self.card_transaction.to_dict(),
            "ynab_transaction": self.ynab_transaction.to_dict(),
        }


@dataclass(frozen=True)
class MatchingResult:
    """
    Partition of card and YNAB transactions into outcome groups.

    Every card transaction is in exactly one of: skipped_payments, matched
    (counted by matched_count; listed in transactions_to_update only when its
    memo changes) or unmatched_card_transactions. unmatched_ynab_transactions
    is informational and never acted on.
    """

    transactions_to_update: tuple[TransactionUpdate, ...]
    unmatched_card_transactions: tuple[CardTransaction, ...]
    unmatched_ynab_transactions: tuple[YnabTransaction, ...]
    skipped_payments: tuple[CardTransaction, ...]
    matched_count: int = 0
    date_tolerance: bool = False

    @property
    def has_changes(self) -> bool:
        return bool(self.transactions_to_update or self.unmatched_card_transactions)

    def summary(self) -> dict[str, int]:
        return {
            "updates": len(self.transactions_to_update),
            "matched": self.matched_count,
            "new": len(self.unmatched_card_transactions),
            "unmatched_ynab": len(self.unmatched_ynab_transactions),
            "skipped_payments": len(self.skipped_payments),
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON reports."""
        return {
            "date_tolerance": self.date_tolerance,
            "summary": self.summary(),
            "transactions_to_update": [update.to_dict() for update in self.transactions_to_update],
            "unmatched_card_transactions": [tx.to_dict() for tx in self.unmatched_card_transactions],
            "unmatched_ynab_transactions": [tx.to_dict() for tx in self.unmatched_ynab_transactions],
            "skipped_payments": [tx.to_dict() for tx in self.skipped_payments],
        }
