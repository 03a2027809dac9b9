#!/usr/bin/env python3
"""
Card Activity Domain Models

Raw entries as scraped from the activity page, and the canonical card
transaction they are parsed into.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money

MEMO_MAX_LENGTH = 500
IMPORT_ID_PREFIX = "CARDSYNC"


@dataclass(frozen=True)
class RawCardEntry:
    """
    One activity row exactly as scraped.

    Labels are None when the page did not contain the element they come from.
    """

    type_label: str | None
    date_label: str | None
    description_fragments: tuple[str, ...] = field(default_factory=tuple)
    status_label: str | None = None
    amount_text: str | None = None


@dataclass(frozen=True)
class CardTransaction:
    """
    Canonical card transaction.

    Amounts follow the card convention: purchases are positive, credits are
    negative. YNAB uses the opposite sign.
    """

    type: str
    date: FinancialDate
    payee: str
    description: str
    status: str
    amount: Money
    # 1-based position among transactions with the same amount and date, oldest first
    occurrence: int = 1

    @property
    def is_payment(self) -> bool:
        return self.type.strip().lower() == "payment"

    @property
    def is_posted(self) -> bool:
        return self.status.strip().lower() == "posted"

    @property
    def memo(self) -> str:
        """Memo text for YNAB, truncated to the API limit."""
        return self.description[:MEMO_MAX_LENGTH]

    @property
    def ynab_amount(self) -> Money:
        """Amount in YNAB sign convention."""
        return -self.amount

    @property
    def import_id(self) -> str:
        """Deterministic YNAB import id, e.g. CARDSYNC:-12990:2024-03-05:1."""
        amount = self.ynab_amount.to_milliunits()
        return f"{IMPORT_ID_PREFIX}:{amount}:{self.date.to_iso_string()}:{self.occurrence}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.type,
            "date": self.date.to_iso_string(),
            "payee": self.payee,
            "description": self.description,
            "status": self.status,
            "amount": self.amount.to_milliunits(),
            "occurrence": self.occurrence,
        }
