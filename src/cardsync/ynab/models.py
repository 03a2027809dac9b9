#!/usr/bin/env python3
"""
YNAB Domain Models

Type-safe models for the subset of the YNAB transaction API cardsync reads
and writes. Amounts use Money (milliunits) and dates use FinancialDate.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money

CLEARED = "cleared"
UNCLEARED = "uncleared"


@dataclass(frozen=True)
class YnabTransaction:
    """
    YNAB transaction from API.

    Outflows are negative, the opposite of the card activity convention.
    """

    id: str
    date: FinancialDate
    amount: Money
    memo: str | None
    cleared: str  # "cleared", "uncleared", "reconciled"
    approved: bool
    account_id: str
    account_name: str | None = None
    payee_id: str | None = None
    payee_name: str | None = None
    category_id: str | None = None
    category_name: str | None = None
    import_id: str | None = None
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabTransaction":
        """
        Create YnabTransaction from API dict.

        Args:
            data: Transaction object from the YNAB API

        Returns:
            YnabTransaction instance
        """
        return cls(
            id=data["id"],
            date=FinancialDate.from_string(data["date"]),
            amount=Money.from_milliunits(data["amount"]),
            memo=data.get("memo"),
            cleared=data.get("cleared", UNCLEARED),
            approved=data.get("approved", True),
            account_id=data.get("account_id", "unknown"),
            account_name=data.get("account_name"),
            payee_id=data.get("payee_id"),
            payee_name=data.get("payee_name"),
            category_id=data.get("category_id"),
            category_name=data.get("category_name"),
            import_id=data.get("import_id"),
            deleted=data.get("deleted", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the API dict shape."""
        return {
            "id": self.id,
            "date": self.date.to_ynab_format(),
            "amount": self.amount.to_milliunits(),
            "memo": self.memo,
            "cleared": self.cleared,
            "approved": self.approved,
            "account_id": self.account_id,
            "account_name": self.account_name,
            "payee_id": self.payee_id,
            "payee_name": self.payee_name,
            "category_id": self.category_id,
            "category_name": self.category_name,
            "import_id": self.import_id,
            "deleted": self.deleted,
        }
