#!/usr/bin/env python3
"""
YNAB Data Loader

Loads YNAB transactions from a local JSON export, for matching offline
without calling the API.

Functions:
- load_transactions: Load transactions as domain models
- filter_transactions_by_account: Keep one account's transactions
"""

from pathlib import Path
from typing import Any

from ..core.dates import FinancialDate
from ..core.json_utils import read_json
from .models import YnabTransaction


def load_transactions(transactions_file: str | Path) -> list[YnabTransaction]:
    """
    Load YNAB transactions from a JSON file as domain models.

    Accepts a bare array, an object with a "transactions" key, or a raw API
    response ({"data": {"transactions": [...]}}).

    Args:
        transactions_file: Path to the JSON file

    Returns:
        List of YnabTransaction domain models

    Raises:
        FileNotFoundError: If the file does not exist
    """
    transactions_file = Path(transactions_file)

    if not transactions_file.exists():
        raise FileNotFoundError(f"YNAB transactions file not found: {transactions_file}")

    data: Any = read_json(transactions_file)

    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]

    if isinstance(data, dict):
        transactions_list: list[dict[str, Any]] = data.get("transactions", [])
    elif isinstance(data, list):
        transactions_list = data
    else:
        transactions_list = []

    return [YnabTransaction.from_dict(tx) for tx in transactions_list]


def filter_transactions_by_account(
    transactions: list[YnabTransaction],
    account_id: str | None = None,
    since_date: FinancialDate | None = None,
) -> list[YnabTransaction]:
    """
    Filter transactions to one account and, optionally, a start date.

    Deleted transactions are always dropped.

    Args:
        transactions: List of YnabTransaction domain models
        account_id: Account to keep (None keeps all accounts)
        since_date: Drop transactions dated before this

    Returns:
        Filtered list, order preserved
    """
    return [
        tx
        for tx in transactions
        if (account_id is None or tx.account_id == account_id)
        and (since_date is None or tx.date >= since_date)
        and not tx.deleted
    ]
