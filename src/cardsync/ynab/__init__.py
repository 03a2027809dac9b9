"""
YNAB Integration Package

Reads and writes transactions in the YNAB account that mirrors the card.

This package provides:
- YnabTransaction domain model
- Async API client (list, create, update) with bearer-token auth
- Offline loading of exported transaction JSON
- Commit driver that applies approved edits in a fixed order

Safety Features:
- Nothing is written until the operator approves a selection
- Writes are sequential; a failure stops the commit and reports progress
- Optional deterministic import ids so YNAB rejects repeated creates
"""

from .client import YnabApiError, YnabClient
from .commit import CommitError, CommitResult, build_create_payload, commit_selection
from .loader import filter_transactions_by_account, load_transactions
from .models import CLEARED, UNCLEARED, YnabTransaction

__all__ = [
    "CLEARED",
    "UNCLEARED",
    "CommitError",
    "CommitResult",
    "YnabApiError",
    "YnabClient",
    "YnabTransaction",
    "build_create_payload",
    "commit_selection",
    "filter_transactions_by_account",
    "load_transactions",
]
