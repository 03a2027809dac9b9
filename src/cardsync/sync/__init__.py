"""
Reconciliation Package

Matches card activity to YNAB transactions and tracks which proposed edits
the operator approved.

Key Components:
- matcher: pure amount + date matching with optional one-day tolerance
- models: TransactionUpdate and MatchingResult
- selection: immutable review state and the approved subset
- flow: one run's inputs (parsed card rows + fetched YNAB window)
"""

from .flow import SyncSession, fetch_session
from .matcher import TransactionMatcher, match_transactions
from .models import MatchingResult, TransactionUpdate
from .selection import ReviewState, Selection, select

__all__ = [
    "MatchingResult",
    "ReviewState",
    "Selection",
    "SyncSession",
    "TransactionMatcher",
    "TransactionUpdate",
    "fetch_session",
    "match_transactions",
    "select",
]
