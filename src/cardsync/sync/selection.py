#!/usr/bin/env python3
"""
Review Selection

Which proposed edits the operator has chosen to commit. The review state is a
plain immutable value: toggles return a new state and `select` derives the
chosen subset from a MatchingResult without side effects.
"""

from dataclasses import dataclass

from ..card.models import CardTransaction
from ..core.money import Money
from .models import MatchingResult, TransactionUpdate


@dataclass(frozen=True)
class ReviewState:
    """Indices of included updates and new transactions."""

    included_updates: frozenset[int] = frozenset()
    included_new: frozenset[int] = frozenset()

    @classmethod
    def all_selected(cls, result: MatchingResult) -> "ReviewState":
        """Everything included, the default when a result is first shown."""
        return cls(
            included_updates=frozenset(range(len(result.transactions_to_update))),
            included_new=frozenset(range(len(result.unmatched_card_transactions))),
        )

    def toggle_update(self, index: int) -> "ReviewState":
        return ReviewState(
            included_updates=self.included_updates ^ {index},
            included_new=self.included_new,
        )

    def toggle_new(self, index: int) -> "ReviewState":
        return ReviewState(
            included_updates=self.included_updates,
            included_new=self.included_new ^ {index},
        )

    def with_all_updates(self, result: MatchingResult, included: bool) -> "ReviewState":
        updates = frozenset(range(len(result.transactions_to_update))) if included else frozenset()
        return ReviewState(included_updates=updates, included_new=self.included_new)

    def with_all_new(self, result: MatchingResult, included: bool) -> "ReviewState":
        new = frozenset(range(len(result.unmatched_card_transactions))) if included else frozenset()
        return ReviewState(included_updates=self.included_updates, included_new=new)


@dataclass(frozen=True)
class Selection:
    """The approved subset of a MatchingResult, in original order."""

    updates: tuple[TransactionUpdate, ...]
    new_transactions: tuple[CardTransaction, ...]

    @property
    def update_count(self) -> int:
        return len(self.updates)

    @property
    def new_count(self) -> int:
        return len(self.new_transactions)

    @property
    def is_empty(self) -> bool:
        return not self.updates and not self.new_transactions

    @property
    def total_new_amount(self) -> Money:
        """Sum of the selected new transactions, card sign convention."""
        return sum((tx.amount for tx in self.new_transactions), Money.from_milliunits(0))


def select(result: MatchingResult, state: ReviewState) -> Selection:
    """
    Apply a review state to a matching result.

    Indices outside the result are ignored, so a state carried over from a
    previous result never selects something that no longer exists.
    """
    return Selection(
        updates=tuple(
            update
            for index, update in enumerate(result.transactions_to_update)
            if index in state.included_updates
        ),
        new_transactions=tuple(
            tx for index, tx in enumerate(result.unmatched_card_transactions) if index in state.included_new
        ),
    )
