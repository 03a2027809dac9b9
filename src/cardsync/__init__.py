"""
cardsync - Card Activity to YNAB Reconciliation

Mirrors a store card's activity listing into its YNAB account: existing YNAB
transactions get the card's item descriptions as memos, and card charges that
YNAB does not have yet are created. Every proposed edit is reviewed before it
is written.

Domain Packages:
- core: Currency, dates, configuration and settings
- card: Activity page scraping and parsing
- ynab: YNAB API client, models and commit driver
- sync: Matching and review selection
- cli: Command-line interface

Example Usage:
    from cardsync.card import load_card_entries, parse_card_transactions
    from cardsync.sync import match_transactions
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.money import Money
from .sync.matcher import match_transactions
from .sync.models import MatchingResult

__all__ = [
    "Environment",
    "MatchingResult",
    "Money",
    "get_config",
    "match_transactions",
]
