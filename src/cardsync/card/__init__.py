"""
Card Activity Package

Reads the card issuer's activity listing and normalizes it.

Key Components:
- scraper: lifts raw rows out of a saved activity page (BeautifulSoup)
- parser: converts raw rows into CardTransaction objects, inferring years
- models: RawCardEntry and CardTransaction

The activity page shows dates without a year and lists rows newest first, so
years are reconstructed from month roll-backs while walking the listing.
"""

from .models import MEMO_MAX_LENGTH, CardTransaction, RawCardEntry
from .parser import ParseError, parse_card_entry, parse_card_transactions
from .scraper import load_card_entries, scrape_card_entries

__all__ = [
    "MEMO_MAX_LENGTH",
    "CardTransaction",
    "ParseError",
    "RawCardEntry",
    "load_card_entries",
    "parse_card_entry",
    "parse_card_transactions",
    "scrape_card_entries",
]
