#!/usr/bin/env python3
"""
Card Activity Record Parser

Turns raw scraped rows into canonical CardTransaction objects.

Parsing is all-or-nothing: a row missing a required element, or carrying a
date or amount that cannot be read, aborts the whole run with ParseError.
Guessing at financial values would silently produce wrong amounts.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import replace

from ..core.currency import parse_currency_to_milliunits
from ..core.dates import FinancialDate, infer_years, parse_month_day
from ..core.money import Money
from .models import CardTransaction, RawCardEntry

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when a scraped activity row cannot be parsed safely."""

    pass


def _require(value: str | None, element: str, index: int | None) -> str:
    if value is None:
        location = f"row {index}" if index is not None else "row"
        raise ParseError(f"Required element not found in {location}: {element}")
    return value


def parse_date_label(entry: RawCardEntry, index: int | None = None) -> tuple[int, int]:
    """
    Read the (month, day) pair from an entry's date label.

    Raises:
        ParseError: If the label is missing or malformed
    """
    label = _require(entry.date_label, "date", index)
    try:
        return parse_month_day(label)
    except ValueError as e:
        raise ParseError(f"Invalid date in row {index}: {e}") from e


def parse_card_entry(
    entry: RawCardEntry,
    year: int,
    index: int | None = None,
    month_day: tuple[int, int] | None = None,
) -> CardTransaction:
    """
    Parse one raw entry into a CardTransaction.

    The first description fragment is the payee; the remaining fragments,
    joined with newlines, are the description.

    Args:
        entry: Raw scraped row
        year: Year to place the yearless date in
        index: Position of the row on the page, for error messages
        month_day: Already-parsed date label, if the caller has one

    Raises:
        ParseError: If a required element is missing or unreadable
    """
    month, day = month_day if month_day is not None else parse_date_label(entry, index)

    type_label = _require(entry.type_label, "type", index)
    status_label = _require(entry.status_label, "status", index)
    amount_text = _require(entry.amount_text, "amount", index)

    try:
        date = FinancialDate.from_parts(year, month, day)
    except ValueError as e:
        raise ParseError(f"Invalid date in row {index}: {entry.date_label!r} ({e})") from e

    try:
        amount = Money.from_milliunits(parse_currency_to_milliunits(amount_text))
    except ValueError as e:
        raise ParseError(f"Invalid amount in row {index}: {e}") from e

    fragments = [fragment.strip() for fragment in entry.description_fragments if fragment.strip()]
    payee = fragments[0] if fragments else ""
    description = "\n".join(fragments[1:]).strip()

    return CardTransaction(
        type=type_label,
        date=date,
        payee=payee,
        description=description,
        status=status_label,
        amount=amount,
    )


def _with_occurrences(transactions: list[CardTransaction]) -> list[CardTransaction]:
    """Number transactions that share an amount and date, oldest first."""
    seen: Counter[tuple[int, FinancialDate]] = Counter()
    occurrences = [0] * len(transactions)

    for position in reversed(range(len(transactions))):
        tx = transactions[position]
        key = (tx.amount.to_milliunits(), tx.date)
        seen[key] += 1
        occurrences[position] = seen[key]

    return [
        replace(tx, occurrence=occurrence)
        for tx, occurrence in zip(transactions, occurrences, strict=True)
    ]


def parse_card_transactions(
    entries: Sequence[RawCardEntry], current_year: int | None = None
) -> list[CardTransaction]:
    """
    Parse a whole newest-first activity listing.

    Years are inferred across the listing: the newest row is placed in
    `current_year` and each month roll-back moves one year earlier.

    Args:
        entries: Raw rows in page order (newest first)
        current_year: Year of the newest row (default: this year)

    Returns:
        Card transactions in the same order

    Raises:
        ParseError: If any row cannot be parsed
    """
    month_days = [parse_date_label(entry, index) for index, entry in enumerate(entries)]
    years = infer_years([month for month, _ in month_days], current_year)

    transactions = [
        parse_card_entry(entry, year, index=index, month_day=month_day)
        for index, (entry, year, month_day) in enumerate(zip(entries, years, month_days, strict=True))
    ]

    logger.info("Parsed %d card transactions", len(transactions))
    return _with_occurrences(transactions)
