#!/usr/bin/env python3
"""
FinancialDate Primitive Type and Yearless Date Parsing

Immutable date wrapper with consistent formatting for financial operations,
plus the helpers that turn card activity labels like "Mar 5" into calendar
dates. Activity pages never show a year, so years are reconstructed from the
order of the listing (see infer_years).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta

ORDERED_MONTH_PREFIXES = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def from_parts(cls, year: int, month: int, day: int) -> "FinancialDate":
        """
        Build from numeric parts.

        Raises:
            ValueError: If the parts do not form a calendar date (e.g. Feb 30)
        """
        return cls(date=date(year, month, day))

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def to_ynab_format(self) -> str:
        """Format as YNAB expects (ISO format)."""
        return self.date.isoformat()

    def shift_days(self, days: int) -> "FinancialDate":
        """Return the date `days` later (or earlier, when negative)."""
        return FinancialDate(date=self.date + timedelta(days=days))

    def __str__(self) -> str:
        return self.to_iso_string()

    def __lt__(self, other: "FinancialDate") -> bool:
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        return self.date >= other.date

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"


def parse_month(month_text: str) -> int:
    """
    Resolve a month name or abbreviation to its number (1-12).

    Matching is a case-insensitive prefix test against ORDERED_MONTH_PREFIXES,
    so "Mar", "MAR" and "March" all resolve to 3.

    Raises:
        ValueError: If no month prefix matches
    """
    lowered = month_text.strip().lower()
    for index, prefix in enumerate(ORDERED_MONTH_PREFIXES):
        if lowered.startswith(prefix):
            return index + 1
    raise ValueError(f"Unrecognized month: {month_text!r}")


def parse_month_day(label: str) -> tuple[int, int]:
    """
    Parse a yearless date label like "Mar 5" into (month, day).

    The day is zero-padded to two digits before it is interpreted, matching
    how the label is turned into an ISO date.

    Raises:
        ValueError: If the month or day part is missing or malformed
    """
    parts = label.split()
    if len(parts) < 2:
        raise ValueError(f"Date label needs a month and a day: {label!r}")

    raw_month, raw_day = parts[0], parts[1]
    month = parse_month(raw_month)

    day_text = raw_day.zfill(2)
    if not day_text.isdigit():
        raise ValueError(f"Invalid day in date label: {label!r}")

    return month, int(day_text)


def infer_years(months: Sequence[int], current_year: int | None = None) -> list[int]:
    """
    Reconstruct years for a newest-first list of yearless dates.

    The first (newest) entry is assumed to fall in the current year. Walking
    backward in time, a month that is greater than the previous entry's month
    means the listing crossed into the prior year.

    Known limitation: a listing that spans more than twelve months can return
    to the same month value without a roll-back being detected, so its older
    entries get a year that is too recent.

    Args:
        months: Month numbers (1-12) in newest-first order
        current_year: Year of the newest entry (default: this year)

    Returns:
        One year per entry, in the same order

    Examples:
        infer_years([1, 12], 2025) -> [2025, 2024]
        infer_years([3, 2, 1], 2025) -> [2025, 2025, 2025]
    """
    year = current_year if current_year is not None else date.today().year
    previous_month: int | None = None
    years: list[int] = []

    for month in months:
        if previous_month is not None and month > previous_month:
            year -= 1
        previous_month = month
        years.append(year)

    return years
