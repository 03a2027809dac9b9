#!/usr/bin/env python3
"""Tests for FinancialDate and yearless date parsing."""

from datetime import date

import pytest

from cardsync.core.dates import FinancialDate, infer_years, parse_month, parse_month_day


class TestFinancialDateConstruction:
    """Test FinancialDate construction."""

    @pytest.mark.parametrize(
        "constructor,expected_date",
        [
            (lambda: FinancialDate(date=date(2024, 1, 15)), date(2024, 1, 15)),
            (lambda: FinancialDate.from_string("2024-01-15"), date(2024, 1, 15)),
            (lambda: FinancialDate.from_string("01/15/2024", date_format="%m/%d/%Y"), date(2024, 1, 15)),
            (lambda: FinancialDate.from_parts(2024, 1, 15), date(2024, 1, 15)),
        ],
        ids=["from_date", "from_string", "from_string_custom_format", "from_parts"],
    )
    def test_financial_date_construction(self, constructor, expected_date):
        """Test FinancialDate construction from various sources."""
        assert constructor().date == expected_date

    def test_from_parts_rejects_impossible_date(self):
        """Test that Feb 30 is not silently normalized."""
        with pytest.raises(ValueError):
            FinancialDate.from_parts(2024, 2, 30)

    def test_today(self):
        """Test creating today's date."""
        assert FinancialDate.today().date == date.today()


class TestFinancialDateBehavior:
    """Test FinancialDate formatting and arithmetic."""

    def test_formats(self):
        """Test ISO and YNAB formats."""
        fd = FinancialDate(date=date(2024, 3, 5))
        assert fd.to_iso_string() == "2024-03-05"
        assert fd.to_ynab_format() == "2024-03-05"
        assert str(fd) == "2024-03-05"

    def test_shift_days_crosses_year_boundary(self):
        """Test shifting across month and year ends."""
        fd = FinancialDate(date=date(2024, 12, 31))
        assert fd.shift_days(1) == FinancialDate(date=date(2025, 1, 1))
        assert FinancialDate(date=date(2024, 3, 1)).shift_days(-1) == FinancialDate(date=date(2024, 2, 29))

    def test_comparisons(self):
        """Test date ordering."""
        earlier = FinancialDate(date=date(2024, 1, 1))
        later = FinancialDate(date=date(2024, 1, 2))
        assert earlier < later
        assert earlier <= later
        assert later > earlier
        assert later >= earlier
        assert earlier == FinancialDate.from_string("2024-01-01")


class TestParseMonth:
    """Test month name resolution."""

    @pytest.mark.parametrize(
        "text,expected",
        [("Jan", 1), ("mar", 3), ("MAY", 5), ("September", 9), ("Sept", 9), ("dec", 12)],
    )
    def test_prefix_matching(self, text, expected):
        """Test case-insensitive prefix matching."""
        assert parse_month(text) == expected

    @pytest.mark.parametrize("text", ["", "Ja", "Foo", "13"])
    def test_unknown_month(self, text):
        """Test that unrecognized months raise."""
        with pytest.raises(ValueError):
            parse_month(text)


class TestParseMonthDay:
    """Test yearless date label parsing."""

    @pytest.mark.parametrize(
        "label,expected",
        [("Mar 5", (3, 5)), ("Dec 31", (12, 31)), ("  Jan   09 ", (1, 9)), ("Feb 29", (2, 29))],
    )
    def test_valid_labels(self, label, expected):
        """Test month and day extraction."""
        assert parse_month_day(label) == expected

    @pytest.mark.parametrize("label", ["Mar", "", "5 Mar", "Mar 5th", "Mar -1"])
    def test_invalid_labels(self, label):
        """Test that malformed labels raise."""
        with pytest.raises(ValueError):
            parse_month_day(label)


class TestInferYears:
    """Test year reconstruction for newest-first listings."""

    def test_single_year(self):
        """Test non-increasing months stay in the current year."""
        assert infer_years([3, 2, 2, 1], current_year=2025) == [2025, 2025, 2025, 2025]

    def test_year_boundary(self):
        """Test Jan followed by Dec rolls back one year."""
        assert infer_years([1, 1, 12, 11], current_year=2025) == [2025, 2025, 2024, 2024]

    def test_multiple_roll_backs(self):
        """Test each increase in month decrements the year again."""
        assert infer_years([2, 11, 3, 12], current_year=2025) == [2025, 2024, 2024, 2023]

    def test_same_month_does_not_roll_back(self):
        """Test that equal months are treated as the same year."""
        assert infer_years([6, 6, 6], current_year=2025) == [2025, 2025, 2025]

    def test_empty(self):
        """Test empty input."""
        assert infer_years([], current_year=2025) == []

    def test_defaults_to_this_year(self):
        """Test that the newest entry lands in the current year by default."""
        assert infer_years([5]) == [date.today().year]

    def test_matches_recomputed_ordering(self):
        """Test that inferred dates are non-increasing in listing order."""
        months = [3, 1, 12, 12, 7, 2, 10]
        years = infer_years(months, current_year=2025)
        dates = [date(year, month, 1) for year, month in zip(years, months)]
        assert dates == sorted(dates, reverse=True)
