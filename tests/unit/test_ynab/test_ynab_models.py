#!/usr/bin/env python3
"""
Unit tests for YNAB domain models and the offline loader.
"""

import json
from dataclasses import replace
from datetime import date

import pytest

from cardsync.core.dates import FinancialDate
from cardsync.core.money import Money
from cardsync.ynab.loader import filter_transactions_by_account, load_transactions
from cardsync.ynab.models import YnabTransaction
from tests.fixtures.card_pages import make_ynab_tx


@pytest.mark.ynab
class TestYnabTransaction:
    """Test YnabTransaction conversion."""

    def test_from_dict(self, sample_ynab_transaction):
        """Test parsing an API transaction."""
        tx = YnabTransaction.from_dict(sample_ynab_transaction)

        assert tx.id == "test-transaction-123"
        assert tx.date == FinancialDate(date=date(2024, 3, 5))
        assert tx.amount == Money.from_milliunits(-45990)
        assert tx.memo is None
        assert tx.account_id == "test-account"
        assert tx.payee_name == "Test Store"

    def test_from_minimal_dict(self):
        """Test defaults for optional fields."""
        tx = YnabTransaction.from_dict({"id": "x", "date": "2024-03-05", "amount": 1000})

        assert tx.cleared == "uncleared"
        assert tx.approved is True
        assert tx.account_id == "unknown"
        assert tx.deleted is False

    def test_to_dict_round_trip(self, sample_ynab_transaction):
        """Test the API shape is preserved."""
        assert YnabTransaction.from_dict(sample_ynab_transaction).to_dict() == sample_ynab_transaction


@pytest.mark.ynab
class TestLoadTransactions:
    """Test loading exported transactions from JSON."""

    @pytest.mark.parametrize(
        "wrap",
        [
            lambda txs: txs,
            lambda txs: {"transactions": txs},
            lambda txs: {"data": {"transactions": txs, "server_knowledge": 10}},
        ],
        ids=["bare_list", "transactions_key", "api_response"],
    )
    def test_accepted_shapes(self, temp_dir, sample_ynab_transaction, wrap):
        """Test all supported file layouts."""
        path = temp_dir / "transactions.json"
        path.write_text(json.dumps(wrap([sample_ynab_transaction])))

        transactions = load_transactions(path)

        assert [tx.id for tx in transactions] == ["test-transaction-123"]

    def test_missing_file(self, temp_dir):
        """Test a clear error for a missing export."""
        with pytest.raises(FileNotFoundError):
            load_transactions(temp_dir / "absent.json")

    def test_unexpected_shape_is_empty(self, temp_dir):
        """Test a JSON scalar loads as no transactions."""
        path = temp_dir / "transactions.json"
        path.write_text("42")

        assert load_transactions(path) == []


@pytest.mark.ynab
class TestFilterTransactions:
    """Test account and date filtering."""

    def test_filter_by_account_and_date(self):
        """Test both filters together, order preserved."""
        transactions = [
            make_ynab_tx("keep-1", -1000, date(2024, 3, 6)),
            make_ynab_tx("other-account", -1000, date(2024, 3, 6), account_id="savings"),
            make_ynab_tx("too-old", -1000, date(2024, 3, 4)),
            make_ynab_tx("keep-2", -1000, date(2024, 3, 5)),
        ]

        filtered = filter_transactions_by_account(
            transactions, account_id="test-account", since_date=FinancialDate(date=date(2024, 3, 5))
        )

        assert [tx.id for tx in filtered] == ["keep-1", "keep-2"]

    def test_no_filters(self):
        """Test None keeps everything."""
        transactions = [make_ynab_tx("a", -1, date(2024, 1, 1), account_id="x")]

        assert filter_transactions_by_account(transactions) == transactions

    def test_deleted_transactions_dropped(self):
        """Test deleted transactions never reach matching."""
        transactions = [
            replace(make_ynab_tx("deleted", -12990, date(2024, 3, 5)), deleted=True),
            make_ynab_tx("live", -12990, date(2024, 3, 5)),
        ]

        filtered = filter_transactions_by_account(transactions, account_id="test-account")

        assert [tx.id for tx in filtered] == ["live"]
