"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path

import pytest

from cardsync.core.config import reload_config
from tests.fixtures.card_pages import activity_page, activity_row


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Create a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def sample_ynab_transaction() -> dict:
    """Sample YNAB API transaction for testing."""
    return {
        "id": "test-transaction-123",
        "date": "2024-03-05",
        "amount": -45990,  # -$45.99 in milliunits
        "memo": None,
        "cleared": "cleared",
        "approved": True,
        "account_id": "test-account",
        "account_name": "Store Card",
        "payee_id": None,
        "payee_name": "Test Store",
        "category_id": None,
        "category_name": "Shopping",
        "import_id": None,
        "deleted": False,
    }


@pytest.fixture
def sample_activity_html() -> str:
    """Activity page with two purchases, a payment and a year roll-back."""
    return activity_page(
        [
            activity_row("Purchase", "Jan 3", ["Test Store", "USB cable", "Desk lamp"], "Pending", "$45.99"),
            activity_row("Payment", "Dec 28", ["Payment - thank you"], "Posted", "-$100.00"),
            activity_row("Purchase", "Dec 20", ["Test Store", "Notebook"], "Posted", "$12.50"),
        ]
    )


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests don't use real data
    monkeypatch.setenv("CARDSYNC_ENV", "test")
    monkeypatch.setenv("CARDSYNC_DATA_DIR", str(tmp_path / "cardsync_data"))
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.delenv("CARDSYNC_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("CARDSYNC_DATE_TOLERANCE", raising=False)
    monkeypatch.delenv("CARDSYNC_IMPORT_IDS", raising=False)
    monkeypatch.delenv("YNAB_BASE_URL", raising=False)
    monkeypatch.delenv("YNAB_TIMEOUT", raising=False)

    # Mock sensitive environment variables
    monkeypatch.setenv("YNAB_API_TOKEN", "test-token")
    monkeypatch.setenv("YNAB_BUDGET_ID", "test-budget")
    monkeypatch.setenv("YNAB_ACCOUNT_ID", "test-account")

    reload_config()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "card: Tests for card activity scraping and parsing")
    config.addinivalue_line("markers", "ynab: Tests for YNAB integration")
    config.addinivalue_line("markers", "matching: Tests for transaction matching and review selection")
