"""
Core Utilities Package

Shared primitives used by the card, YNAB and sync packages.

This package provides:
- Currency parsing with integer milliunit arithmetic
- Money and FinancialDate value types
- Yearless date parsing and year inference for activity listings
- Configuration and persisted YNAB settings
"""

from .config import (
    Config,
    ConfigurationError,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    format_milliunits,
    milliunits_to_dollars_str,
    parse_currency_to_milliunits,
)
from .dates import ORDERED_MONTH_PREFIXES, FinancialDate, infer_years, parse_month, parse_month_day
from .money import Money
from .settings import Settings, load_settings, resolve_settings, save_settings

__all__ = [
    # Configuration
    "Config",
    "ConfigurationError",
    "Environment",
    "FinancialDate",
    "Money",
    "ORDERED_MONTH_PREFIXES",
    "Settings",
    # Currency utilities
    "format_milliunits",
    "get_config",
    # Dates
    "infer_years",
    "is_development",
    "is_production",
    "is_test",
    "load_settings",
    "milliunits_to_dollars_str",
    "parse_currency_to_milliunits",
    "parse_month",
    "parse_month_day",
    "reload_config",
    "resolve_settings",
    "save_settings",
]
