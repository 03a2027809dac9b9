#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All amounts in cardsync are integer milliunits, the fixed-point unit used by
YNAB (1000 milliunits = $1.00). Card activity pages show amounts as currency
strings, so both sides of a match are normalized to milliunits before any
comparison is made.

Key Principles:
- Never compare floating-point amounts
- Parse with Decimal, store as int
- Keep the sign: card pages report outflows as positive, YNAB as negative
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY_SYMBOLS = "$"
MILLIUNITS_PER_UNIT = 1000


def parse_currency_to_milliunits(currency_str: str) -> int:
    """
    Parse a currency string into integer milliunits.

    Args:
        currency_str: String like '$12.99', '-$5.00', '$-5.00' or '1,234.56'

    Returns:
        Amount in milliunits (12990 for '$12.99')

    Raises:
        ValueError: If the string is empty or not a number

    Examples:
        parse_currency_to_milliunits("$12.99") -> 12990
        parse_currency_to_milliunits("-$5.00") -> -5000
        parse_currency_to_milliunits("$1,234.5") -> 1234500
    """
    clean = currency_str.strip()

    is_negative = clean.startswith("-")
    if is_negative:
        clean = clean[1:].strip()

    clean = clean.lstrip(CURRENCY_SYMBOLS).replace(",", "").strip()
    if not clean:
        raise ValueError(f"Empty currency amount: {currency_str!r}")

    try:
        amount = Decimal(clean)
    except InvalidOperation:
        raise ValueError(f"Invalid currency amount: {currency_str!r}") from None

    if not amount.is_finite():
        raise ValueError(f"Invalid currency amount: {currency_str!r}")

    milliunits = int((amount * MILLIUNITS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return -milliunits if is_negative else milliunits


def milliunits_to_dollars_str(milliunits: int) -> str:
    """
    Convert milliunits to a dollar string using integer arithmetic.

    Sub-cent milliunits are truncated toward zero.

    Example:
        milliunits_to_dollars_str(-45990) -> "-45.99"
    """
    is_negative = milliunits < 0
    cents = abs(int(milliunits)) // 10

    dollars = cents // 100
    remainder = cents % 100

    if is_negative and cents:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def format_milliunits(milliunits: int) -> str:
    """Format milliunits as dollar string with $ prefix."""
    return f"${milliunits_to_dollars_str(milliunits)}"


def format_milliunits_abs(milliunits: int) -> str:
    """Format the magnitude of an amount, for display where direction is implied."""
    return format_milliunits(abs(milliunits))
