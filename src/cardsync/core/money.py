#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer milliunits internally.
Prevents floating-point errors when matching amounts from two sources.
"""

from dataclasses import dataclass

from .currency import format_milliunits, parse_currency_to_milliunits


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in milliunits (1000 = $1.00).

    Supports both positive and negative amounts. The card activity page reports
    purchases as positive amounts; YNAB stores the same purchase as negative.

    Examples:
        >>> charge = Money.from_dollars("$129.90")
        >>> charge.to_milliunits()
        129900

        >>> # YNAB convention is the negation of the card convention
        >>> -charge == Money.from_milliunits(-129900)
        True

        >>> str(Money.from_milliunits(-45990))
        '$-45.99'
    """

    milliunits: int

    @classmethod
    def from_milliunits(cls, milliunits: int) -> "Money":
        """Create Money from YNAB milliunits."""
        return cls(milliunits=milliunits)

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """
        Parse from dollar string like '$123.45' or integer dollars.

        Args:
            dollars: String like "$12.34" or integer like 12

        Returns:
            Money object

        Raises:
            ValueError: If the string is not a currency amount
        """
        if isinstance(dollars, int):
            return cls(milliunits=dollars * 1000)
        return cls(milliunits=parse_currency_to_milliunits(dollars))

    def to_milliunits(self) -> int:
        """Get value in YNAB milliunits."""
        return self.milliunits

    def to_dollars(self) -> str:
        """Get formatted dollar string."""
        return str(self)

    def abs(self) -> "Money":
        """Return absolute value of Money, for display."""
        return Money(milliunits=abs(self.milliunits))

    def __neg__(self) -> "Money":
        """Flip between card and YNAB sign conventions."""
        return Money(milliunits=-self.milliunits)

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(milliunits=self.milliunits + other.milliunits)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(milliunits=self.milliunits - other.milliunits)

    def __lt__(self, other: "Money") -> bool:
        return self.milliunits < other.milliunits

    def __le__(self, other: "Money") -> bool:
        return self.milliunits <= other.milliunits

    def __gt__(self, other: "Money") -> bool:
        return self.milliunits > other.milliunits

    def __ge__(self, other: "Money") -> bool:
        return self.milliunits >= other.milliunits

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_milliunits(self.milliunits)

    def __repr__(self) -> str:
        return f"Money(milliunits={self.milliunits})"
