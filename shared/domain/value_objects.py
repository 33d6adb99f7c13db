"""
Common Value Objects

- Money: a positive monetary amount with currency
- DateRange: a stay from check-in (inclusive) to check-out (exclusive)
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from shared.domain.base import ValueObject
from shared.domain.exceptions import InvalidRange, ValidationError

SUPPORTED_CURRENCIES = ('USD', 'EUR', 'GBP', 'KZT')


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Payments are always strictly positive, so zero and negative
    amounts are rejected at construction time.
    """
    amount: Decimal
    currency: str = 'USD'

    def __post_init__(self):
        if not self.currency:
            raise ValidationError("Currency is required")
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(f"Unsupported currency: {self.currency}")
        if self.amount <= 0:
            raise ValidationError("Amount must be a positive number")

    @classmethod
    def parse(cls, raw, currency: str = 'USD') -> 'Money':
        """Build Money from a client-supplied number or numeric string."""
        if isinstance(raw, bool):
            raise ValidationError("Amount must be a positive number")
        try:
            amount = Decimal(str(raw))
        except (InvalidOperation, ValueError):
            raise ValidationError("Amount must be a positive number")
        if not amount.is_finite():
            raise ValidationError("Amount must be a positive number")
        return cls(amount, currency.upper() if currency else currency)

    def __add__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            raise TypeError("Can only add Money to Money")
        if self.currency != other.currency:
            raise ValueError(f"Cannot add different currencies: {self.currency} and {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents [start_date, end_date): the check-out day is free
    for the next guest's check-in.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise InvalidRange(
                f"Check-in ({self.start_date}) must be before check-out ({self.end_date})"
            )

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Examples:
            - [01, 05) overlaps with [04, 08) -> True
            - [01, 05) overlaps with [05, 08) -> False (same-day turnover)
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return self.start_date < other.end_date and other.start_date < self.end_date

    def contains(self, check_date: date) -> bool:
        return self.start_date <= check_date < self.end_date

    def __len__(self) -> int:
        """Number of nights"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
