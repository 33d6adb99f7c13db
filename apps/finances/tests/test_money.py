from decimal import Decimal

import pytest

from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import Money


@pytest.mark.parametrize("raw", [0, -1, "0.00", "abc", "NaN", "Infinity", True, None])
def test_parse_rejects_non_positive_or_non_numeric(raw):
    with pytest.raises(ValidationError):
        Money.parse(raw)


def test_parse_accepts_numbers_and_numeric_strings():
    assert Money.parse(500).amount == Decimal("500")
    assert Money.parse("12.50", "eur") == Money(Decimal("12.50"), "EUR")


def test_unsupported_currency():
    with pytest.raises(ValidationError):
        Money(Decimal("10"), "XYZ")


def test_addition_requires_same_currency():
    assert Money(Decimal("10"), "USD") + Money(Decimal("5"), "USD") == Money(Decimal("15"), "USD")
    with pytest.raises(ValueError):
        Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")
