from decimal import Decimal

import pytest

from hotel.shared.domain import Money


class TestMoney:
    def test_coerces_to_decimal(self):
        money = Money(amount=1500)

        assert money.amount == Decimal("1500")
        assert isinstance(money.amount, Decimal)

    def test_negative_amount_is_rejected(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money(amount=Decimal("-1"))

    def test_multiply(self):
        assert Money(amount=Decimal("1000")).multiply(3) == Money(amount=Decimal("3000"))

    def test_add(self):
        total = Money(amount=Decimal("100.50")).add(Money(amount=Decimal("0.50")))

        assert total.amount == Decimal("101.00")

    def test_zero_is_not_positive(self):
        assert Money.zero().is_positive() is False
        assert Money(amount=Decimal("0.01")).is_positive() is True
