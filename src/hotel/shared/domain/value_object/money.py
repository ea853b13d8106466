from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Money:
    """金額

    通貨は単一（客室料金の通貨）のため保持しない。
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)

    def is_positive(self) -> bool:
        return self.amount > 0

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        return Money(amount=self.amount + other.amount)

    def multiply(self, times: int) -> Money:
        """金額を整数倍する"""
        return Money(amount=self.amount * times)

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))
