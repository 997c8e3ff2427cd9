from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    丸めは行わない。表示側で桁数を決める。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        """金額に係数を掛ける（宿泊数・割引率など）"""
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    @classmethod
    def eur(cls, amount: Decimal | int | str) -> Money:
        """ユーロで Money を生成"""
        return cls(Decimal(str(amount)), Currency.eur())
