from __future__ import annotations

from enum import Enum

from hotel.shared.domain.exception import BusinessRuleViolationException


class BookingStatus(str, Enum):
    """予約ステータス

    値はフロントエンド・既存データと同じ表記を使う。
    """

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str) -> BookingStatus:
        """文字列からステータスを生成する（未定義の値は入力エラー）"""
        try:
            return cls(value)
        except ValueError as e:
            raise BusinessRuleViolationException("Invalid booking status") from e
