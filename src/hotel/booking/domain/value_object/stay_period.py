from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import cached_property

from hotel.booking.domain.service.pricing import compute_nights, parse_stay_date
from hotel.shared.domain.exception import BusinessRuleViolationException


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)

    値は YYYY-MM-DD 形式に正規化して保持する。
    """

    check_in: str
    check_out: str

    def __post_init__(self) -> None:
        try:
            check_in_date = parse_stay_date(self.check_in)
            check_out_date = parse_stay_date(self.check_out)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid date format: {e}") from e

        if check_out_date <= check_in_date:
            raise ValueError("Check-out date must be after check-in date")

        object.__setattr__(self, "check_in", check_in_date.isoformat())
        object.__setattr__(self, "check_out", check_out_date.isoformat())

    @classmethod
    def of(cls, check_in: str, check_out: str) -> StayPeriod:
        """入力値から生成する（不正な日付は入力エラーとして扱う）"""
        try:
            return cls(check_in=check_in, check_out=check_out)
        except ValueError as e:
            raise BusinessRuleViolationException("Invalid booking dates") from e

    @cached_property
    def check_in_date(self) -> date:
        return date.fromisoformat(self.check_in)

    @cached_property
    def check_out_date(self) -> date:
        return date.fromisoformat(self.check_out)

    def nights(self) -> int:
        """宿泊数を計算する"""
        return compute_nights(self.check_in_date, self.check_out_date)
