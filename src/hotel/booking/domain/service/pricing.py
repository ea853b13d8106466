"""宿泊料金の計算

料金は常に (1泊料金, 泊数) から明示的に計算する。
連泊割引はフロントエンドの表示上のみで、サーバー側の料金には適用しない。
"""

from datetime import date, datetime

from hotel.shared.domain import Money
from hotel.shared.domain.exception import BusinessRuleViolationException


def parse_stay_date(value: str) -> date:
    """ISO 8601 の日付（または日時）文字列を暦日に変換する

    フロントエンドは "2024-01-01T00:00:00.000Z" 形式で送ることがあるため、
    日時の場合は日付部分のみを使う。
    """
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def compute_nights(check_in: date, check_out: date) -> int:
    """チェックイン日とチェックアウト日の差（泊数）を計算する"""
    nights = (check_out - check_in).days
    if nights <= 0:
        raise BusinessRuleViolationException("Invalid booking dates")
    return nights


def compute_total_price(price_per_night: Money, nights: int) -> Money:
    """合計料金 = 1泊料金 × 泊数"""
    return price_per_night.multiply(nights)
