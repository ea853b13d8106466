from dataclasses import dataclass

from hotel.booking.domain.entity import Booking
from hotel.booking.domain.repository import BookingRepository
from hotel.shared.domain import Money
from hotel.user.domain.repository import UserRepository

RECENT_BOOKINGS_LIMIT = 5


@dataclass(frozen=True)
class DashboardStats:
    """管理画面のダッシュボード集計値

    予約数・売上はステータスで絞り込まない（キャンセル済みを含む）。
    """

    total_bookings: int
    total_guests: int
    total_users: int
    revenue: Money
    recent_bookings: list[Booking]


class GetDashboardStatsService:
    """ダッシュボード集計のユースケース（読み取りのみ）"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._user_repository = user_repository

    def get(self) -> DashboardStats:
        return DashboardStats(
            total_bookings=self._booking_repository.count(),
            total_guests=self._user_repository.count_by_booking_flag(True),
            total_users=self._user_repository.count_by_booking_flag(False),
            revenue=self._booking_repository.sum_total_price(),
            recent_bookings=self._booking_repository.find_recent(
                RECENT_BOOKINGS_LIMIT
            ),
        )
