from datetime import datetime, timezone
from typing import Callable, TypedDict

from hotel.booking.domain.entity.booking import Booking
from hotel.booking.domain.enum import BookingStatus
from hotel.booking.domain.service.pricing import compute_total_price
from hotel.booking.domain.value_object import BookingId, StayPeriod
from hotel.shared.domain import Money, RoomId, UserId


class BookingDetails(TypedDict):
    """予約作成の入力データ"""

    user_id: str
    room_id: str
    check_in_date: str
    check_out_date: str


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BookingFactory:
    """予約エンティティを生成するFactory"""

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    def create(
        self, booking_details: BookingDetails, price_per_night: Money
    ) -> Booking:
        """新規予約のエンティティを作成する

        合計料金は 1泊料金 × 泊数 で確定させる。
        """
        stay_period = StayPeriod.of(
            booking_details["check_in_date"], booking_details["check_out_date"]
        )

        return Booking(
            id=BookingId.generate(),
            user_id=UserId(value=booking_details["user_id"]),
            room_id=RoomId(value=booking_details["room_id"]),
            stay_period=stay_period,
            total_price=compute_total_price(price_per_night, stay_period.nights()),
            booking_date=self._clock(),
            status=BookingStatus.PENDING,
        )
