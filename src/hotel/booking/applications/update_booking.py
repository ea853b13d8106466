from typing import TypedDict

from hotel.booking.domain.entity import Booking
from hotel.booking.domain.repository import BookingRepository
from hotel.booking.domain.service.pricing import compute_total_price
from hotel.booking.domain.service.room_reassignment import RoomReassignmentService
from hotel.booking.domain.value_object import BookingId, StayPeriod
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId
from hotel.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class BookingChanges(TypedDict, total=False):
    """予約変更の入力データ（すべて任意）"""

    check_in_date: str | None
    check_out_date: str | None
    room_id: str | None


class UpdateBookingService:
    """予約変更のユースケース

    客室の付け替えと日程変更は独立した条件で、片方だけの変更も受け付ける。
    書き込み順: 旧客室 → 新客室 → 予約（トランザクションなし）。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._reassignment = RoomReassignmentService(room_repository)

    def update(self, booking_id: BookingId, changes: BookingChanges) -> Booking:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking not found")

        room = self._room_repository.find_by_id(booking.room_id)
        if room is None:
            raise ResourceNotFoundException("Room not found")

        # 日付の検証は客室の書き込みより前に行う
        stay_period = _stay_period_of(changes)

        new_room_id = changes.get("room_id")
        if new_room_id and new_room_id != str(booking.room_id):
            room = self._reassignment.reassign(
                booking, RoomId(value=new_room_id), old_room=room
            )

        if stay_period is not None:
            if not room.price_per_night.is_positive():
                raise BusinessRuleViolationException(
                    "Failed to calculate total price. Invalid room price or dates."
                )
            total_price = compute_total_price(
                room.price_per_night, stay_period.nights()
            )
            booking.reschedule(stay_period, total_price)

        self._booking_repository.update(booking)
        return booking


def _stay_period_of(changes: BookingChanges) -> StayPeriod | None:
    """チェックイン日・チェックアウト日が両方ある場合のみ滞在期間を返す"""
    check_in = changes.get("check_in_date")
    check_out = changes.get("check_out_date")
    if check_in and check_out:
        return StayPeriod.of(check_in, check_out)
    return None
