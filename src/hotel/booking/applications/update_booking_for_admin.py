from typing import TypedDict

from hotel.booking.domain.entity import Booking
from hotel.booking.domain.enum import BookingStatus
from hotel.booking.domain.repository import BookingRepository
from hotel.booking.domain.service.pricing import compute_total_price
from hotel.booking.domain.service.room_reassignment import RoomReassignmentService
from hotel.booking.domain.value_object import BookingId, StayPeriod
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId
from hotel.shared.domain.exception import (
    BusinessRuleViolationException,
    PermissionDeniedException,
    ResourceNotFoundException,
)


class AdminBookingChanges(TypedDict, total=False):
    """管理者による予約変更の入力データ（すべて任意）"""

    status: str | None
    room_id: str | None
    check_in_date: str | None
    check_out_date: str | None


class UpdateBookingForAdminService:
    """管理者による予約変更のユースケース

    予約の存在確認 → 権限確認 の順で判定する。
    ステータスは定義済みの値であれば遷移の制約なく上書きできる。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._reassignment = RoomReassignmentService(room_repository)

    def update(
        self, booking_id: BookingId, changes: AdminBookingChanges, is_admin: bool
    ) -> Booking:
        booking = self.load_for_admin(booking_id, is_admin)

        status = changes.get("status")
        if status:
            booking.change_status(BookingStatus.parse(status))

        # 日付の検証は客室の書き込みより前に行う
        stay_period = None
        check_in = changes.get("check_in_date")
        check_out = changes.get("check_out_date")
        if check_in and check_out:
            stay_period = StayPeriod.of(check_in, check_out)

        new_room_id = changes.get("room_id")
        if new_room_id and new_room_id != str(booking.room_id):
            self._reassignment.reassign(booking, RoomId(value=new_room_id))

        if stay_period is not None:
            # 付け替え後の客室を取得し直して料金を計算する
            room = self._room_repository.find_by_id(booking.room_id)
            if room is None:
                raise ResourceNotFoundException("Room not found")
            total_price = compute_total_price(
                room.price_per_night, stay_period.nights()
            )
            booking.reschedule(stay_period, total_price)

        self._booking_repository.update(booking)
        return booking

    def update_status(
        self, booking_id: BookingId, status: str | None, is_admin: bool
    ) -> Booking:
        """ステータスのみを変更する（ステータス必須）"""
        booking = self.load_for_admin(booking_id, is_admin)

        if not status:
            raise BusinessRuleViolationException("Status is required")
        booking.change_status(BookingStatus.parse(status))

        self._booking_repository.update(booking)
        return booking

    def load_for_admin(self, booking_id: BookingId, is_admin: bool) -> Booking:
        """予約の存在確認 → 権限確認 を行い、予約を返す

        ハンドラーはリクエストボディの検証より前にこれを呼び出す。
        """
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking not found")
        if not is_admin:
            raise PermissionDeniedException(
                "You do not have permission to update the booking"
            )
        return booking
