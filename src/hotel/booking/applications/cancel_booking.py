from hotel.booking.domain.entity import Booking
from hotel.booking.domain.repository import BookingRepository
from hotel.booking.domain.value_object import BookingId
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain.exception import ResourceNotFoundException


class CancelBookingService:
    """予約キャンセルのユースケース

    書き込み順: 予約（Cancelled）→ 客室（空室）。
    キャンセル済みの予約も再度処理する。ユーザーの予約フラグは戻さない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository

    def cancel(self, booking_id: BookingId) -> Booking:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking not found")

        booking.cancel()
        self._booking_repository.update(booking)

        room = self._room_repository.find_by_id(booking.room_id)
        if room is None:
            raise ResourceNotFoundException("Room not found")
        room.mark_available()
        self._room_repository.update(room)

        return booking
