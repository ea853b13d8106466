from hotel.booking.domain.entity import Booking
from hotel.booking.domain.factory import BookingDetails, BookingFactory
from hotel.booking.domain.repository import BookingRepository
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId, UserId
from hotel.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from hotel.user.domain.repository import UserRepository


class CreateBookingService:
    """予約作成のユースケース

    書き込み順: 予約の保存 → ユーザーの予約フラグ更新。
    2つの書き込みはトランザクションで保護されず、後続が失敗しても予約は残る。
    作成時に客室の空室フラグは変更しない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
        user_repository: UserRepository,
        factory: BookingFactory,
        require_available_room: bool = False,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._user_repository = user_repository
        self._factory = factory
        self._require_available_room = require_available_room

    def create(self, booking_details: BookingDetails) -> Booking:
        """客室を予約する"""
        room_id = RoomId(value=booking_details["room_id"])
        room = self._room_repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException("Room not found")

        user_id = UserId(value=booking_details["user_id"])
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("User not found")

        booking = self._factory.create(booking_details, room.price_per_night)

        if self._require_available_room and not room.is_available:
            raise BusinessRuleViolationException("Room is not available for booking")

        self._booking_repository.save(booking)

        user.mark_as_booking()
        self._user_repository.update(user)

        return booking
