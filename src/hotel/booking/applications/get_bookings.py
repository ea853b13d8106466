from dataclasses import dataclass

from hotel.booking.domain.entity import Booking
from hotel.booking.domain.repository import BookingRepository
from hotel.booking.domain.value_object import BookingId
from hotel.room.domain.entity import Room
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId, UserId
from hotel.shared.domain.exception import ResourceNotFoundException
from hotel.user.domain.entity import User
from hotel.user.domain.repository import UserRepository


@dataclass(frozen=True)
class BookingView:
    """予約に参照先のユーザー・客室を展開したもの（参照先がない場合は None）"""

    booking: Booking
    user: User | None
    room: Room | None


class GetBookingsService:
    """予約参照のユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
        room_repository: RoomRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._user_repository = user_repository
        self._room_repository = room_repository

    def list_all(self) -> list[BookingView]:
        return self._populate(self._booking_repository.find_all())

    def get(self, booking_id: BookingId) -> BookingView:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking not found")
        return self._populate([booking])[0]

    def list_by_user(self, user_id: UserId) -> list[BookingView]:
        """ユーザーの予約一覧（0件の場合は NotFound として扱う）"""
        bookings = self._booking_repository.find_by_user_id(user_id)
        if not bookings:
            raise ResourceNotFoundException("No bookings found for this user.")
        return self._populate(bookings)

    def _populate(self, bookings: list[Booking]) -> list[BookingView]:
        users: dict[UserId, User | None] = {}
        rooms: dict[RoomId, Room | None] = {}
        views = []
        for booking in bookings:
            if booking.user_id not in users:
                users[booking.user_id] = self._user_repository.find_by_id(
                    booking.user_id
                )
            if booking.room_id not in rooms:
                rooms[booking.room_id] = self._room_repository.find_by_id(
                    booking.room_id
                )
            views.append(
                BookingView(
                    booking=booking,
                    user=users[booking.user_id],
                    room=rooms[booking.room_id],
                )
            )
        return views
