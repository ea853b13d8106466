from unittest.mock import MagicMock

import pytest

from hotel.booking.applications.get_bookings import GetBookingsService
from hotel.booking.domain.value_object import BookingId
from hotel.shared.domain import RoomId, UserId
from hotel.shared.domain.exception import ResourceNotFoundException


@pytest.fixture
def service(booking_repository, user_repository, room_repository):
    return GetBookingsService(
        booking_repository=booking_repository,
        user_repository=user_repository,
        room_repository=room_repository,
    )


@pytest.fixture
def seeded(
    booking_repository,
    user_repository,
    room_repository,
    create_booking,
    create_user,
    create_room,
):
    user_repository.users[UserId(value="user-1")] = create_user()
    room_repository.rooms[RoomId(value="room-1")] = create_room()
    for booking_id in ("booking-1", "booking-2"):
        booking_repository.bookings[BookingId(value=booking_id)] = create_booking(
            booking_id=booking_id
        )
    booking_repository.bookings[BookingId(value="booking-3")] = create_booking(
        booking_id="booking-3", user_id="user-2"
    )


class TestGetBookingsService:
    def test_list_all_populates_references(self, service, seeded):
        views = service.list_all()

        assert len(views) == 3
        first = next(v for v in views if str(v.booking.id) == "booking-1")
        assert first.user.name == "Taro"
        assert str(first.room.name) == "Deluxe Twin"

    def test_missing_reference_is_none(self, service, seeded):
        view = service.get(BookingId(value="booking-3"))

        assert view.user is None
        assert view.room is not None

    def test_get_not_found(self, service):
        with pytest.raises(ResourceNotFoundException, match="Booking not found"):
            service.get(BookingId(value="missing"))

    def test_list_by_user(self, service, seeded):
        views = service.list_by_user(UserId(value="user-1"))

        assert {str(v.booking.id) for v in views} == {"booking-1", "booking-2"}

    def test_list_by_user_empty_is_not_found(self, service, seeded):
        with pytest.raises(
            ResourceNotFoundException, match="No bookings found for this user."
        ):
            service.list_by_user(UserId(value="user-without-bookings"))

    def test_references_are_fetched_once(self, create_booking, create_user, create_room):
        booking_repository = MagicMock()
        booking_repository.find_all.return_value = [
            create_booking(booking_id="booking-1"),
            create_booking(booking_id="booking-2"),
        ]
        user_repository = MagicMock()
        user_repository.find_by_id.return_value = create_user()
        room_repository = MagicMock()
        room_repository.find_by_id.return_value = create_room()
        service = GetBookingsService(
            booking_repository=booking_repository,
            user_repository=user_repository,
            room_repository=room_repository,
        )

        service.list_all()

        user_repository.find_by_id.assert_called_once_with(UserId(value="user-1"))
        room_repository.find_by_id.assert_called_once_with(RoomId(value="room-1"))
