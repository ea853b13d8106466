from decimal import Decimal

import pytest

from hotel.booking.applications.update_booking_for_admin import (
    UpdateBookingForAdminService,
)
from hotel.booking.domain.enum import BookingStatus
from hotel.booking.domain.value_object import BookingId
from hotel.shared.domain import RoomId
from hotel.shared.domain.exception import (
    BusinessRuleViolationException,
    PermissionDeniedException,
    ResourceNotFoundException,
)

BOOKING_ID = BookingId(value="booking-1")


@pytest.fixture
def service(booking_repository, room_repository):
    return UpdateBookingForAdminService(
        booking_repository=booking_repository,
        room_repository=room_repository,
    )


@pytest.fixture
def seeded(booking_repository, room_repository, create_booking, create_room):
    room_repository.rooms[RoomId(value="room-1")] = create_room(
        room_id="room-1", price=Decimal("1000"), is_available=False
    )
    room_repository.rooms[RoomId(value="room-2")] = create_room(
        room_id="room-2", price=Decimal("2500")
    )
    booking_repository.bookings[BOOKING_ID] = create_booking(room_id="room-1")


class TestUpdateBookingForAdmin:
    def test_overwrite_status(self, service, seeded, booking_repository):
        booking = service.update(BOOKING_ID, {"status": "Confirmed"}, is_admin=True)

        assert booking.status == BookingStatus.CONFIRMED
        assert booking_repository.bookings[BOOKING_ID].status == BookingStatus.CONFIRMED

    def test_cancelled_booking_can_be_reopened(
        self, service, booking_repository, room_repository, create_booking, create_room
    ):
        room_repository.rooms[RoomId(value="room-1")] = create_room()
        booking_repository.bookings[BOOKING_ID] = create_booking(
            status=BookingStatus.CANCELLED
        )

        booking = service.update(BOOKING_ID, {"status": "Pending"}, is_admin=True)

        assert booking.status == BookingStatus.PENDING

    def test_invalid_status(self, service, seeded):
        with pytest.raises(BusinessRuleViolationException, match="Invalid booking status"):
            service.update(BOOKING_ID, {"status": "Archived"}, is_admin=True)

    def test_non_admin_is_forbidden_regardless_of_payload(self, service, seeded, write_log):
        with pytest.raises(
            PermissionDeniedException,
            match="You do not have permission to update the booking",
        ):
            service.update(BOOKING_ID, {"status": "Archived"}, is_admin=False)

        assert write_log == []

    def test_missing_booking_is_reported_before_permission(self, service):
        with pytest.raises(ResourceNotFoundException, match="Booking not found"):
            service.update(BookingId(value="missing"), {}, is_admin=False)

    def test_reassign_and_reschedule_uses_fresh_room(
        self, service, seeded, room_repository
    ):
        booking = service.update(
            BOOKING_ID,
            {
                "room_id": "room-2",
                "check_in_date": "2026-06-01",
                "check_out_date": "2026-06-03",
            },
            is_admin=True,
        )

        assert booking.room_id == RoomId(value="room-2")
        assert booking.total_price.amount == Decimal("5000")
        assert room_repository.rooms[RoomId(value="room-1")].is_available is True
        assert room_repository.rooms[RoomId(value="room-2")].is_available is False

    def test_invalid_dates_with_room_change_writes_nothing(
        self, service, seeded, room_repository, write_log
    ):
        with pytest.raises(BusinessRuleViolationException, match="Invalid booking dates"):
            service.update(
                BOOKING_ID,
                {"room_id": "room-2", "check_in_date": "bad", "check_out_date": "bad"},
                is_admin=True,
            )

        assert write_log == []
        assert room_repository.rooms[RoomId(value="room-2")].is_available is True

    def test_reassign_into_unavailable_room(self, service, seeded, room_repository, create_room):
        room_repository.rooms[RoomId(value="room-3")] = create_room(
            room_id="room-3", is_available=False
        )

        with pytest.raises(BusinessRuleViolationException):
            service.update(BOOKING_ID, {"room_id": "room-3"}, is_admin=True)

    def test_reassign_when_old_room_is_missing(
        self, service, booking_repository, room_repository, create_booking, create_room
    ):
        room_repository.rooms[RoomId(value="room-2")] = create_room(room_id="room-2")
        booking_repository.bookings[BOOKING_ID] = create_booking(room_id="room-gone")

        with pytest.raises(ResourceNotFoundException, match="Room not found"):
            service.update(BOOKING_ID, {"room_id": "room-2"}, is_admin=True)


class TestUpdateStatusForAdmin:
    def test_update_status(self, service, seeded):
        booking = service.update_status(BOOKING_ID, "Cancelled", is_admin=True)

        assert booking.status == BookingStatus.CANCELLED

    def test_update_status_leaves_room_untouched(self, service, seeded, write_log):
        service.update_status(BOOKING_ID, "Cancelled", is_admin=True)

        assert write_log == [("booking.update", "booking-1")]

    def test_status_is_required(self, service, seeded):
        with pytest.raises(BusinessRuleViolationException, match="Status is required"):
            service.update_status(BOOKING_ID, None, is_admin=True)

    def test_order_of_checks(self, service, seeded):
        with pytest.raises(ResourceNotFoundException):
            service.update_status(BookingId(value="missing"), None, is_admin=False)
        with pytest.raises(PermissionDeniedException):
            service.update_status(BOOKING_ID, None, is_admin=False)
        with pytest.raises(BusinessRuleViolationException, match="Status is required"):
            service.update_status(BOOKING_ID, "", is_admin=True)
        with pytest.raises(BusinessRuleViolationException, match="Invalid booking status"):
            service.update_status(BOOKING_ID, "Unknown", is_admin=True)
