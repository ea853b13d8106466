"""管理者用ハンドラーの判定順（予約の存在 → 権限 → ボディ）"""

import json

import pytest

from hotel.booking.applications.update_booking_for_admin import (
    UpdateBookingForAdminService,
)
from hotel.booking.domain.enum import BookingStatus
from hotel.booking.domain.value_object import BookingId
from hotel.booking.handlers import admin_update, admin_update_status
from hotel.shared.domain import RoomId

BOOKING_ID = BookingId(value="booking-1")


@pytest.fixture(autouse=True)
def service(
    monkeypatch, booking_repository, room_repository, create_booking, create_room
):
    """インメモリリポジトリを使う実サービスを両ハンドラーに設定する"""
    room_repository.rooms[RoomId(value="room-1")] = create_room()
    booking_repository.bookings[BOOKING_ID] = create_booking()
    service = UpdateBookingForAdminService(
        booking_repository=booking_repository,
        room_repository=room_repository,
    )
    monkeypatch.setattr(admin_update, "service", service)
    monkeypatch.setattr(admin_update_status, "service", service)
    return service


class TestAdminHandlersAccessOrder:
    @pytest.mark.parametrize(
        "handler, body",
        [
            (admin_update_status, json.dumps({"status": 5})),
            (admin_update_status, "not json"),
            (admin_update, json.dumps({"roomId": 123})),
            (admin_update, "not json"),
        ],
    )
    def test_non_admin_with_malformed_body_is_forbidden(
        self, handler, body, api_event, lambda_context, write_log
    ):
        response = handler.lambda_handler(
            api_event(body=body, path_parameters={"id": "booking-1"}, role="user"),
            lambda_context,
        )

        assert response["statusCode"] == 403
        assert write_log == []

    @pytest.mark.parametrize("handler", [admin_update, admin_update_status])
    def test_missing_booking_with_malformed_body_is_not_found(
        self, handler, api_event, lambda_context
    ):
        response = handler.lambda_handler(
            api_event(body="not json", path_parameters={"id": "missing"}, role="user"),
            lambda_context,
        )

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["message"] == "Booking not found"

    def test_admin_with_malformed_body_is_bad_request(
        self, api_event, lambda_context, write_log
    ):
        response = admin_update_status.lambda_handler(
            api_event(
                body=json.dumps({"status": 5}),
                path_parameters={"id": "booking-1"},
                role="admin",
            ),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid request body"
        assert write_log == []

    def test_admin_update_status(
        self, api_event, lambda_context, booking_repository
    ):
        response = admin_update_status.lambda_handler(
            api_event(
                body=json.dumps({"status": "Confirmed"}),
                path_parameters={"id": "booking-1"},
                role="admin",
            ),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert booking_repository.bookings[BOOKING_ID].status == BookingStatus.CONFIRMED
