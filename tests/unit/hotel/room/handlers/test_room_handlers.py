import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel.room.applications.get_average_rating import AverageRating
from hotel.room.handlers import create_room as create_room_handler
from hotel.room.handlers import get_average_rating, get_room, list_rooms, put_rating
from hotel.shared.domain.exception import (
    BusinessRuleViolationException,
    PermissionDeniedException,
    ResourceNotFoundException,
)


@pytest.fixture
def mock_service(monkeypatch):
    def _patch(module):
        service = MagicMock()
        monkeypatch.setattr(module, "service", service)
        return service

    return _patch


class TestPutRatingHandler:
    def test_rating_added(self, mock_service, api_event, lambda_context, create_room):
        service = mock_service(put_rating)
        service.rate.return_value = create_room(ratings=[("user-1", 4)])

        response = put_rating.lambda_handler(
            api_event(body=json.dumps({"rating": 4}), path_parameters={"id": "room-1"}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["success"] is True
        assert body["message"] == "Rating added successfully."
        assert body["room"]["ratings"] == [{"userId": "user-1", "rating": 4}]
        room_id, user_id, score = service.rate.call_args.args
        assert (str(room_id), str(user_id), score) == ("room-1", "user-1", 4)

    def test_duplicate_rating(self, mock_service, api_event, lambda_context):
        mock_service(put_rating).rate.side_effect = BusinessRuleViolationException(
            "You have already rated this room."
        )

        response = put_rating.lambda_handler(
            api_event(body=json.dumps({"rating": 4}), path_parameters={"id": "room-1"}),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {
            "success": False,
            "message": "You have already rated this room.",
        }

    def test_non_integer_rating(self, mock_service, api_event, lambda_context):
        service = mock_service(put_rating)

        response = put_rating.lambda_handler(
            api_event(body=json.dumps({"rating": "great"}), path_parameters={"id": "room-1"}),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["success"] is False
        service.rate.assert_not_called()

    def test_room_not_found(self, mock_service, api_event, lambda_context):
        mock_service(put_rating).rate.side_effect = ResourceNotFoundException(
            "Room not found."
        )

        response = put_rating.lambda_handler(
            api_event(body=json.dumps({"rating": 4}), path_parameters={"id": "room-1"}),
            lambda_context,
        )

        assert response["statusCode"] == 404


class TestGetAverageRatingHandler:
    def test_average(self, mock_service, api_event, lambda_context):
        mock_service(get_average_rating).get.return_value = AverageRating(
            value=5, has_ratings=True
        )

        response = get_average_rating.lambda_handler(
            api_event(path_parameters={"id": "room-1"}), lambda_context
        )

        body = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert body["success"] is True
        assert body["avg"] == 5

    def test_no_ratings(self, mock_service, api_event, lambda_context):
        mock_service(get_average_rating).get.return_value = AverageRating(
            value=0, has_ratings=False
        )

        response = get_average_rating.lambda_handler(
            api_event(path_parameters={"id": "room-1"}), lambda_context
        )

        body = json.loads(response["body"])
        assert body["avg"] == 0
        assert body["message"] == "No ratings available."

    def test_missing_room_is_logged(
        self, monkeypatch, mock_service, api_event, lambda_context
    ):
        mock_service(get_average_rating).get.side_effect = ResourceNotFoundException(
            "Room not found"
        )
        logger = MagicMock()
        monkeypatch.setattr(get_average_rating, "logger", logger)

        response = get_average_rating.lambda_handler(
            api_event(path_parameters={"id": "missing"}), lambda_context
        )

        assert response["statusCode"] == 404
        logger.info.assert_any_call(
            "Rejected average rating request", extra={"reason": "Room not found"}
        )


class TestCreateRoomHandler:
    BODY = json.dumps(
        {"name": "Suite", "pricePerNight": "30000", "maxOccupancy": 3, "amenities": ["wifi"]}
    )

    def test_created(self, mock_service, api_event, lambda_context, create_room):
        service = mock_service(create_room_handler)
        service.register.return_value = create_room(name="Suite", price=Decimal("30000"))

        response = create_room_handler.lambda_handler(
            api_event(body=self.BODY, role="admin"), lambda_context
        )

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["message"] == "Room created successfully"
        assert body["room"]["pricePerNight"] == "30000"
        details = service.register.call_args.args[0]
        assert details["price_per_night"] == Decimal("30000")
        assert details["amenities"] == ["wifi"]
        assert service.register.call_args.kwargs["is_admin"] is True

    def test_non_admin(self, mock_service, api_event, lambda_context):
        mock_service(create_room_handler).register.side_effect = PermissionDeniedException(
            "You do not have permission to add rooms"
        )

        response = create_room_handler.lambda_handler(
            api_event(body=self.BODY), lambda_context
        )

        assert response["statusCode"] == 403

    def test_invalid_price(self, mock_service, api_event, lambda_context):
        service = mock_service(create_room_handler)

        response = create_room_handler.lambda_handler(
            api_event(
                body=json.dumps({"name": "Suite", "pricePerNight": 0, "maxOccupancy": 1}),
                role="admin",
            ),
            lambda_context,
        )

        assert response["statusCode"] == 400
        service.register.assert_not_called()


class TestRoomReadHandlers:
    def test_list_rooms(self, mock_service, api_event, lambda_context, create_room):
        mock_service(list_rooms).list_all.return_value = [create_room()]

        response = list_rooms.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body[0]["id"] == "room-1"
        assert body[0]["isAvailable"] is True

    def test_get_room_not_found(self, mock_service, api_event, lambda_context):
        mock_service(get_room).get.side_effect = ResourceNotFoundException(
            "Room not found"
        )

        response = get_room.lambda_handler(
            api_event(path_parameters={"id": "missing"}), lambda_context
        )

        assert response["statusCode"] == 404
