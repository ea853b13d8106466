from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel.booking.applications.update_booking_for_admin import (
    UpdateBookingForAdminService,
)
from hotel.booking.domain.value_object import BookingId
from hotel.booking.handlers.request_models import UpdateStatusRequest
from hotel.booking.handlers.response_models import to_booking_data
from hotel.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.domain import DomainException
from hotel.shared.utils import (
    api_response,
    caller_from_event,
    domain_error_response,
    internal_error_response,
    parse_body,
    path_parameter,
    validation_error_response,
)

logger = Logger()

booking_repository = DynamoDBBookingRepository()
room_repository = DynamoDBRoomRepository()
service = UpdateBookingForAdminService(
    booking_repository=booking_repository,
    room_repository=room_repository,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """管理者用 予約ステータス変更 Lambda Handler"""
    booking_id = path_parameter(event, "id")
    caller = caller_from_event(event)
    logger.info(
        "Received update booking status request",
        extra={"booking_id": booking_id, "user_id": caller.user_id},
    )

    try:
        # ボディの検証より前に 予約の存在確認 → 権限確認 を行う
        service.load_for_admin(BookingId(value=booking_id), is_admin=caller.is_admin)
        request = parse_body(event, UpdateStatusRequest)
        booking = service.update_status(
            BookingId(value=booking_id), request.status, is_admin=caller.is_admin
        )
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        logger.info("Rejected update booking status request", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to update booking status")
        return internal_error_response("Failed to update booking status", e)

    return api_response(
        200,
        {
            "message": "Booking status updated successfully",
            "booking": to_booking_data(booking).to_dict(),
        },
    )
