from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel.booking.applications.update_booking import UpdateBookingService
from hotel.booking.domain.value_object import BookingId
from hotel.booking.handlers.request_models import UpdateBookingRequest
from hotel.booking.handlers.response_models import to_booking_data
from hotel.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.domain import DomainException
from hotel.shared.utils import (
    api_response,
    domain_error_response,
    internal_error_response,
    parse_body,
    path_parameter,
    validation_error_response,
)

logger = Logger()

booking_repository = DynamoDBBookingRepository()
room_repository = DynamoDBRoomRepository()
service = UpdateBookingService(
    booking_repository=booking_repository,
    room_repository=room_repository,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約変更 Lambda Handler（客室の付け替え・日程変更）"""
    booking_id = path_parameter(event, "id")
    logger.info("Received update booking request", extra={"booking_id": booking_id})

    try:
        request = parse_body(event, UpdateBookingRequest)
        booking = service.update(
            BookingId(value=booking_id),
            {
                "room_id": request.room_id,
                "check_in_date": request.check_in_date,
                "check_out_date": request.check_out_date,
            },
        )
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        logger.info("Rejected update booking request", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to update booking")
        return internal_error_response("Failed to update booking", e)

    return api_response(
        200,
        {
            "message": "Booking updated successfully",
            "booking": to_booking_data(booking).to_dict(),
        },
    )
