from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel.booking.applications.cancel_booking import CancelBookingService
from hotel.booking.domain.value_object import BookingId
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
    path_parameter,
)

logger = Logger()

booking_repository = DynamoDBBookingRepository()
room_repository = DynamoDBRoomRepository()
service = CancelBookingService(
    booking_repository=booking_repository,
    room_repository=room_repository,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""
    booking_id = path_parameter(event, "id")
    logger.info("Received cancel booking request", extra={"booking_id": booking_id})

    try:
        booking = service.cancel(BookingId(value=booking_id))
    except DomainException as e:
        logger.info("Rejected cancel booking request", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to cancel booking")
        return internal_error_response("Failed to cancel booking", e)

    logger.info("Booking cancelled", extra={"booking_id": booking_id})
    return api_response(
        200,
        {
            "message": "Booking cancelled successfully",
            "booking": to_booking_data(booking).to_dict(),
        },
    )
