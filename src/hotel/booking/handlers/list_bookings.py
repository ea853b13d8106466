from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel.booking.applications.get_bookings import GetBookingsService
from hotel.booking.handlers.response_models import to_booking_detail_data
from hotel.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.utils import api_response, internal_error_response
from hotel.user.infrastructure.dynamodb_user_repository import DynamoDBUserRepository

logger = Logger()

service = GetBookingsService(
    booking_repository=DynamoDBBookingRepository(),
    user_repository=DynamoDBUserRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """全予約一覧 Lambda Handler"""
    try:
        views = service.list_all()
    except Exception as e:
        logger.exception("Failed to fetch bookings")
        return internal_error_response("Failed to fetch bookings", e)

    logger.info("Fetched bookings", extra={"count": len(views)})
    return api_response(200, [to_booking_detail_data(v).to_dict() for v in views])
