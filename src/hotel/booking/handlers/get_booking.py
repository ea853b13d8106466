from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel.booking.applications.get_bookings import GetBookingsService
from hotel.booking.domain.value_object import BookingId
from hotel.booking.handlers.response_models import to_booking_detail_data
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
    """予約詳細 Lambda Handler"""
    booking_id = path_parameter(event, "id")
    logger.info("Fetching booking", extra={"booking_id": booking_id})

    try:
        view = service.get(BookingId(value=booking_id))
    except DomainException as e:
        logger.info("Rejected get booking request", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to fetch booking")
        return internal_error_response("Failed to fetch booking", e)

    return api_response(200, to_booking_detail_data(view).to_dict())
