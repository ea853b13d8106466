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
from hotel.shared.domain import DomainException, UserId
from hotel.shared.utils import (
    api_response,
    caller_from_event,
    domain_error_response,
    internal_error_response,
    require_user_id,
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
    """ログインユーザー自身の予約一覧 Lambda Handler"""
    caller = caller_from_event(event)
    logger.info("Fetching caller bookings", extra={"user_id": caller.user_id})

    try:
        user_id = require_user_id(caller)
        views = service.list_by_user(UserId(value=user_id))
    except DomainException as e:
        logger.info("Rejected caller bookings request", extra={"reason": str(e)})
        return domain_error_response(e, success=False)
    except Exception as e:
        logger.exception("Failed to fetch caller bookings")
        return internal_error_response(
            "Server error occurred while fetching user bookings.", e, success=False
        )

    return api_response(
        200,
        {
            "success": True,
            "message": "Bookings retrieved successfully.",
            "bookings": [to_booking_detail_data(v).to_dict() for v in views],
        },
    )
