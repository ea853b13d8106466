from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel.booking.applications.create_booking import CreateBookingService
from hotel.booking.domain.factory import BookingDetails, BookingFactory
from hotel.booking.handlers.request_models import CreateBookingRequest
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
    validation_error_response,
)
from hotel.shared.utils.config import env_flag
from hotel.user.infrastructure.dynamodb_user_repository import DynamoDBUserRepository

logger = Logger()

# 依存関係の組み立て
booking_repository = DynamoDBBookingRepository()
room_repository = DynamoDBRoomRepository()
user_repository = DynamoDBUserRepository()
factory = BookingFactory()
service = CreateBookingService(
    booking_repository=booking_repository,
    room_repository=room_repository,
    user_repository=user_repository,
    factory=factory,
    require_available_room=env_flag("REQUIRE_AVAILABLE_ROOM"),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""
    logger.info("Received create booking request")

    try:
        request = parse_body(event, CreateBookingRequest)
        booking = service.create(_to_booking_details(request))
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        logger.info("Rejected create booking request", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to create booking")
        return internal_error_response("Failed to create booking", e)

    logger.info(
        "Booking created",
        extra={
            "booking_id": str(booking.id),
            "total_price": str(booking.total_price.amount),
        },
    )
    return api_response(
        201,
        {
            "message": "Booking created successfully",
            "bookingId": str(booking.id),
            "booking": to_booking_data(booking).to_dict(),
        },
    )


def _to_booking_details(request: CreateBookingRequest) -> BookingDetails:
    return {
        "user_id": request.user_id,
        "room_id": request.room_id,
        "check_in_date": request.check_in_date,
        "check_out_date": request.check_out_date,
    }
