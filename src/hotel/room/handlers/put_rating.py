from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel.room.applications.put_rating import PutRatingService
from hotel.room.handlers.request_models import PutRatingRequest
from hotel.room.handlers.response_models import to_room_data
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.domain import DomainException, RoomId, UserId
from hotel.shared.utils import (
    api_response,
    caller_from_event,
    domain_error_response,
    parse_body,
    path_parameter,
    require_user_id,
    validation_error_response,
)

logger = Logger()

repository = DynamoDBRoomRepository()
service = PutRatingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室評価 Lambda Handler"""
    room_id = path_parameter(event, "id")
    caller = caller_from_event(event)
    logger.info(
        "Received put rating request",
        extra={"room_id": room_id, "user_id": caller.user_id},
    )

    try:
        request = parse_body(event, PutRatingRequest)
        user_id = require_user_id(caller)
        room = service.rate(
            RoomId(value=room_id), UserId(value=user_id), request.rating
        )
    except ValidationError as e:
        return validation_error_response(e, success=False)
    except DomainException as e:
        logger.info("Rejected put rating request", extra={"reason": str(e)})
        return domain_error_response(e, success=False)
    except Exception:
        logger.exception("Failed to put rating")
        return api_response(
            500,
            {"success": False, "message": "Server error occurred while adding rating"},
        )

    return api_response(
        200,
        {
            "success": True,
            "message": "Rating added successfully.",
            "room": to_room_data(room).to_dict(),
        },
    )
