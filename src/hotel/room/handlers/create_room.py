from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel.room.applications.register_room import RegisterRoomService
from hotel.room.domain.factory import RoomDetails, RoomFactory
from hotel.room.handlers.request_models import CreateRoomRequest
from hotel.room.handlers.response_models import to_room_data
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.domain import DomainException
from hotel.shared.utils import (
    api_response,
    caller_from_event,
    domain_error_response,
    internal_error_response,
    parse_body,
    validation_error_response,
)

logger = Logger()

repository = DynamoDBRoomRepository()
factory = RoomFactory()
service = RegisterRoomService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室登録 Lambda Handler（管理者のみ）"""
    caller = caller_from_event(event)
    logger.info("Received create room request", extra={"user_id": caller.user_id})

    try:
        request = parse_body(event, CreateRoomRequest)
        room = service.register(_to_room_details(request), is_admin=caller.is_admin)
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        logger.info("Rejected create room request", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to create room")
        return internal_error_response("Failed to create room", e)

    return api_response(
        201,
        {"message": "Room created successfully", "room": to_room_data(room).to_dict()},
    )


def _to_room_details(request: CreateRoomRequest) -> RoomDetails:
    """リクエストボディから RoomDetails を構築する"""
    return {
        "name": request.name,
        "price_per_night": request.price_per_night,
        "max_occupancy": request.max_occupancy,
        "description": request.description,
        "amenities": request.amenities,
        "images": request.images,
        "room_type": request.room_type,
        "is_available": request.is_available,
    }
