from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel.room.applications.get_rooms import GetRoomsService
from hotel.room.handlers.response_models import to_room_data
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.domain import DomainException, RoomId
from hotel.shared.utils import (
    api_response,
    domain_error_response,
    internal_error_response,
    path_parameter,
)

logger = Logger()

repository = DynamoDBRoomRepository()
service = GetRoomsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室詳細取得 Lambda Handler"""
    room_id = path_parameter(event, "id")
    logger.info("Fetching room details", extra={"room_id": room_id})

    try:
        room = service.get(RoomId(value=room_id))
    except DomainException as e:
        logger.info("Rejected get room request", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to fetch room")
        return internal_error_response("Failed to fetch room", e)

    return api_response(200, to_room_data(room).to_dict())
