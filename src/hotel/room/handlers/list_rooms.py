from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel.room.applications.get_rooms import GetRoomsService
from hotel.room.handlers.response_models import to_room_data
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.utils import api_response, internal_error_response

logger = Logger()

repository = DynamoDBRoomRepository()
service = GetRoomsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室一覧取得 Lambda Handler"""
    logger.info("Listing all rooms")

    try:
        rooms = service.list_all()
    except Exception as e:
        logger.exception("Failed to list rooms")
        return internal_error_response("Failed to fetch rooms", e)

    return api_response(200, [to_room_data(room).to_dict() for room in rooms])
