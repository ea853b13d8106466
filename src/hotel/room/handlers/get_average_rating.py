from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel.room.applications.get_average_rating import GetAverageRatingService
from hotel.room.infrastructure.dynamodb_room_repository import DynamoDBRoomRepository
from hotel.shared.domain import DomainException, RoomId
from hotel.shared.utils import api_response, domain_error_response, path_parameter

logger = Logger()

repository = DynamoDBRoomRepository()
service = GetAverageRatingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """平均評価取得 Lambda Handler"""
    room_id = path_parameter(event, "id")
    logger.info("Fetching average rating", extra={"room_id": room_id})

    try:
        average = service.get(RoomId(value=room_id))
    except DomainException as e:
        logger.info("Rejected average rating request", extra={"reason": str(e)})
        return domain_error_response(e, success=False)
    except Exception:
        logger.exception("Failed to fetch average rating")
        return api_response(
            500,
            {
                "success": False,
                "message": "Server error occurred while retrieving average rating.",
            },
        )

    message = (
        "Average rating retrieved successfully."
        if average.has_ratings
        else "No ratings available."
    )
    return api_response(
        200, {"success": True, "message": message, "avg": average.value}
    )
