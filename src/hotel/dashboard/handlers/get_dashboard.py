from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel.dashboard.applications.get_dashboard_stats import GetDashboardStatsService
from hotel.dashboard.handlers.response_models import to_dashboard_stats_data
from hotel.shared.utils import api_response
from hotel.user.infrastructure.dynamodb_user_repository import DynamoDBUserRepository

logger = Logger()

service = GetDashboardStatsService(
    booking_repository=DynamoDBBookingRepository(),
    user_repository=DynamoDBUserRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ダッシュボード集計 Lambda Handler"""
    try:
        stats = service.get()
    except Exception:
        logger.exception("Failed to fetch dashboard stats")
        return api_response(500, {"error": "Failed to fetch dashboard stats"})

    logger.info(
        "Fetched dashboard stats",
        extra={"total_bookings": stats.total_bookings, "revenue": str(stats.revenue)},
    )
    return api_response(200, to_dashboard_stats_data(stats).to_dict())
