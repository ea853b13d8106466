import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

BOOKING_SERVICE = "booking-service"
ROOM_SERVICE = "room-service"
DASHBOARD_SERVICE = "dashboard-service"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        require_available_room: bool = False,
    ) -> None:
        super().__init__(scope, id)
        self._table = table
        self._common_layer = common_layer

        # 予約
        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "hotel.booking.handlers.create.lambda_handler",
            BOOKING_SERVICE,
            extra_environment={
                "REQUIRE_AVAILABLE_ROOM": str(require_available_room).lower(),
            },
        )
        self.update_booking = self._create_function(
            "UpdateBookingLambda",
            "hotel.booking.handlers.update.lambda_handler",
            BOOKING_SERVICE,
        )
        self.admin_update_booking = self._create_function(
            "AdminUpdateBookingLambda",
            "hotel.booking.handlers.admin_update.lambda_handler",
            BOOKING_SERVICE,
        )
        self.admin_update_booking_status = self._create_function(
            "AdminUpdateBookingStatusLambda",
            "hotel.booking.handlers.admin_update_status.lambda_handler",
            BOOKING_SERVICE,
        )
        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "hotel.booking.handlers.cancel.lambda_handler",
            BOOKING_SERVICE,
        )
        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "hotel.booking.handlers.list_bookings.lambda_handler",
            BOOKING_SERVICE,
        )
        self.get_booking = self._create_function(
            "GetBookingLambda",
            "hotel.booking.handlers.get_booking.lambda_handler",
            BOOKING_SERVICE,
        )
        self.list_user_bookings = self._create_function(
            "ListUserBookingsLambda",
            "hotel.booking.handlers.list_user_bookings.lambda_handler",
            BOOKING_SERVICE,
        )
        self.list_my_bookings = self._create_function(
            "ListMyBookingsLambda",
            "hotel.booking.handlers.list_my_bookings.lambda_handler",
            BOOKING_SERVICE,
        )

        # 客室
        self.create_room = self._create_function(
            "CreateRoomLambda",
            "hotel.room.handlers.create_room.lambda_handler",
            ROOM_SERVICE,
        )
        self.list_rooms = self._create_function(
            "ListRoomsLambda",
            "hotel.room.handlers.list_rooms.lambda_handler",
            ROOM_SERVICE,
        )
        self.get_room = self._create_function(
            "GetRoomLambda",
            "hotel.room.handlers.get_room.lambda_handler",
            ROOM_SERVICE,
        )
        self.put_rating = self._create_function(
            "PutRatingLambda",
            "hotel.room.handlers.put_rating.lambda_handler",
            ROOM_SERVICE,
        )
        self.get_average_rating = self._create_function(
            "GetAverageRatingLambda",
            "hotel.room.handlers.get_average_rating.lambda_handler",
            ROOM_SERVICE,
        )

        # ダッシュボード
        self.get_dashboard = self._create_function(
            "GetDashboardLambda",
            "hotel.dashboard.handlers.get_dashboard.lambda_handler",
            DASHBOARD_SERVICE,
        )

        for fn in [
            self.create_booking,
            self.update_booking,
            self.admin_update_booking,
            self.admin_update_booking_status,
            self.cancel_booking,
            self.create_room,
            self.put_rating,
        ]:
            table.grant_read_write_data(fn)

        for fn in [
            self.list_bookings,
            self.get_booking,
            self.list_user_bookings,
            self.list_my_bookings,
            self.list_rooms,
            self.get_room,
            self.get_average_rating,
            self.get_dashboard,
        ]:
            table.grant_read_data(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        extra_environment: dict[str, str] | None = None,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **(extra_environment or {}),
            },
        )
