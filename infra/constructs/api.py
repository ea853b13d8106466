from aws_cdk import Duration
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct

    認証は外部の Lambda Authorizer に委譲する。
    authorizer_function_arn を省略した場合は Authorizer なしでデプロイする。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: Functions,
        authorizer_function_arn: str | None = None,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "HotelRestApi",
            rest_api_name="Hotel Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
            ),
        )

        self.authorizer: apigw.IAuthorizer | None = None
        if authorizer_function_arn:
            authorizer_fn = _lambda.Function.from_function_arn(
                self, "ExternalAuthorizerFn", authorizer_function_arn
            )
            self.authorizer = apigw.TokenAuthorizer(
                self,
                "TokenAuthorizer",
                handler=authorizer_fn,
                results_cache_ttl=Duration.seconds(300),
            )

        root = self.rest_api.root

        # /bookings
        bookings = root.add_resource("bookings")
        self._add_route(bookings, "POST", functions.create_booking)
        self._add_route(bookings, "GET", functions.list_bookings)

        booking = bookings.add_resource("{id}")
        self._add_route(booking, "GET", functions.get_booking)
        self._add_route(booking, "PUT", functions.update_booking)
        cancel = booking.add_resource("cancel")
        self._add_route(cancel, "POST", functions.cancel_booking)

        # /admin/bookings
        admin_booking = (
            root.add_resource("admin").add_resource("bookings").add_resource("{id}")
        )
        self._add_route(admin_booking, "PUT", functions.admin_update_booking)
        self._add_route(
            admin_booking.add_resource("status"),
            "PATCH",
            functions.admin_update_booking_status,
        )

        # /users/{id}/bookings, /me/bookings
        user_bookings = (
            root.add_resource("users").add_resource("{id}").add_resource("bookings")
        )
        self._add_route(user_bookings, "GET", functions.list_user_bookings)
        my_bookings = root.add_resource("me").add_resource("bookings")
        self._add_route(my_bookings, "GET", functions.list_my_bookings)

        # /rooms
        rooms = root.add_resource("rooms")
        self._add_route(rooms, "POST", functions.create_room)
        self._add_route(rooms, "GET", functions.list_rooms)

        room = rooms.add_resource("{id}")
        self._add_route(room, "GET", functions.get_room)

        rating = room.add_resource("rating")
        self._add_route(rating, "POST", functions.put_rating)
        self._add_route(rating, "GET", functions.get_average_rating)

        # /dashboard
        self._add_route(root.add_resource("dashboard"), "GET", functions.get_dashboard)

    def _add_route(
        self, resource: apigw.IResource, method: str, fn: _lambda.IFunction
    ) -> apigw.Method:
        return resource.add_method(
            method,
            apigw.LambdaIntegration(fn),
            authorizer=self.authorizer,
        )
