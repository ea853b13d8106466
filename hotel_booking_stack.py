from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs.api import Api
from infra.constructs.database import Database
from infra.constructs.functions import Functions
from infra.constructs.layers import Layers


class HotelBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            require_available_room=bool(
                self.node.try_get_context("requireAvailableRoom")
            ),
        )

        api = Api(
            self,
            "Api",
            functions=fns,
            authorizer_function_arn=self.node.try_get_context("authorizerFunctionArn"),
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
