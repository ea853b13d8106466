from dataclasses import dataclass

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from hotel.shared.utils.config import admin_role


@dataclass(frozen=True)
class Caller:
    """認証済みの呼び出し元

    認証自体は API Gateway の Lambda Authorizer 側で完了している前提。
    """

    user_id: str | None
    role: str | None

    @property
    def is_admin(self) -> bool:
        return self.role == admin_role()


def caller_from_event(event: APIGatewayProxyEvent) -> Caller:
    """Authorizer コンテキストから呼び出し元を取り出す"""
    request_context = event.raw_event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    return Caller(
        user_id=authorizer.get("userId") or authorizer.get("principalId"),
        role=authorizer.get("role"),
    )
