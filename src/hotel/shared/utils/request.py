from typing import TypeVar

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import BaseModel

from hotel.shared.domain.exception import PermissionDeniedException
from hotel.shared.utils.identity import Caller

T = TypeVar("T", bound=BaseModel)


def parse_body(event: APIGatewayProxyEvent, model: type[T]) -> T:
    """リクエストボディを Pydantic モデルに変換する

    ボディが空の場合は空オブジェクトとして扱う。
    """
    return model.model_validate_json(event.decoded_body or "{}")


def path_parameter(event: APIGatewayProxyEvent, name: str) -> str:
    return (event.path_parameters or {}).get(name, "")


def require_user_id(caller: Caller) -> str:
    """認証済みユーザーIDを取り出す（Authorizer コンテキストにない場合は拒否）"""
    if not caller.user_id:
        raise PermissionDeniedException("Authenticated user is required")
    return caller.user_id
