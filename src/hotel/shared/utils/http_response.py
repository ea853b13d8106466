import json

from pydantic import ValidationError

from hotel.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    PermissionDeniedException,
    ResourceNotFoundException,
)

_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ResourceNotFoundException, 404),
    (PermissionDeniedException, 403),
    (DuplicateResourceException, 409),
    (BusinessRuleViolationException, 400),
]


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def status_code_for(error: DomainException) -> int:
    """ドメイン例外を HTTP ステータスコードに対応付ける"""
    for exception_type, status_code in _STATUS_CODES:
        if isinstance(error, exception_type):
            return status_code
    return 400


def domain_error_response(error: DomainException, **extra: object) -> dict:
    """ドメイン例外からエラーレスポンスを生成する

    extra はエンドポイント固有のキー（例: success=False）をボディに追加する。
    """
    return api_response(status_code_for(error), {**extra, "message": str(error)})


def validation_error_response(error: ValidationError, **extra: object) -> dict:
    """リクエストボディのバリデーションエラーを 400 に変換する"""
    return api_response(
        400,
        {
            **extra,
            "message": "Invalid request body",
            "error": error.errors(include_url=False, include_context=False),
        },
    )


def internal_error_response(message: str, error: Exception, **extra: object) -> dict:
    """想定外のエラーを 500 に変換する"""
    return api_response(500, {**extra, "message": message, "error": str(error)})
