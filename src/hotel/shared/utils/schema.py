from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """リクエストモデルの基底クラス

    フロントエンドは camelCase で送信するため、camelCase / snake_case の両方を受け付ける。
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseModel(BaseModel):
    """レスポンスモデルの基底クラス（camelCase で出力する）"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
