from decimal import Decimal

from pydantic import Field, field_validator

from hotel.shared.utils import RequestModel, to_decimal


class PutRatingRequest(RequestModel):
    """客室評価リクエストモデル

    範囲チェック（0〜5）はドメイン側で行う。
    """

    rating: int = Field(..., description="評価値（0〜5）", examples=[4])


class CreateRoomRequest(RequestModel):
    """客室登録リクエストモデル"""

    name: str = Field(..., min_length=1, max_length=100, description="客室名")
    price_per_night: Decimal = Field(..., gt=0, description="1泊あたりの料金")
    max_occupancy: int = Field(..., ge=1, description="最大宿泊人数")
    description: str = Field(default="", description="説明")
    amenities: list[str] = Field(default_factory=list, description="設備")
    images: list[str] = Field(default_factory=list, description="画像パス")
    room_type: str | None = Field(default=None, description="客室タイプ")
    is_available: bool = Field(default=True, description="空室フラグ")

    @field_validator("price_per_night", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)
