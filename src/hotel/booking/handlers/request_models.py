from pydantic import Field

from hotel.shared.utils import RequestModel


class CreateBookingRequest(RequestModel):
    """予約作成リクエストモデル

    日付の形式・前後関係はドメイン側（StayPeriod）で検証する。
    """

    user_id: str = Field(..., min_length=1, description="予約するユーザーID")
    room_id: str = Field(..., min_length=1, description="予約する客室ID")
    check_in_date: str = Field(..., description="チェックイン日", examples=["2026-05-01"])
    check_out_date: str = Field(..., description="チェックアウト日", examples=["2026-05-03"])


class UpdateBookingRequest(RequestModel):
    """予約変更リクエストモデル（指定された項目のみ変更する）"""

    room_id: str | None = Field(default=None, description="付け替え先の客室ID")
    check_in_date: str | None = Field(default=None, description="新しいチェックイン日")
    check_out_date: str | None = Field(default=None, description="新しいチェックアウト日")


class AdminUpdateBookingRequest(UpdateBookingRequest):
    """管理者用の予約変更リクエストモデル

    ステータスの値チェックは権限確認の後にドメイン側で行う。
    """

    status: str | None = Field(default=None, description="予約ステータス")


class UpdateStatusRequest(RequestModel):
    status: str | None = Field(default=None, description="予約ステータス")
