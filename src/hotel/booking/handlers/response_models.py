from __future__ import annotations

from hotel.booking.applications.get_bookings import BookingView
from hotel.booking.domain.entity import Booking
from hotel.room.handlers.response_models import RoomData, to_room_data
from hotel.shared.utils import ResponseModel
from hotel.user.domain.entity import User


class BookingData(ResponseModel):
    """予約データのレスポンスモデル"""

    id: str
    user_id: str
    room_id: str
    check_in_date: str
    check_out_date: str
    total_price: str
    booking_date: str
    status: str


class UserData(ResponseModel):
    """ユーザーデータのレスポンスモデル（パスワードハッシュは含めない）"""

    id: str
    name: str
    email: str
    role: str
    is_booking: bool


class BookingDetailData(BookingData):
    """参照先のユーザー・客室を展開した予約データ"""

    user: UserData | None
    room: RoomData | None


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスモデルに変換する"""
    return BookingData(**_booking_fields(booking))


def to_user_data(user: User) -> UserData:
    return UserData(
        id=str(user.id),
        name=user.name,
        email=user.email,
        role=user.role,
        is_booking=user.is_booking,
    )


def to_booking_detail_data(view: BookingView) -> BookingDetailData:
    """BookingView をレスポンスモデルに変換する"""
    return BookingDetailData(
        **_booking_fields(view.booking),
        user=to_user_data(view.user) if view.user else None,
        room=to_room_data(view.room) if view.room else None,
    )


def _booking_fields(booking: Booking) -> dict:
    return {
        "id": str(booking.id),
        "user_id": str(booking.user_id),
        "room_id": str(booking.room_id),
        "check_in_date": booking.stay_period.check_in,
        "check_out_date": booking.stay_period.check_out,
        "total_price": str(booking.total_price.amount),
        "booking_date": booking.booking_date.isoformat(),
        "status": booking.status.value,
    }
