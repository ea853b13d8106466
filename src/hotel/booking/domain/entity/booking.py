from datetime import datetime

from hotel.booking.domain.enum import BookingStatus
from hotel.booking.domain.value_object import BookingId, StayPeriod
from hotel.shared.domain import AggregateRoot, Money, RoomId, UserId


class Booking(AggregateRoot[BookingId]):
    """客室予約エンティティ

    合計料金は日程変更時点のスナップショットで、客室料金の改定には追従しない。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        room_id: RoomId,
        stay_period: StayPeriod,
        total_price: Money,
        booking_date: datetime,
        status: BookingStatus = BookingStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._user_id = user_id
        self._room_id = room_id
        self._stay_period = stay_period
        self._total_price = total_price
        self._booking_date = booking_date
        self._status = status

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def booking_date(self) -> datetime:
        return self._booking_date

    @property
    def status(self) -> BookingStatus:
        return self._status

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == BookingStatus.CANCELLED:
            return
        self._status = BookingStatus.CANCELLED

    def change_status(self, status: BookingStatus) -> None:
        """ステータスを上書きする（管理者操作、遷移の制約なし）"""
        self._status = status

    def reassign_room(self, room_id: RoomId) -> None:
        self._room_id = room_id

    def reschedule(self, stay_period: StayPeriod, total_price: Money) -> None:
        """日程と合計料金を更新する"""
        self._stay_period = stay_period
        self._total_price = total_price
