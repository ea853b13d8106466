from abc import abstractmethod

from hotel.booking.domain.entity import Booking
from hotel.booking.domain.value_object import BookingId
from hotel.shared.domain import Money, Repository, UserId


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """予約を更新する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_recent(self, limit: int) -> list[Booking]:
        """予約日時の新しい順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """予約の総数（キャンセル済みを含む）"""
        raise NotImplementedError

    @abstractmethod
    def sum_total_price(self) -> Money:
        """合計料金の総和（キャンセル済みを含む）"""
        raise NotImplementedError
