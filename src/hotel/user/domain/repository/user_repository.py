from abc import abstractmethod

from hotel.shared.domain import Repository, UserId
from hotel.user.domain.entity import User


class UserRepository(Repository[User, UserId]):
    """ユーザーリポジトリのインターフェース"""

    @abstractmethod
    def save(self, user: User) -> None:
        """ユーザーを保存する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> None:
        """ユーザーを更新する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def count_by_booking_flag(self, is_booking: bool) -> int:
        """予約フラグごとのユーザー数を数える"""
        raise NotImplementedError
