from abc import abstractmethod

from hotel.room.domain.entity import Room
from hotel.shared.domain import Repository, RoomId


class RoomRepository(Repository[Room, RoomId]):
    """客室リポジトリのインターフェース"""

    @abstractmethod
    def save(self, room: Room) -> None:
        """客室を保存する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, room: Room) -> None:
        """客室を更新する（空室フラグ・評価）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Room]:
        """全客室を取得する"""
        raise NotImplementedError
