from hotel.room.domain.entity import Room
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId, UserId
from hotel.shared.domain.exception import ResourceNotFoundException


class PutRatingService:
    """客室評価のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def rate(self, room_id: RoomId, user_id: UserId, score: int) -> Room:
        """客室に評価を追加する（1ユーザー1件まで）"""
        room = self._repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException("Room not found.")

        room.add_rating(user_id, score)
        self._repository.update(room)
        return room
