from dataclasses import dataclass

from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId
from hotel.shared.domain.exception import ResourceNotFoundException


@dataclass(frozen=True)
class AverageRating:
    """平均評価（評価なしの場合は value=0, has_ratings=False）"""

    value: int
    has_ratings: bool


class GetAverageRatingService:
    """客室の平均評価を取得するユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def get(self, room_id: RoomId) -> AverageRating:
        room = self._repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException("Room not found.")

        average = room.average_rating()
        if average is None:
            return AverageRating(value=0, has_ratings=False)
        return AverageRating(value=average, has_ratings=True)
