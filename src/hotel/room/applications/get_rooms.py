from hotel.room.domain.entity import Room
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId
from hotel.shared.domain.exception import ResourceNotFoundException


class GetRoomsService:
    """客室参照のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def list_all(self) -> list[Room]:
        return self._repository.find_all()

    def get(self, room_id: RoomId) -> Room:
        room = self._repository.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException("Room not found")
        return room
