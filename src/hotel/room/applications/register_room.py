from hotel.room.domain.entity import Room
from hotel.room.domain.factory import RoomDetails, RoomFactory
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain.exception import PermissionDeniedException


class RegisterRoomService:
    """客室登録のユースケース（管理者のみ）"""

    def __init__(self, repository: RoomRepository, factory: RoomFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, room_details: RoomDetails, is_admin: bool) -> Room:
        if not is_admin:
            raise PermissionDeniedException("You do not have permission to add rooms")

        room = self._factory.create(room_details)
        self._repository.save(room)
        return room
