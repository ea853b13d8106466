from hotel.booking.domain.entity import Booking
from hotel.room.domain.entity import Room
from hotel.room.domain.repository import RoomRepository
from hotel.shared.domain import RoomId
from hotel.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class RoomReassignmentService:
    """予約の客室を付け替えるドメインサービス

    旧客室を空室に、新客室を満室にしてそれぞれ保存する。
    2つの客室と予約の書き込みはトランザクションで保護されない。
    """

    def __init__(self, room_repository: RoomRepository) -> None:
        self._room_repository = room_repository

    def reassign(
        self, booking: Booking, new_room_id: RoomId, old_room: Room | None = None
    ) -> Room:
        """新しい客室を返す（old_room を省略した場合は付け替え時に取得する）"""
        new_room = self._room_repository.find_by_id(new_room_id)
        if new_room is None:
            raise ResourceNotFoundException("New room not found")
        if not new_room.is_available:
            raise BusinessRuleViolationException(
                "New room is not available for booking"
            )

        if old_room is None:
            old_room = self._room_repository.find_by_id(booking.room_id)
            if old_room is None:
                raise ResourceNotFoundException("Room not found")

        old_room.mark_available()
        self._room_repository.update(old_room)

        new_room.mark_unavailable()
        self._room_repository.update(new_room)

        booking.reassign_room(new_room.id)
        return new_room
