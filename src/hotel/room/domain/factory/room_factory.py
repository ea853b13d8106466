from decimal import Decimal
from typing import NotRequired, TypedDict

from hotel.room.domain.entity.room import Room
from hotel.room.domain.value_object import RoomName
from hotel.shared.domain import Money, RoomId
from hotel.shared.domain.exception import BusinessRuleViolationException


class RoomDetails(TypedDict):
    """客室登録の入力データ"""

    name: str
    price_per_night: Decimal
    max_occupancy: int
    description: NotRequired[str]
    amenities: NotRequired[list[str]]
    images: NotRequired[list[str]]
    room_type: NotRequired[str | None]
    is_available: NotRequired[bool]


class RoomFactory:
    """客室エンティティを生成するFactory"""

    def create(self, room_details: RoomDetails) -> Room:
        """新規客室のエンティティを作成する"""
        try:
            name = RoomName(room_details["name"])
            price_per_night = Money(amount=room_details["price_per_night"])
        except ValueError as e:
            raise BusinessRuleViolationException(str(e)) from e

        if not price_per_night.is_positive():
            raise BusinessRuleViolationException("Price per night must be positive")
        if room_details["max_occupancy"] < 1:
            raise BusinessRuleViolationException("Max occupancy must be at least 1")

        return Room(
            id=RoomId.generate(),
            name=name,
            price_per_night=price_per_night,
            max_occupancy=room_details["max_occupancy"],
            description=room_details.get("description", ""),
            amenities=room_details.get("amenities", []),
            images=room_details.get("images", []),
            room_type=room_details.get("room_type"),
            is_available=room_details.get("is_available", True),
        )
