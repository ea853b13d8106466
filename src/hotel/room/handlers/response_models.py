from __future__ import annotations

from hotel.room.domain.entity import Room
from hotel.shared.utils import ResponseModel


class RatingData(ResponseModel):
    """評価データのレスポンスモデル"""

    user_id: str
    rating: int


class RoomData(ResponseModel):
    """客室データのレスポンスモデル"""

    id: str
    name: str
    description: str
    price_per_night: str
    max_occupancy: int
    amenities: list[str]
    images: list[str]
    room_type: str | None
    is_available: bool
    ratings: list[RatingData]


def to_room_data(room: Room) -> RoomData:
    """Room エンティティをレスポンスモデルに変換する"""
    return RoomData(
        id=str(room.id),
        name=str(room.name),
        description=room.description,
        price_per_night=str(room.price_per_night.amount),
        max_occupancy=room.max_occupancy,
        amenities=room.amenities,
        images=room.images,
        room_type=room.room_type,
        is_available=room.is_available,
        ratings=[
            RatingData(user_id=str(r.user_id), rating=r.score) for r in room.ratings
        ],
    )
