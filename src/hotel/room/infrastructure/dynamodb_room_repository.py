from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from hotel.room.domain.entity import Room
from hotel.room.domain.repository import RoomRepository
from hotel.room.domain.value_object import Rating, RoomName
from hotel.shared.domain import Money, RoomId, UserId
from hotel.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from hotel.shared.infrastructure import (
    get_table,
    is_conditional_check_failure,
    query_all,
)


class DynamoDBRoomRepository(RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table = get_table(table_name)

    def save(self, room: Room) -> None:
        """客室をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(room),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise DuplicateResourceException(f"Room already exists: {room.id}")
            raise

    def update(self, room: Room) -> None:
        """客室を上書きする"""
        try:
            self.table.put_item(
                Item=self._to_item(room),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise ResourceNotFoundException("Room not found")
            raise

    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"ROOM#{room_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Room]:
        """GSI1 から全客室を取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("ROOMS"),
        )
        return [self._to_entity(item) for item in items]

    def _to_item(self, room: Room) -> dict:
        item = {
            "PK": f"ROOM#{room.id}",
            "SK": "METADATA",
            "entity_type": "ROOM",
            "room_id": str(room.id),
            "name": str(room.name),
            "description": room.description,
            "price_per_night": str(room.price_per_night.amount),
            "max_occupancy": room.max_occupancy,
            "is_available": room.is_available,
            "amenities": room.amenities,
            "images": room.images,
            "ratings": [
                {"user_id": str(r.user_id), "rating": r.score} for r in room.ratings
            ],
            "GSI1PK": "ROOMS",
            "GSI1SK": f"ROOM#{room.id}",
        }
        if room.room_type is not None:
            item["room_type"] = room.room_type
        return item

    def _to_entity(self, item: dict) -> Room:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Room(
            id=RoomId(value=item["room_id"]),
            name=RoomName(value=item["name"]),
            price_per_night=Money(amount=Decimal(item["price_per_night"])),
            max_occupancy=int(item.get("max_occupancy", 1)),
            description=item.get("description", ""),
            amenities=list(item.get("amenities", [])),
            images=list(item.get("images", [])),
            room_type=item.get("room_type"),
            is_available=bool(item.get("is_available", True)),
            ratings=[
                Rating(user_id=UserId(value=r["user_id"]), score=int(r["rating"]))
                for r in item.get("ratings", [])
            ],
        )
