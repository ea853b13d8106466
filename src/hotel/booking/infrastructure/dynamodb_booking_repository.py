from datetime import datetime
from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from hotel.booking.domain.entity import Booking
from hotel.booking.domain.enum import BookingStatus
from hotel.booking.domain.repository import BookingRepository
from hotel.booking.domain.value_object import BookingId, StayPeriod
from hotel.shared.domain import Money, RoomId, UserId
from hotel.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from hotel.shared.infrastructure import (
    count_all,
    get_table,
    is_conditional_check_failure,
    query_all,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    GSI1: 全予約を予約日時順に並べる（ダッシュボード・一覧用）
    GSI2: ユーザーごとの予約
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table = get_table(table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(booking),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                )
            raise

    def update(self, booking: Booking) -> None:
        """予約を上書きする"""
        try:
            self.table.put_item(
                Item=self._to_item(booking),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise ResourceNotFoundException("Booking not found")
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Booking]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("BOOKINGS"),
        )
        return [self._to_entity(item) for item in items]

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """ユーザーIDで予約を検索する"""
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"USER#{user_id}")
            & Key("GSI2SK").begins_with("BOOKING#"),
        )
        return [self._to_entity(item) for item in items]

    def find_recent(self, limit: int) -> list[Booking]:
        """予約日時の降順で limit 件取得する"""
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("BOOKINGS"),
            ScanIndexForward=False,
            Limit=limit,
        )
        return [self._to_entity(item) for item in response.get("Items", [])]

    def count(self) -> int:
        return count_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("BOOKINGS"),
        )

    def sum_total_price(self) -> Money:
        """全予約の合計料金を集計する（ステータスで絞り込まない）"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("BOOKINGS"),
            ProjectionExpression="total_price",
        )
        total = sum((Decimal(item["total_price"]) for item in items), Decimal("0"))
        return Money(amount=total)

    def _to_item(self, booking: Booking) -> dict:
        booking_date = booking.booking_date.isoformat(timespec="microseconds")
        return {
            "PK": f"BOOKING#{booking.id}",
            "SK": "METADATA",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "room_id": str(booking.room_id),
            "check_in_date": booking.stay_period.check_in,
            "check_out_date": booking.stay_period.check_out,
            "total_price": str(booking.total_price.amount),
            "status": booking.status.value,
            "booking_date": booking_date,
            "GSI1PK": "BOOKINGS",
            "GSI1SK": f"{booking_date}#{booking.id}",
            "GSI2PK": f"USER#{booking.user_id}",
            "GSI2SK": f"BOOKING#{booking_date}#{booking.id}",
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            room_id=RoomId(value=item["room_id"]),
            stay_period=StayPeriod(
                check_in=item["check_in_date"],
                check_out=item["check_out_date"],
            ),
            total_price=Money(amount=Decimal(item["total_price"])),
            booking_date=datetime.fromisoformat(item["booking_date"]),
            status=BookingStatus(item["status"]),
        )
