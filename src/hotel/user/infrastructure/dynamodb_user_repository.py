from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from hotel.shared.domain import UserId
from hotel.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from hotel.shared.infrastructure import (
    count_all,
    get_table,
    is_conditional_check_failure,
)
from hotel.user.domain.entity import User
from hotel.user.domain.repository import UserRepository


class DynamoDBUserRepository(UserRepository):
    """DynamoDBを使用したUserRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table = get_table(table_name)

    def save(self, user: User) -> None:
        """ユーザーをDBに保存する"""
        item = {
            "PK": f"USER#{user.id}",
            "SK": "PROFILE",
            "entity_type": "USER",
            "user_id": str(user.id),
            "name": user.name,
            "email": user.email,
            "role": user.role,
            "is_booking": user.is_booking,
            "GSI1PK": "USERS",
            "GSI1SK": f"USER#{user.id}",
        }
        if user.password_hash is not None:
            item["password_hash"] = user.password_hash
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise DuplicateResourceException(f"User already exists: {user.id}")
            raise

    def update(self, user: User) -> None:
        """予約フラグを更新する"""
        try:
            self.table.update_item(
                Key={"PK": f"USER#{user.id}", "SK": "PROFILE"},
                UpdateExpression="SET is_booking = :is_booking",
                ExpressionAttributeValues={":is_booking": user.is_booking},
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise ResourceNotFoundException("User not found")
            raise

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索"""
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "PROFILE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def count_by_booking_flag(self, is_booking: bool) -> int:
        """予約フラグごとのユーザー数を数える

        認証サービスが作成した直後のユーザーは is_booking 属性を持たないため、
        未予約側の集計では属性なしも含める。
        """
        condition = Attr("is_booking").eq(is_booking)
        if not is_booking:
            condition = condition | Attr("is_booking").not_exists()
        return count_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("USERS"),
            FilterExpression=condition,
        )

    def _to_entity(self, item: dict) -> User:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return User(
            id=UserId(value=item["user_id"]),
            name=item.get("name", ""),
            email=item.get("email", ""),
            role=item.get("role", "user"),
            is_booking=bool(item.get("is_booking", False)),
            password_hash=item.get("password_hash"),
        )
