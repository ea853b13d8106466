import copy
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel.booking.domain.entity import Booking
from hotel.booking.domain.enum import BookingStatus
from hotel.booking.domain.repository import BookingRepository
from hotel.booking.domain.value_object import BookingId, StayPeriod
from hotel.room.domain.entity import Room
from hotel.room.domain.repository import RoomRepository
from hotel.room.domain.value_object import Rating, RoomName
from hotel.shared.domain import Money, RoomId, UserId
from hotel.shared.domain.exception import ResourceNotFoundException
from hotel.user.domain.entity import User
from hotel.user.domain.repository import UserRepository


class InMemoryRoomRepository(RoomRepository):
    """書き込みを write_log に記録するインメモリ実装"""

    def __init__(self, write_log: list) -> None:
        self.rooms: dict[RoomId, Room] = {}
        self.write_log = write_log

    def save(self, room: Room) -> None:
        self.write_log.append(("room.save", str(room.id)))
        self.rooms[room.id] = copy.deepcopy(room)

    def update(self, room: Room) -> None:
        if room.id not in self.rooms:
            raise ResourceNotFoundException("Room not found")
        self.write_log.append(("room.update", str(room.id)))
        self.rooms[room.id] = copy.deepcopy(room)

    def find_by_id(self, room_id: RoomId) -> Room | None:
        room = self.rooms.get(room_id)
        return copy.deepcopy(room) if room else None

    def find_all(self) -> list[Room]:
        return [copy.deepcopy(r) for r in self.rooms.values()]


class InMemoryUserRepository(UserRepository):
    def __init__(self, write_log: list) -> None:
        self.users: dict[UserId, User] = {}
        self.write_log = write_log

    def save(self, user: User) -> None:
        self.write_log.append(("user.save", str(user.id)))
        self.users[user.id] = copy.deepcopy(user)

    def update(self, user: User) -> None:
        if user.id not in self.users:
            raise ResourceNotFoundException("User not found")
        self.write_log.append(("user.update", str(user.id)))
        self.users[user.id] = copy.deepcopy(user)

    def find_by_id(self, user_id: UserId) -> User | None:
        user = self.users.get(user_id)
        return copy.deepcopy(user) if user else None

    def count_by_booking_flag(self, is_booking: bool) -> int:
        return sum(1 for u in self.users.values() if u.is_booking == is_booking)


class InMemoryBookingRepository(BookingRepository):
    def __init__(self, write_log: list) -> None:
        self.bookings: dict[BookingId, Booking] = {}
        self.write_log = write_log

    def save(self, booking: Booking) -> None:
        self.write_log.append(("booking.save", str(booking.id)))
        self.bookings[booking.id] = copy.deepcopy(booking)

    def update(self, booking: Booking) -> None:
        if booking.id not in self.bookings:
            raise ResourceNotFoundException("Booking not found")
        self.write_log.append(("booking.update", str(booking.id)))
        self.bookings[booking.id] = copy.deepcopy(booking)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        booking = self.bookings.get(booking_id)
        return copy.deepcopy(booking) if booking else None

    def find_all(self) -> list[Booking]:
        return [copy.deepcopy(b) for b in self.bookings.values()]

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        return [copy.deepcopy(b) for b in self.bookings.values() if b.user_id == user_id]

    def find_recent(self, limit: int) -> list[Booking]:
        ordered = sorted(
            self.bookings.values(), key=lambda b: b.booking_date, reverse=True
        )
        return [copy.deepcopy(b) for b in ordered[:limit]]

    def count(self) -> int:
        return len(self.bookings)

    def sum_total_price(self) -> Money:
        total = Money.zero()
        for booking in self.bookings.values():
            total = total.add(booking.total_price)
        return total


@pytest.fixture
def write_log() -> list:
    """リポジトリへの書き込み順を記録する"""
    return []


@pytest.fixture
def room_repository(write_log):
    return InMemoryRoomRepository(write_log)


@pytest.fixture
def user_repository(write_log):
    return InMemoryUserRepository(write_log)


@pytest.fixture
def booking_repository(write_log):
    return InMemoryBookingRepository(write_log)


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: str = "room-1",
        name: str = "Deluxe Twin",
        price: Decimal = Decimal("1000"),
        max_occupancy: int = 2,
        is_available: bool = True,
        ratings: list[tuple[str, int]] | None = None,
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            name=RoomName(value=name),
            price_per_night=Money(amount=price),
            max_occupancy=max_occupancy,
            is_available=is_available,
            ratings=[
                Rating(user_id=UserId(value=u), score=s) for u, s in ratings or []
            ],
        )

    return _factory


@pytest.fixture
def create_user():
    """User を生成する Factory fixture"""

    def _factory(
        user_id: str = "user-1",
        name: str = "Taro",
        email: str = "taro@example.com",
        role: str = "user",
        is_booking: bool = False,
    ) -> User:
        return User(
            id=UserId(value=user_id),
            name=name,
            email=email,
            role=role,
            is_booking=is_booking,
            password_hash="hashed",
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-1",
        user_id: str = "user-1",
        room_id: str = "room-1",
        check_in: str = "2026-05-01",
        check_out: str = "2026-05-03",
        total_price: Decimal = Decimal("2000"),
        booking_date: datetime = datetime(2026, 4, 1, 9, 0, tzinfo=timezone.utc),
        status: BookingStatus = BookingStatus.PENDING,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            room_id=RoomId(value=room_id),
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            total_price=Money(amount=total_price),
            booking_date=booking_date,
            status=status,
        )

    return _factory


@pytest.fixture
def lambda_context():
    """Powertools の inject_lambda_context が参照する属性を持つコンテキスト"""

    class _LambdaContext:
        function_name = "test-function"
        function_version = "$LATEST"
        memory_limit_in_mb = 128
        invoked_function_arn = (
            "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
        )
        aws_request_id = "request-id"
        tenant_id = None

    return _LambdaContext()


@pytest.fixture
def api_event():
    """API Gateway Proxy イベントを生成する Factory fixture"""

    def _factory(
        body: str | None = None,
        path_parameters: dict | None = None,
        user_id: str | None = "user-1",
        role: str = "user",
    ) -> dict:
        authorizer = {"role": role}
        if user_id is not None:
            authorizer["userId"] = user_id
        return {
            "httpMethod": "POST",
            "path": "/",
            "resource": "/",
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_parameters,
            "queryStringParameters": None,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {"authorizer": authorizer},
        }

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_table():
    """DynamoDB Table のモックフィクスチャ"""
    return MagicMock()
