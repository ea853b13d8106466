from decimal import ROUND_HALF_UP, Decimal

from hotel.room.domain.value_object import Rating, RoomName
from hotel.shared.domain import AggregateRoot, Money, RoomId, UserId
from hotel.shared.domain.exception import BusinessRuleViolationException


class Room(AggregateRoot[RoomId]):
    """客室エンティティ

    評価は追記のみで、1ユーザーにつき1件まで保持する。
    """

    def __init__(
        self,
        id: RoomId,
        name: RoomName,
        price_per_night: Money,
        max_occupancy: int,
        description: str = "",
        amenities: list[str] | None = None,
        images: list[str] | None = None,
        room_type: str | None = None,
        is_available: bool = True,
        ratings: list[Rating] | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._price_per_night = price_per_night
        self._max_occupancy = max_occupancy
        self._description = description
        self._amenities = list(amenities or [])
        self._images = list(images or [])
        self._room_type = room_type
        self._is_available = is_available
        self._ratings = list(ratings or [])

    @property
    def name(self) -> RoomName:
        return self._name

    @property
    def price_per_night(self) -> Money:
        return self._price_per_night

    @property
    def max_occupancy(self) -> int:
        return self._max_occupancy

    @property
    def description(self) -> str:
        return self._description

    @property
    def amenities(self) -> list[str]:
        return list(self._amenities)

    @property
    def images(self) -> list[str]:
        return list(self._images)

    @property
    def room_type(self) -> str | None:
        return self._room_type

    @property
    def is_available(self) -> bool:
        return self._is_available

    @property
    def ratings(self) -> list[Rating]:
        return list(self._ratings)

    def mark_available(self) -> None:
        self._is_available = True

    def mark_unavailable(self) -> None:
        self._is_available = False

    def has_rated(self, user_id: UserId) -> bool:
        return any(r.user_id == user_id for r in self._ratings)

    def add_rating(self, user_id: UserId, score: int) -> None:
        """評価を追加する"""
        if not Rating.is_valid_score(score):
            raise BusinessRuleViolationException(
                f"Rating must be between {Rating.MIN} and {Rating.MAX}."
            )
        if self.has_rated(user_id):
            raise BusinessRuleViolationException("You have already rated this room.")
        self._ratings.append(Rating(user_id=user_id, score=score))

    def average_rating(self) -> int | None:
        """評価の平均を整数に丸めて返す（四捨五入）

        評価が1件もない場合は None。
        """
        if not self._ratings:
            return None
        total = sum(Decimal(r.score) for r in self._ratings)
        mean = total / len(self._ratings)
        return int(mean.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
