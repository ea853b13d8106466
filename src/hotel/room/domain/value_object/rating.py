from dataclasses import dataclass
from typing import ClassVar

from hotel.shared.domain import UserId


@dataclass(frozen=True)
class Rating:
    """ユーザーが客室につけた評価（0〜5）"""

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 5

    user_id: UserId
    score: int

    def __post_init__(self) -> None:
        if not self.is_valid_score(self.score):
            raise ValueError(f"Rating must be between {self.MIN} and {self.MAX}.")

    @classmethod
    def is_valid_score(cls, score: int) -> bool:
        return cls.MIN <= score <= cls.MAX
