from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """ユーザーID（全サービス共通）

    予約・評価からユーザーを参照するための識別子。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
