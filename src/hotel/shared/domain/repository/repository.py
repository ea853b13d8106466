from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - save は新規作成、update は既存集約の上書き
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を新規に永続化する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, aggregate: T) -> None:
        """既存の集約を上書きする"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError
