from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 集約の外からは必ず集約ルート経由で状態を変更する
    - 永続化の単位 = 集約（集約をまたぐ書き込みはトランザクションで保護されない）
    """
