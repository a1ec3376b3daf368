from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値オブジェクトの変更は必ず集約ルートを経由
    - ロックの単位 = 集約境界
    """
