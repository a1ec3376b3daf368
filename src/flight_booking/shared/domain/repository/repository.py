from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の保管を抽象化する
    - 保存済みIDへの save は DuplicateResourceException
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """登録順に全件を返す"""
        raise NotImplementedError
