from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Mapping, Optional, Protocol, TypeVar

from .entities import Product

CollectionName = str
ElementId = int
Properties = Mapping[str, str]

T = TypeVar("T")


# ---- Result protocol ----
class OperationResult(Enum):
    """Outcome codes returned by every collection store operation."""

    SUCCESS = "success"
    FAILURE = "failure"
    INVALID_COLLECTION_NAME = "invalid_collection_name"
    CONNECTION_ISSUE = "connection_issue"


@dataclass(frozen=True)
class StoreReply(Generic[T]):
    """Tagged store outcome; ``value`` is only meaningful on success."""

    result: OperationResult
    value: Optional[T] = None

    @property
    def ok(self) -> bool:
        return self.result is OperationResult.SUCCESS

    @classmethod
    def success(cls, value: Any = None) -> "StoreReply[Any]":
        return cls(OperationResult.SUCCESS, value)

    @classmethod
    def failure(cls) -> "StoreReply[Any]":
        return cls(OperationResult.FAILURE)

    @classmethod
    def invalid_name(cls) -> "StoreReply[Any]":
        return cls(OperationResult.INVALID_COLLECTION_NAME)

    @classmethod
    def connection_issue(cls) -> "StoreReply[Any]":
        return cls(OperationResult.CONNECTION_ISSUE)


# ---- Ports (Hexagonal boundaries) ----
class CollectionStorePort(Protocol):
    """Named collections of integer-keyed string property maps.

    Implementations never raise for store conditions; every outcome is an
    ``OperationResult`` wrapped in a ``StoreReply``.
    """

    async def collection_exists(self, name: CollectionName) -> StoreReply[bool]: ...
    async def collection_element_exists(
        self, name: CollectionName, element_id: ElementId
    ) -> StoreReply[bool]: ...
    async def create_collection(self, name: CollectionName) -> StoreReply[None]: ...
    async def generate_id(self, name: CollectionName) -> StoreReply[int]: ...
    async def get_element(
        self, name: CollectionName, element_id: ElementId
    ) -> StoreReply[Properties]: ...
    async def insert_element(
        self, name: CollectionName, element_id: ElementId, properties: Properties
    ) -> StoreReply[None]: ...
    async def update_element(
        self, name: CollectionName, element_id: ElementId, properties: Properties
    ) -> StoreReply[None]: ...
    async def delete_element(
        self, name: CollectionName, element_id: ElementId
    ) -> StoreReply[None]: ...


class ProductRepositoryPort(Protocol):
    """Application-facing product operations."""

    async def add(self, product: Product) -> int: ...
    async def get(self, product_id: int) -> Product: ...
    async def remove(self, product_id: int) -> None: ...
    async def update(self, product: Product) -> None: ...


__all__ = [
    "CollectionName",
    "CollectionStorePort",
    "ElementId",
    "OperationResult",
    "ProductRepositoryPort",
    "Properties",
    "StoreReply",
]
