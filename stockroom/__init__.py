"""In-memory collection store with a result-mapping product repository."""

from stockroom.adapters.collection_store_memory import InMemoryCollectionStore, StoreFaults
from stockroom.app.wiring import build_product_repository
from stockroom.domain import (
    CollectionNotFoundError,
    OperationResult,
    Product,
    ProductNotFoundError,
    ProductValidationError,
    RepositoryError,
    StoreConnectionError,
    StoreReply,
    UseCaseError,
)
from stockroom.usecases.product_repository import ProductRepository

__version__ = "0.1.0"

__all__ = [
    "CollectionNotFoundError",
    "InMemoryCollectionStore",
    "OperationResult",
    "Product",
    "ProductNotFoundError",
    "ProductRepository",
    "ProductValidationError",
    "RepositoryError",
    "StoreConnectionError",
    "StoreFaults",
    "StoreReply",
    "UseCaseError",
    "build_product_repository",
]
