"""Domain package exports for value objects, ports, and errors."""

from .entities import Product, product_problems, validate_product
from .errors import (
    CollectionNotFoundError,
    ProductNotFoundError,
    ProductValidationError,
    RepositoryError,
    StoreConnectionError,
    UseCaseError,
)
from .naming import is_valid_collection_name
from .ports import (
    CollectionStorePort,
    OperationResult,
    ProductRepositoryPort,
    StoreReply,
)
from .product_codec import PRODUCT_KEYS, decode_product, encode_product

__all__ = [
    "CollectionNotFoundError",
    "CollectionStorePort",
    "OperationResult",
    "PRODUCT_KEYS",
    "Product",
    "ProductNotFoundError",
    "ProductRepositoryPort",
    "ProductValidationError",
    "RepositoryError",
    "StoreConnectionError",
    "StoreReply",
    "UseCaseError",
    "decode_product",
    "encode_product",
    "is_valid_collection_name",
    "product_problems",
    "validate_product",
]
