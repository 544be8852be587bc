"""Domain-level error types for use-case and adapter mapping.

Store adapters never raise for store conditions; they answer with an
``OperationResult``. Use cases translate those results into the errors below
so callers see one stable code per failure kind.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    default_code = "USE_CASE_ERROR"
    default_message = "Operation failed."

    def __init__(
        self,
        code: Optional[str] = None,
        message: Optional[str] = None,
        *,
        meta: Optional[Dict[str, Any]] = None,
    ):
        code = code or self.default_code
        message = message or self.default_message
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


class ProductValidationError(UseCaseError, ValueError):
    """Product fields violate local invariants; the store was not touched."""

    default_code = "INVALID_PRODUCT"
    default_message = "Product is invalid."


class StoreConnectionError(UseCaseError):
    """The backing store reported a connectivity problem."""

    default_code = "STORE_CONNECTION"
    default_message = "Store connection failed."


class RepositoryError(UseCaseError):
    """The backing store rejected an operation for any non-connectivity reason."""

    default_code = "REPOSITORY_FAILED"
    default_message = "Repository operation failed."


class CollectionNotFoundError(UseCaseError):
    default_code = "COLLECTION_NOT_FOUND"
    default_message = "Product collection not found."


class ProductNotFoundError(UseCaseError):
    default_code = "PRODUCT_NOT_FOUND"
    default_message = "Product not found."


__all__ = [
    "CollectionNotFoundError",
    "ProductNotFoundError",
    "ProductValidationError",
    "RepositoryError",
    "StoreConnectionError",
    "UseCaseError",
]
