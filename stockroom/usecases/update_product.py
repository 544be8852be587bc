from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stockroom.domain.entities import Product, validate_product
from stockroom.domain.errors import CollectionNotFoundError, ProductNotFoundError
from stockroom.domain.ports import CollectionName, CollectionStorePort
from stockroom.domain.product_codec import encode_product
from stockroom.usecases.error_mapping import unwrap


@dataclass
class UpdateProduct:
    """Replace every stored property of an existing product."""

    store: CollectionStorePort
    collection_name: CollectionName
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    async def __call__(self, product: Product) -> None:
        validate_product(product)

        collection_exists = unwrap(
            await self.store.collection_exists(self.collection_name),
            step="collection_exists",
        )
        if not collection_exists:
            raise CollectionNotFoundError(
                message=f"Collection {self.collection_name!r} not found.",
                meta={"collection": self.collection_name},
            )

        element_exists = unwrap(
            await self.store.collection_element_exists(self.collection_name, product.id),
            step="collection_element_exists",
        )
        if not element_exists:
            raise ProductNotFoundError(
                message=f"Product {product.id} not found.",
                meta={"collection": self.collection_name, "id": product.id},
            )

        unwrap(
            await self.store.update_element(
                self.collection_name, product.id, encode_product(product)
            ),
            step="update_element",
        )
        self._log.debug("Updated product %s in %s", product.id, self.collection_name)
