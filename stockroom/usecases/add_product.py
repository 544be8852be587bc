from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stockroom.domain.entities import Product, validate_product
from stockroom.domain.ports import CollectionName, CollectionStorePort
from stockroom.domain.product_codec import encode_product
from stockroom.usecases.error_mapping import unwrap


@dataclass
class AddProduct:
    """Validate a product, make sure its collection exists, and insert it under a fresh id."""

    store: CollectionStorePort
    collection_name: CollectionName
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    async def __call__(self, product: Product) -> int:
        validate_product(product)

        exists = unwrap(
            await self.store.collection_exists(self.collection_name),
            step="collection_exists",
        )
        if not exists:
            self._log.debug("Creating collection %s", self.collection_name)
            unwrap(
                await self.store.create_collection(self.collection_name),
                step="create_collection",
            )

        product_id = unwrap(
            await self.store.generate_id(self.collection_name), step="generate_id"
        )
        unwrap(
            await self.store.insert_element(
                self.collection_name, product_id, encode_product(product)
            ),
            step="insert_element",
        )
        self._log.debug("Added product %s to %s", product_id, self.collection_name)
        return product_id
