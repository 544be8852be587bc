from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stockroom.domain.errors import CollectionNotFoundError, ProductNotFoundError
from stockroom.domain.ports import CollectionName, CollectionStorePort
from stockroom.usecases.error_mapping import unwrap


@dataclass
class RemoveProduct:
    store: CollectionStorePort
    collection_name: CollectionName
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    async def __call__(self, product_id: int) -> None:
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
            await self.store.collection_element_exists(self.collection_name, product_id),
            step="collection_element_exists",
        )
        if not element_exists:
            raise ProductNotFoundError(
                message=f"Product {product_id} not found.",
                meta={"collection": self.collection_name, "id": product_id},
            )

        unwrap(
            await self.store.delete_element(self.collection_name, product_id),
            step="delete_element",
        )
        self._log.debug("Removed product %s from %s", product_id, self.collection_name)
