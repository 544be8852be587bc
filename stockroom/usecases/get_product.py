from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stockroom.domain.entities import Product
from stockroom.domain.errors import CollectionNotFoundError, ProductNotFoundError
from stockroom.domain.ports import CollectionName, CollectionStorePort, OperationResult
from stockroom.domain.product_codec import decode_product
from stockroom.usecases.error_mapping import unwrap


@dataclass
class GetProduct:
    store: CollectionStorePort
    collection_name: CollectionName
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    async def __call__(self, product_id: int) -> Product:
        """Fetch and decode a product.

        Record existence is checked separately from the fetch: a missing
        record raises ``ProductNotFoundError`` regardless of what the fetch
        reports, unless the fetch hit a connection issue.
        """
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

        reply = await self.store.get_element(self.collection_name, product_id)
        if reply.result is OperationResult.CONNECTION_ISSUE:
            unwrap(reply, step="get_element")

        if not element_exists:
            raise ProductNotFoundError(
                message=f"Product {product_id} not found.",
                meta={"collection": self.collection_name, "id": product_id},
            )

        properties = unwrap(reply, step="get_element")
        self._log.debug("Fetched product %s from %s", product_id, self.collection_name)
        return decode_product(product_id, properties or {})
