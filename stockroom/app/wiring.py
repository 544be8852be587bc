"""Composition root: build a ready-to-use product repository."""

from __future__ import annotations

import logging
from typing import Optional

from stockroom.adapters.collection_store_memory import InMemoryCollectionStore
from stockroom.app.settings import Settings
from stockroom.domain.ports import CollectionStorePort
from stockroom.usecases.product_repository import ProductRepository
from stockroom.utils import logging as logging_utils


def build_product_repository(
    settings: Optional[Settings] = None,
    store: Optional[CollectionStorePort] = None,
) -> ProductRepository:
    """Wire a ``ProductRepository`` over ``store`` or a fresh in-memory store.

    When no store is given, the in-memory store honors ``settings.faults``.
    """
    level = logging_utils.configure_root()
    log = logging.getLogger(__name__)
    log.debug("Effective log level: %s", logging_utils.level_name(level))

    settings = settings or Settings.from_env()
    if store is None:
        store = InMemoryCollectionStore(faults=settings.faults)
        if settings.faults.active:
            log.warning("Store fault injection enabled: %s", settings.faults)

    log.debug("Product repository bound to collection %s", settings.collection_name)
    return ProductRepository(store=store, collection_name=settings.collection_name)


__all__ = ["build_product_repository"]
