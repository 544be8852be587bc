from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Dict, Iterable, Optional

from stockroom.domain.naming import is_valid_collection_name
from stockroom.domain.ports import (
    CollectionName,
    CollectionStorePort,
    ElementId,
    Properties,
    StoreReply,
)


@dataclass(frozen=True)
class StoreFaults:
    """Per-operation failure switches for conformance-testing store callers.

    A flagged operation short-circuits before name validation or state access
    and answers ``CONNECTION_ISSUE`` when ``connection_issue`` is set,
    otherwise ``FAILURE``.
    """

    collection_exists: bool = False
    collection_element_exists: bool = False
    create_collection: bool = False
    generate_id: bool = False
    get_element: bool = False
    insert_element: bool = False
    update_element: bool = False
    delete_element: bool = False
    connection_issue: bool = False

    @classmethod
    def operation_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls) if f.name != "connection_issue")

    @classmethod
    def failing(cls, operations: Iterable[str], *, connection_issue: bool = False) -> "StoreFaults":
        """Build a fault plan that fails every operation named in ``operations``."""
        known = set(cls.operation_names())
        flags: Dict[str, bool] = {}
        for op in operations:
            if op not in known:
                raise ValueError(f"Unknown store operation: {op!r}")
            flags[op] = True
        return cls(connection_issue=connection_issue, **flags)

    @property
    def active(self) -> bool:
        return any(getattr(self, name) for name in self.operation_names())


class _Collection:
    """Named bucket of elements with its own id counter."""

    def __init__(self, name: CollectionName) -> None:
        self._name = name
        self._next_id = 1
        self.elements: Dict[ElementId, Dict[str, str]] = {}

    @property
    def name(self) -> CollectionName:
        return self._name

    def generate_element_id(self) -> int:
        element_id = self._next_id
        self._next_id += 1
        return element_id


class InMemoryCollectionStore(CollectionStorePort):
    """Process-local collection store guarded by a single lock.

    Every operation returns a ``StoreReply`` instead of raising. The coroutine
    signatures match a real backing store; no operation awaits while holding
    the lock, so the store is safe for both threads and asyncio tasks.
    """

    def __init__(self, faults: Optional[StoreFaults] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._faults = faults or StoreFaults()
        self._lock = threading.Lock()
        self._collections: Dict[CollectionName, _Collection] = {}

    @property
    def faults(self) -> StoreFaults:
        return self._faults

    # ---------- CollectionStorePort ----------

    async def collection_exists(self, name: CollectionName) -> StoreReply[bool]:
        rejected = self._precheck("collection_exists", name)
        if rejected is not None:
            return rejected
        with self._lock:
            return StoreReply.success(name in self._collections)

    async def collection_element_exists(
        self, name: CollectionName, element_id: ElementId
    ) -> StoreReply[bool]:
        rejected = self._precheck("collection_element_exists", name)
        if rejected is not None:
            return rejected
        with self._lock:
            collection = self._collections.get(name)
            if collection is None:
                return StoreReply.failure()
            return StoreReply.success(element_id in collection.elements)

    async def create_collection(self, name: CollectionName) -> StoreReply[None]:
        rejected = self._precheck("create_collection", name)
        if rejected is not None:
            return rejected
        with self._lock:
            if name in self._collections:
                return StoreReply.failure()
            self._collections[name] = _Collection(name)
        self._log.debug("Created collection %s", name)
        return StoreReply.success()

    async def generate_id(self, name: CollectionName) -> StoreReply[int]:
        rejected = self._precheck("generate_id", name)
        if rejected is not None:
            return rejected
        with self._lock:
            collection = self._collections.get(name)
            if collection is None:
                return StoreReply.failure()
            return StoreReply.success(collection.generate_element_id())

    async def get_element(
        self, name: CollectionName, element_id: ElementId
    ) -> StoreReply[Properties]:
        rejected = self._precheck("get_element", name)
        if rejected is not None:
            return rejected
        with self._lock:
            element = self._element(name, element_id)
            if element is None:
                return StoreReply.failure()
            snapshot = MappingProxyType(dict(element))
        return StoreReply.success(snapshot)

    async def insert_element(
        self, name: CollectionName, element_id: ElementId, properties: Properties
    ) -> StoreReply[None]:
        rejected = self._precheck("insert_element", name)
        if rejected is not None:
            return rejected
        with self._lock:
            collection = self._collections.get(name)
            if collection is None or element_id in collection.elements:
                return StoreReply.failure()
            collection.elements[element_id] = dict(properties)
        self._log.debug("Inserted element %s into %s", element_id, name)
        return StoreReply.success()

    async def update_element(
        self, name: CollectionName, element_id: ElementId, properties: Properties
    ) -> StoreReply[None]:
        rejected = self._precheck("update_element", name)
        if rejected is not None:
            return rejected
        with self._lock:
            element = self._element(name, element_id)
            if element is None:
                return StoreReply.failure()
            # full replacement, not a merge
            element.clear()
            element.update(dict(properties))
        return StoreReply.success()

    async def delete_element(
        self, name: CollectionName, element_id: ElementId
    ) -> StoreReply[None]:
        rejected = self._precheck("delete_element", name)
        if rejected is not None:
            return rejected
        with self._lock:
            collection = self._collections.get(name)
            if collection is None or element_id not in collection.elements:
                return StoreReply.failure()
            del collection.elements[element_id]
        self._log.debug("Deleted element %s from %s", element_id, name)
        return StoreReply.success()

    # ---------- Introspection ----------

    def has_collection(self, name: CollectionName) -> bool:
        with self._lock:
            return name in self._collections

    def has_element(self, name: CollectionName, element_id: ElementId) -> bool:
        with self._lock:
            return self._element(name, element_id) is not None

    # ---------- Helpers ----------

    def _precheck(self, operation: str, name: CollectionName) -> Optional[StoreReply]:
        """Apply fault injection, then name validation; None means proceed."""
        if getattr(self._faults, operation):
            if self._faults.connection_issue:
                self._log.debug("Injected connection issue for %s(%r)", operation, name)
                return StoreReply.connection_issue()
            self._log.debug("Injected failure for %s(%r)", operation, name)
            return StoreReply.failure()
        if not is_valid_collection_name(name):
            return StoreReply.invalid_name()
        return None

    def _element(self, name: CollectionName, element_id: ElementId) -> Optional[Dict[str, str]]:
        # caller holds the lock
        collection = self._collections.get(name)
        if collection is None:
            return None
        return collection.elements.get(element_id)


__all__ = ["InMemoryCollectionStore", "StoreFaults"]
