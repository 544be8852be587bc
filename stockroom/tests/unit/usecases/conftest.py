from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from stockroom.domain.ports import StoreReply


class ScriptedStore:
    """Collection store double answering from a per-operation script.

    Unscripted operations succeed; existence checks default to True and
    ``generate_id`` defaults to 1.
    """

    _DEFAULTS: Dict[str, Any] = {
        "collection_exists": True,
        "collection_element_exists": True,
        "generate_id": 1,
        "get_element": {},
    }

    def __init__(self, **replies: StoreReply) -> None:
        self.replies = replies
        self.calls: List[Tuple[Any, ...]] = []

    @property
    def steps(self) -> List[str]:
        return [call[0] for call in self.calls]

    async def _answer(self, op: str, *args: Any) -> StoreReply:
        self.calls.append((op, *args))
        if op in self.replies:
            return self.replies[op]
        return StoreReply.success(self._DEFAULTS.get(op))

    async def collection_exists(self, name):
        return await self._answer("collection_exists", name)

    async def collection_element_exists(self, name, element_id):
        return await self._answer("collection_element_exists", name, element_id)

    async def create_collection(self, name):
        return await self._answer("create_collection", name)

    async def generate_id(self, name):
        return await self._answer("generate_id", name)

    async def get_element(self, name, element_id):
        return await self._answer("get_element", name, element_id)

    async def insert_element(self, name, element_id, properties):
        return await self._answer("insert_element", name, element_id, dict(properties))

    async def update_element(self, name, element_id, properties):
        return await self._answer("update_element", name, element_id, dict(properties))

    async def delete_element(self, name, element_id):
        return await self._answer("delete_element", name, element_id)


class UnreachableStore:
    """Fails the test on any store access."""

    def __getattr__(self, name: str):
        raise AssertionError(f"store.{name} must not be called")


@pytest.fixture
def scripted_store():
    return ScriptedStore


@pytest.fixture
def unreachable_store() -> UnreachableStore:
    return UnreachableStore()
