from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from stockroom.adapters.collection_store_memory import StoreFaults
from stockroom.domain.naming import is_valid_collection_name
from stockroom.utils.logging import env_truthy

DEFAULT_COLLECTION = "products"

ENV_COLLECTION = "STOCKROOM_COLLECTION"
ENV_FAULTS = "STOCKROOM_FAULTS"
ENV_FAULTS_CONNECTION = "STOCKROOM_FAULTS_CONNECTION"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the product repository wiring."""

    collection_name: str = DEFAULT_COLLECTION
    faults: StoreFaults = field(default_factory=StoreFaults)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from ``environ`` (defaults to ``os.environ``).

        ``STOCKROOM_FAULTS`` is a comma-separated list of store operation
        names to fail; ``STOCKROOM_FAULTS_CONNECTION`` turns those failures
        into connection issues.
        """
        env = os.environ if environ is None else environ

        collection = (env.get(ENV_COLLECTION) or "").strip() or DEFAULT_COLLECTION
        if not is_valid_collection_name(collection):
            raise ValueError(f"{ENV_COLLECTION} is not a valid collection name: {collection!r}")

        raw_faults = env.get(ENV_FAULTS) or ""
        operations = [part.strip() for part in raw_faults.split(",") if part.strip()]
        faults = StoreFaults.failing(
            operations,
            connection_issue=env_truthy(env.get(ENV_FAULTS_CONNECTION)),
        )
        return cls(collection_name=collection, faults=faults)


__all__ = ["DEFAULT_COLLECTION", "Settings"]
