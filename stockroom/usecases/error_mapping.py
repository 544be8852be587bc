"""Translate collection store results into user-facing UseCaseError instances."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from stockroom.domain.errors import RepositoryError, StoreConnectionError, UseCaseError
from stockroom.domain.ports import OperationResult, StoreReply

T = TypeVar("T")

_log = logging.getLogger(__name__)


def map_store_result(
    result: OperationResult,
    *,
    step: str,
) -> Optional[UseCaseError]:
    """Map a store outcome to the error a caller should see.

    ``CONNECTION_ISSUE`` always wins, every other non-success code collapses
    to a generic repository failure, and ``SUCCESS`` maps to ``None``.

    Args:
        result (OperationResult): Outcome reported by the store.
        step (str): Store operation name, carried in the error meta.

    Returns:
        Optional[UseCaseError]: Error to raise, or None on success.
    """
    if result is OperationResult.SUCCESS:
        return None
    meta = {"step": step, "result": result.value}
    if result is OperationResult.CONNECTION_ISSUE:
        return StoreConnectionError(
            message=f"Store connection failed during {step}.", meta=meta
        )
    return RepositoryError(message=f"Store rejected {step} ({result.value}).", meta=meta)


def unwrap(reply: StoreReply[T], *, step: str) -> Optional[T]:
    """Return ``reply.value`` on success, otherwise raise the mapped error.

    Raises:
        StoreConnectionError: The store reported a connection issue.
        RepositoryError: The store reported any other non-success result.
    """
    error = map_store_result(reply.result, step=step)
    if error is not None:
        _log.warning("%s: %s", error.code, error.message)
        raise error
    return reply.value


__all__ = ["map_store_result", "unwrap"]
