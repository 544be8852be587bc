from __future__ import annotations

import pytest

from stockroom.domain.errors import RepositoryError, StoreConnectionError
from stockroom.domain.ports import OperationResult, StoreReply
from stockroom.usecases.error_mapping import map_store_result, unwrap


def test_success_maps_to_none():
    assert map_store_result(OperationResult.SUCCESS, step="generate_id") is None


def test_connection_issue_maps_to_connection_error():
    err = map_store_result(OperationResult.CONNECTION_ISSUE, step="get_element")

    assert isinstance(err, StoreConnectionError)
    assert err.code == "STORE_CONNECTION"
    assert err.meta == {"step": "get_element", "result": "connection_issue"}


@pytest.mark.parametrize(
    "result", [OperationResult.FAILURE, OperationResult.INVALID_COLLECTION_NAME]
)
def test_other_codes_map_to_repository_error(result):
    err = map_store_result(result, step="insert_element")

    assert isinstance(err, RepositoryError)
    assert err.code == "REPOSITORY_FAILED"


def test_unwrap_returns_value_on_success():
    assert unwrap(StoreReply.success(4), step="generate_id") == 4


def test_unwrap_raises_mapped_error():
    with pytest.raises(StoreConnectionError):
        unwrap(StoreReply.connection_issue(), step="collection_exists")
