"""Name schemas - wire names, millisecond timestamps, envelope helpers."""

import time

from pickstream.schemas.names import (
    ApiResponse,
    HealthResponse,
    NameResponse,
    NamesData,
    epoch_millis,
)


def test_epoch_millis_is_milliseconds():
    before = int(time.time() * 1000)
    value = epoch_millis()
    after = int(time.time() * 1000)
    assert before <= value <= after


def test_name_response_stamps_timestamp():
    resp = NameResponse(name="Alice")
    assert resp.name == "Alice"
    assert resp.timestamp > 1_600_000_000_000


def test_api_response_ok_without_data():
    resp = ApiResponse.ok("done")
    assert resp.success is True
    assert resp.data is None
    assert resp.model_dump(exclude_none=True) == {"success": True, "message": "done"}


def test_api_response_ok_with_names_data():
    data = NamesData(names=["Alice"], count=1).model_dump()
    resp = ApiResponse.ok("Names retrieved successfully", data)
    assert resp.data == {"names": ["Alice"], "count": 1}


def test_api_response_error():
    resp = ApiResponse.error("nope")
    assert resp.success is False
    assert resp.message == "nope"


def test_health_response_serializes_names_count_alias():
    resp = HealthResponse(service="pickstream-backend", names_count=3)
    dumped = resp.model_dump(by_alias=True)
    assert dumped["namesCount"] == 3
    assert dumped["status"] == "UP"
    assert "names_count" not in dumped
