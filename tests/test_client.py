import json
from unittest import mock

import pytest
import responses

from igniterest.client import (
    CacheValue,
    IgniteRestClient,
    IgniteRestError,
    row_fields,
)

BASE = "http://localhost:8080/ignite"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def _sent(call):
    return json.loads(call.request.body)


def test_cache_value_round_trip():
    value = CacheValue(id=7, name="seven")
    assert CacheValue.from_json(value.to_json()) == value


def test_cache_value_to_json_fields():
    assert CacheValue(id=1, name="a").to_json() == {"id": 1, "name": "a"}


@pytest.mark.parametrize(
    "data",
    [
        {"id": 1},
        {"name": "x"},
        {"id": "1", "name": "x"},
        {"id": 1, "name": 5},
        {"id": True, "name": "x"},
        {"id": 2**31, "name": "x"},
        [1, "x"],
        None,
    ],
)
def test_cache_value_from_json_rejects_bad_data(data):
    with pytest.raises(ValueError):
        CacheValue.from_json(data)


def test_get_or_create_cache_sends_cache_name(mocked):
    mocked.post(f"{BASE}/cache/getOrCreate", json={})
    IgniteRestClient(BASE).get_or_create_cache("c1")
    assert _sent(mocked.calls[0]) == {"cacheName": "c1"}


def test_put_serialises_cache_value(mocked):
    mocked.post(f"{BASE}/cache/put", json={})
    IgniteRestClient(BASE).put("c1", 1, CacheValue(id=1, name="one"))
    assert _sent(mocked.calls[0]) == {
        "cacheName": "c1",
        "key": 1,
        "value": {"id": 1, "name": "one"},
    }


def test_put_failure_raises_with_status_and_body(mocked):
    mocked.post(f"{BASE}/cache/put", status=500, body="boom")
    with pytest.raises(IgniteRestError) as info:
        IgniteRestClient(BASE).put("c1", 1, CacheValue(id=1, name="one"))
    assert info.value.status == 500
    assert info.value.body == "boom"


def test_get_returns_stored_json(mocked):
    mocked.post(f"{BASE}/cache/get", json={"response": {"id": 3, "name": "three"}})
    result = IgniteRestClient(BASE).get("c1", 3)
    assert CacheValue.from_json(result) == CacheValue(id=3, name="three")
    assert _sent(mocked.calls[0]) == {"cacheName": "c1", "key": 3}


def test_get_returns_none_for_null(mocked):
    mocked.post(f"{BASE}/cache/get", json={"response": None})
    assert IgniteRestClient(BASE).get("c1", 99) is None


def test_get_missing_response_field_raises_with_success_status(mocked):
    mocked.post(f"{BASE}/cache/get", json={"other": 1})
    with pytest.raises(IgniteRestError) as info:
        IgniteRestClient(BASE).get("c1", 99)
    assert info.value.status == 200
    assert info.value.body == {"other": 1}


def test_sql_payload_and_result(mocked):
    body = {"successStatus": 0, "response": {"items": [[101, "row"]]}}
    mocked.post(f"{BASE}/sql", json=body)
    result = IgniteRestClient(BASE).sql("SELECT 1", page_size=100)
    assert result == body
    assert _sent(mocked.calls[0]) == {
        "schemaName": "PUBLIC",
        "query": "SELECT 1",
        "pageSize": 100,
    }


def test_sql_sends_args_without_page_size(mocked):
    mocked.post(f"{BASE}/sql", json={"successStatus": 0})
    IgniteRestClient(BASE).sql("INSERT", args=[1, "a"], schema_name="S")
    assert _sent(mocked.calls[0]) == {"schemaName": "S", "query": "INSERT", "args": [1, "a"]}


@pytest.mark.parametrize("status_value", [1, "0", 0.0, None, False])
def test_sql_non_zero_success_status_raises(mocked, status_value):
    body = {"successStatus": status_value}
    mocked.post(f"{BASE}/sql", json=body)
    with pytest.raises(IgniteRestError) as info:
        IgniteRestClient(BASE).sql("SELECT 1")
    assert info.value.body == body
    assert info.value.status == 200


def test_destroy_cache_strips_trailing_slash(mocked):
    mocked.post(f"{BASE}/cache/destroy", json={})
    IgniteRestClient(BASE + "/").destroy_cache("c1")
    assert mocked.calls[0].request.url == f"{BASE}/cache/destroy"


def test_context_manager_leaves_supplied_session_open():
    session = mock.Mock()
    with IgniteRestClient(BASE, session=session) as client:
        assert client.session is session
    session.close.assert_not_called()


@pytest.mark.parametrize(
    "item, expected",
    [
        ([101, "SQL Inserted Item 1"], (101, "SQL Inserted Item 1")),
        ([1.5, 2], (None, None)),
        ([True, "x"], (None, "x")),
        ([7], (7, None)),
        ([], (None, None)),
        ({"0": 1}, (None, None)),
        ("text", (None, None)),
    ],
)
def test_row_fields(item, expected):
    assert row_fields(item) == expected