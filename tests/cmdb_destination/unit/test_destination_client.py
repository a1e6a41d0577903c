"""CMDB Table API client tests."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests
from cmdb_inventory_sync.cmdb_destination.destination_client import (
    DestinationApiClient,
    DestinationApiError,
)
from cmdb_inventory_sync.configuration.runtime_settings import DestinationSettings
from cmdb_inventory_sync.field_mapping import DestinationRecord
from cmdb_inventory_sync.http_transport import HttpRequestError


class FakeTransport:
    def __init__(self, *responses: Any) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def request_json(self, method: str, url: str, *, params=None, body=None) -> Any:
        self.calls.append({"method": method, "url": url, "params": params, "body": body})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _client(transport: FakeTransport) -> DestinationApiClient:
    settings = DestinationSettings(
        base_url="https://dev000000.service-now.com/",
        username="admin",
        password="secret",
        table="cmdb_ci_server",
    )
    return DestinationApiClient(settings, transport=transport)  # type: ignore[arg-type]


def test_find_sys_ids_by_asset_tag_queries_table() -> None:
    transport = FakeTransport({"result": [{"sys_id": "s1"}, {"sys_id": "s2"}]})

    sys_ids = _client(transport).find_sys_ids_by_asset_tag("AB12")

    assert sys_ids == ["s1", "s2"]
    assert transport.calls == [
        {
            "method": "GET",
            "url": "https://dev000000.service-now.com/api/now/table/cmdb_ci_server",
            "params": {"sysparm_fields": "sys_id", "sysparm_query": "asset_tag=AB12"},
            "body": None,
        }
    ]


def test_find_sys_ids_with_empty_result_is_empty() -> None:
    assert _client(FakeTransport({"result": []})).find_sys_ids_by_asset_tag("AB12") == []


def test_create_posts_record_payload() -> None:
    transport = FakeTransport({"result": {"sys_id": "new"}})
    record = DestinationRecord({"name": "web-01", "asset_tag": "AB12"})

    _client(transport).create(record)

    call = transport.calls[0]
    assert call["method"] == "POST"
    assert call["url"].endswith("/api/now/table/cmdb_ci_server")
    assert call["body"] == {"name": "web-01", "asset_tag": "AB12"}


def test_update_puts_record_to_sys_id() -> None:
    transport = FakeTransport({"result": {"sys_id": "s1"}})

    _client(transport).update("s1", DestinationRecord({"name": "web-01", "asset_tag": "AB12"}))

    call = transport.calls[0]
    assert call["method"] == "PUT"
    assert call["url"].endswith("/api/now/table/cmdb_ci_server/s1")


def test_uniqueness_violation_is_detected_from_error_detail() -> None:
    failure = HttpRequestError(
        "POST failed with status 403",
        status_code=403,
        payload={
            "error": {
                "message": "Operation Failed",
                "detail": "Error during insert: violates uniqueness constraint on name",
            }
        },
    )

    with pytest.raises(DestinationApiError) as excinfo:
        _client(FakeTransport(failure)).create(DestinationRecord({"name": "web-01"}))

    assert excinfo.value.status_code == 403
    assert excinfo.value.is_uniqueness_violation is True


def test_other_failures_are_not_uniqueness_violations() -> None:
    failure = HttpRequestError(
        "POST failed with status 500", status_code=500, payload={"error": {"detail": "boom"}}
    )

    with pytest.raises(DestinationApiError) as excinfo:
        _client(FakeTransport(failure)).create(DestinationRecord({"name": "web-01"}))

    assert excinfo.value.is_uniqueness_violation is False
    assert excinfo.value.detail == "boom"


def test_failure_without_json_payload_has_empty_detail() -> None:
    failure = HttpRequestError("GET failed", status_code=502, payload=None)

    with pytest.raises(DestinationApiError) as excinfo:
        _client(FakeTransport(failure)).find_sys_ids_by_asset_tag("AB12")

    assert excinfo.value.detail == ""


def test_create_sends_a_single_post_when_gateway_fails_after_commit() -> None:
    class GatewaySession:
        def __init__(self) -> None:
            self.methods: list[str] = []

        def request(self, *, method: str, **kwargs: Any) -> requests.Response:
            self.methods.append(method)
            response = requests.Response()
            response.status_code = 502 if len(self.methods) == 1 else 201
            response._content = json.dumps({"result": {"sys_id": "s1"}}).encode("utf-8")
            return response

    session = GatewaySession()
    settings = DestinationSettings(
        base_url="https://dev000000.service-now.com",
        username="admin",
        password="secret",
        table="cmdb_ci_server",
    )
    client = DestinationApiClient(settings, session=session)  # type: ignore[arg-type]

    with pytest.raises(DestinationApiError) as excinfo:
        client.create(DestinationRecord({"name": "web-01", "asset_tag": "AB12"}))

    assert excinfo.value.status_code == 502
    assert session.methods == ["POST"]
