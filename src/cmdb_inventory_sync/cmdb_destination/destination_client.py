"""Client for the CMDB Table API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import quote

import requests

from cmdb_inventory_sync.configuration.runtime_settings import DestinationSettings
from cmdb_inventory_sync.field_mapping import DestinationRecord
from cmdb_inventory_sync.http_transport import HttpRequestError, JsonTransport

UNIQUENESS_MARKER = "uniqueness"


class DestinationApiError(Exception):
    """Raised when the CMDB rejects or fails a request."""

    def __init__(self, message: str, *, status_code: int | None = None, detail: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    @property
    def is_uniqueness_violation(self) -> bool:
        """True when the CMDB refused the write because a unique column already exists."""
        return UNIQUENESS_MARKER in self.detail.lower()


class DestinationApi(Protocol):
    """Read/write view of the CMDB table used by the sync engine."""

    def find_sys_ids_by_asset_tag(self, asset_tag: str) -> list[str]: ...

    def create(self, record: DestinationRecord) -> Mapping[str, Any]: ...

    def update(self, sys_id: str, record: DestinationRecord) -> Mapping[str, Any]: ...


class DestinationApiClient:
    """`DestinationApi` implementation over HTTP with basic authentication."""

    def __init__(
        self,
        settings: DestinationSettings,
        *,
        transport: JsonTransport | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._table_url = (
            f"{settings.base_url.rstrip('/')}/api/now/table/{quote(settings.table, safe='')}"
        )
        self._transport = transport or JsonTransport(
            headers={"Accept": "application/json"},
            auth=(settings.username, settings.password),
            session=session,
            timeout_seconds=settings.timeout_seconds,
        )

    def find_sys_ids_by_asset_tag(self, asset_tag: str) -> list[str]:
        """Return the sys_id of every row whose asset_tag equals the given tag."""
        payload = self._call(
            "GET",
            self._table_url,
            params={"sysparm_fields": "sys_id", "sysparm_query": f"asset_tag={asset_tag}"},
        )
        rows = payload.get("result") or []
        return [
            str(row["sys_id"]) for row in rows if isinstance(row, Mapping) and row.get("sys_id")
        ]

    def create(self, record: DestinationRecord) -> Mapping[str, Any]:
        """Insert a new row."""
        return self._call("POST", self._table_url, body=record.as_payload())

    def update(self, sys_id: str, record: DestinationRecord) -> Mapping[str, Any]:
        """Overwrite the row identified by `sys_id`."""
        url = f"{self._table_url}/{quote(sys_id, safe='')}"
        return self._call("PUT", url, body=record.as_payload())

    def _call(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Mapping[str, Any]:
        try:
            payload = self._transport.request_json(method, url, params=params, body=body)
        except HttpRequestError as exc:
            raise DestinationApiError(
                str(exc), status_code=exc.status_code, detail=_error_detail(exc.payload)
            ) from exc
        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise DestinationApiError(f"Unexpected response body from {url}.")
        return payload


def _error_detail(payload: Any) -> str:
    """Extract `error.detail` (falling back to `error.message`) from an error body."""
    if not isinstance(payload, Mapping):
        return ""
    error = payload.get("error")
    if not isinstance(error, Mapping):
        return ""
    detail = error.get("detail") or error.get("message") or ""
    return str(detail)
