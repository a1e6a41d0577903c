"""Client for the discovery system REST API."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from typing import Any, Protocol
from urllib.parse import quote

import requests

from cmdb_inventory_sync.configuration.runtime_settings import SourceSettings
from cmdb_inventory_sync.http_transport import HttpRequestError, JsonTransport

from .source_models import SourcePage, SourceRecord


class SourceApiError(Exception):
    """Raised when the discovery API cannot serve a request."""


class SourceApi(Protocol):
    """Read-only view of the discovery API used by the sync engine."""

    def list_page(self, *, offset: int, limit: int) -> SourcePage: ...

    def fetch_record(self, entity_id: str) -> SourceRecord: ...


class SourceApiClient:
    """`SourceApi` implementation over HTTP."""

    def __init__(
        self,
        settings: SourceSettings,
        *,
        transport: JsonTransport | None = None,
        session: requests.Session | None = None,
        clock_ms: Callable[[], int] | None = None,
    ) -> None:
        self._collection_url = "/".join(
            (
                settings.base_url.rstrip("/"),
                quote(settings.environment, safe=""),
                quote(settings.entity_type, safe=""),
            )
        )
        self._transport = transport or JsonTransport(
            headers={
                "Accept": "application/json",
                "Authorization": f"apiToken {settings.api_token}",
            },
            session=session,
            timeout_seconds=settings.timeout_seconds,
        )
        self._clock_ms = clock_ms or (lambda: int(time.time() * 1000))

    def list_page(self, *, offset: int, limit: int) -> SourcePage:
        """Fetch one page of entity ids."""
        payload = self._get(
            self._collection_url,
            params={"offset": offset, "limit": limit, "utc": self._clock_ms()},
        )
        total = payload.get("totalAvailableItems")
        if isinstance(total, bool) or not isinstance(total, int):
            raise SourceApiError("Listing response has no integer 'totalAvailableItems'.")
        items = payload.get("items") or []
        return SourcePage(
            total_available_items=total,
            ids=tuple(_item_id(item) for item in items),
        )

    def fetch_record(self, entity_id: str) -> SourceRecord:
        """Fetch the current snapshot of one entity."""
        payload = self._get(f"{self._collection_url}/{quote(entity_id, safe='')}")
        items = payload.get("items") or []
        if not items or not isinstance(items[0], Mapping):
            raise SourceApiError(f"Entity {entity_id} not found in the discovery API response.")
        item = items[0]
        instance = item.get("instance")
        if not isinstance(instance, str):
            raise SourceApiError(f"Entity {entity_id} has no 'instance' identifier.")
        state = item.get("state")
        return SourceRecord(instance=instance, state=state if isinstance(state, Mapping) else None)

    def _get(self, url: str, *, params: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        try:
            payload = self._transport.request_json("GET", url, params=params)
        except HttpRequestError as exc:
            raise SourceApiError(str(exc)) from exc
        if not isinstance(payload, Mapping):
            raise SourceApiError(f"Unexpected response body from {url}.")
        return payload


def _item_id(item: Any) -> str:
    entity_id = item.get("id") if isinstance(item, Mapping) else None
    if entity_id is None or entity_id == "":
        raise SourceApiError("Discovery API returned a listing item without 'id'.")
    return str(entity_id)
