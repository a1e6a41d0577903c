"""Exhaustive listing of source entity ids."""

from __future__ import annotations

import logging

from .source_client import SourceApi

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000


def list_all_ids(source: SourceApi, *, page_size: int = DEFAULT_PAGE_SIZE) -> list[str]:
    """Return every entity id of the source collection in server order.

    Keeps requesting pages until the offset reaches the total reported by the
    latest response.
    """
    if page_size <= 0:
        raise ValueError("page_size must be greater than zero.")
    ids: list[str] = []
    offset = 0
    while True:
        page = source.list_page(offset=offset, limit=page_size)
        ids.extend(page.ids)
        offset += page_size
        logger.debug("Listed %d of %d entities", len(ids), page.total_available_items)
        if offset >= page.total_available_items:
            return ids
