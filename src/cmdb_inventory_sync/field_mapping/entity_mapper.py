"""Projection of one source record onto the destination schema."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .mapping_models import DestinationRecord, FieldMapping
from .path_projection import project

if TYPE_CHECKING:
    from cmdb_inventory_sync.source_inventory.source_models import SourceRecord

ASSET_TAG_FIELD = "asset_tag"


def derive_asset_tag(instance: str) -> str | None:
    """Return the second '-'-delimited segment of a source instance id.

    The full instance id exceeds the 40 character limit of the destination
    `asset_tag` column. Returns None when the id has no second segment.
    """
    segments = instance.split("-")
    if len(segments) < 2:
        return None
    return segments[1]


def map_entity(record: SourceRecord, mapping: FieldMapping) -> DestinationRecord:
    """Build the destination record for one source record."""
    values: dict[str, Any] = {
        entry.field: project(record.state, entry.path) for entry in mapping
    }
    values[ASSET_TAG_FIELD] = derive_asset_tag(record.instance)
    return DestinationRecord(values)
