"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cmdb_inventory_sync.field_mapping.mapping_models import FieldMapping


@dataclass(frozen=True)
class SourceSettings:
    """Discovery API connectivity configuration."""

    base_url: str
    environment: str
    api_token: str = field(repr=False)
    entity_type: str
    timeout_seconds: int = 30


@dataclass(frozen=True)
class DestinationSettings:
    """CMDB Table API connectivity configuration."""

    base_url: str
    username: str
    password: str = field(repr=False)
    table: str
    timeout_seconds: int = 30


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    source: SourceSettings
    destination: DestinationSettings
    mapping: FieldMapping
