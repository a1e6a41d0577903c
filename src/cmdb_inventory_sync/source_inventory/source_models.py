"""Source inventory entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SourceRecord:
    """Current snapshot of one discovered entity."""

    instance: str
    state: Mapping[str, Any] | None

    @property
    def is_deleted(self) -> bool:
        """Only an absent state marks a deletion; an empty state is still a live entity."""
        return self.state is None


@dataclass(frozen=True)
class SourcePage:
    """One page of the source listing endpoint."""

    total_available_items: int
    ids: tuple[str, ...]
