"""Field mapping entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Name:
    """Path segment addressing a key of a mapping."""

    key: str


@dataclass(frozen=True)
class Index:
    """Path segment addressing a position of a list."""

    position: int


PathSegment = Name | Index


@dataclass(frozen=True)
class FieldPath:
    """Destination field name together with its source path."""

    field: str
    path: tuple[PathSegment, ...]


@dataclass(frozen=True)
class FieldMapping:
    """Named, ordered table of destination fields and their source paths."""

    name: str
    fields: tuple[FieldPath, ...]

    def declares(self, field_name: str) -> bool:
        """Return True when the table maps the given destination field."""
        return any(entry.field == field_name for entry in self.fields)

    def __iter__(self) -> Iterator[FieldPath]:
        return iter(self.fields)


@dataclass(frozen=True)
class DestinationRecord:
    """Flat record written to the destination table."""

    values: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def asset_tag(self) -> str | None:
        return self.values.get("asset_tag")

    @property
    def name(self) -> Any:
        return self.values.get("name", "")

    def get(self, field_name: str, default: Any = None) -> Any:
        return self.values.get(field_name, default)

    def as_payload(self) -> dict[str, Any]:
        """Return a plain dict suitable for JSON serialization.

        Fields without a value are left out so an update never blanks them.
        """
        return {field: value for field, value in self.values.items() if value is not None}


def build_field_mapping(name: str, table: Mapping[str, Any]) -> FieldMapping:
    """Build a FieldMapping from a `{field: [segment, ...]}` table.

    String segments become `Name` segments and integers become `Index` segments.

    Raises:
      ValueError: If a path is not a non-empty list or holds an unsupported segment.
    """
    fields: list[FieldPath] = []
    for field_name, raw_path in table.items():
        if not isinstance(field_name, str) or not field_name.strip():
            raise ValueError(f"Mapping '{name}' has an invalid field name: {field_name!r}")
        if isinstance(raw_path, (str, bytes)) or not isinstance(raw_path, (list, tuple)):
            raise ValueError(f"Mapping '{name}' field '{field_name}' path must be a list.")
        if not raw_path:
            raise ValueError(f"Mapping '{name}' field '{field_name}' path must not be empty.")
        path = tuple(_segment(name, field_name, segment) for segment in raw_path)
        fields.append(FieldPath(field=field_name, path=path))
    if not fields:
        raise ValueError(f"Mapping '{name}' must declare at least one field.")
    return FieldMapping(name=name, fields=tuple(fields))


def _segment(mapping_name: str, field_name: str, raw: Any) -> PathSegment:
    if isinstance(raw, bool):
        raise ValueError(
            f"Mapping '{mapping_name}' field '{field_name}' has a boolean path segment."
        )
    if isinstance(raw, int):
        if raw < 0:
            raise ValueError(
                f"Mapping '{mapping_name}' field '{field_name}' has a negative index: {raw}"
            )
        return Index(raw)
    if isinstance(raw, str):
        return Name(raw)
    raise ValueError(
        f"Mapping '{mapping_name}' field '{field_name}' path segments must be strings or "
        f"integers, got {raw!r}."
    )
