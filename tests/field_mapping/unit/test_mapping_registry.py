"""Mapping registry and table building tests."""

from __future__ import annotations

import pytest
from cmdb_inventory_sync.field_mapping import (
    Index,
    Name,
    UnknownMappingError,
    build_field_mapping,
    mapping_names,
    resolve_mapping,
)


def test_builtin_mapping_names_are_registered_in_order() -> None:
    assert mapping_names() == ("linux-host", "windows-host", "service")


def test_linux_host_mapping_declares_serial_number_path() -> None:
    mapping = resolve_mapping("linux-host")

    assert mapping.declares("serial_number")
    paths = {entry.field: entry.path for entry in mapping}
    assert paths["serial_number"] == (Name("system"), Name("serialNumber"))
    assert paths["cpu_core_count"] == (
        Name("hardware"),
        Name("processor"),
        Name("devices"),
        Index(0),
        Name("coreCount"),
    )


def test_service_mapping_only_maps_name() -> None:
    mapping = resolve_mapping("service")

    assert [entry.field for entry in mapping] == ["name"]
    assert not mapping.declares("serial_number")


def test_resolve_unknown_mapping_raises() -> None:
    with pytest.raises(UnknownMappingError, match='no mapping defined for "mainframe"'):
        resolve_mapping("mainframe")


def test_build_field_mapping_preserves_declaration_order() -> None:
    mapping = build_field_mapping("custom", {"b": ["x"], "a": ["y", 1]})

    assert [entry.field for entry in mapping] == ["b", "a"]
    assert mapping.fields[1].path == (Name("y"), Index(1))


@pytest.mark.parametrize(
    ("table", "message"),
    [
        ({}, "at least one field"),
        ({"name": "displayName"}, "must be a list"),
        ({"name": []}, "must not be empty"),
        ({"name": ["devices", -1]}, "negative index"),
        ({"name": ["devices", True]}, "boolean path segment"),
        ({"name": ["devices", 1.5]}, "strings or integers"),
    ],
)
def test_build_field_mapping_rejects_invalid_tables(table, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        build_field_mapping("custom", table)
