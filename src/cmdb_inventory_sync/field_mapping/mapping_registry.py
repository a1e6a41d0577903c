"""Built-in mapping tables from discovery state to CMDB server columns."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .mapping_models import FieldMapping, build_field_mapping


class UnknownMappingError(LookupError):
    """Raised when a mapping name is not registered."""


_LINUX_HOST: dict[str, list[Any]] = {
    "name": ["displayName"],
    "manufacturer": ["system", "manufacturer"],
    "serial_number": ["system", "serialNumber"],
    "model_id": ["system", "version"],
    "os": ["technology", "Operating system", "product"],
    "os_version": ["technology", "Operating system", "version"],
    "cpu_manufacturer": ["hardware", "processor", "devices", 0, "manufacturer"],
    "cpu_count": ["hardware", "processor", "totalDevices"],
    "cpu_core_count": ["hardware", "processor", "devices", 0, "coreCount"],
    "ip_address": ["operatingSystem", "networkInterfaces", "vmbr0", "inet"],
    "mac_address": ["operatingSystem", "networkInterfaces", "vmbr0", "ether"],
}

_WINDOWS_HOST: dict[str, list[Any]] = {
    "name": ["displayName"],
    "manufacturer": ["system", "manufacturer"],
    "serial_number": ["bios", "serialNumber"],
    "model_id": ["system", "model"],
    "os": ["technology", "Operating system", "product"],
    "os_version": ["technology", "Operating system", "version"],
    "cpu_manufacturer": ["hardware", "processor", "devices", 0, "manufacturer"],
    "cpu_count": ["hardware", "processor", "totalDevices"],
    "cpu_core_count": ["hardware", "processor", "devices", 0, "numberOfCores"],
}

_SERVICE: dict[str, list[Any]] = {
    "name": ["displayName"],
}

BUILTIN_MAPPINGS: Mapping[str, FieldMapping] = MappingProxyType(
    {
        name: build_field_mapping(name, table)
        for name, table in (
            ("linux-host", _LINUX_HOST),
            ("windows-host", _WINDOWS_HOST),
            ("service", _SERVICE),
        )
    }
)


def mapping_names() -> tuple[str, ...]:
    """Return the registered mapping names in declaration order."""
    return tuple(BUILTIN_MAPPINGS)


def resolve_mapping(name: str) -> FieldMapping:
    """Look up a built-in mapping table by name."""
    try:
        return BUILTIN_MAPPINGS[name]
    except KeyError as exc:
        raise UnknownMappingError(f'There is no mapping defined for "{name}".') from exc
