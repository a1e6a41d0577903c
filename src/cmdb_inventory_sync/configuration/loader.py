"""Configuration loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from cmdb_inventory_sync.field_mapping import (
    FieldMapping,
    UnknownMappingError,
    build_field_mapping,
    resolve_mapping,
)

from .runtime_settings import Configuration, DestinationSettings, SourceSettings

PLACEHOLDER = "<REQUIRED>"
CUSTOM_MAPPING_NAME = "custom"
SECRET_ENVIRONMENT_VARIABLES = {
    "source.api_token": "SOURCE_API_TOKEN",
    "destination.password": "DESTINATION_PASSWORD",
}


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid.

    `problems` lists every individual issue found, so that all of them can be
    reported at once.
    """

    def __init__(self, problems: list[str] | str) -> None:
        self.problems = [problems] if isinstance(problems, str) else list(problems)
        super().__init__("\n".join(self.problems))


def load_configuration(
    config_path: Path | str, *, environ: Mapping[str, str] | None = None
) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    reader = _SectionReader(os.environ if environ is None else environ)
    source_section = reader.section(parsed, "source")
    destination_section = reader.section(parsed, "destination")

    source = SourceSettings(
        base_url=reader.required_string(source_section, "source.base_url"),
        environment=reader.required_string(source_section, "source.environment"),
        api_token=reader.required_string(source_section, "source.api_token"),
        entity_type=reader.required_string(source_section, "source.entity_type"),
        timeout_seconds=reader.positive_int(source_section, "source.timeout_seconds", 30),
    )
    destination = DestinationSettings(
        base_url=reader.required_string(destination_section, "destination.base_url"),
        username=reader.required_string(destination_section, "destination.username"),
        password=reader.required_string(destination_section, "destination.password"),
        table=reader.required_string(destination_section, "destination.table"),
        timeout_seconds=reader.positive_int(
            destination_section, "destination.timeout_seconds", 30
        ),
    )
    mapping = reader.mapping(parsed.get("mapping"))

    if reader.problems or mapping is None:
        raise ConfigurationError(reader.problems)

    return Configuration(path=path, source=source, destination=destination, mapping=mapping)


class _SectionReader:
    """Reads configuration values while collecting every problem found."""

    def __init__(self, environ: Mapping[str, str]) -> None:
        self._environ = environ
        self.problems: list[str] = []

    def section(self, root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
        value = root.get(name)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            self.problems.append(f"Configuration section '{name}' must be a mapping.")
            return {}
        return value

    def required_string(self, section: Mapping[str, Any], dotted_name: str) -> str:
        value = section.get(dotted_name.rsplit(".", 1)[1])
        if _is_missing(value) and dotted_name in SECRET_ENVIRONMENT_VARIABLES:
            value = self._environ.get(SECRET_ENVIRONMENT_VARIABLES[dotted_name])
        if _is_missing(value):
            self.problems.append(f"{dotted_name} attribute missing.")
            return ""
        if not isinstance(value, str):
            self.problems.append(f"{dotted_name} must be a string.")
            return ""
        return value.strip()

    def positive_int(self, section: Mapping[str, Any], dotted_name: str, default: int) -> int:
        value = section.get(dotted_name.rsplit(".", 1)[1], default)
        if isinstance(value, bool) or not isinstance(value, int):
            self.problems.append(f"{dotted_name} must be an integer.")
            return default
        if value <= 0:
            self.problems.append(f"{dotted_name} must be greater than zero.")
            return default
        return value

    def mapping(self, value: Any) -> FieldMapping | None:
        if _is_missing(value):
            self.problems.append("mapping attribute missing.")
            return None
        if isinstance(value, str):
            try:
                return resolve_mapping(value.strip())
            except UnknownMappingError as exc:
                self.problems.append(str(exc))
                return None
        if isinstance(value, Mapping):
            try:
                return build_field_mapping(CUSTOM_MAPPING_NAME, value)
            except ValueError as exc:
                self.problems.append(str(exc))
                return None
        self.problems.append("mapping must be a mapping name or a table of field paths.")
        return None


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        stripped = value.strip()
        return not stripped or stripped == PLACEHOLDER
    return False
