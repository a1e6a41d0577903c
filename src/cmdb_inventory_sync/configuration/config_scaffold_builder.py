"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Sync configuration template for cmdb-inventory-sync.
# Replace every <REQUIRED> placeholder before running sync.
# api_token and password may be left as placeholders and supplied through the
# SOURCE_API_TOKEN and DESTINATION_PASSWORD environment variables instead.

source:
  # Discovery API root, including the API version path.
  base_url: "https://live.versio.io/api-versio.db/1.0"
  # 10-character environment id shown on the first line of the dashboard.
  environment: "<REQUIRED>"
  # API token with "CMDB viewer" rights.
  api_token: "<REQUIRED>"
  # Instance group to export, e.g. "host" or "service".
  entity_type: "host"
  # timeout_seconds: 30

destination:
  # ServiceNow instance URL, e.g. "https://dev000000.service-now.com".
  base_url: "<REQUIRED>"
  username: "<REQUIRED>"
  password: "<REQUIRED>"
  # Target table, e.g. "cmdb_ci_server" for servers or "cmdb_ci_service" for services.
  table: "cmdb_ci_server"
  # timeout_seconds: 30

# Built-in mapping name ("linux-host", "windows-host" or "service") or an inline
# table of destination column -> path into the discovered state, for example:
# mapping:
#   name: ["displayName"]
#   cpu_core_count: ["hardware", "processor", "devices", 0, "coreCount"]
mapping: "linux-host"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML sync configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder sync configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Sync configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
