"""Boundary tests for reconciliation internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_reconciliation_core_does_not_import_transport_or_reporting() -> None:
    package_dir = _project_root() / "src" / "cmdb_inventory_sync"
    core_modules = (
        package_dir / "reconciliation" / "reconciliation_outcomes.py",
        package_dir / "reconciliation" / "entity_reconciler.py",
        package_dir / "field_mapping" / "path_projection.py",
        package_dir / "field_mapping" / "entity_mapper.py",
    )
    forbidden_import_fragments = (
        "import requests",
        "cmdb_inventory_sync.http_transport",
        "cmdb_inventory_sync.results_reporting",
        "import click",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
