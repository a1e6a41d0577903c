"""Module entry point for `python -m cmdb_inventory_sync`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
