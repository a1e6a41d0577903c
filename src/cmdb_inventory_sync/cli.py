"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from cmdb_inventory_sync.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    write_placeholder_configuration,
)
from cmdb_inventory_sync.field_mapping import mapping_names, resolve_mapping
from cmdb_inventory_sync.run_execution import SyncRequest, SyncRunError, execute_sync_run


class CliError(Exception):
    """Custom CLI error."""


def _echo_progress(line: str, *, is_error: bool = False) -> None:
    click.echo(line, err=is_error)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="cmdb-inventory-sync")
def cli() -> None:
    """Discovery inventory to ServiceNow CMDB synchronization utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML sync configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML sync configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-mappings")
def list_mappings() -> None:
    """List the built-in mapping tables and the columns they fill."""
    for name in mapping_names():
        mapping = resolve_mapping(name)
        click.echo(f"{name}: {', '.join(entry.field for entry in mapping)}")


@cli.command(name="sync")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON sync configuration file",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log every HTTP call and per-entity failure details to stderr.",
)
def sync(config_path: str, verbose: bool) -> None:
    """Import or update every discovered entity in the CMDB table."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    try:
        execute_sync_run(SyncRequest(config_path=config_path), reporter=_echo_progress)
    except ConfigurationError as exc:
        message = "\n".join([*exc.problems, "Set all the required attributes and retry."])
        raise CliError(message) from exc
    except SyncRunError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
