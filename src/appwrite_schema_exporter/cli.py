"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from appwrite_schema_exporter.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from appwrite_schema_exporter.export_execution import (
    ExportExecutionError,
    ExportRequest,
    execute_schema_export,
)
from appwrite_schema_exporter.field_guide import build_field_instructions, check_schema_marker
from appwrite_schema_exporter.schema_management import SchemaError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="appwrite-schema-exporter")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Appwrite schema export utility."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="export")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON exporter configuration file",
)
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Appwrite schema document to export [default: appwrite.json]",
)
@click.option(
    "--output-root",
    "output_root",
    required=False,
    type=click.Path(path_type=str),
    help="Directory receiving the export tree [default: appwrite]",
)
@click.option(
    "--allow-unsafe-names",
    is_flag=True,
    default=False,
    help="Skip rejecting names and keys that contain path separators or dot segments.",
)
def export_schema(
    config_path: str | None,
    schema_path: str | None,
    output_root: str | None,
    allow_unsafe_names: bool,
) -> None:
    """Write one JSON file per collection, attribute and index."""
    configuration = _load_configuration(config_path)
    request = ExportRequest(
        schema_path=Path(schema_path) if schema_path else configuration.schema_path,
        output_root=Path(output_root) if output_root else configuration.output.root,
        indent=configuration.output.indent,
        check_path_safety=not allow_unsafe_names,
    )
    try:
        outcome = execute_schema_export(request, configuration.defaults, progress=click.echo)
    except ExportExecutionError as exc:
        raise CliError(f"An error occurred: {exc}") from exc
    click.echo("")
    click.echo(
        f"Conversion successful! {len(outcome.collections)} collections, "
        f"{outcome.files_written} files written."
    )
    click.echo(f'The "{request.output_root}" folder is now ready.')
    click.echo('You can now run "appwrite push" to deploy your schema.')


@cli.command(name="field-guide")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON exporter configuration file",
)
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Appwrite schema document to check [default: appwrite.json]",
)
def field_guide(config_path: str | None, schema_path: str | None) -> None:
    """Print console steps for adding pending fields and check the schema document."""
    configuration = _load_configuration(config_path)
    settings = configuration.field_guide
    resolved_schema = Path(schema_path) if schema_path else configuration.schema_path
    for line in build_field_instructions(settings):
        click.echo(line)
    try:
        updated = check_schema_marker(resolved_schema, settings.marker)
    except (SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc
    if updated:
        click.echo(f"{resolved_schema.name} has been updated successfully!")
    else:
        click.echo(f"{resolved_schema.name} has NOT been updated. Please update it manually.")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML exporter configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML exporter configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _load_configuration(config_path: str | None) -> Configuration:
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="appwrite-schema-exporter", standalone_mode=False)
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
