"""Schema export use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from appwrite_schema_exporter.configuration.runtime_settings import DatabaseDefaults
from appwrite_schema_exporter.export_writing import (
    ExportWriteError,
    database_directory,
    write_collection,
)
from appwrite_schema_exporter.schema_management import (
    ExplicitDatabase,
    SchemaError,
    detect_database_source,
    load_schema_document,
    resolve_database,
    validate_database,
)

from .export_contracts import ExportOutcome, ExportRequest

logger = logging.getLogger(__name__)

ProgressReporter = Callable[[str], None]


class ExportExecutionError(Exception):
    """Raised when an export run cannot be completed."""


def execute_schema_export(
    request: ExportRequest,
    defaults: DatabaseDefaults | None = None,
    *,
    progress: ProgressReporter | None = None,
) -> ExportOutcome:
    """Export every collection of the resolved database into the output tree.

    Nothing is written until the document has been parsed, resolved and
    validated. Once writing starts, files already written stay in place if a
    later write fails.
    """
    report = progress or _discard
    resolved_defaults = defaults or DatabaseDefaults()
    try:
        report(f"Reading {request.schema_path}...")
        document = load_schema_document(request.schema_path)
        source = detect_database_source(document)
        if isinstance(source, ExplicitDatabase):
            report('Found "databases" array structure.')
        else:
            report('Found top-level "collections" array. Using default database info.')
        database = resolve_database(
            source,
            default_database_id=resolved_defaults.database_id,
            default_database_name=resolved_defaults.database_name,
        )
        validate_database(database, check_path_safety=request.check_path_safety)
    except (SchemaError, OSError) as exc:
        raise ExportExecutionError(str(exc)) from exc

    database_dir = database_directory(request.output_root, database.name)
    report(f"Preparing directory for database: {database.name}")
    logger.debug("exporting %d collections to %s", len(database.collections), database_dir)

    exported = []
    try:
        for collection in database.collections:
            report(f"  -> Processing collection: {collection.name}")
            exported.append(write_collection(collection, database_dir, indent=request.indent))
    except ExportWriteError as exc:
        raise ExportExecutionError(str(exc)) from exc

    outcome = ExportOutcome(
        database_name=database.name,
        database_directory=database_dir,
        collections=tuple(exported),
    )
    logger.debug("export finished: %d files written", outcome.files_written)
    return outcome


def _discard(_message: str) -> None:
    return None
