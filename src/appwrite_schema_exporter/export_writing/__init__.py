"""Export writing domain exports."""

from .export_layout import (
    DEFAULT_OUTPUT_ROOT,
    attribute_path,
    collection_directory,
    database_directory,
    index_path,
)
from .export_models import CollectionExport
from .schema_export_writer import (
    DEFAULT_INDENT,
    ExportWriteError,
    build_collection_record,
    render_json,
    write_collection,
)

__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_OUTPUT_ROOT",
    "CollectionExport",
    "ExportWriteError",
    "attribute_path",
    "build_collection_record",
    "collection_directory",
    "database_directory",
    "index_path",
    "render_json",
    "write_collection",
]
