"""Schema management exports."""

from .schema_models import (
    Collection,
    Database,
    DatabaseSource,
    ExplicitDatabase,
    ImplicitDatabase,
    SchemaDocument,
)
from .schema_resolution import (
    ParseError,
    SchemaError,
    SchemaFileNotFoundError,
    SchemaShapeError,
    SchemaValidationError,
    detect_database_source,
    load_schema_document,
    resolve_database,
    validate_database,
)

__all__ = [
    "Collection",
    "Database",
    "DatabaseSource",
    "ExplicitDatabase",
    "ImplicitDatabase",
    "SchemaDocument",
    "ParseError",
    "SchemaError",
    "SchemaFileNotFoundError",
    "SchemaShapeError",
    "SchemaValidationError",
    "detect_database_source",
    "load_schema_document",
    "resolve_database",
    "validate_database",
]
