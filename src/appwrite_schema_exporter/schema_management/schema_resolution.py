"""Schema loading, shape detection and database resolution service."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .schema_models import (
    Collection,
    Database,
    DatabaseSource,
    ExplicitDatabase,
    ImplicitDatabase,
    SchemaDocument,
)

logger = logging.getLogger(__name__)

_UNSAFE_SEGMENTS = frozenset({".", ".."})
_UNSAFE_CHARACTERS = ("/", "\\", "\x00")


class SchemaError(Exception):
    """Base error for reading and resolving schema documents."""


class SchemaFileNotFoundError(SchemaError):
    """Raised when the schema document does not exist."""


class ParseError(SchemaError):
    """Raised when the schema document is not well-formed JSON."""


class SchemaShapeError(SchemaError):
    """Raised when the document does not resolve to exactly one database."""


class SchemaValidationError(SchemaError):
    """Raised when a name or key cannot be used as a path segment."""


def load_schema_document(schema_path: Path | str) -> SchemaDocument:
    """Read and parse the schema document at `schema_path`."""
    path = Path(schema_path)
    if not path.is_file():
        raise SchemaFileNotFoundError(f"Schema file not found: {path}")
    # ValueError covers undecodable bytes, JSONDecodeError and non-finite numbers.
    try:
        text = path.read_text(encoding="utf-8")
        root = json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except ValueError as exc:
        raise ParseError(f"Invalid schema document {path}: {exc}") from exc
    if not isinstance(root, Mapping):
        raise ParseError(f"Schema document root must be an object: {path}")
    logger.debug("parsed schema document %s (%d top-level keys)", path, len(root))
    return SchemaDocument(root=root, source_path=path)


def detect_database_source(document: SchemaDocument) -> DatabaseSource:
    """Classify the document as an explicit `databases` array or bare `collections`.

    A non-empty `databases` array wins; its first entry is used and any further
    databases are ignored. Otherwise a top-level `collections` array is accepted,
    even when empty.
    """
    root = document.root
    databases = root.get("databases")
    if _is_array(databases) and databases:
        first = databases[0]
        if not isinstance(first, Mapping):
            raise SchemaShapeError("First entry of 'databases' must be an object.")
        if len(databases) > 1:
            logger.debug("ignoring %d additional databases", len(databases) - 1)
        return ExplicitDatabase(record=first)

    collections = root.get("collections")
    if collections is not None:
        if not _is_array(collections):
            raise SchemaShapeError("Top-level 'collections' must be an array.")
        return ImplicitDatabase(collections=tuple(collections))

    raise SchemaShapeError("neither databases nor collections key found")


def resolve_database(
    source: DatabaseSource,
    *,
    default_database_id: str,
    default_database_name: str,
) -> Database:
    """Normalize either detected document shape into a single `Database`."""
    if isinstance(source, ExplicitDatabase):
        record = source.record
        raw_collections = record.get("collections")
        if not _is_array(raw_collections):
            raise SchemaShapeError(
                f"Database '{record.get('name')}' must define a 'collections' array."
            )
        database_id = record.get("$id")
        name = record.get("name")
    else:
        raw_collections = source.collections
        database_id = default_database_id
        name = default_database_name

    collections = []
    for position, raw in enumerate(raw_collections):
        if not isinstance(raw, Mapping):
            raise SchemaShapeError(f"Collection at position {position} must be an object.")
        collections.append(Collection(raw=raw))
    return Database(database_id=database_id, name=name, collections=tuple(collections))


def validate_database(database: Database, *, check_path_safety: bool = True) -> None:
    """Reject names and keys that cannot become directory or file names.

    Every database name, collection name and attribute/index key must be a
    non-empty string, and `attributes`/`indexes` must be arrays when present.
    With `check_path_safety`, separators, NUL and the `.`/`..` segments are
    rejected as well.
    """
    _validate_segment(database.name, "database name", check_path_safety)
    for collection in database.collections:
        _validate_segment(collection.name, "collection name", check_path_safety)
        for kind, field_name in (("attribute", "attributes"), ("index", "indexes")):
            records = collection.raw.get(field_name)
            if records is None:
                continue
            if not _is_array(records):
                raise SchemaValidationError(
                    f"Collection '{collection.name}' field '{field_name}' must be an array."
                )
            for record in records:
                if not isinstance(record, Mapping):
                    raise SchemaValidationError(
                        f"Collection '{collection.name}' has a non-object {kind} entry."
                    )
                _validate_segment(
                    record.get("key"),
                    f"{kind} key in collection '{collection.name}'",
                    check_path_safety,
                )


def _validate_segment(value: Any, label: str, check_path_safety: bool) -> None:
    if not isinstance(value, str):
        raise SchemaValidationError(f"{label} must be a string, got {value!r}.")
    if not value.strip():
        raise SchemaValidationError(f"{label} must not be empty.")
    if not check_path_safety:
        return
    if value in _UNSAFE_SEGMENTS or any(char in value for char in _UNSAFE_CHARACTERS):
        raise SchemaValidationError(f"{label} is not a safe path segment: {value!r}.")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number {token} is out of range")
    return value


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
