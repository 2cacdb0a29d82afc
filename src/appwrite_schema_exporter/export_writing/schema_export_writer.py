"""Collection, attribute and index file writer service."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from appwrite_schema_exporter.schema_management.schema_models import Collection

from .export_layout import COLLECTION_FILENAME, attribute_path, collection_directory, index_path
from .export_models import CollectionExport

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 4

_COLLECTION_FIELDS = ("$id", "name", "documentSecurity", "enabled")


class ExportWriteError(Exception):
    """Raised when a directory or file cannot be written."""


def build_collection_record(collection: Collection) -> dict[str, Any]:
    """Build the `collection.json` payload.

    Fields missing from the input are left out rather than written as null.
    `permissions` always appears: an empty value (missing, null, false, 0 or
    "") becomes an empty list, anything else is copied unchanged.
    """
    raw = collection.raw
    record = {key: raw[key] for key in _COLLECTION_FIELDS if key in raw}
    permissions = raw.get("permissions")
    record["permissions"] = [] if _is_empty_value(permissions) else permissions
    return record


def render_json(value: Any, *, indent: int = DEFAULT_INDENT) -> str:
    """Serialize `value` the same way on every run."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def write_collection(
    collection: Collection, database_dir: Path, *, indent: int = DEFAULT_INDENT
) -> CollectionExport:
    """Write `collection.json` plus one file per attribute and index.

    The `attributes` and `indexes` subdirectories are created only when at
    least one file goes into them.
    """
    collection_dir = collection_directory(database_dir, collection.name)
    _make_directory(collection_dir)
    collection_file = collection_dir / COLLECTION_FILENAME
    _write_json(collection_file, build_collection_record(collection), indent=indent)

    attribute_files = _write_keyed_records(
        collection.attributes, lambda key: attribute_path(collection_dir, key), indent=indent
    )
    index_files = _write_keyed_records(
        collection.indexes, lambda key: index_path(collection_dir, key), indent=indent
    )
    logger.debug(
        "wrote collection %s: %d attributes, %d indexes",
        collection.name,
        len(attribute_files),
        len(index_files),
    )
    return CollectionExport(
        name=collection.name,
        directory=collection_dir,
        collection_file=collection_file,
        attribute_files=attribute_files,
        index_files=index_files,
    )


def _write_keyed_records(
    records: Sequence[Mapping[str, Any]] | None,
    path_for_key: Callable[[str], Path],
    *,
    indent: int,
) -> tuple[Path, ...]:
    written: list[Path] = []
    for record in records or ():
        destination = path_for_key(record["key"])
        _make_directory(destination.parent)
        _write_json(destination, record, indent=indent)
        written.append(destination)
    return tuple(written)


def _make_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, UnicodeEncodeError) as exc:
        raise ExportWriteError(f"Failed to create directory {path}: {exc}") from exc


def _write_json(path: Path, value: Any, *, indent: int) -> None:
    try:
        path.write_text(render_json(value, indent=indent), encoding="utf-8")
    except (OSError, UnicodeEncodeError) as exc:
        raise ExportWriteError(f"Failed to write {path}: {exc}") from exc


def _is_empty_value(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    return isinstance(value, (int, float)) and value == 0
