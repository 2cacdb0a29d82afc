"""Output directory layout for exported schema entities."""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_ROOT = "appwrite"
COLLECTION_FILENAME = "collection.json"
ATTRIBUTES_DIRNAME = "attributes"
INDEXES_DIRNAME = "indexes"


def database_directory(output_root: Path | str, database_name: str) -> Path:
    """Return `{output_root}/databases/{database_name}`."""
    return Path(output_root) / "databases" / database_name


def collection_directory(database_dir: Path, collection_name: str) -> Path:
    return database_dir / "collections" / collection_name


def attribute_path(collection_dir: Path, key: str) -> Path:
    return collection_dir / ATTRIBUTES_DIRNAME / f"{key}.json"


def index_path(collection_dir: Path, key: str) -> Path:
    return collection_dir / INDEXES_DIRNAME / f"{key}.json"
