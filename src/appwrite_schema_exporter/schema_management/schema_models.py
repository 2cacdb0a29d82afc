"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed Appwrite schema document."""

    root: Mapping[str, Any]
    source_path: Path | None = None


@dataclass(frozen=True)
class Collection:
    """One collection entry, keeping the raw record for verbatim output."""

    raw: Mapping[str, Any]

    @property
    def collection_id(self) -> Any:
        return self.raw.get("$id")

    @property
    def name(self) -> Any:
        return self.raw.get("name")

    @property
    def attributes(self) -> tuple[Mapping[str, Any], ...] | None:
        return _optional_records(self.raw.get("attributes"))

    @property
    def indexes(self) -> tuple[Mapping[str, Any], ...] | None:
        return _optional_records(self.raw.get("indexes"))


@dataclass(frozen=True)
class Database:
    """Resolved database with its ordered collections."""

    database_id: Any
    name: str
    collections: tuple[Collection, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ExplicitDatabase:
    """Database taken from the first entry of a `databases` array."""

    record: Mapping[str, Any]


@dataclass(frozen=True)
class ImplicitDatabase:
    """Top-level `collections` array with no enclosing database record."""

    collections: tuple[Mapping[str, Any], ...]


DatabaseSource = ExplicitDatabase | ImplicitDatabase


def _optional_records(value: Any) -> tuple[Mapping[str, Any], ...] | None:
    if value is None:
        return None
    return tuple(value)
