"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SCHEMA_FILENAME = "appwrite.json"
DEFAULT_DATABASE_ID = "68d593d10031b4d7cb048"
DEFAULT_DATABASE_NAME = "cricket_db"
DEFAULT_CONSOLE_URL = "https://fra.cloud.appwrite.io"
DEFAULT_GUIDE_COLLECTION = "team_points"


@dataclass(frozen=True)
class OutputSettings:
    """Where and how exported files are written."""

    root: Path = Path("appwrite")
    indent: int = 4


@dataclass(frozen=True)
class DatabaseDefaults:
    """Identity used when the schema only has top-level collections."""

    database_id: str = DEFAULT_DATABASE_ID
    database_name: str = DEFAULT_DATABASE_NAME


@dataclass(frozen=True)
class PendingField:
    """A field an operator still has to add through the console."""

    name: str
    field_type: str
    required: bool = False
    default: object = None


def _default_pending_fields() -> tuple[PendingField, ...]:
    return (
        PendingField(name="totalRunsScored", field_type="Integer", default=0),
        PendingField(name="totalOversFaced", field_type="Double", default=0.0),
        PendingField(name="totalRunsConceded", field_type="Integer", default=0),
        PendingField(name="totalOversBowled", field_type="Double", default=0.0),
    )


@dataclass(frozen=True)
class FieldGuideSettings:
    """Console instructions for manually adding fields to one collection."""

    console_url: str = DEFAULT_CONSOLE_URL
    database_name: str = DEFAULT_DATABASE_NAME
    collection: str = DEFAULT_GUIDE_COLLECTION
    fields: tuple[PendingField, ...] = field(default_factory=_default_pending_fields)
    marker: str = "totalRunsScored"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    schema_path: Path = Path(DEFAULT_SCHEMA_FILENAME)
    output: OutputSettings = field(default_factory=OutputSettings)
    defaults: DatabaseDefaults = field(default_factory=DatabaseDefaults)
    field_guide: FieldGuideSettings = field(default_factory=FieldGuideSettings)
