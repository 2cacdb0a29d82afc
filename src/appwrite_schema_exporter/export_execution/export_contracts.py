"""Export execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from appwrite_schema_exporter.export_writing.export_models import CollectionExport


@dataclass(frozen=True)
class ExportRequest:
    """Input contract for one export run."""

    schema_path: Path
    output_root: Path
    indent: int = 4
    check_path_safety: bool = True


@dataclass(frozen=True)
class ExportOutcome:
    """Output contract for one completed export run."""

    database_name: str
    database_directory: Path
    collections: tuple[CollectionExport, ...]

    @property
    def files_written(self) -> int:
        return sum(collection.files_written for collection in self.collections)
