"""Export writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CollectionExport:
    """Files written for one collection."""

    name: str
    directory: Path
    collection_file: Path
    attribute_files: tuple[Path, ...]
    index_files: tuple[Path, ...]

    @property
    def files_written(self) -> int:
        return 1 + len(self.attribute_files) + len(self.index_files)
