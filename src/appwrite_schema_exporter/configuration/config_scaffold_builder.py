"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "appwrite-export.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration for appwrite-schema-exporter.
# Every key is optional; remove a line to fall back to the built-in default.
# Relative paths are resolved against the directory containing this file.

schema:
  # Appwrite schema document to export.
  path: "appwrite.json"

output:
  # Export tree is written to <root>/databases/<database>/collections/...
  root: "appwrite"
  indent: 4

defaults:
  # Used only when the schema has top-level collections and no databases array.
  database_id: "68d593d10031b4d7cb048"
  database_name: "cricket_db"

field_guide:
  console_url: "https://fra.cloud.appwrite.io"
  database_name: "cricket_db"
  collection: "team_points"
  # The guide reports whether this text already appears in the schema document.
  marker: "totalRunsScored"
  fields:
    - name: "totalRunsScored"
      type: "Integer"
      required: false
      default: 0
    - name: "totalOversFaced"
      type: "Double"
      required: false
      default: 0.0
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
