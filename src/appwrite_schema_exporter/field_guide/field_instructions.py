"""Operator instructions for adding fields through the Appwrite console."""

from __future__ import annotations

from pathlib import Path

from appwrite_schema_exporter.configuration.runtime_settings import (
    FieldGuideSettings,
    PendingField,
)
from appwrite_schema_exporter.schema_management import ParseError, SchemaFileNotFoundError


def build_field_instructions(settings: FieldGuideSettings) -> list[str]:
    """Return the numbered console walkthrough, one output line per entry."""
    lines = [
        "To complete the update:",
        "",
        f"1. Go to Appwrite Console: {settings.console_url}",
        f"2. Navigate to: Databases → {settings.database_name} → {settings.collection}",
        '3. Click "Add Attribute" and add the following fields:',
        "",
    ]
    for number, pending in enumerate(settings.fields, start=1):
        lines.extend(_describe_field(number, pending))
        lines.append("")
    count = len(settings.fields)
    noun = "attribute" if count == 1 else "attributes"
    lines.extend(
        [
            f"4. After adding all {count} {noun}, try creating a group again.",
            "",
            "Alternative: If you have Appwrite CLI installed, run:",
            "  cd appwrite",
            f"  appwrite deploy collection {settings.collection}",
            "",
        ]
    )
    return lines


def _describe_field(number: int, pending: PendingField) -> list[str]:
    lines = [
        f"   Field {number}: {pending.name}",
        f"   - Type: {pending.field_type}",
        f"   - Required: {'Yes' if pending.required else 'No'}",
    ]
    if pending.default is not None:
        lines.append(f"   - Default: {_format_default(pending.default)}")
    return lines


def _format_default(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def check_schema_marker(schema_path: Path | str, marker: str) -> bool:
    """Report whether `marker` occurs anywhere in the schema document text."""
    path = Path(schema_path)
    if not path.is_file():
        raise SchemaFileNotFoundError(f"Schema file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid schema document {path}: {exc}") from exc
    return marker in text
