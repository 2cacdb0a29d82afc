"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_CONSOLE_URL,
    DEFAULT_DATABASE_ID,
    DEFAULT_DATABASE_NAME,
    DEFAULT_GUIDE_COLLECTION,
    DEFAULT_SCHEMA_FILENAME,
    Configuration,
    DatabaseDefaults,
    FieldGuideSettings,
    OutputSettings,
    PendingField,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Configuration used when no file is given."""
    return Configuration(path=None)


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the configuration file, or return defaults for `None`."""
    if config_path is None:
        return default_configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.parent
    return Configuration(
        path=path,
        schema_path=_parse_schema_section(parsed.get("schema"), base_path),
        output=_parse_output_section(parsed.get("output"), base_path),
        defaults=_parse_defaults_section(parsed.get("defaults")),
        field_guide=_parse_field_guide_section(parsed.get("field_guide")),
    )


def _parse_schema_section(value: Any, base_path: Path) -> Path:
    section = _optional_mapping(value, "schema")
    raw_path = section.get("path", DEFAULT_SCHEMA_FILENAME)
    return _resolve_path(base_path, _require_non_empty_string(raw_path, "schema.path"))


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    root = _require_non_empty_string(section.get("root", "appwrite"), "output.root")
    indent = _require_positive_int(section.get("indent", 4), "output.indent")
    return OutputSettings(root=_resolve_path(base_path, root), indent=indent)


def _parse_defaults_section(value: Any) -> DatabaseDefaults:
    section = _optional_mapping(value, "defaults")
    database_id = _require_non_empty_string(
        section.get("database_id", DEFAULT_DATABASE_ID), "defaults.database_id"
    )
    database_name = _require_non_empty_string(
        section.get("database_name", DEFAULT_DATABASE_NAME), "defaults.database_name"
    )
    return DatabaseDefaults(database_id=database_id, database_name=database_name)


def _parse_field_guide_section(value: Any) -> FieldGuideSettings:
    section = _optional_mapping(value, "field_guide")
    console_url = _require_non_empty_string(
        section.get("console_url", DEFAULT_CONSOLE_URL), "field_guide.console_url"
    )
    database_name = _require_non_empty_string(
        section.get("database_name", DEFAULT_DATABASE_NAME), "field_guide.database_name"
    )
    collection = _require_non_empty_string(
        section.get("collection", DEFAULT_GUIDE_COLLECTION), "field_guide.collection"
    )
    raw_fields = section.get("fields")
    fields = (
        FieldGuideSettings().fields if raw_fields is None else _parse_pending_fields(raw_fields)
    )
    default_marker = fields[0].name if fields else FieldGuideSettings().marker
    marker = _require_non_empty_string(
        section.get("marker", default_marker), "field_guide.marker"
    )
    return FieldGuideSettings(
        console_url=console_url,
        database_name=database_name,
        collection=collection,
        fields=fields,
        marker=marker,
    )


def _parse_pending_fields(value: Any) -> tuple[PendingField, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ConfigurationError("field_guide.fields must be a list.")
    fields = []
    for position, item in enumerate(value):
        label = f"field_guide.fields[{position}]"
        entry = _require_mapping(item, label)
        fields.append(
            PendingField(
                name=_require_non_empty_string(entry.get("name"), f"{label}.name"),
                field_type=_require_non_empty_string(entry.get("type"), f"{label}.type"),
                required=bool(entry.get("required", False)),
                default=entry.get("default"),
            )
        )
    return tuple(fields)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
