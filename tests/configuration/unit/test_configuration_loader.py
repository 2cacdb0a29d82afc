"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from appwrite_schema_exporter.configuration import (
    DatabaseDefaults,
    FieldGuideSettings,
    PendingField,
    build_placeholder_configuration,
)
from appwrite_schema_exporter.configuration.loader import (
    ConfigurationError,
    load_configuration,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_no_configuration_path_returns_defaults() -> None:
    configuration = load_configuration(None)

    assert configuration.path is None
    assert configuration.schema_path == Path("appwrite.json")
    assert configuration.output.root == Path("appwrite")
    assert configuration.output.indent == 4
    assert configuration.defaults == DatabaseDefaults(
        database_id="68d593d10031b4d7cb048", database_name="cricket_db"
    )
    assert configuration.field_guide.collection == "team_points"
    assert [field.name for field in configuration.field_guide.fields] == [
        "totalRunsScored",
        "totalOversFaced",
        "totalRunsConceded",
        "totalOversBowled",
    ]


def test_loads_yaml_configuration_and_resolves_relative_paths(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "appwrite-export.yaml",
        """
schema:
  path: schema/appwrite.json
output:
  root: build/appwrite
  indent: 2
defaults:
  database_id: league-id
  database_name: league_db
field_guide:
  collection: fixtures
  fields:
    - name: venue
      type: String
      required: true
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.schema_path == (tmp_path / "schema" / "appwrite.json").resolve()
    assert configuration.output.root == (tmp_path / "build" / "appwrite").resolve()
    assert configuration.output.indent == 2
    assert configuration.defaults.database_name == "league_db"
    assert configuration.field_guide.collection == "fixtures"
    assert configuration.field_guide.fields == (
        PendingField(name="venue", field_type="String", required=True, default=None),
    )
    assert configuration.field_guide.marker == "venue"
    assert configuration.field_guide.console_url == FieldGuideSettings().console_url


def test_loads_json_configuration_with_absolute_schema_path(tmp_path: Path) -> None:
    schema_path = tmp_path / "elsewhere" / "appwrite.json"
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps({"schema": {"path": str(schema_path)}, "field_guide": {"marker": "points"}}),
    )

    configuration = load_configuration(config_path)

    assert configuration.schema_path == schema_path
    assert configuration.field_guide.marker == "points"


def test_empty_configuration_file_uses_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.schema_path == (tmp_path / "appwrite.json").resolve()
    assert configuration.output.root == (tmp_path / "appwrite").resolve()


def test_placeholder_configuration_loads_cleanly(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", build_placeholder_configuration())

    configuration = load_configuration(config_path)

    assert configuration.defaults.database_name == "cricket_db"
    assert configuration.field_guide.fields[1] == PendingField(
        name="totalOversFaced", field_type="Double", required=False, default=0.0
    )


def test_errors_when_configuration_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "[]")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_configuration(config_path)


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "schema: [unclosed")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("config", "message"),
    [
        ({"schema": "appwrite.json"}, "Configuration section 'schema' must be a mapping"),
        ({"schema": {"path": " "}}, "schema.path must not be empty"),
        ({"output": {"indent": 0}}, "output.indent must be greater than zero"),
        ({"output": {"indent": True}}, "output.indent must be an integer"),
        ({"defaults": {"database_name": 3}}, "defaults.database_name must be a string"),
        ({"field_guide": {"fields": "venue"}}, "field_guide.fields must be a list"),
        ({"field_guide": {"fields": [{"name": "venue"}]}}, r"field_guide.fields\[0\].type"),
    ],
)
def test_errors_for_invalid_values(tmp_path: Path, config: dict, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", json.dumps(config))

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
