"""Export writer tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from appwrite_schema_exporter.export_writing import (
    ExportWriteError,
    attribute_path,
    build_collection_record,
    collection_directory,
    database_directory,
    index_path,
    render_json,
    write_collection,
)
from appwrite_schema_exporter.schema_management import Collection


def test_layout_paths_follow_databases_collections_tree(tmp_path: Path) -> None:
    database_dir = database_directory(tmp_path / "appwrite", "cricket_db")
    collection_dir = collection_directory(database_dir, "players")

    assert database_dir == tmp_path / "appwrite" / "databases" / "cricket_db"
    assert collection_dir == database_dir / "collections" / "players"
    assert attribute_path(collection_dir, "name") == collection_dir / "attributes" / "name.json"
    assert index_path(collection_dir, "name_idx") == collection_dir / "indexes" / "name_idx.json"


def test_collection_record_keeps_field_order_and_defaults_permissions() -> None:
    collection = Collection(
        raw={
            "enabled": True,
            "name": "players",
            "attributes": [{"key": "name"}],
            "$id": "c1",
            "documentSecurity": False,
        }
    )

    record = build_collection_record(collection)

    assert list(record) == ["$id", "name", "documentSecurity", "enabled", "permissions"]
    assert record["documentSecurity"] is False
    assert record["permissions"] == []


def test_collection_record_omits_absent_fields_and_keeps_nulls() -> None:
    record = build_collection_record(
        Collection(raw={"name": "players", "enabled": None, "permissions": None})
    )

    assert record == {"name": "players", "enabled": None, "permissions": []}


def test_render_json_uses_four_space_indent_without_trailing_newline() -> None:
    text = render_json({"key": "name", "type": "string"})

    assert text == '{\n    "key": "name",\n    "type": "string"\n}'


def test_render_json_keeps_non_ascii_characters() -> None:
    assert render_json({"name": "spielstände"}, indent=2) == '{\n  "name": "spielstände"\n}'


def test_write_collection_writes_collection_attributes_and_indexes(tmp_path: Path) -> None:
    attribute = {"key": "name", "type": "string", "required": True, "size": 128}
    index = {"key": "name_idx", "type": "key", "attributes": ["name"]}
    collection = Collection(
        raw={
            "$id": "c1",
            "name": "players",
            "documentSecurity": True,
            "enabled": True,
            "permissions": ['read("any")'],
            "attributes": [attribute],
            "indexes": [index],
        }
    )

    result = write_collection(collection, tmp_path)

    collection_dir = tmp_path / "collections" / "players"
    assert result.directory == collection_dir
    assert result.files_written == 3
    assert json.loads((collection_dir / "collection.json").read_text(encoding="utf-8")) == {
        "$id": "c1",
        "name": "players",
        "documentSecurity": True,
        "enabled": True,
        "permissions": ['read("any")'],
    }
    assert json.loads(result.attribute_files[0].read_text(encoding="utf-8")) == attribute
    assert json.loads(result.index_files[0].read_text(encoding="utf-8")) == index


def test_write_collection_skips_subdirectories_for_empty_sequences(tmp_path: Path) -> None:
    collection = Collection(raw={"name": "players", "attributes": [], "indexes": []})

    result = write_collection(collection, tmp_path)

    assert result.files_written == 1
    assert sorted(path.name for path in result.directory.iterdir()) == ["collection.json"]


def test_write_collection_preserves_attribute_order(tmp_path: Path) -> None:
    collection = Collection(
        raw={"name": "teams", "attributes": [{"key": "b"}, {"key": "a"}, {"key": "c"}]}
    )

    result = write_collection(collection, tmp_path)

    assert [path.stem for path in result.attribute_files] == ["b", "a", "c"]


def test_write_collection_wraps_filesystem_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "collections"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(ExportWriteError, match="Failed to create directory"):
        write_collection(Collection(raw={"name": "players"}), tmp_path)


def test_write_collection_leaves_earlier_files_when_a_later_write_fails(tmp_path: Path) -> None:
    collection_dir = tmp_path / "collections" / "players"
    (collection_dir / "indexes").mkdir(parents=True)
    (collection_dir / "indexes" / "broken.json").mkdir()
    collection = Collection(
        raw={
            "name": "players",
            "attributes": [{"key": "name"}],
            "indexes": [{"key": "broken"}],
        }
    )

    with pytest.raises(ExportWriteError, match="Failed to write"):
        write_collection(collection, tmp_path)

    assert (collection_dir / "collection.json").exists()
    assert (collection_dir / "attributes" / "name.json").exists()


def test_write_collection_wraps_unencodable_attribute_values(tmp_path: Path) -> None:
    collection = Collection(raw={"name": "players", "attributes": [{"key": "a", "d": "\ud800"}]})

    with pytest.raises(ExportWriteError, match="Failed to write"):
        write_collection(collection, tmp_path)

    assert (tmp_path / "collections" / "players" / "collection.json").exists()


def test_write_collection_wraps_unencodable_directory_names(tmp_path: Path) -> None:
    with pytest.raises(ExportWriteError, match="Failed to create directory"):
        write_collection(Collection(raw={"name": "bad\ud800"}), tmp_path)


@pytest.mark.parametrize(
    ("permissions", "expected"),
    [
        (None, []),
        (False, []),
        ("", []),
        (0, []),
        ('read("any")', 'read("any")'),
        ({"read": "any"}, {"read": "any"}),
        (['read("any")'], ['read("any")']),
    ],
)
def test_collection_record_copies_permissions_unchanged(
    permissions: object, expected: object
) -> None:
    collection = Collection(raw={"name": "players", "permissions": permissions})

    record = build_collection_record(collection)

    assert record["permissions"] == expected
