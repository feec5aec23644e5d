from pathlib import Path

import pytest

from caco3.relative_path import RelativePath


def test_plain_path_relative_is_itself():
    assert RelativePath(Path("/dev/null")).relative() == Path("/dev/null")


def test_relative_to_metadata_directory():
    value = RelativePath("db.sqlite", Path("/etc/app/config.toml"))
    assert value.relative() == Path("/etc/app/db.sqlite")


def test_absolute_path_ignores_metadata():
    value = RelativePath("/var/data.db", Path("/etc/app/config.toml"))
    assert value.relative() == Path("/var/data.db")


def test_serialize_readable():
    value = RelativePath("db.sqlite", Path("/etc/app/config.toml"))
    assert value.serialize() == {"path": str(Path("/etc/app/db.sqlite"))}


def test_deserialize_readable():
    assert RelativePath.deserialize({"path": "/dev/null"}) == RelativePath(Path("/dev/null"))


def test_deserialize_machine_form():
    value = RelativePath.deserialize(
        {
            "___figment_relative_path": "db.sqlite",
            "___figment_relative_metadata_path": "/etc/app/config.toml",
        }
    )
    assert value.path == Path("db.sqlite")
    assert value.relative() == Path("/etc/app/db.sqlite")


def test_deserialize_string():
    assert RelativePath.deserialize("some/file").path == Path("some/file")


def test_round_trip_through_readable_form():
    original = RelativePath("db.sqlite", Path("/etc/app/config.toml"))
    restored = RelativePath.deserialize(original.serialize())
    assert restored.relative() == original.relative()


def test_deserialize_missing_path_field():
    with pytest.raises(ValueError):
        RelativePath.deserialize({"other": "x"})


def test_deserialize_wrong_type():
    with pytest.raises(TypeError):
        RelativePath.deserialize(42)