"""Tests for the .osts container."""

import json
from pathlib import Path

import pytest

from frostbite.osts import OstsFormatError, OstsScript, read_osts, write_osts

FIXTURES = Path(__file__).parent / "fixtures"


def test_read_fixture():
    script = read_osts(FIXTURES / "sample.osts")
    assert script.version == "0.3.0"
    assert script.description == "Sample script"
    assert script.parameter_info == "{}"
    assert script.body.startswith("namespace fr {\n")


def test_round_trip_keeps_camel_case_and_extras(tmp_path):
    script = read_osts(FIXTURES / "sample.osts")
    out = write_osts(script, tmp_path / "copy.osts")
    data = json.loads(out.read_text())
    assert data["noCodeMetadata"] == ""
    assert data["apiInfo"] == "{}"
    assert data["customField"] == "kept"
    assert "no_code_metadata" not in data


def test_with_body_leaves_original():
    script = OstsScript(body="old", description="d")
    replaced = script.with_body("new")
    assert replaced.body == "new"
    assert replaced.description == "d"
    assert script.body == "old"


def test_populate_by_field_name():
    script = OstsScript(api_info="x")
    assert json.loads(script.to_json())["apiInfo"] == "x"


@pytest.mark.parametrize("metadata", [None, {"steps": []}, "text"])
def test_no_code_metadata_round_trips(metadata):
    text = json.dumps({"version": "0.3.0", "body": "main();", "noCodeMetadata": metadata})
    script = OstsScript.from_json(text)
    assert script.no_code_metadata == metadata
    assert json.loads(script.to_json())["noCodeMetadata"] == metadata


def test_missing_keys_default():
    script = OstsScript.from_json('{"body": "main();"}')
    assert script.body == "main();"
    assert script.version == "0.3.0"


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '{"body": 5}'])
def test_invalid(text):
    with pytest.raises(OstsFormatError):
        OstsScript.from_json(text)


def test_invalid_is_value_error():
    with pytest.raises(ValueError):
        OstsScript.from_json("{")
