"""Tests for loading API description files."""

import json
from pathlib import Path

import pytest

from api_documenter.api_json_file import ApiJsonFile
from api_documenter.api_model import (
    ClassItem,
    EnumItem,
    FunctionItem,
    MethodItem,
    PropertyItem,
    UnknownItem,
)
from api_documenter.errors import LoadError

SAMPLE = {
    "kind": "package",
    "name": "@acme/demo",
    "summary": [{"kind": "textDocElement", "value": "Demo."}],
    "isBeta": False,
    "exports": {
        "Widget": {
            "kind": "class",
            "isBeta": True,
            "members": {
                "size": {
                    "kind": "property",
                    "type": "number",
                    "accessModifier": "protected",
                },
                "render": {
                    "kind": "method",
                    "signature": "render(mode: string): void",
                    "parameters": {
                        "mode": {"name": "mode", "type": "string"}
                    },
                },
                "changed": {"kind": "event"},
            },
        },
        "clamp": {
            "kind": "function",
            "signature": "clamp(x: number): number",
            "returnValue": {"type": "number", "description": []},
        },
        "Level": {"kind": "enum", "values": {"Off": {"value": "0"}, "On": {}}},
        "Inner": {"kind": "namespace"},
    },
}


def write(tmp_path: Path, content: str, name: str = "demo.api.json") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_load_from_file(tmp_path: Path) -> None:
    """Verify a well-formed description parses into the entity tree."""
    loaded = ApiJsonFile.load_from_file(write(tmp_path, json.dumps(SAMPLE)))

    assert loaded.package_name == "@acme/demo"
    assert loaded.doc_package.summary == SAMPLE["summary"]
    assert list(loaded.doc_package.exports) == ["Widget", "clamp", "Level", "Inner"]

    widget = loaded.doc_package.exports["Widget"]
    assert isinstance(widget, ClassItem)
    assert widget.is_beta

    size = widget.members["size"]
    assert isinstance(size, PropertyItem)
    assert size.type == "number"
    assert size.access_modifier == "protected"

    render = widget.members["render"]
    assert isinstance(render, MethodItem)
    assert render.return_value is None
    assert render.parameters["mode"].type == "string"

    changed = widget.members["changed"]
    assert isinstance(changed, UnknownItem)
    assert changed.kind == "event"

    clamp = loaded.doc_package.exports["clamp"]
    assert isinstance(clamp, FunctionItem)
    assert clamp.return_value is not None
    assert clamp.return_value.type == "number"

    level = loaded.doc_package.exports["Level"]
    assert isinstance(level, EnumItem)
    assert level.values["Off"].has_value
    assert not level.values["On"].has_value

    inner = loaded.doc_package.exports["Inner"]
    assert isinstance(inner, UnknownItem)
    assert inner.kind == "namespace"


def test_load_tab_indented_json(tmp_path: Path) -> None:
    """Verify any valid JSON loads, with JSON number types."""
    content = (
        '{\n\t"kind": "package",\n\t"name": "@acme\\/demo",\n'
        '\t"exports": {"Big": {"kind": "enum", "values": {"A": {"value": 1e5}}}}\n}'
    )
    loaded = ApiJsonFile.load_from_file(write(tmp_path, content))
    assert loaded.package_name == "@acme/demo"
    big = loaded.doc_package.exports["Big"]
    assert isinstance(big, EnumItem)
    assert big.values["A"].value == 100000.0


def test_invalid_utf8_raises_load_error(tmp_path: Path) -> None:
    """Verify undecodable bytes are reported as a LoadError."""
    path = tmp_path / "demo.api.json"
    path.write_bytes(b'{"kind": "package", "name": "d\xff"}')
    with pytest.raises(LoadError) as exc:
        ApiJsonFile.load_from_file(path)
    assert "demo.api.json" in str(exc.value)


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    """Verify an unreadable path is reported as a LoadError."""
    with pytest.raises(LoadError) as exc:
        ApiJsonFile.load_from_file(tmp_path / "missing.api.json")
    assert "missing.api.json" in str(exc.value)


@pytest.mark.parametrize(
    ("content", "reason"),
    [
        ("{not json", "malformed"),
        ("[1, 2]", "not an object"),
        ('{"kind": "class", "name": "x"}', "expected kind"),
        ('{"kind": "package"}', "no name"),
        ('{"kind": "package", "name": "d", "exports": ["Widget"]}', "exports"),
        ('{"kind": "package", "name": "d", "exports": {"W": "class"}}', "export W"),
        (
            '{"kind": "package", "name": "d",'
            ' "exports": {"W": {"kind": "class", "members": ["m"]}}}',
            "members",
        ),
        (
            '{"kind": "package", "name": "d",'
            ' "exports": {"f": {"kind": "function", "parameters": ["x"]}}}',
            "parameters",
        ),
        (
            '{"kind": "package", "name": "d",'
            ' "exports": {"f": {"kind": "function", "returnValue": "int"}}}',
            "returnValue",
        ),
        (
            '{"kind": "package", "name": "d",'
            ' "exports": {"E": {"kind": "enum", "values": [1, 2]}}}',
            "values",
        ),
    ],
)
def test_malformed_description_raises_load_error(
    tmp_path: Path, content: str, reason: str
) -> None:
    """Verify malformed descriptions are rejected with a reason."""
    with pytest.raises(LoadError, match=reason):
        ApiJsonFile.load_from_file(write(tmp_path, content))
