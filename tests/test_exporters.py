"""Tests for JSON and YAML export of rule documents."""

import json
from pathlib import Path

import pytest
import yaml

from rule_blocks.exporters import (
    JsonDocumentExporter,
    YamlDocumentExporter,
    document_to_dict,
    get_exporter,
)
from rule_blocks.rules.extractor import extract_document


def test_document_to_dict(two_rules_text: str) -> None:
    payload = document_to_dict(extract_document(two_rules_text, path=Path("elixir.md")))

    assert payload["path"] == "elixir.md"
    assert payload["title"] == "elixir"
    assert payload["metadata"] == {"description": "", "globs": [], "always_apply": False}
    assert [block["title"] for block in payload["blocks"]] == [
        "Use Concise Function Syntax",
        "Use pipelining",
    ]
    first = payload["blocks"][0]
    assert list(first) == ["title", "line", "description", "bad_example", "good_example"]
    assert first["good_example"] == {
        "language": "elixir",
        "line": 14,
        "code": "def add(a, b), do: a + b",
    }


def test_missing_example_exports_as_null() -> None:
    document = extract_document("## Rule\n\nText.\n\n```\nok()\n```\n")
    payload = document_to_dict(document)

    assert payload["path"] is None
    assert payload["blocks"][0]["bad_example"] is None


def test_group_is_exported_when_present() -> None:
    document = extract_document("# Guide\n\n## One\n\nA.\n\n## Two\n\nB.\n")

    assert document_to_dict(document)["blocks"][0]["group"] == "Guide"


def test_json_export_parses_back(two_rules_text: str) -> None:
    document = extract_document(two_rules_text)
    text = JsonDocumentExporter().export(document)

    assert text.endswith("\n")
    assert json.loads(text) == document_to_dict(document)


def test_yaml_export_uses_literal_blocks(two_rules_text: str) -> None:
    document = extract_document(two_rules_text)
    text = YamlDocumentExporter().export(document)

    assert "code: |" in text
    assert yaml.safe_load(text) == document_to_dict(document)


def test_get_exporter() -> None:
    assert isinstance(get_exporter("JSON"), JsonDocumentExporter)
    assert isinstance(get_exporter("yaml"), YamlDocumentExporter)
    with pytest.raises(ValueError):
        get_exporter("xml")
