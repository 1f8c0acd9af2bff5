"""Export extracted rule documents as JSON or YAML."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

import yaml

from rule_blocks.rules.models import CodeSnippet, RuleBlock, RuleDocument


def snippet_to_dict(snippet: CodeSnippet | None) -> dict[str, Any] | None:
    if snippet is None:
        return None
    return {
        "language": snippet.language,
        "line": snippet.line,
        "code": snippet.code,
    }


def block_to_dict(block: RuleBlock) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "title": block.title,
        "line": block.line,
        "description": block.description,
        "bad_example": snippet_to_dict(block.bad_example),
        "good_example": snippet_to_dict(block.good_example),
    }
    if block.group:
        payload["group"] = block.group
    return payload


def document_to_dict(document: RuleDocument) -> dict[str, Any]:
    return {
        "path": str(document.path) if document.path is not None else None,
        "title": document.title,
        "metadata": {
            "description": document.metadata.description,
            "globs": list(document.metadata.globs),
            "always_apply": document.metadata.always_apply,
        },
        "blocks": [block_to_dict(block) for block in document.blocks],
    }


class IDocumentExporter(ABC):
    @abstractmethod
    def export(self, document: RuleDocument) -> str:
        """Return the serialized document."""


class JsonDocumentExporter(IDocumentExporter):
    def export(self, document: RuleDocument) -> str:
        return json.dumps(document_to_dict(document), indent=2, ensure_ascii=False) + "\n"


class YamlDocumentExporter(IDocumentExporter):
    """Emit YAML with literal block style for multi-line code."""

    def export(self, document: RuleDocument) -> str:
        return yaml.dump(
            document_to_dict(document),
            Dumper=_LiteralDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


class _LiteralDumper(yaml.SafeDumper):
    pass


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.Node:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_LiteralDumper.add_representer(str, _represent_str)


EXPORTERS: dict[str, type[IDocumentExporter]] = {
    "json": JsonDocumentExporter,
    "yaml": YamlDocumentExporter,
}


def get_exporter(name: str) -> IDocumentExporter:
    try:
        return EXPORTERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown export format: {name}") from None
