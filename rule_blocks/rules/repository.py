"""Repository for locating and loading rule documents."""

from __future__ import annotations

import logging
from pathlib import Path

from rule_blocks.config.models import ExtractorConfig
from rule_blocks.constants import RULE_DOCUMENT_SUFFIXES
from rule_blocks.errors import InvalidRuleDocumentError, MissingRuleDocumentError
from rule_blocks.rules.extractor import extract_document
from rule_blocks.rules.models import RuleDocument

_logger = logging.getLogger(__name__)


def is_rule_document(path: Path) -> bool:
    return path.suffix.lower() in RULE_DOCUMENT_SUFFIXES and not path.name.startswith(".")


class RuleDocumentRepository:
    def __init__(self, root: Path, config: ExtractorConfig | None = None) -> None:
        self._root = root
        self._config = config or ExtractorConfig()

    def list_paths(self) -> list[Path]:
        if not self._root.exists():
            raise MissingRuleDocumentError(self._root)
        if self._root.is_file():
            return [self._root]

        paths: list[Path] = []
        for child in sorted(self._root.rglob("*")):
            relative = child.relative_to(self._root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if child.is_file() and is_rule_document(child):
                paths.append(child)
        return paths

    def load(self, path: Path) -> RuleDocument:
        if not path.is_file():
            raise MissingRuleDocumentError(path)
        _logger.debug("Loading rule document %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRuleDocumentError(path, f"not UTF-8: {exc.reason}") from exc
        return extract_document(text, path=path, config=self._config)

    def list_documents(self) -> list[RuleDocument]:
        return [self.load(path) for path in self.list_paths()]
