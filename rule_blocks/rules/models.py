"""Rule document data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rule_blocks.utils import normalize_title


class ExampleKind(str, Enum):
    BAD = "bad"
    GOOD = "good"


@dataclass(frozen=True)
class CodeSnippet:
    code: str
    language: str = ""
    line: int = 0
    kind: ExampleKind | None = None


@dataclass(frozen=True)
class RuleBlock:
    """One titled guideline with its illustrative examples.

    ``examples`` holds every snippet of the block in document order;
    ``bad_example`` and ``good_example`` point into it.
    """

    title: str
    description: str
    bad_example: CodeSnippet | None = None
    good_example: CodeSnippet | None = None
    examples: tuple[CodeSnippet, ...] = ()
    line: int = 0
    level: int = 2
    group: str = ""
    allows_missing_bad: bool = False


@dataclass(frozen=True)
class RuleMetadata:
    description: str = ""
    globs: list[str] = field(default_factory=list)
    always_apply: bool = False


@dataclass(frozen=True)
class ParseProblem:
    line: int
    message: str
    code: str = "unterminated-fence"


@dataclass(frozen=True)
class RuleDocument:
    path: Path | None
    title: str
    metadata: RuleMetadata
    preamble: str
    blocks: tuple[RuleBlock, ...]
    problems: tuple[ParseProblem, ...] = ()

    @property
    def name(self) -> str:
        return self.path.stem if self.path is not None else ""

    def find_block(self, title: str) -> RuleBlock | None:
        wanted = normalize_title(title)
        for block in self.blocks:
            if normalize_title(block.title) == wanted:
                return block
        return None
