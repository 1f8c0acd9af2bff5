"""Split YAML frontmatter and scan Markdown into headings, fences and prose."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

import yaml

from rule_blocks.rules.models import ParseProblem, RuleMetadata

_FRONTMATTER_RE = re.compile(
    r"^---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)", re.DOTALL | re.MULTILINE
)
_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
_CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+$")
_FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_FENCE_CLOSE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    line: int


@dataclass(frozen=True)
class Fence:
    language: str
    info: str
    code: str
    line: int
    closed: bool = True

    @property
    def code_line(self) -> int:
        return self.line + 1


@dataclass(frozen=True)
class Prose:
    text: str
    line: int


Token = Union[Heading, Fence, Prose]


@dataclass(frozen=True)
class Frontmatter:
    raw: dict[str, Any]
    body: str
    body_line: int
    problem: ParseProblem | None = None


def split_frontmatter(text: str) -> Frontmatter:
    """Return the frontmatter mapping and the body that follows it.

    ``body_line`` is the 1-based line of the original text where the body
    starts. Unreadable YAML leaves ``raw`` empty and reports a problem.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return Frontmatter(raw={}, body=text, body_line=1)

    body = text[match.end() :]
    body_line = match.group(0).count("\n") + 1
    if not match.group(0).endswith("\n"):
        body_line += 1

    try:
        raw = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as exc:
        detail = str(exc).splitlines()[0]
        problem = ParseProblem(
            line=1, message=f"invalid frontmatter ({detail})", code="invalid-frontmatter"
        )
        return Frontmatter(raw={}, body=body, body_line=body_line, problem=problem)

    if not isinstance(raw, dict):
        problem = ParseProblem(
            line=1, message="frontmatter is not a mapping", code="invalid-frontmatter"
        )
        return Frontmatter(raw={}, body=body, body_line=body_line, problem=problem)
    return Frontmatter(raw=raw, body=body, body_line=body_line)


def parse_metadata(raw: dict[str, Any]) -> RuleMetadata:
    globs = raw.get("globs", [])
    if not isinstance(globs, list):
        globs = []

    always_apply = raw.get("always_apply", raw.get("alwaysApply", False))
    description = raw.get("description") or ""
    return RuleMetadata(
        description=str(description),
        globs=[str(g) for g in globs],
        always_apply=bool(always_apply),
    )


def parse_heading(line: str) -> tuple[int, str] | None:
    match = _HEADING_RE.match(line)
    if not match:
        return None
    text = _CLOSING_HASHES_RE.sub("", match.group(2) or "").strip()
    return len(match.group(1)), text


def _open_fence(line: str) -> tuple[str, str] | None:
    match = _FENCE_OPEN_RE.match(line)
    if not match:
        return None
    marker, info = match.group(1), match.group(2).strip()
    if marker[0] == "`" and "`" in info:
        return None
    return marker, info


def _closes_fence(line: str, marker: str) -> bool:
    match = _FENCE_CLOSE_RE.match(line)
    if not match:
        return False
    closing = match.group(1)
    return closing[0] == marker[0] and len(closing) >= len(marker)


def _fence_language(info: str) -> str:
    if not info:
        return ""
    word = info.split()[0]
    return word.strip("{}.").lower()


def scan_markdown(body: str, first_line: int = 1) -> tuple[list[Token], list[ParseProblem]]:
    """Tokenize a Markdown body line by line.

    Headings inside fenced code are treated as code. A fence left open runs
    to the end of the body and is reported as a problem.
    """
    tokens: list[Token] = []
    problems: list[ParseProblem] = []
    lines = body.splitlines()

    index = 0
    while index < len(lines):
        line = lines[index]
        line_no = first_line + index

        opened = _open_fence(line)
        if opened is not None:
            marker, info = opened
            code_lines: list[str] = []
            index += 1
            closed = False
            while index < len(lines):
                if _closes_fence(lines[index], marker):
                    closed = True
                    break
                code_lines.append(lines[index])
                index += 1
            if not closed:
                problems.append(
                    ParseProblem(line=line_no, message="unterminated code fence")
                )
            tokens.append(
                Fence(
                    language=_fence_language(info),
                    info=info,
                    code="\n".join(code_lines),
                    line=line_no,
                    closed=closed,
                )
            )
            index += 1
            continue

        heading = parse_heading(line)
        if heading is not None:
            level, text = heading
            tokens.append(Heading(level=level, text=text, line=line_no))
        else:
            tokens.append(Prose(text=line, line=line_no))
        index += 1

    return tokens, problems
