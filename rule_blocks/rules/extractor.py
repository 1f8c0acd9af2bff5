"""Segment a rule document into ordered RuleBlock records."""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from rule_blocks.config.models import ExtractorConfig
from rule_blocks.constants import (
    BAD_GLYPHS,
    CODE_COMMENT_PREFIXES,
    GOOD_GLYPHS,
    NO_BAD_EXAMPLE_MARKER,
)
from rule_blocks.rules.models import (
    CodeSnippet,
    ExampleKind,
    RuleBlock,
    RuleDocument,
)
from rule_blocks.rules.parser import (
    Fence,
    Heading,
    Prose,
    Token,
    parse_metadata,
    scan_markdown,
    split_frontmatter,
)

_logger = logging.getLogger(__name__)

_HTML_COMMENT_RE = re.compile(r"^\s*<!--\s*(.*?)\s*-->\s*$")
_BULLET_RE = re.compile(r"^(?:[-*+]|\d+[.)])\s+")
_DECORATION = "#*_>`~:.!-=()[] \t"
_COMMENT_CLOSERS = ("-->", "*/")
_LABEL_SEPARATORS = (":", "-", "–", "—", "(", ",")
_FILLER_WORDS = frozenset(
    {
        "example",
        "examples",
        "code",
        "pattern",
        "approach",
        "way",
        "version",
        "style",
        "practice",
        "this",
    }
)


@dataclass
class _Section:
    heading: Heading
    group: str = ""
    tokens: list[Token] = field(default_factory=list)


def _strip_decoration(text: str) -> str:
    text = _BULLET_RE.sub("", text.strip())
    return text.strip(_DECORATION)


def _is_emphasized(text: str) -> bool:
    core = text.rstrip(": \t")
    return len(core) > 2 and core[0] in "*_" and core[-1] in "*_"


def _marker_rest(text: str, markers: tuple[str, ...]) -> str | None:
    for marker in markers:
        if text == marker:
            return ""
        if text.startswith(marker) and not text[len(marker)].isalnum():
            return text[len(marker) :].strip()
    return None


def _is_label_tail(rest: str) -> bool:
    if not rest or rest.startswith(_LABEL_SEPARATORS):
        return True
    return all(word in _FILLER_WORDS for word in rest.split())


def classify_label(
    text: str, config: ExtractorConfig, strict: bool = True
) -> ExampleKind | None:
    """Return the example kind a short label line announces, if any.

    In strict mode (prose and code comments) a line such as "Avoid nesting"
    is ordinary text; it only labels a snippet when it ends with a colon, is
    emphasized, carries a check/cross glyph, or is a bare marker like "Bad"
    or "Good example". Headings are classified loosely.
    """
    stripped = _BULLET_RE.sub("", text.strip())
    if not stripped:
        return None

    has_bad_glyph = any(glyph in stripped for glyph in BAD_GLYPHS)
    has_good_glyph = any(glyph in stripped for glyph in GOOD_GLYPHS)
    for glyph in BAD_GLYPHS + GOOD_GLYPHS:
        stripped = stripped.replace(glyph, " ").strip()

    loose = (
        not strict
        or has_bad_glyph
        or has_good_glyph
        or _is_emphasized(stripped)
        or stripped.rstrip("*_ \t").endswith(":")
    )

    normalized = " ".join(
        _strip_decoration(stripped).lower().replace("’", "'").split()
    )
    if len(normalized.split()) > config.max_label_words:
        return None

    if normalized:
        # Bad markers first so "instead of" wins over "instead".
        for kind, markers in (
            (ExampleKind.BAD, config.bad_markers),
            (ExampleKind.GOOD, config.good_markers),
        ):
            rest = _marker_rest(normalized, markers)
            if rest is not None and (loose or _is_label_tail(rest)):
                return kind

    if has_bad_glyph and not has_good_glyph:
        return ExampleKind.BAD
    if has_good_glyph and not has_bad_glyph:
        return ExampleKind.GOOD
    return None


def _is_label_heading(heading: Heading, config: ExtractorConfig) -> bool:
    # "Avoid deep nesting" is a rule title, "Bad" and "Good example" are labels.
    return classify_label(heading.text, config) is not None


def resolve_heading_level(
    tokens: list[Token], config: ExtractorConfig
) -> int | None:
    """Pick the heading level that starts rule blocks.

    The configured level wins. Otherwise label headings ("### Bad") deeper
    than the shallowest title heading are ignored and the shallowest level
    used more than once is taken. Without repeats, a leading level-1 title
    is skipped in favour of the next level down.
    """
    if config.heading_level is not None:
        return config.heading_level

    all_headings = [token for token in tokens if isinstance(token, Heading)]
    titles = [h for h in all_headings if not _is_label_heading(h, config)]
    if not titles:
        return None

    top = min(heading.level for heading in titles)
    headings = [
        heading
        for heading in all_headings
        if heading.level <= top or not _is_label_heading(heading, config)
    ]

    counts = Counter(heading.level for heading in headings)
    repeated = [level for level, count in counts.items() if count > 1]
    if repeated:
        return min(repeated)

    levels = sorted(counts)
    if len(levels) > 1 and headings[0].level == 1:
        return levels[1]
    return levels[0]


def _comment_text(line: str) -> str | None:
    stripped = line.strip()
    for prefix in CODE_COMMENT_PREFIXES:
        if stripped.startswith(prefix):
            text = stripped[len(prefix) :]
            for closer in _COMMENT_CLOSERS:
                if text.endswith(closer):
                    text = text[: -len(closer)]
            return text.strip()
    return None


def _comment_label(line: str, config: ExtractorConfig) -> ExampleKind | None:
    text = _comment_text(line)
    if not text:
        return None
    return classify_label(text, config)


def _trim_code(lines: list[str]) -> str:
    end = len(lines)
    while end and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[:end])


def snippets_from_fence(
    fence: Fence, label: ExampleKind | None, config: ExtractorConfig
) -> list[CodeSnippet]:
    """Turn one fence into one or more snippets.

    A fence whose code carries two or more label comments is split at each
    of them. A single leading label comment labels the whole fence.
    """
    lines = fence.code.splitlines()
    label_rows: list[tuple[int, ExampleKind | None]] = []
    for index, line in enumerate(lines):
        kind = _comment_label(line, config)
        if kind is not None:
            label_rows.append((index, kind))

    if config.split_labeled_fences and len(label_rows) >= 2:
        snippets: list[CodeSnippet] = []
        leading = _trim_code(lines[: label_rows[0][0]])
        if leading.strip():
            snippets.append(
                CodeSnippet(
                    code=leading,
                    language=fence.language,
                    line=fence.code_line,
                    kind=label,
                )
            )
        bounds = label_rows + [(len(lines), None)]
        for (start, kind), (end, _) in zip(bounds, bounds[1:]):
            snippets.append(
                CodeSnippet(
                    code=_trim_code(lines[start:end]),
                    language=fence.language,
                    line=fence.code_line + start,
                    kind=kind,
                )
            )
        return snippets

    kind = label
    first_code = next((line for line in lines if line.strip()), None)
    if kind is None and first_code is not None:
        kind = _comment_label(first_code, config)
    return [
        CodeSnippet(
            code=fence.code,
            language=fence.language,
            line=fence.code_line,
            kind=kind,
        )
    ]


def assign_examples(
    snippets: list[CodeSnippet],
) -> tuple[CodeSnippet | None, CodeSnippet | None]:
    """Choose the bad and good example among a block's snippets.

    Labeled snippets win. Unlabeled ones fill the remaining slots in
    document order; a lone unlabeled snippet is the good example.
    """
    bad = next((s for s in snippets if s.kind == ExampleKind.BAD), None)
    good = next((s for s in snippets if s.kind == ExampleKind.GOOD), None)
    unlabeled = [s for s in snippets if s.kind is None]
    if not unlabeled:
        return bad, good

    if bad is None and good is None:
        if len(unlabeled) >= 2:
            return unlabeled[0], unlabeled[1]
        return None, unlabeled[0]
    if bad is None:
        return unlabeled[0], good
    if good is None:
        return bad, unlabeled[0]
    return bad, good


def _join_prose(lines: list[str]) -> str:
    paragraphs: list[list[str]] = [[]]
    for line in lines:
        if line.strip():
            paragraphs[-1].append(line.rstrip())
        elif paragraphs[-1]:
            paragraphs.append([])
    return "\n\n".join("\n".join(p).strip() for p in paragraphs if p)


def build_block(section: _Section, config: ExtractorConfig) -> RuleBlock:
    description_lines: list[str] = []
    snippets: list[CodeSnippet] = []
    pending: ExampleKind | None = None
    allows_missing_bad = False

    for token in section.tokens:
        if isinstance(token, Fence):
            snippets.extend(snippets_from_fence(token, pending, config))
            pending = None
            continue

        if isinstance(token, Heading):
            kind = classify_label(token.text, config, strict=False)
            if kind is not None:
                pending = kind
            else:
                description_lines.extend(["", token.text, ""])
            continue

        comment = _HTML_COMMENT_RE.match(token.text)
        if comment:
            if comment.group(1).lower() == NO_BAD_EXAMPLE_MARKER:
                allows_missing_bad = True
            continue

        kind = classify_label(token.text, config)
        if kind is not None:
            pending = kind
            continue
        description_lines.append(token.text)

    bad, good = assign_examples(snippets)
    return RuleBlock(
        title=section.heading.text,
        description=_join_prose(description_lines),
        bad_example=bad,
        good_example=good,
        examples=tuple(snippets),
        line=section.heading.line,
        level=section.heading.level,
        group=section.group,
        allows_missing_bad=allows_missing_bad,
    )


def _segment(tokens: list[Token], level: int) -> tuple[list[Token], list[_Section]]:
    preamble: list[Token] = []
    sections: list[_Section] = []
    current: _Section | None = None
    group = ""

    for token in tokens:
        if isinstance(token, Heading) and token.level < level:
            group = token.text
            current = None
            if not sections:
                preamble.append(token)
            continue
        if isinstance(token, Heading) and token.level == level:
            current = _Section(heading=token, group=group)
            sections.append(current)
            continue
        if current is not None:
            current.tokens.append(token)
        elif not sections:
            preamble.append(token)
        else:
            _logger.debug("Dropping text outside any rule block at line %d", token.line)
    return preamble, sections


def _document_title(
    preamble: list[Token], level: int | None, description: str, path: Path | None
) -> str:
    if level is not None:
        for token in preamble:
            if isinstance(token, Heading) and token.level < level and token.text:
                return token.text
    if description:
        return description
    if path is not None:
        return path.stem
    return ""


def _preamble_text(preamble: list[Token]) -> str:
    lines: list[str] = []
    for token in preamble:
        if isinstance(token, Prose) and not _HTML_COMMENT_RE.match(token.text):
            lines.append(token.text)
        elif isinstance(token, Fence):
            lines.extend(["", token.code, ""])
    return _join_prose(lines)


def extract_document(
    text: str, path: Path | None = None, config: ExtractorConfig | None = None
) -> RuleDocument:
    """Parse a whole rule document, frontmatter included.

    Never raises on malformed Markdown: problems such as an unterminated
    fence are collected on the returned document instead.
    """
    config = config or ExtractorConfig()
    source = path or "<text>"
    frontmatter = split_frontmatter(text)
    metadata = parse_metadata(frontmatter.raw)

    tokens, problems = scan_markdown(frontmatter.body, first_line=frontmatter.body_line)
    if frontmatter.problem is not None:
        problems.insert(0, frontmatter.problem)

    level = resolve_heading_level(tokens, config)
    if level is None:
        _logger.debug("No rule headings found in %s", source)
        preamble, sections = tokens, []
    else:
        _logger.debug("Using heading level %d for rule blocks in %s", level, source)
        preamble, sections = _segment(tokens, level)

    blocks = tuple(build_block(section, config) for section in sections)
    _logger.debug("Extracted %d rule blocks from %s", len(blocks), source)
    return RuleDocument(
        path=path,
        title=_document_title(preamble, level, metadata.description, path),
        metadata=metadata,
        preamble=_preamble_text(preamble),
        blocks=blocks,
        problems=tuple(problems),
    )


def extract_rule_blocks(
    text: str, config: ExtractorConfig | None = None
) -> list[RuleBlock]:
    """Return the rule blocks of ``text`` in document order."""
    return list(extract_document(text, config=config).blocks)
