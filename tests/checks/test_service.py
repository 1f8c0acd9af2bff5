"""Tests for structural document checks."""

from rule_blocks.checks.models import IssueCode, Severity
from rule_blocks.checks.service import DocumentChecker
from rule_blocks.config.models import ExtractorConfig
from rule_blocks.rules.extractor import extract_document


def _codes(report) -> list[IssueCode]:
    return [issue.code for issue in report.issues]


def test_two_rule_document_is_clean(two_rules_text: str) -> None:
    report = DocumentChecker().check(extract_document(two_rules_text))

    assert report.issues == []
    assert report.is_clean(strict=True)
    assert report.snippets_checked == 0
    assert report.snippets_skipped == 4


def test_missing_good_is_error_and_missing_bad_is_warning() -> None:
    text = "## Only text\n\nNo code at all here.\n"
    report = DocumentChecker().check(extract_document(text))

    assert _codes(report) == [IssueCode.MISSING_GOOD, IssueCode.MISSING_BAD]
    assert report.errors[0].severity == Severity.ERROR
    assert report.warnings[0].severity == Severity.WARNING
    assert report.has_errors()


def test_missing_bad_is_allowed_by_marker() -> None:
    text = "## Rule\n\n<!-- no-bad-example -->\nOnly the good way.\n\n```\nok()\n```\n"
    report = DocumentChecker().check(extract_document(text))

    assert report.issues == []


def test_missing_bad_is_allowed_by_config() -> None:
    text = "## Rule\n\nOnly the good way.\n\n```\nok()\n```\n"
    checker = DocumentChecker(config=ExtractorConfig(require_bad_example=False))

    assert checker.check(extract_document(text)).issues == []


def test_warnings_only_fail_in_strict_mode() -> None:
    text = "## Rule\n\nOnly the good way.\n\n```\nok()\n```\n"
    report = DocumentChecker().check(extract_document(text))

    assert _codes(report) == [IssueCode.MISSING_BAD]
    assert report.is_clean() is True
    assert report.is_clean(strict=True) is False


def test_duplicate_titles_are_errors() -> None:
    text = (
        "## Use pipelining\n\nFirst.\n\n```\na\n```\n```\nb\n```\n\n"
        "## use  Pipelining\n\nSecond.\n\n```\nc\n```\n```\nd\n```\n"
    )
    report = DocumentChecker().check(extract_document(text))

    assert _codes(report) == [IssueCode.DUPLICATE_TITLE]
    issue = report.issues[0]
    assert issue.line == 12
    assert "line 1" in issue.message


def test_empty_description_and_identical_examples() -> None:
    text = "## Rule\n\nBad:\n```\nsame()\n```\nGood:\n```\nsame()\n```\n"
    report = DocumentChecker().check(extract_document(text))

    assert _codes(report) == [IssueCode.EMPTY_DESCRIPTION, IssueCode.IDENTICAL_EXAMPLES]


def test_python_syntax_errors_are_reported() -> None:
    text = (
        "## Rule\n\nUse comprehensions.\n\n"
        "Bad:\n```python\nfor x in items\n    out.append(x)\n```\n\n"
        "Good:\n```python\nout = [x for x in items]\n```\n"
    )
    report = DocumentChecker().check(extract_document(text))

    assert _codes(report) == [IssueCode.SYNTAX_ERROR]
    issue = report.issues[0]
    assert issue.line == 7
    assert issue.block_title == "Rule"
    assert issue.message.startswith("python:")
    assert report.snippets_checked == 2


def test_unterminated_fence_is_error() -> None:
    text = "## Rule\n\nText.\n\n```elixir\nunfinished()\n"
    report = DocumentChecker().check(extract_document(text))

    assert IssueCode.UNTERMINATED_FENCE in _codes(report)
    assert report.has_errors()


def test_invalid_frontmatter_is_warning() -> None:
    text = "---\n- not\n- a mapping\n---\n## Rule\n\nText.\n\n```\na\n```\n```\nb\n```\n"
    report = DocumentChecker().check(extract_document(text))

    assert _codes(report) == [IssueCode.INVALID_FRONTMATTER]
    assert report.issues[0].severity == Severity.WARNING

