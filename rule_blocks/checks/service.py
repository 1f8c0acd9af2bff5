"""Structural checks over an extracted rule document."""

from __future__ import annotations

import logging

from rule_blocks.checks.models import CheckIssue, CheckReport, IssueCode, Severity
from rule_blocks.checks.syntax import SyntaxCheckerRegistry
from rule_blocks.config.models import ExtractorConfig
from rule_blocks.rules.models import CodeSnippet, RuleBlock, RuleDocument
from rule_blocks.utils import normalize_title

_logger = logging.getLogger(__name__)

_PROBLEM_CODES = {
    IssueCode.UNTERMINATED_FENCE.value: (IssueCode.UNTERMINATED_FENCE, Severity.ERROR),
    IssueCode.INVALID_FRONTMATTER.value: (
        IssueCode.INVALID_FRONTMATTER,
        Severity.WARNING,
    ),
}


class DocumentChecker:
    """Run the structural checks over every block of a document.

    Checks cover example presence, duplicate titles, empty descriptions,
    identical examples, parser problems and snippet syntax (for languages
    with a registered checker). Whether two rules contradict each other is
    left to human review.
    """

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        syntax_registry: SyntaxCheckerRegistry | None = None,
    ) -> None:
        self.config = config or ExtractorConfig()
        self.syntax_registry = syntax_registry or SyntaxCheckerRegistry.create_default()

    def check(self, document: RuleDocument) -> CheckReport:
        report = CheckReport(path=document.path)

        for problem in document.problems:
            code, severity = _PROBLEM_CODES.get(
                problem.code, (IssueCode.UNTERMINATED_FENCE, Severity.ERROR)
            )
            report.issues.append(
                CheckIssue(
                    code=code,
                    severity=severity,
                    line=problem.line,
                    message=problem.message,
                )
            )

        seen_titles: dict[str, RuleBlock] = {}
        for block in document.blocks:
            report.issues.extend(self._check_examples(block))
            report.issues.extend(self._check_description(block))

            key = normalize_title(block.title)
            first = seen_titles.get(key)
            if first is not None:
                report.issues.append(
                    CheckIssue(
                        code=IssueCode.DUPLICATE_TITLE,
                        severity=Severity.ERROR,
                        line=block.line,
                        message=f"duplicate title, first defined at line {first.line}",
                        block_title=block.title,
                    )
                )
            else:
                seen_titles[key] = block

            for snippet in block.examples:
                issue = self._check_syntax(block, snippet, report)
                if issue is not None:
                    report.issues.append(issue)

        report.issues.sort(key=lambda issue: issue.line)
        _logger.debug(
            "Checked %s: %d issues, %d snippets checked, %d skipped",
            document.path or "<text>",
            len(report.issues),
            report.snippets_checked,
            report.snippets_skipped,
        )
        return report

    def _check_examples(self, block: RuleBlock) -> list[CheckIssue]:
        issues: list[CheckIssue] = []
        if block.good_example is None:
            issues.append(
                CheckIssue(
                    code=IssueCode.MISSING_GOOD,
                    severity=Severity.ERROR,
                    line=block.line,
                    message="no good example",
                    block_title=block.title,
                )
            )
        if (
            block.bad_example is None
            and self.config.require_bad_example
            and not block.allows_missing_bad
        ):
            issues.append(
                CheckIssue(
                    code=IssueCode.MISSING_BAD,
                    severity=Severity.WARNING,
                    line=block.line,
                    message="no bad example",
                    block_title=block.title,
                )
            )
        if (
            block.bad_example is not None
            and block.good_example is not None
            and block.bad_example.code.strip() == block.good_example.code.strip()
        ):
            issues.append(
                CheckIssue(
                    code=IssueCode.IDENTICAL_EXAMPLES,
                    severity=Severity.WARNING,
                    line=block.good_example.line,
                    message="bad and good examples are identical",
                    block_title=block.title,
                )
            )
        return issues

    def _check_description(self, block: RuleBlock) -> list[CheckIssue]:
        if block.description.strip():
            return []
        return [
            CheckIssue(
                code=IssueCode.EMPTY_DESCRIPTION,
                severity=Severity.WARNING,
                line=block.line,
                message="no description",
                block_title=block.title,
            )
        ]

    def _check_syntax(
        self, block: RuleBlock, snippet: CodeSnippet, report: CheckReport
    ) -> CheckIssue | None:
        checker = self.syntax_registry.get(snippet.language)
        if checker is None:
            report.snippets_skipped += 1
            return None

        report.snippets_checked += 1
        error = checker.check(snippet.code)
        if error is None:
            return None
        return CheckIssue(
            code=IssueCode.SYNTAX_ERROR,
            severity=Severity.ERROR,
            line=snippet.line,
            message=f"{snippet.language}: {error}",
            block_title=block.title,
        )
