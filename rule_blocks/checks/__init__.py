from rule_blocks.checks.models import CheckIssue, CheckReport, IssueCode, Severity
from rule_blocks.checks.service import DocumentChecker
from rule_blocks.checks.syntax import ISyntaxChecker, SyntaxCheckerRegistry

__all__ = [
    "CheckIssue",
    "CheckReport",
    "DocumentChecker",
    "ISyntaxChecker",
    "IssueCode",
    "Severity",
    "SyntaxCheckerRegistry",
]
