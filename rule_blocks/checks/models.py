from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    MISSING_GOOD = "missing-good"
    MISSING_BAD = "missing-bad"
    DUPLICATE_TITLE = "duplicate-title"
    EMPTY_DESCRIPTION = "empty-description"
    IDENTICAL_EXAMPLES = "identical-examples"
    UNTERMINATED_FENCE = "unterminated-fence"
    INVALID_FRONTMATTER = "invalid-frontmatter"
    SYNTAX_ERROR = "syntax-error"


@dataclass(frozen=True)
class CheckIssue:
    code: IssueCode
    severity: Severity
    line: int
    message: str
    block_title: Optional[str] = None


@dataclass
class CheckReport:
    path: Optional[Path]
    issues: list[CheckIssue] = field(default_factory=list)
    snippets_checked: int = 0
    snippets_skipped: int = 0

    @property
    def errors(self) -> list[CheckIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[CheckIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.WARNING]

    def has_errors(self) -> bool:
        return bool(self.errors)

    def is_clean(self, strict: bool = False) -> bool:
        if strict:
            return not self.issues
        return not self.has_errors()
