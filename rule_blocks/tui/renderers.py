from rich.console import Console, Group
from rich.markup import escape
from rich.text import Text

from rule_blocks.checks.models import CheckReport
from rule_blocks.rules.models import ExampleKind, RuleBlock, RuleDocument
from rule_blocks.tui.enums import UIStyle
from rule_blocks.tui.sections import UISection
from rule_blocks.tui.tables import DocumentTable, IssueTable
from rule_blocks.utils import display_path


class RuleBlocksConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_document(self, document: RuleDocument) -> None:
        self.console.print(
            UISection.panel(
                "document",
                DocumentTable.summary_block(document),
                style=UIStyle.BLUE.value,
            )
        )
        if document.blocks:
            self.console.print(
                UISection.panel(
                    "rule blocks",
                    DocumentTable.blocks_table(document.blocks),
                    style=UIStyle.CYAN.value,
                )
            )
        else:
            self.console.print(
                UISection.message(
                    "rule blocks", "No rule blocks found.", style=UIStyle.YELLOW.value
                )
            )
        self._render_problems(document)

    def render_block(self, block: RuleBlock) -> None:
        parts: list = []
        if block.description:
            parts.append(Text(block.description))
        else:
            parts.append(Text("(no description)", style=UIStyle.DIM.value))

        subtitle = f"line {block.line}"
        if block.group:
            subtitle = f"{escape(block.group)} · {subtitle}"
        self.console.print(
            UISection.panel(
                escape(block.title),
                Group(*parts),
                style=UIStyle.BLUE.value,
                subtitle=subtitle,
            )
        )
        self.console.print(UISection.snippet(ExampleKind.BAD, block.bad_example))
        self.console.print(UISection.snippet(ExampleKind.GOOD, block.good_example))

    def render_documents(self, documents: list[RuleDocument]) -> None:
        if not documents:
            self.console.print(
                UISection.message(
                    "documents", "No rule documents found.", style=UIStyle.YELLOW.value
                )
            )
            return
        self.console.print(
            UISection.panel(
                "documents",
                DocumentTable.documents_table(documents),
                style=UIStyle.CYAN.value,
            )
        )

    def render_report(self, report: CheckReport) -> None:
        style = UIStyle.RED.value if report.has_errors() else UIStyle.GREEN.value
        if not report.has_errors() and report.warnings:
            style = UIStyle.YELLOW.value
        self.console.print(
            UISection.panel("check", IssueTable.summary_block(report), style=style)
        )
        if report.issues:
            self.console.print(IssueTable.issues_table(report.issues))

    def render_check_summary(self, reports: list[CheckReport], strict: bool) -> None:
        failed = [report for report in reports if not report.is_clean(strict=strict)]
        if not failed:
            self.console.print(
                UISection.message(
                    "result",
                    f"{len(reports)} document(s) passed.",
                    style=UIStyle.GREEN.value,
                )
            )
            return
        lines = "\n".join(
            f"- {escape(display_path(report.path)) if report.path else '<text>'}"
            for report in failed
        )
        self.console.print(
            UISection.message(
                "result",
                f"{len(failed)} of {len(reports)} document(s) failed:\n{lines}",
                style=UIStyle.RED.value,
            )
        )

    def _render_problems(self, document: RuleDocument) -> None:
        if not document.problems:
            return
        problems_text = "\n".join(
            f"- line {problem.line}: {escape(problem.message)}"
            for problem in document.problems
        )
        self.console.print(
            UISection.message("problems", problems_text, style=UIStyle.RED.value)
        )

