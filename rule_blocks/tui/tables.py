from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from rule_blocks.checks.models import CheckIssue, CheckReport
from rule_blocks.rules.models import CodeSnippet, RuleBlock, RuleDocument
from rule_blocks.tui.enums import SEVERITY_STYLE, UIStyle
from rule_blocks.utils import display_path


def _example_cell(snippet: CodeSnippet | None) -> str:
    if snippet is None:
        return f"[{UIStyle.DIM.value}]-[/{UIStyle.DIM.value}]"
    language = snippet.language or "text"
    return f"{escape(language)} @{snippet.line}"


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


class DocumentTable:
    @staticmethod
    def summary_block(document: RuleDocument):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Document", escape(document.title or "(untitled)"))
        if document.path is not None:
            table.add_row("Path", escape(display_path(document.path)))
        if document.metadata.description:
            table.add_row("Description", escape(document.metadata.description))
        if document.metadata.globs:
            table.add_row("Globs", escape(", ".join(document.metadata.globs)))
        if document.metadata.always_apply:
            table.add_row("Always apply", "yes")
        table.add_row("Blocks", str(len(document.blocks)))
        return table

    @staticmethod
    def blocks_table(blocks: tuple[RuleBlock, ...]) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Title", overflow="fold", max_width=40),
            Column(header="Line", width=6, justify="right"),
            Column(header="Bad", width=14),
            Column(header="Good", width=14),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for index, block in enumerate(blocks, start=1):
            table.add_row(
                str(index),
                escape(block.title),
                str(block.line),
                _example_cell(block.bad_example),
                _example_cell(block.good_example),
                escape(_first_line(block.description)),
            )
        return table

    @staticmethod
    def documents_table(documents: list[RuleDocument]) -> Table:
        table = Table(
            Column(header="Name", width=28, overflow="fold"),
            Column(header="Title", overflow="ellipsis"),
            Column(header="Blocks", width=8, justify="right"),
            Column(header="Problems", width=10, justify="right"),
            expand=True,
            header_style="bold",
        )
        for document in documents:
            problems = len(document.problems)
            problem_text = (
                f"[{UIStyle.RED.value}]{problems}[/{UIStyle.RED.value}]"
                if problems
                else "0"
            )
            table.add_row(
                escape(document.name),
                escape(document.title),
                str(len(document.blocks)),
                problem_text,
            )
        return table


class IssueTable:
    @staticmethod
    def summary_block(report: CheckReport):
        counts = Counter(issue.severity.value for issue in report.issues)
        chips = [f"{key}={value}" for key, value in sorted(counts.items())]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        if report.path is not None:
            table.add_row("Path", escape(display_path(report.path)))
        table.add_row("Issues", "  ".join(chips))
        table.add_row(
            "Snippets",
            f"checked={report.snippets_checked}  skipped={report.snippets_skipped}",
        )
        return table

    @staticmethod
    def issues_table(issues: list[CheckIssue]) -> Table:
        table = Table(
            Column(header="Line", width=6, justify="right"),
            Column(header="Severity", width=9),
            Column(header="Code", width=20),
            Column(header="Block", overflow="ellipsis", max_width=36),
            Column(header="Message", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for issue in issues:
            style = SEVERITY_STYLE.get(issue.severity, UIStyle.WHITE.value)
            table.add_row(
                str(issue.line),
                f"[{style}]{issue.severity.value}[/{style}]",
                issue.code.value,
                escape(issue.block_title or ""),
                escape(issue.message),
            )
        return table
