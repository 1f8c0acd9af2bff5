from rich.console import RenderableType
from rich.panel import Panel
from rich.syntax import Syntax

from rule_blocks.rules.models import CodeSnippet, ExampleKind
from rule_blocks.tui.enums import EXAMPLE_KIND_STYLE, UIStyle


class UISection:
    @staticmethod
    def panel(
        title: str,
        body: RenderableType,
        style: str = UIStyle.BLUE.value,
        subtitle: str | None = None,
    ) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def message(title: str, text: str, style: str) -> Panel:
        return Panel(text, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def snippet(kind: ExampleKind, snippet: CodeSnippet | None) -> Panel:
        """Highlighted example, numbered with its lines in the source document."""
        if snippet is None:
            return UISection.message(kind.value, "(none)", style=UIStyle.DIM.value)
        syntax = Syntax(
            snippet.code,
            snippet.language or "text",
            line_numbers=True,
            start_line=snippet.line,
            word_wrap=True,
        )
        return UISection.panel(
            kind.value,
            syntax,
            style=EXAMPLE_KIND_STYLE[kind],
            subtitle=snippet.language or None,
        )
