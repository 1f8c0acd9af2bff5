import logging
from pathlib import Path
from typing import Any, Dict

import click
from rich.console import Console
from rich.logging import RichHandler

from rule_blocks.checks import CheckReport, DocumentChecker
from rule_blocks.config import ConfigRepository, ExtractorConfig
from rule_blocks.errors import RuleBlockNotFoundError, RuleBlocksError
from rule_blocks.exporters import EXPORTERS, get_exporter
from rule_blocks.rules.models import RuleDocument
from rule_blocks.rules.repository import RuleDocumentRepository
from rule_blocks.tui import RuleBlocksConsoleUI


FORMAT_VALUES = ["table", *EXPORTERS]
PACKAGE_LOGGER = "rule_blocks"


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_time=False, show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def _load_config(obj: Dict[str, Any], heading_level: int | None = None) -> ExtractorConfig:
    repository = ConfigRepository(explicit_path=obj.get("config_path"))
    try:
        config = repository.load()
    except RuleBlocksError as exc:
        raise click.ClickException(str(exc))
    return config.with_heading_level(heading_level)


def _load_document(path: Path, config: ExtractorConfig) -> RuleDocument:
    repository = RuleDocumentRepository(path, config=config)
    try:
        return repository.load(path)
    except RuleBlocksError as exc:
        raise click.ClickException(str(exc))


def _heading_level_option():
    return click.option(
        "--heading-level",
        type=click.IntRange(1, 6),
        default=None,
        help="Heading level that starts a rule block (auto-detected by default).",
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to a rule-blocks YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Extract and check bad/good rule blocks in Markdown rule documents."""
    _configure_logging(verbose)
    ctx.obj = {"config_path": config_path}


@cli.command(help="Extract the rule blocks of a document.")
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(FORMAT_VALUES, case_sensitive=False),
    default="table",
    show_default=True,
)
@_heading_level_option()
@click.pass_obj
def extract(
    obj: Dict[str, Any], path: Path, output_format: str, heading_level: int | None
) -> None:
    config = _load_config(obj, heading_level)
    document = _load_document(path, config)

    if output_format.lower() == "table":
        RuleBlocksConsoleUI(Console()).render_document(document)
        return
    click.echo(get_exporter(output_format).export(document), nl=False)


@cli.command(help="Show one rule block with its examples.")
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("title")
@_heading_level_option()
@click.pass_obj
def show(obj: Dict[str, Any], path: Path, title: str, heading_level: int | None) -> None:
    config = _load_config(obj, heading_level)
    document = _load_document(path, config)

    block = document.find_block(title)
    if block is None:
        raise click.ClickException(str(RuleBlockNotFoundError(title)))
    RuleBlocksConsoleUI(Console()).render_block(block)


@cli.command(help="Check rule documents for structural problems.")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors.")
@_heading_level_option()
@click.pass_obj
def check(
    obj: Dict[str, Any], paths: tuple[Path, ...], strict: bool, heading_level: int | None
) -> None:
    ui = RuleBlocksConsoleUI(Console())
    config = _load_config(obj, heading_level)
    checker = DocumentChecker(config=config)

    reports: list[CheckReport] = []
    for path in paths:
        repository = RuleDocumentRepository(path, config=config)
        try:
            documents = repository.list_documents()
        except RuleBlocksError as exc:
            raise click.ClickException(str(exc))
        for document in documents:
            report = checker.check(document)
            ui.render_report(report)
            reports.append(report)

    ui.render_check_summary(reports, strict=strict)
    if any(not report.is_clean(strict=strict) for report in reports):
        raise click.exceptions.Exit(1)


@cli.command("list", help="List rule documents under a directory.")
@click.argument("root", type=click.Path(path_type=Path), default=Path("."))
@click.pass_obj
def list_documents(obj: Dict[str, Any], root: Path) -> None:
    config = _load_config(obj)
    repository = RuleDocumentRepository(root, config=config)
    try:
        documents = repository.list_documents()
    except RuleBlocksError as exc:
        raise click.ClickException(str(exc))
    RuleBlocksConsoleUI(Console()).render_documents(documents)


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
