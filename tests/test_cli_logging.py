"""Tests for the global verbose flag."""

import logging

from rich.logging import RichHandler

from rule_blocks.__main__ import PACKAGE_LOGGER, cli


def test_verbose_enables_debug_logging(
    write_doc, two_rules_text: str, cli_runner, caplog
) -> None:
    path = write_doc("elixir.md", two_rules_text)

    with caplog.at_level(logging.DEBUG):
        result = cli_runner.invoke(cli, ["-v", "extract", str(path), "-f", "json"])

    assert result.exit_code == 0
    logger = logging.getLogger(PACKAGE_LOGGER)
    assert logger.level == logging.DEBUG
    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1
    assert "Using heading level 2 for rule blocks" in caplog.text
    assert "Extracted 2 rule blocks" in caplog.text


def test_default_log_level_is_warning(write_doc, two_rules_text: str, cli_runner) -> None:
    path = write_doc("elixir.md", two_rules_text)

    cli_runner.invoke(cli, ["-v", "extract", str(path), "-f", "json"])
    result = cli_runner.invoke(cli, ["extract", str(path), "-f", "json"])

    assert result.exit_code == 0
    logger = logging.getLogger(PACKAGE_LOGGER)
    assert logger.level == logging.WARNING
    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1
