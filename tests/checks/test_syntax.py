"""Tests for snippet syntax checkers."""

import pytest

from rule_blocks.checks.syntax import (
    ISyntaxChecker,
    JsonSyntaxChecker,
    PythonSyntaxChecker,
    SyntaxCheckerRegistry,
    TomlSyntaxChecker,
    YamlSyntaxChecker,
)


@pytest.mark.parametrize(
    ("checker", "valid", "invalid"),
    [
        (PythonSyntaxChecker(), "def f():\n    return 1\n", "def f(:\n"),
        (JsonSyntaxChecker(), '{"a": [1, 2]}', '{"a": }'),
        (YamlSyntaxChecker(), "a: 1\nb:\n  - x\n", "a: [1, 2\n"),
        (TomlSyntaxChecker(), 'name = "x"\n[tool]\nkey = 1\n', "name = \n"),
    ],
)
def test_checkers_accept_valid_and_reject_invalid(
    checker: ISyntaxChecker, valid: str, invalid: str
) -> None:
    assert checker.check(valid) is None
    error = checker.check(invalid)
    assert isinstance(error, str)
    assert error


def test_default_registry_resolves_aliases() -> None:
    registry = SyntaxCheckerRegistry.create_default()

    assert isinstance(registry.get("py"), PythonSyntaxChecker)
    assert isinstance(registry.get("Python3"), PythonSyntaxChecker)
    assert isinstance(registry.get("yml"), YamlSyntaxChecker)
    assert registry.get("elixir") is None
    assert registry.get("") is None
    assert isinstance(registry.get("JSON"), JsonSyntaxChecker)


def test_registry_accepts_custom_checkers() -> None:
    class AlwaysFails(ISyntaxChecker):
        LANGUAGES = ("elixir", "ex")

        def check(self, code: str) -> str | None:
            return "unsupported"

    registry = SyntaxCheckerRegistry()
    registry.register(AlwaysFails())

    assert registry.get("ex").check("x") == "unsupported"
    assert registry.get("elixir").check("x") == "unsupported"
    assert registry.get("py") is None
