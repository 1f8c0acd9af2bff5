"""Per-language syntax checks for example snippets."""

from __future__ import annotations

import ast
import json
import tomllib
from abc import ABC, abstractmethod

import yaml


class ISyntaxChecker(ABC):
    LANGUAGES: tuple[str, ...] = ()

    @abstractmethod
    def check(self, code: str) -> str | None:
        """Return an error message, or None when the code parses."""


class PythonSyntaxChecker(ISyntaxChecker):
    LANGUAGES = ("python", "py", "python3")

    def check(self, code: str) -> str | None:
        try:
            ast.parse(code)
        except SyntaxError as exc:
            return f"{exc.msg} (line {exc.lineno})"
        return None


class JsonSyntaxChecker(ISyntaxChecker):
    LANGUAGES = ("json",)

    def check(self, code: str) -> str | None:
        try:
            json.loads(code)
        except json.JSONDecodeError as exc:
            return f"{exc.msg} (line {exc.lineno})"
        return None


class YamlSyntaxChecker(ISyntaxChecker):
    LANGUAGES = ("yaml", "yml")

    def check(self, code: str) -> str | None:
        try:
            list(yaml.safe_load_all(code))
        except yaml.YAMLError as exc:
            return str(exc).splitlines()[0]
        return None


class TomlSyntaxChecker(ISyntaxChecker):
    LANGUAGES = ("toml",)

    def check(self, code: str) -> str | None:
        try:
            tomllib.loads(code)
        except tomllib.TOMLDecodeError as exc:
            return str(exc)
        return None


DEFAULT_CHECKERS: tuple[type[ISyntaxChecker], ...] = (
    PythonSyntaxChecker,
    JsonSyntaxChecker,
    YamlSyntaxChecker,
    TomlSyntaxChecker,
)


class SyntaxCheckerRegistry:
    def __init__(self, checkers: list[ISyntaxChecker] | None = None) -> None:
        self._checkers: dict[str, ISyntaxChecker] = {}
        for checker in checkers or []:
            self.register(checker)

    @classmethod
    def create_default(cls) -> "SyntaxCheckerRegistry":
        return cls([checker_cls() for checker_cls in DEFAULT_CHECKERS])

    def register(self, checker: ISyntaxChecker) -> None:
        for language in checker.LANGUAGES:
            self._checkers[language.lower()] = checker

    def get(self, language: str) -> ISyntaxChecker | None:
        return self._checkers.get(language.lower())
