from pathlib import Path


class RuleBlocksError(Exception):
    """Base user-facing application error."""


class RuleFileError(RuleBlocksError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingRuleDocumentError(RuleFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Rule document not found")


class InvalidRuleDocumentError(RuleFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Unreadable rule document ({detail})")


class MissingConfigFileError(RuleFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing config file")


class InvalidYamlFormatError(RuleFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(RuleFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class RuleBlockNotFoundError(RuleBlocksError):
    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"Rule block not found: {title}")
