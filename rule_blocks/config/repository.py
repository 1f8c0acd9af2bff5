"""Locate, load and validate the extractor config file."""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from rule_blocks.config.models import ExtractorConfig
from rule_blocks.constants import CONFIG_ENV_VAR, CONFIG_FILENAME
from rule_blocks.errors import (
    InvalidConfigSchemaError,
    InvalidYamlFormatError,
    MissingConfigFileError,
)
from rule_blocks.utils import read_yaml

_logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@lru_cache(maxsize=1)
def _config_validator() -> Draft202012Validator:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def validate_config(payload: Any, config_path: Path) -> None:
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(config_path, "must be a mapping")
    error = next(iter(_config_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(config_path, format_schema_error(error))


class ConfigRepository:
    def __init__(
        self,
        explicit_path: Path | None = None,
        cwd: Path | None = None,
        environ: dict[str, str] | None = None,
    ) -> None:
        self._explicit_path = explicit_path
        self._cwd = cwd or Path.cwd()
        self._environ = os.environ if environ is None else environ

    @property
    def config_path(self) -> Path | None:
        if self._explicit_path is not None:
            return self._explicit_path
        env_value = self._environ.get(CONFIG_ENV_VAR)
        if env_value:
            return Path(env_value).expanduser()
        default_path = self._cwd / CONFIG_FILENAME
        if default_path.exists():
            return default_path
        return None

    def load(self) -> ExtractorConfig:
        path = self.config_path
        if path is None:
            _logger.debug("No config file found, using defaults")
            return ExtractorConfig()
        if not path.exists():
            raise MissingConfigFileError(path)

        try:
            payload = read_yaml(path)
        except yaml.YAMLError as exc:
            raise InvalidYamlFormatError(path, str(exc).splitlines()[0]) from exc

        if payload is None:
            payload = {}
        validate_config(payload, path)
        _logger.debug("Loaded config from %s", path)
        return ExtractorConfig.from_dict(payload)
