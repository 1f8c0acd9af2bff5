import re
from pathlib import Path
from typing import Any

import yaml

_WHITESPACE_RE = re.compile(r"\s+")


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def normalize_title(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip().casefold()


def display_path(path: str | Path) -> str:
    """Render ``path`` with the home directory shown as ``~``."""
    candidate = Path(path)
    try:
        relative = candidate.relative_to(Path.home())
    except ValueError:
        return str(candidate)
    if relative == Path("."):
        return "~"
    return f"~/{relative.as_posix()}"

