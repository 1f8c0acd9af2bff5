import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


TWO_RULES_DOCUMENT = """\
## Use Concise Function Syntax

Use the concise `do:` syntax for single-expression functions.

Bad:
```elixir
def add(a, b) do
  a + b
end
```

Good:
```elixir
def add(a, b), do: a + b
```

## Use pipelining

Chain transformations with the pipe operator instead of nesting calls.

```elixir
# Bad
String.upcase(String.trim(name))
```

```elixir
# Good
name |> String.trim() |> String.upcase()
```
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("RULE_BLOCKS_CONFIG", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def two_rules_text() -> str:
    return TWO_RULES_DOCUMENT


@pytest.fixture
def write_doc(tmp_path: Path):
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("COLUMNS", "200")
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
