from pathlib import Path

from rule_blocks.utils import (
    display_path,
    normalize_title,
    read_yaml,
)


def test_normalize_title() -> None:
    assert normalize_title("  Use   Pipelining\t") == "use pipelining"
    assert normalize_title("Use pipelining") == normalize_title("USE PIPELINING")


def test_read_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("heading_level: 2\n", encoding="utf-8")

    assert read_yaml(path) == {"heading_level": 2}


def test_display_path_for_absolute_home_path(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert display_path(tmp_path / "rules" / "elixir.md") == "~/rules/elixir.md"
    assert display_path(tmp_path) == "~"
    assert display_path("/elsewhere/x.md") == "/elsewhere/x.md"
    assert display_path("rules/x.md") == "rules/x.md"

