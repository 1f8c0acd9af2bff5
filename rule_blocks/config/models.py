"""Extractor configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from rule_blocks.constants import (
    DEFAULT_BAD_MARKERS,
    DEFAULT_GOOD_MARKERS,
    DEFAULT_MAX_LABEL_WORDS,
)


@dataclass(frozen=True)
class ExtractorConfig:
    heading_level: int | None = None
    bad_markers: tuple[str, ...] = DEFAULT_BAD_MARKERS
    good_markers: tuple[str, ...] = DEFAULT_GOOD_MARKERS
    max_label_words: int = DEFAULT_MAX_LABEL_WORDS
    split_labeled_fences: bool = True
    require_bad_example: bool = True

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ExtractorConfig":
        defaults = cls()
        return cls(
            heading_level=raw.get("heading_level", defaults.heading_level),
            bad_markers=tuple(
                str(item).lower() for item in raw.get("bad_markers", defaults.bad_markers)
            ),
            good_markers=tuple(
                str(item).lower()
                for item in raw.get("good_markers", defaults.good_markers)
            ),
            max_label_words=int(raw.get("max_label_words", defaults.max_label_words)),
            split_labeled_fences=bool(
                raw.get("split_labeled_fences", defaults.split_labeled_fences)
            ),
            require_bad_example=bool(
                raw.get("require_bad_example", defaults.require_bad_example)
            ),
        )

    def with_heading_level(self, level: int | None) -> "ExtractorConfig":
        if level is None:
            return self
        return replace(self, heading_level=level)
