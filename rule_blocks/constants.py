from typing import Final


RULE_DOCUMENT_SUFFIXES: Final[tuple[str, ...]] = (".md", ".mdc")

CONFIG_FILENAME: Final[str] = ".rule-blocks.yaml"
CONFIG_ENV_VAR: Final[str] = "RULE_BLOCKS_CONFIG"

NO_BAD_EXAMPLE_MARKER: Final[str] = "no-bad-example"

DEFAULT_BAD_MARKERS: Final[tuple[str, ...]] = (
    "bad",
    "avoid",
    "don't",
    "dont",
    "incorrect",
    "wrong",
    "before",
    "instead of",
)
DEFAULT_GOOD_MARKERS: Final[tuple[str, ...]] = (
    "good",
    "prefer",
    "preferred",
    "correct",
    "better",
    "after",
    "instead",
    "do",
)
DEFAULT_MAX_LABEL_WORDS: Final[int] = 4

BAD_GLYPHS: Final[tuple[str, ...]] = ("❌", "✗", "🚫")
GOOD_GLYPHS: Final[tuple[str, ...]] = ("✅", "✓", "✔")

CODE_COMMENT_PREFIXES: Final[tuple[str, ...]] = ("<!--", "/*", "//", "--", "#", "%", ";")
