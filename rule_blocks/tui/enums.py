from enum import Enum

from rule_blocks.checks.models import Severity
from rule_blocks.rules.models import ExampleKind


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


SEVERITY_STYLE = {
    Severity.ERROR: UIStyle.RED.value,
    Severity.WARNING: UIStyle.YELLOW.value,
}

EXAMPLE_KIND_STYLE = {
    ExampleKind.BAD: UIStyle.RED.value,
    ExampleKind.GOOD: UIStyle.GREEN.value,
}
