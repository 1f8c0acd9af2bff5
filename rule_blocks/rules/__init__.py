from rule_blocks.rules.extractor import extract_document, extract_rule_blocks
from rule_blocks.rules.models import (
    CodeSnippet,
    ExampleKind,
    ParseProblem,
    RuleBlock,
    RuleDocument,
    RuleMetadata,
)

__all__ = [
    "CodeSnippet",
    "ExampleKind",
    "ParseProblem",
    "RuleBlock",
    "RuleDocument",
    "RuleMetadata",
    "extract_document",
    "extract_rule_blocks",
]
