from rule_blocks.tui.renderers import RuleBlocksConsoleUI

__all__ = ["RuleBlocksConsoleUI"]
