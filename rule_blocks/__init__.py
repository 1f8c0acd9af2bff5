"""Extract and check bad/good example rule blocks from Markdown rule documents."""

__version__ = "0.1.0"
