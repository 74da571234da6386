#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/parsers/__init__.py
"""Markdown parsing into the markrender AST.

The parser is a thin adapter over mistune; see :mod:`markrender.parsers.markdown`.
"""

from markrender.parsers.markdown import MarkdownParser, parse_markdown

__all__ = ["MarkdownParser", "parse_markdown"]
