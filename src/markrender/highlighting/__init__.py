#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/highlighting/__init__.py
"""Syntax highlighting for fenced code blocks."""

from markrender.highlighting.base import (
    SyntaxHighlighter,
    Token,
    highlight_to_html,
    normalize_tokens,
)
from markrender.highlighting.caching import CachingHighlighter
from markrender.highlighting.pygments_highlighter import PygmentsHighlighter, category_for_token_type

__all__ = [
    "CachingHighlighter",
    "PygmentsHighlighter",
    "SyntaxHighlighter",
    "Token",
    "category_for_token_type",
    "highlight_to_html",
    "normalize_tokens",
]
