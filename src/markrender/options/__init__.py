#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the markrender parser adapter and renderers.

All options classes are frozen dataclasses; use ``create_updated`` to derive
a modified copy.
"""

from markrender.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from markrender.options.html import HtmlRendererOptions
from markrender.options.markdown import MarkdownParserOptions
from markrender.options.plaintext import PlainTextOptions
from markrender.options.styled import StyledTextOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "PlainTextOptions",
    "StyledTextOptions",
]
