#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/renderers/__init__.py
"""Renderers that turn a markrender AST into output.

Available renderers:

- :class:`HtmlRenderer`: HTML fragments or standalone documents
- :class:`PlainTextRenderer`: unformatted text for indexing and previews
- :class:`StyledTextRenderer`: :class:`rich.text.Text` styled from a theme

Any object with a ``render(document)`` method satisfies
:class:`MarkdownRenderer` and can be passed to :func:`markrender.render`.
"""

from markrender.renderers.base import BaseRenderer, InlineContentMixin, MarkdownRenderer
from markrender.renderers.context import AppearanceMode, BlockType, RenderContext
from markrender.renderers.html import HtmlRenderer
from markrender.renderers.plaintext import PlainTextRenderer
from markrender.renderers.styled import StyledTextRenderer, styled_runs

__all__ = [
    "AppearanceMode",
    "BaseRenderer",
    "BlockType",
    "HtmlRenderer",
    "InlineContentMixin",
    "MarkdownRenderer",
    "PlainTextRenderer",
    "RenderContext",
    "StyledTextRenderer",
    "styled_runs",
]
