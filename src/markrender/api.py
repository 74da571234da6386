#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/api.py
"""High-level entry points.

Each ``to_*`` function accepts Markdown text (``str`` or UTF-8 ``bytes``) or an
already parsed :class:`~markrender.ast.Document`, parses it when needed and
renders it with the matching built-in renderer.

"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar, Union

from rich.text import Text

from markrender.ast import Document
from markrender.highlighting.base import SyntaxHighlighter
from markrender.options.html import HtmlRendererOptions
from markrender.options.markdown import MarkdownParserOptions
from markrender.options.plaintext import PlainTextOptions
from markrender.options.styled import StyledTextOptions
from markrender.parsers.markdown import MarkdownParser
from markrender.renderers.base import MarkdownRenderer
from markrender.renderers.context import RenderContext
from markrender.renderers.html import HtmlRenderer
from markrender.renderers.plaintext import PlainTextRenderer
from markrender.renderers.styled import StyledTextRenderer

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT")
MarkdownSource = Union[str, bytes, Document]


def parse(source: Union[str, bytes], options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse Markdown text into a Document.

    Parameters
    ----------
    source : str or bytes
        Markdown text; bytes are decoded as UTF-8
    options : MarkdownParserOptions or None, default = None
        Syntax extensions to recognize

    Returns
    -------
    Document
        Parsed AST

    Raises
    ------
    ParsingError
        If byte input is not valid UTF-8

    """
    return MarkdownParser(options).parse(source)


def render(document: Document, renderer: MarkdownRenderer[OutputT]) -> OutputT:
    """Render a document with any object satisfying :class:`MarkdownRenderer`.

    Parameters
    ----------
    document : Document
        Document to render
    renderer : MarkdownRenderer
        Any object with a ``render(document)`` method

    Returns
    -------
    OutputT
        Whatever the renderer produces

    Raises
    ------
    TypeError
        If ``renderer`` has no ``render`` method

    Examples
    --------
        >>> from markrender import parse, render
        >>> from markrender.renderers import HtmlRenderer
        >>> render(parse("*hi*"), HtmlRenderer())
        '<p><em>hi</em></p>\\n'

    """
    if not isinstance(renderer, MarkdownRenderer):
        raise TypeError(f"renderer must provide a render(document) method, got {type(renderer).__name__}")
    return renderer.render(document)


def _as_document(source: MarkdownSource, parser_options: Optional[MarkdownParserOptions]) -> Document:
    if isinstance(source, Document):
        if parser_options is not None:
            logger.debug("parser_options ignored for an already parsed Document")
        return source
    return parse(source, parser_options)


def to_html(
    source: MarkdownSource,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
    highlighter: Optional[SyntaxHighlighter] = None,
    context: Optional[RenderContext] = None,
) -> str:
    """Convert Markdown (or a Document) to HTML.

    Parameters
    ----------
    source : str, bytes or Document
        Markdown text or a parsed document
    parser_options : MarkdownParserOptions or None, default = None
        Used only when ``source`` is text
    renderer_options : HtmlRendererOptions or None, default = None
        HTML output options
    highlighter : SyntaxHighlighter or None, default = None
        Tokenizer for fenced code blocks; code is left unhighlighted without one
    context : RenderContext or None, default = None
        Optional render context

    Returns
    -------
    str
        HTML fragment, or a full document when ``renderer_options.standalone`` is set

    Examples
    --------
        >>> to_html("**bold** and *em*")
        '<p><strong>bold</strong> and <em>em</em></p>\\n'

    """
    renderer = HtmlRenderer(renderer_options, highlighter=highlighter)
    return renderer.render(_as_document(source, parser_options), context)


def to_plain_text(
    source: MarkdownSource,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[PlainTextOptions] = None,
    context: Optional[RenderContext] = None,
) -> str:
    """Convert Markdown (or a Document) to plain text.

    Examples
    --------
        >>> to_plain_text("**bold** and *em*")
        'bold and em'

    """
    renderer = PlainTextRenderer(renderer_options)
    return renderer.render(_as_document(source, parser_options), context)


def to_styled_text(
    source: MarkdownSource,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[StyledTextOptions] = None,
    highlighter: Optional[SyntaxHighlighter] = None,
    context: Optional[RenderContext] = None,
) -> Text:
    """Convert Markdown (or a Document) to a styled :class:`rich.text.Text`.

    The appearance mode comes from ``context`` when given, otherwise from
    ``renderer_options.mode``.
    """
    renderer = StyledTextRenderer(renderer_options, highlighter=highlighter)
    return renderer.render(_as_document(source, parser_options), context)


__all__ = ["parse", "render", "to_html", "to_plain_text", "to_styled_text"]
