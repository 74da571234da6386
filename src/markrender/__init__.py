"""markrender - Markdown rendering to HTML, plain text and styled text.

markrender parses Markdown into an immutable AST and renders that tree through
a single visitor-based renderer abstraction. Three renderers ship with the
package, and any object with a ``render(document)`` method can be used in
their place.

Key Features
------------
- HTML fragments or standalone documents with embedded theme CSS
- Plain text output for search indexing, previews and accessibility
- Styled :class:`rich.text.Text` output colored from the same theme
- Token-level syntax highlighting of fenced code (Pygments), cacheable
- Light and dark color themes shared between CSS and styled text
- Optional syntax extensions: tables, task lists, strikethrough, footnotes,
  block directives and minimal Doxygen commands

Requirements
------------
- Python 3.10+
- mistune, Pygments and rich

Examples
--------
Basic usage:

    >>> from markrender import to_html, to_plain_text
    >>> to_html("**bold** and *em*")
    '<p><strong>bold</strong> and <em>em</em></p>\\n'
    >>> to_plain_text("**bold** and *em*")
    'bold and em'

Highlighted, standalone HTML:

    >>> from markrender import HtmlRendererOptions, PygmentsHighlighter, to_html
    >>> html = to_html(
    ...     "```python\\nx = 1\\n```",
    ...     renderer_options=HtmlRendererOptions(standalone=True),
    ...     highlighter=PygmentsHighlighter(),
    ... )

Styled text for a dark terminal:

    >>> from rich.console import Console
    >>> from markrender import ColorMode, RenderContext, to_styled_text
    >>> Console().print(to_styled_text("# Title", context=RenderContext(mode=ColorMode.DARK)))

See Also
--------
markrender.ast : AST node definitions and the visitor base class
markrender.renderers : Built-in renderers
markrender.themes : Syntax and Markdown color themes

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "markrender requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from markrender.api import parse, render, to_html, to_plain_text, to_styled_text  # noqa: E402
from markrender.ast import Document, Node, NodeVisitor  # noqa: E402
from markrender.exceptions import (  # noqa: E402
    InvalidOptionsError,
    MarkRenderError,
    ParsingError,
    ThemeError,
    ValidationError,
)
from markrender.highlighting import CachingHighlighter, PygmentsHighlighter, SyntaxHighlighter, Token  # noqa: E402
from markrender.options import (  # noqa: E402
    HtmlRendererOptions,
    MarkdownParserOptions,
    PlainTextOptions,
    StyledTextOptions,
)
from markrender.renderers import (  # noqa: E402
    AppearanceMode,
    HtmlRenderer,
    MarkdownRenderer,
    PlainTextRenderer,
    RenderContext,
    StyledTextRenderer,
)
from markrender.themes import ColorMode, MarkdownTheme, SyntaxColors, SyntaxTheme, TokenCategory  # noqa: E402

__all__ = [
    "__version__",
    # API
    "parse",
    "render",
    "to_html",
    "to_plain_text",
    "to_styled_text",
    # AST
    "Document",
    "Node",
    "NodeVisitor",
    # Renderers
    "AppearanceMode",
    "HtmlRenderer",
    "MarkdownRenderer",
    "PlainTextRenderer",
    "RenderContext",
    "StyledTextRenderer",
    # Highlighting
    "CachingHighlighter",
    "PygmentsHighlighter",
    "SyntaxHighlighter",
    "Token",
    # Themes
    "ColorMode",
    "MarkdownTheme",
    "SyntaxColors",
    "SyntaxTheme",
    "TokenCategory",
    # Options
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "PlainTextOptions",
    "StyledTextOptions",
    # Exceptions
    "InvalidOptionsError",
    "MarkRenderError",
    "ParsingError",
    "ThemeError",
    "ValidationError",
]
