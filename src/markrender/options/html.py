#  Copyright (c) 2025 Tom Villani, Ph.D.
# markrender/options/html.py
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from markrender.constants import (
    DEFAULT_ALLOW_RAW_HTML,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_HTML_TITLE,
    DEFAULT_LANGUAGE_CLASS_PREFIX,
    DEFAULT_VALIDATE_IMAGES,
)
from markrender.options.base import BaseRendererOptions
from markrender.themes.syntax import SyntaxTheme


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-HTML rendering.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the fragment in a complete HTML5 document whose ``<style>``
        element carries the syntax theme CSS. The default output is a
        fragment for embedding in a caller-supplied shell.
    language_class_prefix : str, default "language-"
        Prefix of the class naming a code block's language on ``<code>``.
    allow_raw_html : bool, default True
        Pass raw HTML blocks and inline HTML through unchanged. When False,
        raw HTML is escaped and shows as text.
    validate_images : bool, default False
        Sniff data URI images and mark those whose payload does not match
        the declared MIME type with ``class="invalid-image"``.
    highlight_code : bool, default True
        Use the attached highlighter for fenced code blocks.
    syntax_theme : SyntaxTheme
        Theme used for the standalone stylesheet and ``css_styles``.
    title : str, default "Document"
        ``<title>`` of standalone documents.

    Examples
    --------
        >>> from markrender.renderers.html import HtmlRenderer
        >>> options = HtmlRendererOptions(allow_raw_html=False)
        >>> renderer = HtmlRenderer(options)

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Wrap output in a complete HTML document with embedded theme CSS", "importance": "core"},
    )
    language_class_prefix: str = field(
        default=DEFAULT_LANGUAGE_CLASS_PREFIX,
        metadata={"help": "Class prefix naming a code block's language", "importance": "advanced"},
    )
    allow_raw_html: bool = field(
        default=DEFAULT_ALLOW_RAW_HTML,
        metadata={"help": "Pass raw HTML through (escape it when disabled)", "importance": "security"},
    )
    validate_images: bool = field(
        default=DEFAULT_VALIDATE_IMAGES,
        metadata={"help": "Flag data URI images whose content does not match their MIME type", "importance": "advanced"},
    )
    highlight_code: bool = field(
        default=True,
        metadata={"help": "Highlight fenced code blocks with the attached highlighter", "importance": "core"},
    )
    syntax_theme: SyntaxTheme = field(
        default_factory=SyntaxTheme.default,
        metadata={"help": "Light/dark syntax palette for generated CSS", "importance": "core"},
    )
    title: str = field(
        default=DEFAULT_HTML_TITLE,
        metadata={"help": "Document title used in standalone mode", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the language class prefix could break out of the class attribute

        """
        super().__post_init__()

        if any(ch.isspace() or ch in "\"'<>&" for ch in self.language_class_prefix):
            raise ValueError(
                f"language_class_prefix must not contain whitespace, quotes or markup, "
                f"got {self.language_class_prefix!r}"
            )
        if not isinstance(self.syntax_theme, SyntaxTheme):
            raise ValueError(f"syntax_theme must be a SyntaxTheme, got {type(self.syntax_theme).__name__}")
