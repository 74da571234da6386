#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts AST nodes to an
HTML fragment. Text is escaped exactly once, fenced code blocks are
optionally highlighted into ``token-<category>`` spans, and node kinds the
renderer has no hook for fall back to rendering their children.

"""

from __future__ import annotations

import logging
from typing import Optional

from markrender.ast.nodes import (
    BlockDirective,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    DoxygenCommand,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from markrender.ast.visitors import NodeVisitor
from markrender.constants import INVALID_IMAGE_CLASS
from markrender.highlighting.base import SyntaxHighlighter, highlight_to_html
from markrender.options.html import HtmlRendererOptions
from markrender.renderers.base import BaseRenderer, InlineContentMixin
from markrender.renderers.context import BlockType, RenderContext
from markrender.utils.html_utils import escape_attribute, escape_html, html_class_token, render_html_document
from markrender.utils.images import is_data_uri, validate_data_uri

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer[str]):
    """Render AST nodes to HTML.

    This class implements the visitor pattern to traverse an AST and
    generate an HTML fragment, or a complete document when
    ``options.standalone`` is set.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options
    highlighter : SyntaxHighlighter or None, default = None
        Highlighter for fenced code blocks. Without one, code blocks are
        emitted as escaped text.

    Examples
    --------
    Basic usage:

        >>> from markrender.ast import Document, Heading, Text
        >>> from markrender.renderers.html import HtmlRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> HtmlRenderer().render(doc)
        '<h1>Title</h1>\\n'

    With syntax highlighting:

        >>> from markrender.highlighting import PygmentsHighlighter
        >>> renderer = HtmlRenderer(highlighter=PygmentsHighlighter())

    """

    def __init__(self, options: HtmlRendererOptions | None = None, highlighter: Optional[SyntaxHighlighter] = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "HtmlRenderer")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.highlighter = highlighter
        self._output: list[str] = []
        self._tight_lists: list[bool] = []

    @property
    def css_styles(self) -> str:
        """Stylesheet for the ``token-*`` classes, generated from the syntax theme."""
        return self.options.syntax_theme.generate_css()

    def render(self, document: Document, context: Optional[RenderContext] = None) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        document : Document
            The document node to render
        context : RenderContext or None, default = None
            Optional caller context; it is copied, never mutated

        Returns
        -------
        str
            HTML fragment, or a full HTML document in standalone mode

        """
        worker = self._start_render(context)
        worker._output = []
        worker._tight_lists = []

        document.accept(worker)
        content = "".join(worker._output)

        if self.options.standalone:
            return render_html_document(content, title=self.options.title, css=self.css_styles)
        return content

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        with self._context.entering(BlockType.DOCUMENT):
            for child in node.children:
                child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        with self._context.entering(BlockType.HEADING):
            content = self._render_inline_content(node.content)
        self._output.append(f"<h{node.level}>{content}</h{node.level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Paragraphs directly inside an item of a tight list are unwrapped.
        """
        with self._context.entering(BlockType.PARAGRAPH):
            content = self._render_inline_content(node.content)

        if self._context.parent_block_type is BlockType.LIST_ITEM and self._tight_lists and self._tight_lists[-1]:
            self._output.append(content)
        else:
            self._output.append(f"<p>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node, highlighted when a highlighter is attached.

        Highlighter errors never escape: the block falls back to escaped text.
        """
        class_attr = ""
        if node.language:
            class_attr = f' class="{escape_attribute(self.options.language_class_prefix + node.language)}"'

        body = self._highlight(node) or escape_html(node.content)
        self._output.append(f"<pre><code{class_attr}>{body}</code></pre>\n")

    def _highlight(self, node: CodeBlock) -> str:
        """Return highlighted HTML for a code block, or '' when not highlighted."""
        if self.highlighter is None or not self.options.highlight_code or not node.language:
            return ""
        try:
            tokens = self.highlighter.tokenize(node.content, node.language)
            if not tokens:
                return ""
            return highlight_to_html(node.content, tokens)
        except Exception as e:
            logger.warning(f"Highlighting failed for language {node.language!r}, rendering plain code: {e}")
            return ""

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._output.append("<blockquote>\n")
        with self._context.entering(BlockType.BLOCKQUOTE):
            for child in node.children:
                child.accept(self)
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node."""
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
        block_type = BlockType.ORDERED_LIST if node.ordered else BlockType.UNORDERED_LIST

        self._output.append(f"<{tag}{start_attr}>\n")
        self._tight_lists.append(node.tight)
        try:
            with self._context.entering(block_type, start=node.start):
                for item in node.items:
                    item.accept(self)
        finally:
            self._tight_lists.pop()
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node, with a disabled checkbox for task items."""
        if node.task_status is None:
            self._output.append("<li>")
        else:
            checked = " checked" if node.task_status == "checked" else ""
            self._output.append(f'<li><input type="checkbox" disabled{checked}> ')

        with self._context.entering(BlockType.LIST_ITEM):
            last = len(node.children) - 1
            for index, child in enumerate(node.children):
                child.accept(self)
                # Unwrapped tight-list text needs a line break before the next block
                if index < last and isinstance(child, Paragraph) and not self._output[-1].endswith("\n"):
                    self._output.append("\n")

        self._output.append("</li>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node."""
        self._output.append("<table>\n")
        with self._context.entering(BlockType.TABLE):
            if node.header is not None:
                self._output.append("<thead>\n<tr>\n")
                self._render_cells(node.header, "th", node)
                self._output.append("</tr>\n</thead>\n")

            self._output.append("<tbody>\n")
            for row in node.rows:
                self._output.append("<tr>\n")
                self._render_cells(row, "td", node)
                self._output.append("</tr>\n")
            self._output.append("</tbody>\n")
        self._output.append("</table>\n")

    def _render_cells(self, row: TableRow, tag: str, table: Table) -> None:
        for i, cell in enumerate(row.cells):
            alignment = cell.alignment or (table.alignments[i] if i < len(table.alignments) else None)
            align_attr = f' style="text-align: {alignment}"' if alignment else ""
            content = self._render_inline_content(cell.content)
            self._output.append(f"<{tag}{align_attr}>{content}</{tag}>\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node outside of a table as a bare row."""
        self._output.append("<tr>\n")
        for cell in node.cells:
            cell.accept(self)
        self._output.append("</tr>\n")

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node outside of a table as a bare cell."""
        self._output.append(f"<td>{self._render_inline_content(node.content)}</td>\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("<hr>\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node, escaped unless raw HTML is allowed."""
        content = node.content if self.options.allow_raw_html else escape_html(node.content)
        if not content:
            return
        self._output.append(content)
        if not content.endswith("\n"):
            self._output.append("\n")

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition node as a numbered div with a back-link."""
        number = self._context.footnote_number(node.identifier)
        self._output.append(f'<div class="footnote" id="fn-{number}">\n')
        with self._context.entering(BlockType.FOOTNOTE):
            for child in node.content:
                child.accept(self)
        self._output.append(f'<a href="#fnref-{number}" class="footnote-backref">&#8617;</a>\n</div>\n')

    def visit_block_directive(self, node: BlockDirective) -> None:
        """Render a BlockDirective node as a div wrapping its children."""
        arguments_attr = f' data-arguments="{escape_attribute(node.arguments)}"' if node.arguments else ""
        self._output.append(f'<div class="directive directive-{html_class_token(node.name)}"{arguments_attr}>\n')
        with self._context.entering(BlockType.DIRECTIVE):
            for child in node.children:
                child.accept(self)
        self._output.append("</div>\n")

    def visit_doxygen_command(self, node: DoxygenCommand) -> None:
        """Render a DoxygenCommand node as a div with an optional parameter label."""
        parts = [f'<div class="doxygen doxygen-{html_class_token(node.name)}">']
        if node.parameter:
            parts.append(f'<span class="doxygen-parameter">{escape_html(node.parameter)}</span> ')
        parts.append(self._render_inline_content(node.content))
        parts.append("</div>\n")
        self._output.append("".join(parts))

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"<del>{self._render_inline_content(node.content)}</del>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"<code>{escape_html(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        content = self._render_inline_content(node.content)
        title_attr = f' title="{escape_attribute(node.title)}"' if node.title else ""
        self._output.append(f'<a href="{escape_attribute(node.url)}"{title_attr}>{content}</a>')

    def visit_image(self, node: Image) -> None:
        """Render an Image node.

        With ``validate_images`` enabled, data URI images whose payload does
        not match the declared type get the ``invalid-image`` class.
        """
        class_attr = ""
        if self.options.validate_images and is_data_uri(node.url):
            result = validate_data_uri(node.url)
            if not result.is_valid:
                logger.debug(
                    f"Data URI image failed validation ({result.status.value}): "
                    f"declared {result.declared_mime!r}, detected {result.detected_mime!r}"
                )
                class_attr = f' class="{INVALID_IMAGE_CLASS}"'

        title_attr = f' title="{escape_attribute(node.title)}"' if node.title else ""
        self._output.append(
            f'<img{class_attr} src="{escape_attribute(node.url)}" alt="{escape_attribute(node.alt_text)}"{title_attr}>'
        )

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node: a newline for soft breaks, ``<br>`` for hard ones."""
        self._output.append("\n" if node.soft else "<br>\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node, escaped unless raw HTML is allowed."""
        self._output.append(node.content if self.options.allow_raw_html else escape_html(node.content))

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node as a numbered superscript link."""
        number = self._context.footnote_number(node.identifier)
        self._output.append(f'<sup class="footnote-ref"><a href="#fn-{number}" id="fnref-{number}">{number}</a></sup>')

