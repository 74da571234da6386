#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/renderers/styled.py
"""Styled text rendering from AST.

This module provides the StyledTextRenderer class which converts AST nodes to
a :class:`rich.text.Text` value: the document's text with one complete
:class:`rich.style.Style` per run. Colors come from a
:class:`~markrender.themes.markdown.MarkdownTheme` resolved for the active
appearance mode, so the same document renders consistently with the HTML
output and its generated CSS.

Typography that a terminal cannot express directly is carried in each
style's ``meta`` mapping:

- ``font_size``: point size from the theme (headings scale up)
- ``font``: ``"monospace"`` for code spans and code blocks
- ``indent``: leading indent for block quotes and list content
- ``paragraph_spacing``: space after the paragraph, set on paragraph runs only

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

from rich.style import Style
from rich.text import Text

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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text as TextNode,
    ThematicBreak,
)
from markrender.ast.utils import get_node_children
from markrender.ast.visitors import NodeVisitor
from markrender.constants import (
    ITALIC_TOKEN_CATEGORIES,
    MONOSPACE_FONT,
    STYLED_LIST_BULLETS,
    STYLED_THEMATIC_BREAK_WIDTH,
)
from markrender.highlighting.base import SyntaxHighlighter, Token, normalize_tokens
from markrender.options.styled import StyledTextOptions
from markrender.renderers.base import BaseRenderer
from markrender.renderers.context import BlockType, RenderContext

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR = "\n\n"
_DOXYGEN_LABELS = {"returns": "Returns", "return": "Returns", "note": "Note"}


@dataclass(frozen=True)
class _RunState:
    """Attributes in effect for the text currently being appended."""

    color: str
    font_size: int
    bgcolor: Optional[str] = None
    bold: bool = False
    italic: bool = False
    strike: bool = False
    underline: bool = False
    link: Optional[str] = None
    font: Optional[str] = None
    indent: int = 0
    paragraph_spacing: Optional[int] = None

    def to_style(self) -> Style:
        meta: dict[str, object] = {"font_size": self.font_size, "indent": self.indent}
        if self.paragraph_spacing is not None:
            meta["paragraph_spacing"] = self.paragraph_spacing
        if self.font:
            meta["font"] = self.font
        return Style(
            color=self.color,
            bgcolor=self.bgcolor,
            bold=self.bold or None,
            italic=self.italic or None,
            strike=self.strike or None,
            underline=self.underline or None,
            link=self.link,
            meta=meta,
        )


def styled_runs(text: Text) -> list[tuple[str, Style]]:
    """Return the (run text, style) pairs of a rendered :class:`rich.text.Text`.

    Parameters
    ----------
    text : Text
        Output of :meth:`StyledTextRenderer.render`

    Returns
    -------
    list of (str, Style)
        Runs in document order; unstyled stretches are skipped

    """
    plain = text.plain
    runs: list[tuple[str, Style]] = []
    for span in sorted(text.spans, key=lambda s: s.start):
        style = span.style if isinstance(span.style, Style) else Style.parse(span.style)
        runs.append((plain[span.start : span.end], style))
    return runs


class StyledTextRenderer(NodeVisitor, BaseRenderer[Text]):
    """Render AST to a styled :class:`rich.text.Text`.

    Parameters
    ----------
    options : StyledTextOptions or None, default = None
        Theme and default appearance mode
    highlighter : SyntaxHighlighter or None, default = None
        Tokenizer used to color fenced code blocks

    Examples
    --------
        >>> from rich.console import Console
        >>> from markrender.ast import Document, Paragraph, Strong, Text
        >>> doc = Document(children=[Paragraph(content=[Strong(content=[Text(content="Hi")])])])
        >>> Console().print(StyledTextRenderer().render(doc))

    Rendering for a dark background:

        >>> from markrender.renderers.context import RenderContext
        >>> from markrender.themes import ColorMode
        >>> text = StyledTextRenderer().render(doc, RenderContext(mode=ColorMode.DARK))

    """

    def __init__(self, options: StyledTextOptions | None = None, highlighter: Optional[SyntaxHighlighter] = None):
        """Initialize the styled text renderer with options and an optional highlighter."""
        BaseRenderer._validate_options_type(options, StyledTextOptions, "StyledTextRenderer")
        options = options or StyledTextOptions()
        BaseRenderer.__init__(self, options)
        self.options: StyledTextOptions = options
        self.highlighter = highlighter
        self._text = Text()
        self._states: list[_RunState] = []

    def _default_context(self) -> RenderContext:
        return RenderContext(mode=self.options.mode)

    def render(self, document: Document, context: Optional[RenderContext] = None) -> Text:
        """Render a document AST to styled text.

        Parameters
        ----------
        document : Document
            The document node to render
        context : RenderContext or None, default = None
            Supplies the appearance mode; falls back to ``options.mode``

        Returns
        -------
        Text
            Styled text whose spans cover every character exactly once

        """
        worker = self._start_render(context)
        worker._text = Text()
        theme = self.options.theme
        worker._states = [
            _RunState(color=theme.colors(worker._context.mode).text, font_size=theme.body_font_size),
        ]
        document.accept(worker)
        return worker._text

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _state(self) -> _RunState:
        return self._states[-1]

    @property
    def _colors(self):
        return self.options.theme.colors(self._context.mode)

    @contextmanager
    def _styled(self, **changes: object) -> Iterator[None]:
        """Apply attribute changes to everything appended inside the block."""
        self._states.append(replace(self._state, **changes))
        try:
            yield
        finally:
            self._states.pop()

    def _append(self, text: str) -> None:
        self._text.append(text, style=self._state.to_style())

    def _capture(self, nodes: list[Node]) -> Text:
        """Render nodes into a separate Text and return it."""
        saved = self._text
        self._text = Text()
        try:
            for node in nodes:
                node.accept(self)
            return self._text
        finally:
            self._text = saved

    def _render_blocks(self, nodes: list[Node], separator: str = _BLOCK_SEPARATOR) -> None:
        """Render block nodes, separating those that produce output."""
        first = True
        for node in nodes:
            rendered = self._capture([node])
            if not rendered.plain:
                continue
            if not first:
                self._append(separator)
            self._text.append_text(rendered)
            first = False

    def _render_inline(self, content: list[Node]) -> None:
        for node in content:
            node.accept(self)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        with self._context.entering(BlockType.DOCUMENT):
            self._render_blocks(node.children)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node in bold at the theme's heading size."""
        with self._context.entering(BlockType.HEADING):
            with self._styled(bold=True, font_size=self.options.theme.heading_font_size(node.level)):
                self._render_inline(node.content)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        with self._styled(paragraph_spacing=self.options.theme.paragraph_spacing):
            self._render_inline(node.content)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node in monospace, recolored per highlighted token."""
        theme = self.options.theme
        with self._styled(
            font=MONOSPACE_FONT,
            font_size=theme.code_font_size,
            bgcolor=self._colors.code_background,
            bold=False,
            italic=False,
        ):
            tokens = self._highlight(node)
            position = 0
            for token in tokens:
                if position < token.start:
                    self._append(node.content[position : token.start])
                color = theme.syntax_color(token.category.value, self._context.mode) or self._state.color
                with self._styled(color=color, italic=token.category.value in ITALIC_TOKEN_CATEGORIES):
                    self._append(token.text(node.content))
                position = token.end
            if position < len(node.content):
                self._append(node.content[position:])

    def _highlight(self, node: CodeBlock) -> list[Token]:
        """Return normalized tokens for a code block, or [] when not highlighted."""
        if self.highlighter is None or not self.options.highlight_code or not node.language:
            return []
        try:
            return normalize_tokens(self.highlighter.tokenize(node.content, node.language), len(node.content))
        except Exception as e:
            logger.warning(f"Highlighting failed for language {node.language!r}, rendering plain code: {e}")
            return []

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node indented, in the block quote color."""
        with self._context.entering(BlockType.BLOCKQUOTE):
            with self._styled(
                color=self._colors.blockquote,
                indent=self._state.indent + self.options.theme.blockquote_indent,
            ):
                self._render_blocks(node.children)

    def visit_list(self, node: List) -> None:
        """Render a List node, one item per line."""
        block_type = BlockType.ORDERED_LIST if node.ordered else BlockType.UNORDERED_LIST
        with self._context.entering(block_type, start=node.start):
            with self._styled(indent=self._state.indent + self.options.theme.list_indent):
                self._render_blocks(list(node.items), separator="\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node: marker, tab, then its blocks on separate lines."""
        if self._context.parent_block_type is BlockType.ORDERED_LIST:
            marker = f"{self._context.next_list_number()}."
        else:
            depth = max(1, self._context.list_depth)
            marker = STYLED_LIST_BULLETS[min(depth, len(STYLED_LIST_BULLETS)) - 1]

        prefix = f"{marker}\t"
        if node.task_status is not None:
            prefix += "[x] " if node.task_status == "checked" else "[ ] "
        self._append(prefix)

        with self._context.entering(BlockType.LIST_ITEM):
            self._render_blocks(node.children, separator="\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node, one row per line with tab-separated cells."""
        with self._context.entering(BlockType.TABLE):
            rows: list[TableRow] = list(node.rows)
            if node.header is not None:
                with self._styled(bold=True):
                    self.visit_table_row(node.header)
                if rows:
                    self._append("\n")
            for index, row in enumerate(rows):
                if index:
                    self._append("\n")
                self.visit_table_row(row)

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        for index, cell in enumerate(node.cells):
            if index:
                self._append("\t")
            cell.accept(self)

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node."""
        self._render_inline(node.content)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node as a line of box-drawing characters."""
        self._append("─" * STYLED_THEMATIC_BREAK_WIDTH)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Skip raw HTML blocks."""
        pass

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition node as ``[N] text``."""
        number = self._context.footnote_number(node.identifier)
        with self._styled(color=self._colors.link):
            self._append(f"[{number}] ")
        with self._context.entering(BlockType.FOOTNOTE):
            self._render_blocks(node.content, separator=" ")

    def visit_block_directive(self, node: BlockDirective) -> None:
        """Render a BlockDirective node as its content blocks."""
        with self._context.entering(BlockType.DIRECTIVE):
            self._render_blocks(node.children)

    def visit_doxygen_command(self, node: DoxygenCommand) -> None:
        """Render a DoxygenCommand node with a bold label."""
        label = node.parameter if node.name == "param" and node.parameter else _DOXYGEN_LABELS.get(node.name)
        if label:
            with self._styled(bold=True):
                self._append(f"{label}: ")
        self._render_inline(node.content)

    def generic_visit(self, node: Node) -> None:
        """Render the children of an unrecognized node kind.

        Containers holding ``children`` are rendered as separated blocks,
        anything else as inline content.
        """
        if isinstance(getattr(node, "children", None), list):
            logger.debug(f"No styled handler for {type(node).__name__}, rendering children as blocks")
            self._render_blocks(get_node_children(node))
        else:
            super().generic_visit(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: TextNode) -> None:
        """Render a Text node."""
        self._append(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node in italics."""
        with self._styled(italic=True):
            self._render_inline(node.content)

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node in bold."""
        with self._styled(bold=True):
            self._render_inline(node.content)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node struck through."""
        with self._styled(strike=True):
            self._render_inline(node.content)

    def visit_code(self, node: Code) -> None:
        """Render a Code node in monospace on the inline code background."""
        with self._styled(
            font=MONOSPACE_FONT,
            font_size=self.options.theme.code_font_size,
            bgcolor=self._colors.inline_code_background,
        ):
            self._append(node.content)

    def visit_link(self, node: Link) -> None:
        """Render a Link node underlined in the link color, carrying its URL."""
        with self._styled(color=self._colors.link, underline=True, link=node.url or None):
            self._render_inline(node.content)

    def visit_image(self, node: Image) -> None:
        """Render an Image node as its bracketed alt text."""
        self._append(f"[{node.alt_text}]")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node: a space for soft breaks, a newline for hard ones."""
        self._append(" " if node.soft else "\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Skip inline HTML."""
        pass

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node as ``[N]`` in the link color."""
        with self._styled(color=self._colors.link):
            self._append(f"[{self._context.footnote_number(node.identifier)}]")


__all__ = ["StyledTextRenderer", "styled_runs"]
