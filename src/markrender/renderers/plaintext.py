#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/renderers/plaintext.py
"""Plain text rendering from AST.

This module provides the PlainTextRenderer class which converts AST nodes
to plain, unformatted text. The renderer strips all formatting (bold, italic,
headings, etc.) and outputs only the text content. This is useful for:
- Search indexing
- Previews and summaries
- Accessibility output

Blocks are rendered one at a time and joined with the configured paragraph
separator; list items keep a bullet or number and are indented per nesting
level.

"""

from __future__ import annotations

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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from markrender.ast.utils import get_node_children
from markrender.ast.visitors import NodeVisitor
from markrender.constants import PLAINTEXT_LIST_INDENT, PLAINTEXT_THEMATIC_BREAK
from markrender.options.plaintext import PlainTextOptions
from markrender.renderers.base import BaseRenderer, InlineContentMixin
from markrender.renderers.context import BlockType, RenderContext

_DOXYGEN_LABELS = {"returns": "Returns", "return": "Returns", "note": "Note"}


class PlainTextRenderer(NodeVisitor, InlineContentMixin, BaseRenderer[str]):
    """Render AST to plain text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text formatting options

    Examples
    --------
        >>> from markrender.ast import Document, Paragraph, Strong, Text
        >>> doc = Document(children=[
        ...     Paragraph(content=[Strong(content=[Text(content="bold")]), Text(content=" text")])
        ... ])
        >>> PlainTextRenderer().render(doc)
        'bold text'

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "PlainTextRenderer")
        options = options or PlainTextOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainTextOptions = options
        self._output: list[str] = []

    def render(self, document: Document, context: Optional[RenderContext] = None) -> str:
        """Render a document AST to a plain text string.

        Parameters
        ----------
        document : Document
            The document node to render
        context : RenderContext or None, default = None
            Optional caller context; it is copied, never mutated

        Returns
        -------
        str
            Plain text output without trailing whitespace

        """
        worker = self._start_render(context)
        worker._output = []
        document.accept(worker)
        return "".join(worker._output).rstrip()

    def _render_blocks(self, nodes: list[Node], separator: Optional[str] = None) -> str:
        """Render block nodes one by one and join the non-empty results."""
        parts = [self._render_inline_content([node]) for node in nodes]
        sep = self.options.paragraph_separator if separator is None else separator
        return sep.join(part for part in parts if part)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        with self._context.entering(BlockType.DOCUMENT):
            self._output.append(self._render_blocks(node.children))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node (extract text only)."""
        self._output.append(self._render_inline_content(node.content))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node verbatim, minus trailing newlines."""
        self._output.append(node.content.rstrip("\n"))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node (extract text only)."""
        with self._context.entering(BlockType.BLOCKQUOTE):
            self._output.append(self._render_blocks(node.children))

    def visit_list(self, node: List) -> None:
        """Render a List node, one item per line."""
        block_type = BlockType.ORDERED_LIST if node.ordered else BlockType.UNORDERED_LIST
        with self._context.entering(block_type, start=node.start):
            self._output.append(self._render_blocks(list(node.items), separator="\n"))

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node with its marker and optional checkbox.

        Continuation blocks are indented under the marker; nested lists
        indent themselves.
        """
        indent = PLAINTEXT_LIST_INDENT * max(0, self._context.list_depth - 1)
        if self._context.parent_block_type is BlockType.ORDERED_LIST:
            marker = f"{self._context.next_list_number()}."
        else:
            marker = self.options.bullet

        prefix = f"{indent}{marker} "
        if node.task_status is not None:
            prefix += "[x] " if node.task_status == "checked" else "[ ] "

        with self._context.entering(BlockType.LIST_ITEM):
            parts = [(child, self._render_inline_content([child])) for child in node.children]

        lines: list[str] = []
        for child, text in parts:
            if not text:
                continue
            if not lines:
                lines.append(prefix + text)
            elif isinstance(child, List):
                lines.append(text)
            else:
                continuation = indent + PLAINTEXT_LIST_INDENT
                lines.append("\n".join(continuation + line if line else line for line in text.split("\n")))

        self._output.append("\n".join(lines) if lines else prefix.rstrip())

    def visit_table(self, node: Table) -> None:
        """Render a Table node, one row per line."""
        rows: list[TableRow] = []
        if node.header is not None and self.options.include_table_headers:
            rows.append(node.header)
        rows.extend(node.rows)

        with self._context.entering(BlockType.TABLE):
            self._output.append("\n".join(self._render_table_row_to_string(row) for row in rows))

    def _render_table_row_to_string(self, row: TableRow) -> str:
        cells_text = [self._render_inline_content(cell.content).replace("\n", " ") for cell in row.cells]
        return self.options.table_cell_separator.join(cells_text)

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node outside of a table."""
        self._output.append(self._render_table_row_to_string(node))

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node outside of a table."""
        self._output.append(self._render_inline_content(node.content))

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node as a short rule."""
        self._output.append(PLAINTEXT_THEMATIC_BREAK)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Skip raw HTML blocks."""
        pass

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition node as ``[N] text``."""
        number = self._context.footnote_number(node.identifier)
        with self._context.entering(BlockType.FOOTNOTE):
            body = self._render_blocks(node.content, separator=" ")
        self._output.append(f"[{number}] {body}".rstrip())

    def visit_block_directive(self, node: BlockDirective) -> None:
        """Render a BlockDirective node as its content blocks."""
        with self._context.entering(BlockType.DIRECTIVE):
            self._output.append(self._render_blocks(node.children))

    def visit_doxygen_command(self, node: DoxygenCommand) -> None:
        """Render a DoxygenCommand node as a labelled line."""
        text = self._render_inline_content(node.content)
        label = node.parameter if node.name == "param" and node.parameter else _DOXYGEN_LABELS.get(node.name)
        self._output.append(f"{label}: {text}" if label else text)

    def generic_visit(self, node: Node) -> None:
        """Render the children of an unrecognized node kind.

        Containers holding ``children`` are treated as blocks and separated
        like document blocks; anything else is concatenated as inline content.
        """
        children = get_node_children(node)
        if isinstance(getattr(node, "children", None), list):
            self._output.append(self._render_blocks(children))
        else:
            super().generic_visit(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node (extract text only, ignore formatting)."""
        self._output.append(self._render_inline_content(node.content))

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node (extract text only, ignore formatting)."""
        self._output.append(self._render_inline_content(node.content))

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node (extract text only, ignore formatting)."""
        self._output.append(self._render_inline_content(node.content))

    def visit_code(self, node: Code) -> None:
        """Render a Code node (extract text only)."""
        self._output.append(node.content)

    def visit_link(self, node: Link) -> None:
        """Render a Link node (extract text only, ignore URL)."""
        self._output.append(self._render_inline_content(node.content))

    def visit_image(self, node: Image) -> None:
        """Render an Image node (use alt text only)."""
        if node.alt_text:
            self._output.append(node.alt_text)

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node: a space for soft breaks, a newline for hard ones."""
        self._output.append(" " if node.soft else "\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Skip inline HTML."""
        pass

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node as ``[N]``."""
        self._output.append(f"[{self._context.footnote_number(node.identifier)}]")
