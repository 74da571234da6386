#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy produced by the Markdown parser adapter
and consumed by the renderers. Each node represents a structural or inline
element in the document.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock, FootnoteDefinition
    - BlockDirective, DoxygenCommand (parser extensions)

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, LineBreak
    - HTMLInline, FootnoteReference

Dispatch
--------
Every node class names its visitor hook in the ``visit_name`` class attribute.
``Node.accept`` calls that hook when the visitor defines it and otherwise
hands the node to ``visitor.generic_visit``. New node kinds, including
subclasses defined outside this package, therefore never require edits to
existing visitors.

Nodes are frozen dataclasses. The parser builds each tree bottom-up and the
renderers only read it.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from markrender.constants import Alignment, TaskStatus


class Node(ABC):
    """Base class for all AST nodes.

    Subclasses set ``visit_name`` to the name of the visitor method that
    handles them. A subclass that does not set it inherits its parent's hook;
    the base value routes straight to ``generic_visit``.

    """

    visit_name: ClassVar[str] = "generic_visit"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object, usually a :class:`~markrender.ast.visitors.NodeVisitor`

        Returns
        -------
        Any
            Result of ``visitor.<visit_name>(self)`` or, when the visitor has
            no such method, of ``visitor.generic_visit(self)``

        """
        handler = getattr(visitor, self.visit_name, None)
        if handler is None:
            return visitor.generic_visit(self)
        return handler(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    visit_name: ClassVar[str] = "visit_document"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text

    Raises
    ------
    ValueError
        If level is outside 1-6

    """

    visit_name: ClassVar[str] = "visit_heading"

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph node containing inline content."""

    visit_name: ClassVar[str] = "visit_paragraph"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Code block node with optional language tag.

    Parameters
    ----------
    content : str
        Literal code text (not parsed as markdown)
    language : str or None, default = None
        Language tag, the first word of the fence info string
    info_string : str or None, default = None
        Full fence info string as written in the source

    """

    visit_name: ClassVar[str] = "visit_code_block"

    content: str
    language: Optional[str] = None
    info_string: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    visit_name: ClassVar[str] = "visit_block_quote"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)

    """

    visit_name: ClassVar[str] = "visit_list"

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        Checkbox state for task list items

    """

    visit_name: ClassVar[str] = "visit_list_item"

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Table(Node):
    """Table node with optional header and alignment.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table body rows (excluding header)
    header : TableRow or None, default = None
        Optional header row
    alignments : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)

    """

    visit_name: ClassVar[str] = "visit_table"

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Optional[Alignment]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TableRow(Node):
    """Table row node containing cells."""

    visit_name: ClassVar[str] = "visit_table_row"

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TableCell(Node):
    """Table cell node with inline content and optional alignment."""

    visit_name: ClassVar[str] = "visit_table_cell"

    content: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    visit_name: ClassVar[str] = "visit_thematic_break"

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HTMLBlock(Node):
    """Raw HTML block node.

    Warnings
    --------
    Raw HTML is preserved as written. The HTML renderer passes it through
    only while ``allow_raw_html`` is enabled and escapes it otherwise.

    """

    visit_name: ClassVar[str] = "visit_html_block"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FootnoteDefinition(Node):
    """Footnote definition node (block).

    Parameters
    ----------
    identifier : str
        Footnote label matching a FootnoteReference
    content : list of Node, default = empty list
        Block-level content of the footnote

    """

    visit_name: ClassVar[str] = "visit_footnote_definition"

    identifier: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BlockDirective(Node):
    """Block directive extension node, written ``@Name(arguments) { ... }``.

    Parameters
    ----------
    name : str
        Directive name as written (for example ``Comment`` or ``Metadata``)
    arguments : str, default = ''
        Raw text between the parentheses, empty when omitted
    children : list of Node, default = empty list
        Block content parsed from the braces

    """

    visit_name: ClassVar[str] = "visit_block_directive"

    name: str
    arguments: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DoxygenCommand(Node):
    """Minimal Doxygen command node such as ``\\param name text``.

    Parameters
    ----------
    name : str
        Command name without its leading ``\\`` or ``@`` (``param``, ``returns``, ...)
    parameter : str or None, default = None
        Parameter name for ``param`` commands
    content : list of Node, default = empty list
        Inline description following the command

    """

    visit_name: ClassVar[str] = "visit_doxygen_command"

    name: str
    parameter: Optional[str] = None
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content, stored unescaped

    """

    visit_name: ClassVar[str] = "visit_text"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Emphasis(Node):
    """Emphasis (italic) node."""

    visit_name: ClassVar[str] = "visit_emphasis"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Strong(Node):
    """Strong (bold) node."""

    visit_name: ClassVar[str] = "visit_strong"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Strikethrough(Node):
    """Strikethrough node (GFM extension)."""

    visit_name: ClassVar[str] = "visit_strikethrough"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Code(Node):
    """Inline code span node.

    Parameters
    ----------
    content : str
        Literal code text

    """

    visit_name: ClassVar[str] = "visit_code"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link destination
    content : list of Node, default = empty list
        Inline nodes for the link text
    title : str or None, default = None
        Optional link title

    """

    visit_name: ClassVar[str] = "visit_link"

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source URL or data URI
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title

    """

    visit_name: ClassVar[str] = "visit_image"

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks

    """

    visit_name: ClassVar[str] = "visit_line_break"

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HTMLInline(Node):
    """Inline raw HTML node."""

    visit_name: ClassVar[str] = "visit_html_inline"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FootnoteReference(Node):
    """Footnote reference node (inline), written ``[^identifier]``."""

    visit_name: ClassVar[str] = "visit_footnote_reference"

    identifier: str
    metadata: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    "FootnoteDefinition",
    "BlockDirective",
    "DoxygenCommand",
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "HTMLInline",
    "FootnoteReference",
]
