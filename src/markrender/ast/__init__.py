#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/ast/__init__.py
"""Abstract Syntax Tree for parsed Markdown documents.

The parser adapter produces a tree of the node classes defined here and the
renderers consume it through the visitor pattern.

Examples
--------
Build a document by hand and render it:

    >>> from markrender.ast import Document, Paragraph, Strong, Text
    >>> from markrender.renderers import HtmlRenderer
    >>> doc = Document(children=[
    ...     Paragraph(content=[Strong(content=[Text(content="bold")])])
    ... ])
    >>> HtmlRenderer().render(doc)
    '<p><strong>bold</strong></p>\\n'

"""

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
from markrender.ast.utils import extract_text, get_node_children
from markrender.ast.visitors import NodeVisitor

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
    "NodeVisitor",
    "extract_text",
    "get_node_children",
]
