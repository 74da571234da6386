#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_ast_nodes.py
"""Unit tests for AST nodes, visitor dispatch and AST utilities.

Tests cover:
- Node construction and validation
- Immutability of nodes
- Dispatch to visit_<kind> hooks
- generic_visit fallback for node kinds a visitor does not know
- Child enumeration and text extraction

"""

import dataclasses
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from markrender.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Node,
    NodeVisitor,
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    extract_text,
    get_node_children,
)


@dataclass(frozen=True)
class Callout(Node):
    """Block node kind unknown to the built-in visitors."""

    visit_name: ClassVar[str] = "visit_callout"

    children: list[Node] = field(default_factory=list)


@dataclass(frozen=True)
class Badge(Node):
    """Leaf node kind unknown to the built-in visitors."""

    label: str = ""


class TextCollector(NodeVisitor):
    """Visitor that only knows about Text nodes."""

    def __init__(self):
        self.texts = []

    def visit_text(self, node):
        self.texts.append(node.content)


@pytest.mark.unit
class TestNodeConstruction:
    """Tests for node construction and validation."""

    def test_heading_levels(self) -> None:
        """Test that levels 1-6 are accepted."""
        for level in range(1, 7):
            assert Heading(level=level).level == level

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_invalid_level(self, level: int) -> None:
        """Test that out-of-range heading levels are rejected."""
        with pytest.raises(ValueError, match="Heading level"):
            Heading(level=level)

    def test_nodes_are_immutable(self) -> None:
        """Test that node fields cannot be reassigned."""
        text = Text(content="hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.content = "changed"  # type: ignore[misc]

    def test_defaults(self) -> None:
        """Test default field values."""
        code_block = CodeBlock(content="x")
        assert code_block.language is None
        assert code_block.info_string is None

        lst = List(ordered=True)
        assert lst.items == []
        assert lst.start == 1
        assert lst.tight is True

        assert ListItem().task_status is None
        assert Image(url="a.png").alt_text == ""


@pytest.mark.unit
class TestDispatch:
    """Tests for visitor dispatch."""

    def test_dispatches_to_visit_hook(self) -> None:
        """Test that accept calls the visit_<kind> hook."""
        collector = TextCollector()
        Text(content="hi").accept(collector)
        assert collector.texts == ["hi"]

    def test_visit_returns_hook_result(self) -> None:
        """Test that visit returns whatever the hook returns."""

        class Counter(NodeVisitor):
            def visit_heading(self, node):
                return node.level

        assert Counter().visit(Heading(level=3)) == 3

    def test_known_container_without_hook_visits_children(self) -> None:
        """Test that unhandled built-in containers fall back to their children."""
        doc = Document(
            children=[
                Paragraph(content=[Text(content="a"), Strong(content=[Text(content="b")])]),
                BlockQuote(children=[Paragraph(content=[Text(content="c")])]),
            ]
        )
        collector = TextCollector()
        collector.visit(doc)
        assert collector.texts == ["a", "b", "c"]

    def test_unknown_node_kind_visits_children(self) -> None:
        """Test that a new node kind falls back to generic_visit."""
        collector = TextCollector()
        collector.visit(Callout(children=[Paragraph(content=[Text(content="inside")])]))
        assert collector.texts == ["inside"]

    def test_unknown_leaf_is_skipped(self) -> None:
        """Test that an unknown leaf node produces nothing and does not raise."""
        collector = TextCollector()
        collector.visit(Badge(label="new"))
        assert collector.texts == []

    def test_custom_hook_for_new_node_kind(self) -> None:
        """Test that a visitor can add a hook for a new node kind."""

        class CalloutCounter(NodeVisitor):
            def __init__(self):
                self.count = 0

            def visit_callout(self, node):
                self.count += 1

        counter = CalloutCounter()
        counter.visit(Document(children=[Callout(), Callout()]))
        assert counter.count == 2


@pytest.mark.unit
class TestGetNodeChildren:
    """Tests for get_node_children."""

    def test_document_children(self) -> None:
        """Test block children of a document."""
        para = Paragraph(content=[Text(content="x")])
        assert get_node_children(Document(children=[para])) == [para]

    def test_inline_content(self) -> None:
        """Test inline children of a link."""
        text = Text(content="x")
        assert get_node_children(Link(url="u", content=[text])) == [text]

    def test_table_header_first(self) -> None:
        """Test that a table's header row precedes its body rows."""
        header = TableRow(cells=[TableCell(content=[Text(content="h")])], is_header=True)
        row = TableRow(cells=[TableCell(content=[Text(content="d")])])
        assert get_node_children(Table(header=header, rows=[row])) == [header, row]

    def test_list_items(self) -> None:
        """Test that list items are enumerated."""
        item = ListItem(children=[Paragraph(content=[Text(content="x")])])
        assert get_node_children(List(ordered=False, items=[item])) == [item]

    def test_leaf_has_no_children(self) -> None:
        """Test that leaf nodes have no children."""
        assert get_node_children(Text(content="x")) == []
        assert get_node_children(Code(content="x")) == []


@pytest.mark.unit
class TestExtractText:
    """Tests for extract_text."""

    def test_nested_inline(self) -> None:
        """Test text extraction through nested formatting."""
        nodes = [Text(content="Hello "), Emphasis(content=[Strong(content=[Text(content="world")])])]
        assert extract_text(nodes) == "Hello world"

    def test_code_and_image(self) -> None:
        """Test that code spans and image alt text contribute."""
        nodes = [Code(content="x"), Text(content=" and "), Image(url="a.png", alt_text="pic")]
        assert extract_text(nodes) == "x and pic"

    def test_joiner(self) -> None:
        """Test joining sibling block text."""
        doc = Document(
            children=[Paragraph(content=[Text(content="one")]), Paragraph(content=[Text(content="two")])]
        )
        assert extract_text(doc.children, joiner="\n") == "one\ntwo"
