#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_plaintext_renderer.py
"""Unit tests for PlainTextRenderer.

Tests cover:
- Basic text extraction
- List markers, nesting and task items
- Table formatting
- Footnotes, directives and Doxygen commands
- Option handling

"""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest
from hypothesis import given
from hypothesis import strategies as st

from markrender.ast import (
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
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from markrender.options import PlainTextOptions
from markrender.renderers import PlainTextRenderer


def _para(text: str) -> Paragraph:
    return Paragraph(content=[Text(content=text)])


def _item(text: str, **kwargs) -> ListItem:
    return ListItem(children=[_para(text)], **kwargs)


def _render(*blocks: Node, **options) -> str:
    return PlainTextRenderer(PlainTextOptions(**options)).render(Document(children=list(blocks)))


@dataclass(frozen=True)
class Panel(Node):
    """Container kind the plain text renderer has no hook for."""

    visit_name: ClassVar[str] = "visit_panel"

    children: list[Node] = field(default_factory=list)


@pytest.mark.unit
class TestBasicRendering:
    """Tests for text extraction."""

    def test_formatting_stripped(self) -> None:
        """Test that inline formatting is dropped."""
        para = Paragraph(
            content=[
                Strong(content=[Text(content="bold")]),
                Text(content=" and "),
                Emphasis(content=[Text(content="italic")]),
                Text(content=" "),
                Code(content="code"),
            ]
        )
        assert _render(para) == "bold and italic code"

    def test_blocks_separated(self) -> None:
        """Test the default paragraph separator."""
        assert _render(Heading(level=1, content=[Text(content="Title")]), _para("Body")) == "Title\n\nBody"

    def test_custom_separator(self) -> None:
        """Test a custom paragraph separator."""
        assert _render(_para("a"), _para("b"), paragraph_separator="\n") == "a\nb"

    def test_empty_document(self) -> None:
        """Test that an empty document renders nothing."""
        assert _render() == ""

    def test_links_and_images(self) -> None:
        """Test that links keep their text and images their alt text."""
        para = Paragraph(
            content=[
                Link(url="https://x.test", content=[Text(content="site")]),
                Text(content=" "),
                Image(url="a.png", alt_text="picture"),
            ]
        )
        assert _render(para) == "site picture"

    def test_line_breaks(self) -> None:
        """Test soft and hard breaks."""
        para = Paragraph(
            content=[
                Text(content="a"),
                LineBreak(soft=True),
                Text(content="b"),
                LineBreak(),
                Text(content="c"),
            ]
        )
        assert _render(para) == "a b\nc"

    def test_html_dropped(self) -> None:
        """Test that raw HTML contributes nothing."""
        para = Paragraph(content=[Text(content="x"), HTMLInline(content="<br>")])
        assert _render(_para("a"), HTMLBlock(content="<div>b</div>"), para) == "a\n\nx"

    def test_code_block_verbatim(self) -> None:
        """Test that code blocks keep their text without trailing newlines."""
        assert _render(CodeBlock(content="x = 1\ny = 2\n", language="python")) == "x = 1\ny = 2"

    def test_blockquote_and_break(self) -> None:
        """Test that quotes keep their text and breaks become a rule."""
        quote = BlockQuote(children=[_para("q1"), _para("q2")])
        assert _render(quote, ThematicBreak(), _para("after")) == "q1\n\nq2\n\n---\n\nafter"

    @given(st.text(max_size=100))
    def test_paragraph_text_preserved(self, content: str) -> None:
        """Property: a single paragraph renders to its text, right-stripped."""
        assert PlainTextRenderer().render(Document(children=[_para(content)])) == content.rstrip()


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_unordered(self) -> None:
        """Test bullet markers."""
        assert _render(List(ordered=False, items=[_item("a"), _item("b")])) == "• a\n• b"

    def test_custom_bullet(self) -> None:
        """Test a configured bullet."""
        assert _render(List(ordered=False, items=[_item("a")]), bullet="-") == "- a"

    def test_ordered_with_start(self) -> None:
        """Test numbering from the list start."""
        assert _render(List(ordered=True, start=3, items=[_item("a"), _item("b")])) == "3. a\n4. b"

    def test_nested(self) -> None:
        """Test that nested lists are indented."""
        inner = List(ordered=True, items=[_item("x"), _item("y")])
        outer = List(ordered=False, items=[ListItem(children=[_para("top"), inner]), _item("next")])
        assert _render(outer) == "• top\n  1. x\n  2. y\n• next"

    def test_continuation_paragraph(self) -> None:
        """Test that later blocks of an item are indented under it."""
        lst = List(ordered=False, tight=False, items=[ListItem(children=[_para("first"), _para("second")])])
        assert _render(lst) == "• first\n  second"

    def test_task_items(self) -> None:
        """Test checkbox markers."""
        lst = List(
            ordered=False,
            items=[_item("done", task_status="checked"), _item("todo", task_status="unchecked")],
        )
        assert _render(lst) == "• [x] done\n• [ ] todo"

    def test_empty_item(self) -> None:
        """Test that an empty item keeps its marker."""
        assert _render(List(ordered=False, items=[ListItem(), _item("b")])) == "•\n• b"


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    @pytest.fixture
    def table(self) -> Table:
        """Two-column table with a header."""
        return Table(
            header=TableRow(
                cells=[TableCell(content=[Text(content="Name")]), TableCell(content=[Text(content="Age")])],
                is_header=True,
            ),
            rows=[
                TableRow(cells=[TableCell(content=[Text(content="Alice")]), TableCell(content=[Text(content="30")])]),
                TableRow(cells=[TableCell(content=[Text(content="Bob")]), TableCell(content=[Text(content="25")])]),
            ],
        )

    def test_with_headers(self, table: Table) -> None:
        """Test the default table layout."""
        assert _render(table) == "Name | Age\nAlice | 30\nBob | 25"

    def test_without_headers(self, table: Table) -> None:
        """Test omitting the header row."""
        assert _render(table, include_table_headers=False) == "Alice | 30\nBob | 25"

    def test_custom_cell_separator(self, table: Table) -> None:
        """Test a custom cell separator."""
        assert _render(table, table_cell_separator="\t").split("\n")[0] == "Name\tAge"

    def test_cell_breaks_flattened(self) -> None:
        """Test that hard breaks inside cells stay on one line."""
        cell = TableCell(content=[Text(content="a"), LineBreak(), Text(content="b")])
        assert _render(Table(rows=[TableRow(cells=[cell])])) == "a b"


@pytest.mark.unit
class TestExtensions:
    """Tests for footnotes, directives, Doxygen commands and unknown nodes."""

    def test_footnotes(self) -> None:
        """Test footnote markers and definitions."""
        para = Paragraph(content=[Text(content="See"), FootnoteReference(identifier="n")])
        note = FootnoteDefinition(identifier="n", content=[_para("The note.")])
        assert _render(para, note) == "See[1]\n\n[1] The note."

    def test_footnote_numbers_first_seen(self) -> None:
        """Test that numbers follow first appearance."""
        para = Paragraph(content=[FootnoteReference(identifier="b"), FootnoteReference(identifier="a")])
        note = FootnoteDefinition(identifier="a", content=[_para("A")])
        assert _render(para, note) == "[1][2]\n\n[2] A"

    def test_directive(self) -> None:
        """Test that directives render their content."""
        directive = BlockDirective(name="Note", arguments="x", children=[_para("one"), _para("two")])
        assert _render(directive) == "one\n\ntwo"

    def test_doxygen_commands(self) -> None:
        """Test labelled Doxygen lines."""
        commands = [
            DoxygenCommand(name="param", parameter="count", content=[Text(content="How many")]),
            DoxygenCommand(name="returns", content=[Text(content="The total")]),
            DoxygenCommand(name="note", content=[Text(content="Careful")]),
            DoxygenCommand(name="discussion", content=[Text(content="Details")]),
        ]
        assert _render(*commands) == "count: How many\n\nReturns: The total\n\nNote: Careful\n\nDetails"

    def test_unknown_container(self) -> None:
        """Test that unknown containers render their children as blocks."""
        assert _render(Panel(children=[_para("a"), _para("b")])) == "a\n\nb"

    def test_reuse_resets_state(self) -> None:
        """Test that footnote numbering restarts on every render."""
        renderer = PlainTextRenderer()
        doc = Document(children=[Paragraph(content=[FootnoteReference(identifier="x")])])
        assert renderer.render(doc) == "[1]"
        assert renderer.render(doc) == "[1]"
