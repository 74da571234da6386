#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/parsers/markdown.py
r"""Markdown to AST converter.

This module converts Markdown text into the :mod:`markrender.ast` tree using
the mistune parser. mistune is run without a renderer so that it yields its
token stream, which is then translated node by node.

Two syntax extensions are implemented here as extra mistune block rules:

- Block directives: ``@Name(arguments) { ... }``, where the body may span
  lines, contain nested braces and is itself parsed as Markdown.
- Minimal Doxygen commands: lines starting with ``\param name text``,
  ``\returns text``, ``\return text``, ``\note text`` or ``\discussion text``
  (``@`` may replace the backslash).

"""

from __future__ import annotations

import logging
import re
from typing import Any, Literal, Optional, Union

import mistune
from mistune.util import unescape

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
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from markrender.exceptions import InvalidOptionsError, ParsingError
from markrender.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

_DIRECTIVE_PATTERN = (
    r"^ {0,3}@(?P<directive_name>[A-Za-z][\w-]*)"
    r"(?:\((?P<directive_args>[^)\n]*)\))?[ \t]*"
    r"(?:(?P<directive_open>\{)|$)"
)
_DOXYGEN_PATTERN = (
    r"^ {0,3}[\\@](?P<doxygen_name>param|returns|return|note|discussion)"
    r"(?![\w-])[ \t]*(?P<doxygen_text>[^\n]*)"
)
_ALIGNMENTS = frozenset({"left", "center", "right"})
_FENCE_OPEN = re.compile(r" {0,3}(`{3,}|~{3,})")


def _skip_fence(src: str, fence: re.Match) -> int:
    """Return the position after the fenced code block opened by ``fence``."""
    marker = fence.group(1)
    closing = re.compile(rf"^ {{0,3}}{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$", re.M)
    line_end = src.find("\n", fence.end())
    if line_end == -1:
        return len(src)
    match = closing.search(src, line_end + 1)
    return len(src) if match is None else match.end()


def _directive_body_end(src: str, start: int) -> Optional[int]:
    """Position just past the brace closing a directive body, or None if unterminated.

    Braces inside fenced code blocks are not counted.
    """
    depth = 1
    position = start
    while position < len(src):
        if src[position - 1] == "\n":
            fence = _FENCE_OPEN.match(src, position)
            if fence:
                position = _skip_fence(src, fence)
                continue
        char = src[position]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if not depth:
                return position + 1
        position += 1
    return None


def _parse_block_directive(block: Any, m: re.Match, state: Any) -> Optional[int]:
    """Mistune block rule for ``@Name(arguments) { ... }``.

    Returns None for an unterminated body so the line falls back to paragraph text.
    """
    attrs = {"name": m.group("directive_name"), "arguments": (m.group("directive_args") or "").strip()}
    if not m.group("directive_open"):
        state.append_token({"type": "block_directive", "attrs": attrs, "children": []})
        return m.end() + 1

    src = state.src
    position = _directive_body_end(src, m.end())
    if position is None:
        return None

    body = src[m.end() : position - 1].strip("\n")
    child = state.child_state(body + "\n")
    block.parse(child)
    state.append_token({"type": "block_directive", "attrs": attrs, "children": child.tokens})

    line_end = src.find("\n", position)
    return len(src) if line_end == -1 else line_end + 1


def _parse_doxygen_command(block: Any, m: re.Match, state: Any) -> int:
    """Mistune block rule for single-line Doxygen commands."""
    name = m.group("doxygen_name")
    text = m.group("doxygen_text").strip()
    parameter = None
    if name == "param" and text:
        parameter, _, text = text.partition(" ")
        text = text.strip()
    state.append_token({"type": "doxygen_command", "attrs": {"name": name, "parameter": parameter}, "text": text})
    return m.end() + 1


def block_directives(md: mistune.Markdown) -> None:
    """Mistune plugin adding the block directive rule."""
    md.block.register("block_directive", _DIRECTIVE_PATTERN, _parse_block_directive)


def minimal_doxygen(md: mistune.Markdown) -> None:
    """Mistune plugin adding the Doxygen command rule."""
    md.block.register("doxygen_command", _DOXYGEN_PATTERN, _parse_doxygen_command)


class MarkdownParser:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Syntax extensions to recognize

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")
        >>> len(doc.children)
        2

    With directives enabled:

        >>> parser = MarkdownParser(MarkdownParserOptions(parse_block_directives=True))
        >>> doc = parser.parse("@Note { Remember this }")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="MarkdownParser",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def _create_markdown(self) -> mistune.Markdown:
        """Build a token-producing mistune instance for the enabled extensions."""
        plugins: list[Any] = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        # Doxygen first so "@param" is never read as a bodiless directive
        if self.options.parse_minimal_doxygen:
            plugins.append(minimal_doxygen)
        if self.options.parse_block_directives:
            plugins.append(block_directives)

        return mistune.create_markdown(plugins=plugins, renderer=None)

    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text; bytes are decoded as UTF-8

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If byte input is not valid UTF-8

        """
        if isinstance(input_data, bytes):
            try:
                markdown_content = input_data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError(
                    "Markdown input is not valid UTF-8", parsing_stage="decoding", original_error=e
                ) from e
        else:
            markdown_content = input_data

        # Fresh mistune instance per call keeps parser state from leaking
        markdown = self._create_markdown()
        tokens, _state = markdown.parse(markdown_content)

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token into AST node(s)."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is what tight list items contain
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "footnotes":
            return [self._process_footnote_item(item) for item in token.get("children", [])]
        elif token_type == "block_directive":
            attrs = token.get("attrs", {})
            return BlockDirective(
                name=attrs.get("name", ""),
                arguments=attrs.get("arguments", ""),
                children=self._process_tokens(token.get("children", [])),
            )
        elif token_type == "doxygen_command":
            attrs = token.get("attrs", {})
            return DoxygenCommand(
                name=attrs.get("name", ""),
                parameter=attrs.get("parameter"),
                content=self._process_inline_tokens(token.get("children", [])),
            )

        if token_type not in ("blank_line", ""):
            logger.debug(f"Skipping unsupported mistune token type: {token_type}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a code block token.

        The single trailing newline contributed by the fence syntax is
        dropped; the language is the first word of the info string.
        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attrs = token.get("attrs", {}) or {}
        info_string = (attrs.get("info") or "").strip() or None
        language = info_string.split(maxsplit=1)[0] if info_string else None

        return CodeBlock(content=code_content, language=language, info_string=info_string)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        children = token.get("children", [])
        items = [self._process_list_item(child) for child in children if isinstance(child, dict)]

        return List(ordered=ordered, items=items, start=start if isinstance(start, int) else 1, tight=bool(tight))

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process a list item token, reading the checkbox of task list items."""
        content = self._process_tokens(token.get("children", []))

        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs", {}) or {}
        if "checked" in attrs:
            task_status = "checked" if attrs["checked"] else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process a table token into header, body rows and column alignments."""
        header = None
        rows = []
        alignments: list[Any] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_cells(section.get("children", []))
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            align = (cell_token.get("attrs", {}) or {}).get("align")
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    alignment=align if align in _ALIGNMENTS else None,
                )
            )
        return cells

    def _process_footnote_item(self, token: dict[str, Any]) -> FootnoteDefinition:
        """Process one definition from mistune's trailing footnotes section."""
        attrs = token.get("attrs", {}) or {}
        identifier = attrs.get("key") or attrs.get("label", "")
        return FootnoteDefinition(identifier=identifier, content=self._process_tokens(token.get("children", [])))

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token; mistune leaves entity references undecoded."""
        return Text(content=unescape(token.get("raw", "")))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {}) or {}
        title = attrs.get("title")
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=unescape(title) if title else title,
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text is carried by its inline children."""
        attrs = token.get("attrs", {}) or {}
        alt_text = "".join(
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") in ("text", "codespan")
        )
        title = attrs.get("title")
        return Image(
            url=attrs.get("url", ""), alt_text=unescape(alt_text), title=unescape(title) if title else title
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        """Handle footnote_ref token; mistune puts the normalized label in ``raw``."""
        attrs = token.get("attrs", {}) or {}
        return FootnoteReference(identifier=token.get("raw") or attrs.get("label", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Dispatch a single inline token to its handler."""
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug(f"Skipping unsupported inline token type: {token_type}")
        return None


def parse_markdown(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown text to an AST.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from markrender.parsers.markdown import parse_markdown
    >>> doc = parse_markdown("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)


__all__ = ["MarkdownParser", "block_directives", "minimal_doxygen", "parse_markdown"]
