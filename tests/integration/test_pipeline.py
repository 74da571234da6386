#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_pipeline.py
"""Integration tests for the parse and render pipeline.

Tests cover:
- The public ``to_*`` functions on a realistic document
- Parser extensions flowing through every renderer
- Custom renderers through ``render``
- Agreement between HTML theme CSS and styled text colors
- Robustness on arbitrary input

"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import markrender
from markrender import (
    ColorMode,
    Document,
    HtmlRendererOptions,
    MarkdownParserOptions,
    NodeVisitor,
    ParsingError,
    PlainTextOptions,
    PygmentsHighlighter,
    RenderContext,
    StyledTextOptions,
    parse,
    render,
    to_html,
    to_plain_text,
    to_styled_text,
)
from markrender.renderers import BaseRenderer, styled_runs
from markrender.themes import MarkdownTheme

EXTENDED_SOURCE = """@Warning(level: high) {
Mind the **gap**.
}

\\param width Width in pixels
\\returns The area
"""


class WordCounter(NodeVisitor, BaseRenderer[int]):
    """Renderer producing the number of words in a document."""

    def render(self, document):
        worker = self._start_render(None)
        worker.count = 0
        worker.visit(document)
        return worker.count

    def visit_text(self, node):
        self.count += len(node.content.split())


@pytest.mark.integration
class TestPublicApi:
    """Tests for the top-level functions."""

    def test_version(self) -> None:
        """Test the package version."""
        assert markrender.__version__ == "1.0.0"

    def test_to_html_inline(self) -> None:
        """Test strong and emphasis end to end."""
        assert to_html("**bold** and *em*") == "<p><strong>bold</strong> and <em>em</em></p>\n"

    def test_to_html_unknown_language(self) -> None:
        """Test that unknown fence languages keep their class and plain text."""
        html = to_html("```unknownlang\nx=1\n```\n", highlighter=PygmentsHighlighter())
        assert html == '<pre><code class="language-unknownlang">x=1</code></pre>\n'

    def test_to_html_escapes_once(self) -> None:
        """Test escaping of text that looks like markup entities."""
        assert to_html("a &lt; b") == "<p>a &lt; b</p>\n"
        assert to_html("`<tag>`") == "<p><code>&lt;tag&gt;</code></p>\n"

    def test_to_html_nested_tight_list(self) -> None:
        """Test line breaks around a list nested in a tight item."""
        assert to_html("- one\n- two\n  - sub\n") == (
            "<ul>\n<li>one</li>\n<li>two\n<ul>\n<li>sub</li>\n</ul>\n</li>\n</ul>\n"
        )

    def test_to_plain_text(self) -> None:
        """Test plain text conversion."""
        assert to_plain_text("**bold** and *em*") == "bold and em"

    def test_bytes_input(self) -> None:
        """Test byte input through the API."""
        assert to_plain_text("# Überschrift".encode("utf-8")) == "Überschrift"

    def test_invalid_bytes(self) -> None:
        """Test that undecodable input raises ParsingError."""
        with pytest.raises(ParsingError):
            to_html(b"\xff")

    def test_document_input(self) -> None:
        """Test that parsed documents are rendered as-is."""
        doc = parse("Hello *world*")
        assert isinstance(doc, Document)
        assert to_plain_text(doc, parser_options=MarkdownParserOptions.none()) == "Hello world"

    def test_render_with_custom_renderer(self) -> None:
        """Test render() with a user-defined renderer."""
        assert render(parse("# One two\n\nthree *four* five"), WordCounter()) == 5

    def test_render_rejects_non_renderer(self) -> None:
        """Test that render() checks its renderer argument."""
        with pytest.raises(TypeError):
            render(parse("x"), object())  # type: ignore[arg-type]


@pytest.mark.integration
class TestSampleDocument:
    """Tests rendering one realistic document with every renderer."""

    def test_plain_text(self, sample_markdown: str) -> None:
        """Test the exact plain text rendition."""
        assert to_plain_text(sample_markdown) == (
            "Sample Document\n\n"
            "This is a sample document with italic text and some inline code.\n\n"
            "Section 2\n\n"
            "Here is a list:\n\n"
            "• Item 1\n• Item 2\n• Item 3\n\n"
            "And a numbered list:\n\n"
            "1. First item\n2. Second item\n\n"
            "A quoted line.\n\n"
            'def hello_world():\n    print("Hello, World!")\n\n'
            "Header 1 | Header 2\nRow 1 | Data 1\n\n"
            "---\n\n"
            "A link and a footnote[1].\n\n"
            "[1] The footnote text."
        )

    def test_html(self, sample_markdown: str) -> None:
        """Test representative HTML fragments."""
        html = to_html(sample_markdown, highlighter=PygmentsHighlighter())
        assert html.startswith("<h1>Sample Document</h1>\n<p>This is a <strong>sample document</strong>")
        assert "<ul>\n<li>Item 1</li>\n<li>Item 2</li>\n<li>Item 3</li>\n</ul>\n" in html
        assert "<ol>\n<li>First item</li>\n<li>Second item</li>\n</ol>\n" in html
        assert "<blockquote>\n<p>A quoted line.</p>\n</blockquote>\n" in html
        assert '<pre><code class="language-python"><span class="token-keyword">def</span>' in html
        assert '<th style="text-align: center">Header 2</th>' in html
        assert '<a href="https://example.com" title="Example">link</a>' in html
        assert '<sup class="footnote-ref"><a href="#fn-1" id="fnref-1">1</a></sup>' in html
        assert html.endswith('<a href="#fnref-1" class="footnote-backref">&#8617;</a>\n</div>\n')

    def test_standalone_html(self, sample_markdown: str) -> None:
        """Test the standalone document with embedded CSS."""
        html = to_html(sample_markdown, renderer_options=HtmlRendererOptions(standalone=True, title="Sample"))
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Sample</title>" in html
        assert "@media (prefers-color-scheme: dark)" in html
        assert html.endswith("</body>\n</html>\n")

    def test_styled_text_matches_plain_structure(self, sample_markdown: str) -> None:
        """Test that styled text carries the same words as plain text."""
        styled = to_styled_text(sample_markdown, highlighter=PygmentsHighlighter())
        plain = to_plain_text(sample_markdown)
        for phrase in ("Sample Document", "Item 3", "Second item", "A quoted line.", "Row 1", "The footnote text."):
            assert phrase in styled.plain
            assert phrase in plain

    def test_styled_code_colors_match_css(self, sample_markdown: str) -> None:
        """Test that styled token colors are the ones the HTML stylesheet declares."""
        theme = MarkdownTheme()
        css = theme.syntax.generate_css()
        styled = to_styled_text(
            sample_markdown,
            renderer_options=StyledTextOptions(theme=theme),
            highlighter=PygmentsHighlighter(),
            context=RenderContext(mode=ColorMode.DARK),
        )
        keyword_color = theme.syntax_color("keyword", ColorMode.DARK)
        runs = dict(styled_runs(styled))
        assert runs["def"].color.triplet.hex == keyword_color
        assert f"        --syntax-keyword: {keyword_color};" in css


@pytest.mark.integration
class TestExtensions:
    """Tests for directives and Doxygen commands across renderers."""

    def test_html(self) -> None:
        """Test extension markup in HTML."""
        html = to_html(EXTENDED_SOURCE, parser_options=MarkdownParserOptions.all())
        assert html == (
            '<div class="directive directive-warning" data-arguments="level: high">\n'
            "<p>Mind the <strong>gap</strong>.</p>\n"
            "</div>\n"
            '<div class="doxygen doxygen-param"><span class="doxygen-parameter">width</span> Width in pixels</div>\n'
            '<div class="doxygen doxygen-returns">The area</div>\n'
        )

    def test_plain_text(self) -> None:
        """Test extension output in plain text."""
        text = to_plain_text(
            EXTENDED_SOURCE,
            parser_options=MarkdownParserOptions.all(),
            renderer_options=PlainTextOptions(paragraph_separator="\n"),
        )
        assert text == "Mind the gap.\nwidth: Width in pixels\nReturns: The area"

    def test_styled_text(self) -> None:
        """Test extension output in styled text."""
        styled = to_styled_text(EXTENDED_SOURCE, parser_options=MarkdownParserOptions.all())
        assert styled.plain == "Mind the gap.\n\nwidth: Width in pixels\n\nReturns: The area"

    def test_extensions_off(self) -> None:
        """Test that the same source is plain Markdown without extensions."""
        html = to_html(EXTENDED_SOURCE)
        assert "directive" not in html
        assert "doxygen" not in html
        assert "@Warning(level: high) {" in html


@pytest.mark.integration
class TestRobustness:
    """Property tests over arbitrary Markdown."""

    @settings(max_examples=50, deadline=None)
    @given(
        st.text(
            alphabet=st.sampled_from(list("ab #*_`~-+>|[]()!^:@{}\\\n\t1.<>&\"'")),
            max_size=300,
        )
    )
    def test_all_renderers_total(self, source: str) -> None:
        """Property: every renderer accepts whatever the parser produces."""
        doc = parse(source, MarkdownParserOptions.all())
        html = to_html(doc, highlighter=PygmentsHighlighter())
        assert isinstance(html, str)
        assert isinstance(to_plain_text(doc), str)

        styled = to_styled_text(doc, highlighter=PygmentsHighlighter())
        covered = sum(span.end - span.start for span in styled.spans)
        assert covered == len(styled.plain)
