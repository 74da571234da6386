#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_options.py
"""Unit tests for options dataclasses.

Tests cover:
- Defaults and field metadata
- Validation in __post_init__
- create_updated cloning
- Renderer rejection of foreign options classes

"""

import dataclasses

import pytest

from markrender.exceptions import InvalidOptionsError
from markrender.options import (
    HtmlRendererOptions,
    MarkdownParserOptions,
    PlainTextOptions,
    StyledTextOptions,
)
from markrender.parsers import MarkdownParser
from markrender.renderers import HtmlRenderer, PlainTextRenderer, StyledTextRenderer
from markrender.themes import ColorMode, MarkdownTheme, SyntaxTheme


@pytest.mark.unit
class TestHtmlRendererOptions:
    """Tests for HtmlRendererOptions."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = HtmlRendererOptions()
        assert options.standalone is False
        assert options.language_class_prefix == "language-"
        assert options.allow_raw_html is True
        assert options.validate_images is False
        assert options.highlight_code is True
        assert options.syntax_theme == SyntaxTheme.default()
        assert options.title == "Document"

    @pytest.mark.parametrize("prefix", ["lang ", 'x"', "a<b", "a&b", "it's"])
    def test_unsafe_prefix_rejected(self, prefix: str) -> None:
        """Test that prefixes able to break the class attribute are rejected."""
        with pytest.raises(ValueError, match="language_class_prefix"):
            HtmlRendererOptions(language_class_prefix=prefix)

    def test_empty_prefix_allowed(self) -> None:
        """Test that an empty prefix is accepted."""
        assert HtmlRendererOptions(language_class_prefix="").language_class_prefix == ""

    def test_theme_type_checked(self) -> None:
        """Test that syntax_theme must be a SyntaxTheme."""
        with pytest.raises(ValueError, match="syntax_theme"):
            HtmlRendererOptions(syntax_theme="dark")  # type: ignore[arg-type]

    def test_create_updated(self) -> None:
        """Test cloning with changes."""
        options = HtmlRendererOptions()
        updated = options.create_updated(standalone=True, title="Notes")
        assert updated.standalone is True
        assert updated.title == "Notes"
        assert options.standalone is False

    def test_create_updated_validates(self) -> None:
        """Test that clones are validated too."""
        with pytest.raises(ValueError):
            HtmlRendererOptions().create_updated(language_class_prefix="a b")

    def test_frozen(self) -> None:
        """Test that options cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            HtmlRendererOptions().standalone = True  # type: ignore[misc]

    def test_field_metadata(self) -> None:
        """Test that every field documents itself."""
        for f in dataclasses.fields(HtmlRendererOptions):
            assert f.metadata.get("help")
            assert f.metadata.get("importance") in {"core", "advanced", "security"}


@pytest.mark.unit
class TestPlainTextOptions:
    """Tests for PlainTextOptions."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = PlainTextOptions()
        assert options.paragraph_separator == "\n\n"
        assert options.bullet == "•"
        assert options.table_cell_separator == " | "
        assert options.include_table_headers is True

    @pytest.mark.parametrize("separator", ["", "--", " x "])
    def test_invalid_separator(self, separator: str) -> None:
        """Test that separators must be non-empty whitespace."""
        with pytest.raises(ValueError, match="paragraph_separator"):
            PlainTextOptions(paragraph_separator=separator)


@pytest.mark.unit
class TestStyledTextOptions:
    """Tests for StyledTextOptions."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = StyledTextOptions()
        assert options.theme == MarkdownTheme()
        assert options.mode is ColorMode.LIGHT
        assert options.highlight_code is True

    def test_mode_coerced(self) -> None:
        """Test that mode names are coerced."""
        assert StyledTextOptions(mode="dark").mode is ColorMode.DARK  # type: ignore[arg-type]

    def test_invalid_mode(self) -> None:
        """Test that unknown modes are rejected."""
        with pytest.raises(ValueError):
            StyledTextOptions(mode="sepia")  # type: ignore[arg-type]

    def test_theme_type_checked(self) -> None:
        """Test that theme must be a MarkdownTheme."""
        with pytest.raises(ValueError, match="theme"):
            StyledTextOptions(theme=SyntaxTheme())  # type: ignore[arg-type]


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = MarkdownParserOptions()
        assert options.parse_block_directives is False
        assert options.parse_minimal_doxygen is False
        assert options.parse_tables is True
        assert options.parse_strikethrough is True
        assert options.parse_task_lists is True
        assert options.parse_footnotes is True

    def test_all_and_none(self) -> None:
        """Test the all/none constructors."""
        assert all(getattr(MarkdownParserOptions.all(), f.name) for f in dataclasses.fields(MarkdownParserOptions))
        assert not any(
            getattr(MarkdownParserOptions.none(), f.name) for f in dataclasses.fields(MarkdownParserOptions)
        )


@pytest.mark.unit
class TestOptionsTypeChecks:
    """Tests for components rejecting the wrong options class."""

    @pytest.mark.parametrize(
        "component,options",
        [
            (HtmlRenderer, PlainTextOptions()),
            (PlainTextRenderer, HtmlRendererOptions()),
            (StyledTextRenderer, PlainTextOptions()),
            (MarkdownParser, HtmlRendererOptions()),
        ],
    )
    def test_wrong_options_class(self, component, options) -> None:
        """Test that InvalidOptionsError names both types."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            component(options)
        assert exc_info.value.expected_type is not type(options)
        assert exc_info.value.received_type is type(options)
