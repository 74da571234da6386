#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/themes/markdown.py
"""Typography and color theme for styled-text output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from markrender.constants import (
    DEFAULT_BLOCKQUOTE_INDENT,
    DEFAULT_BODY_FONT_SIZE,
    DEFAULT_CODE_FONT_SIZE,
    DEFAULT_HEADING_FONT_SIZES,
    DEFAULT_LIST_INDENT,
    DEFAULT_PARAGRAPH_SPACING,
)
from markrender.exceptions import ThemeError
from markrender.themes.syntax import ColorMode, SyntaxTheme, TokenCategory, normalize_color


@dataclass(frozen=True)
class ModeColors:
    """Non-syntax colors for one appearance mode.

    Parameters
    ----------
    text : str
        Body text color
    link : str
        Link color
    blockquote : str
        Block quote text color
    code_background : str
        Background behind fenced code blocks
    inline_code_background : str
        Background behind inline code spans

    """

    text: str
    link: str
    blockquote: str
    code_background: str
    inline_code_background: str

    def __post_init__(self) -> None:
        """Normalize every color to lowercase ``#rrggbb``."""
        for name in ("text", "link", "blockquote", "code_background", "inline_code_background"):
            object.__setattr__(self, name, normalize_color(getattr(self, name), name))

    @classmethod
    def light(cls) -> ModeColors:
        """Default light-mode colors."""
        return cls(
            text="#1f2328",
            link="#0969da",
            blockquote="#656d76",
            code_background="#f5f5f5",
            inline_code_background="#f0f0f0",
        )

    @classmethod
    def dark(cls) -> ModeColors:
        """Default dark-mode colors."""
        return cls(
            text="#e6edf3",
            link="#4493f8",
            blockquote="#9198a1",
            code_background="#262626",
            inline_code_background="#333333",
        )


@dataclass(frozen=True)
class MarkdownTheme:
    """Theme consumed by :class:`~markrender.renderers.styled.StyledTextRenderer`.

    Sizes are in points and are carried on styled runs as metadata; the
    presentation surface decides how to apply them.

    Parameters
    ----------
    heading_font_sizes : tuple of int, default = (28, 24, 20, 18, 16, 14)
        Font size per heading level 1-6
    body_font_size : int, default = 16
        Font size of body text
    code_font_size : int, default = 14
        Font size of inline and block code
    light_colors : ModeColors
        Text, link, quote and code colors in light mode
    dark_colors : ModeColors
        Text, link, quote and code colors in dark mode
    syntax : SyntaxTheme
        Token category colors, shared with the HTML stylesheet
    paragraph_spacing : int, default = 12
        Space after paragraphs
    list_indent : int, default = 24
        Indent per list nesting level
    blockquote_indent : int, default = 16
        Indent per block quote nesting level

    """

    heading_font_sizes: tuple[int, ...] = DEFAULT_HEADING_FONT_SIZES
    body_font_size: int = DEFAULT_BODY_FONT_SIZE
    code_font_size: int = DEFAULT_CODE_FONT_SIZE
    light_colors: ModeColors = field(default_factory=ModeColors.light)
    dark_colors: ModeColors = field(default_factory=ModeColors.dark)
    syntax: SyntaxTheme = field(default_factory=SyntaxTheme.default)
    paragraph_spacing: int = DEFAULT_PARAGRAPH_SPACING
    list_indent: int = DEFAULT_LIST_INDENT
    blockquote_indent: int = DEFAULT_BLOCKQUOTE_INDENT

    def __post_init__(self) -> None:
        """Validate sizes.

        Raises
        ------
        ThemeError
            If heading sizes are not six positive numbers or another size is not positive

        """
        sizes = tuple(self.heading_font_sizes)
        if len(sizes) != 6 or any(size <= 0 for size in sizes):
            raise ThemeError(
                f"heading_font_sizes must hold six positive sizes, got {self.heading_font_sizes!r}",
                field_name="heading_font_sizes",
                value=self.heading_font_sizes,
            )
        object.__setattr__(self, "heading_font_sizes", sizes)

        for name in ("body_font_size", "code_font_size"):
            if getattr(self, name) <= 0:
                raise ThemeError(f"{name} must be positive, got {getattr(self, name)}", name, getattr(self, name))
        for name in ("paragraph_spacing", "list_indent", "blockquote_indent"):
            if getattr(self, name) < 0:
                raise ThemeError(f"{name} must be non-negative, got {getattr(self, name)}", name, getattr(self, name))

    def heading_font_size(self, level: int) -> int:
        """Font size for a heading level; levels outside 1-6 are clamped."""
        clamped = max(1, min(6, level))
        return self.heading_font_sizes[clamped - 1]

    def colors(self, mode: ColorMode | str) -> ModeColors:
        """Non-syntax colors for the given mode."""
        return self.dark_colors if ColorMode(mode) is ColorMode.DARK else self.light_colors

    def syntax_color(self, name: str, mode: ColorMode | str) -> Optional[str]:
        """Resolve a token category name to a color for the given mode.

        Qualified names fall back to their first component, so
        ``keyword.control`` resolves to the ``keyword`` color.

        Parameters
        ----------
        name : str
            Category name, optionally dotted
        mode : ColorMode or str
            Active appearance mode

        Returns
        -------
        str or None
            Hex color, or None if the name does not denote a category

        """
        palette = self.syntax.colors_for(mode)
        for candidate in (name, name.split(".", 1)[0]):
            try:
                category = TokenCategory(candidate)
            except ValueError:
                continue
            return palette.color_for(category)
        return None


__all__ = ["MarkdownTheme", "ModeColors"]
