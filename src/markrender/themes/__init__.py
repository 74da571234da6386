#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/themes/__init__.py
"""Color themes shared by the HTML and styled-text renderers."""

from markrender.themes.markdown import MarkdownTheme, ModeColors
from markrender.themes.syntax import (
    ColorMode,
    ColorValue,
    SyntaxColors,
    SyntaxTheme,
    TokenCategory,
    hex_to_rgb,
    normalize_color,
)

__all__ = [
    "ColorMode",
    "ColorValue",
    "MarkdownTheme",
    "ModeColors",
    "SyntaxColors",
    "SyntaxTheme",
    "TokenCategory",
    "hex_to_rgb",
    "normalize_color",
]
