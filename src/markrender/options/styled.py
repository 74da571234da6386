#  Copyright (c) 2025 Tom Villani, Ph.D.
# markrender/options/styled.py
"""Configuration options for styled (rich) text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from markrender.options.base import BaseRendererOptions
from markrender.themes.markdown import MarkdownTheme
from markrender.themes.syntax import ColorMode


@dataclass(frozen=True)
class StyledTextOptions(BaseRendererOptions):
    """Configuration options for styled text rendering.

    Parameters
    ----------
    theme : MarkdownTheme
        Fonts, spacing and colors of the styled output.
    mode : ColorMode, default ColorMode.LIGHT
        Appearance used when ``render`` is called without a context.
    highlight_code : bool, default True
        Color fenced code blocks with the attached highlighter.

    """

    theme: MarkdownTheme = field(
        default_factory=MarkdownTheme,
        metadata={"help": "Typography and color theme", "importance": "core"},
    )
    mode: ColorMode = field(
        default=ColorMode.LIGHT,
        metadata={"help": "Default appearance mode (light or dark)", "importance": "core"},
    )
    highlight_code: bool = field(
        default=True,
        metadata={"help": "Highlight fenced code blocks with the attached highlighter", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Coerce the mode and check the theme type.

        Raises
        ------
        ValueError
            If the mode is unknown or the theme is not a MarkdownTheme

        """
        super().__post_init__()

        object.__setattr__(self, "mode", ColorMode(self.mode))
        if not isinstance(self.theme, MarkdownTheme):
            raise ValueError(f"theme must be a MarkdownTheme, got {type(self.theme).__name__}")
