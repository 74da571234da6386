#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/themes/syntax.py
"""Syntax highlighting color model.

A :class:`SyntaxColors` value maps each of the eleven token categories to a
color. A :class:`SyntaxTheme` pairs a light and a dark palette and can emit
the CSS that binds them to ``--syntax-<category>`` custom properties and
``.token-<category>`` classes. The same values drive the styled-text
renderer, so HTML output and native output agree on every token color.

Colors are validated once, at construction. Renderers trust them afterwards.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Iterator, Sequence, Union

from markrender.constants import CSS_TOKEN_CLASS_PREFIX, CSS_VARIABLE_PREFIX, ITALIC_TOKEN_CATEGORIES
from markrender.exceptions import ThemeError

ColorValue = Union[str, Sequence[int]]

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


class TokenCategory(str, Enum):
    """Closed set of syntax token categories, in CSS emission order."""

    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"
    FUNCTION = "function"
    TYPE = "type"
    VARIABLE = "variable"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    PROPERTY = "property"
    ATTRIBUTE = "attribute"

    @property
    def css_class(self) -> str:
        """HTML class applied to spans of this category (``token-keyword``)."""
        return f"{CSS_TOKEN_CLASS_PREFIX}{self.value}"

    @property
    def css_variable(self) -> str:
        """CSS custom property holding this category's color (``--syntax-keyword``)."""
        return f"{CSS_VARIABLE_PREFIX}{self.value}"


class ColorMode(str, Enum):
    """Active appearance used to pick between light and dark palettes."""

    LIGHT = "light"
    DARK = "dark"


def normalize_color(value: ColorValue, field_name: str | None = None) -> str:
    """Validate a color and return it as lowercase ``#rrggbb``.

    Parameters
    ----------
    value : str or sequence of int
        ``#rgb``/``#rrggbb`` hex string (any case) or an ``(r, g, b)`` triple
        of integers in 0-255
    field_name : str, optional
        Field being validated, used in error messages

    Returns
    -------
    str
        Normalized hex color

    Raises
    ------
    ThemeError
        If the value is not a recognizable color

    Examples
    --------
        >>> normalize_color("#ABC")
        '#aabbcc'
        >>> normalize_color((255, 0, 128))
        '#ff0080'

    """
    label = f" for '{field_name}'" if field_name else ""

    if isinstance(value, str):
        if not _HEX_COLOR.fullmatch(value):
            raise ThemeError(f"Invalid hex color{label}: {value!r}", field_name=field_name, value=value)
        digits = value[1:].lower()
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return f"#{digits}"

    if isinstance(value, (tuple, list)) and len(value) == 3:
        channels = list(value)
        if all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in channels):
            return "#{:02x}{:02x}{:02x}".format(*channels)

    raise ThemeError(
        f"Invalid color{label}: expected '#rrggbb' or an (r, g, b) triple, got {value!r}",
        field_name=field_name,
        value=value,
    )


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert a normalized ``#rrggbb`` color into an RGB triple."""
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


@dataclass(frozen=True)
class SyntaxColors:
    """Colors for the eleven syntax token categories.

    Every field accepts a hex string or an RGB triple and is stored as a
    lowercase ``#rrggbb`` string. Use :meth:`light` and :meth:`dark` for the
    built-in palettes.

    Raises
    ------
    ThemeError
        If any field holds an invalid color

    """

    keyword: str
    string: str
    comment: str
    number: str
    function: str
    type: str
    variable: str
    operator: str
    punctuation: str
    property: str
    attribute: str

    def __post_init__(self) -> None:
        """Validate and normalize every color field."""
        for f in fields(self):
            object.__setattr__(self, f.name, normalize_color(getattr(self, f.name), f.name))

    @classmethod
    def light(cls) -> SyntaxColors:
        """Light palette (VS Code Light+)."""
        return cls(
            keyword="#af00db",
            string="#a31515",
            comment="#008000",
            number="#098658",
            function="#795e26",
            type="#267f99",
            variable="#001080",
            operator="#000000",
            punctuation="#000000",
            property="#001080",
            attribute="#795e26",
        )

    @classmethod
    def dark(cls) -> SyntaxColors:
        """Dark palette (VS Code Dark+)."""
        return cls(
            keyword="#c586c0",
            string="#ce9178",
            comment="#6a9955",
            number="#b5cea8",
            function="#dcdcaa",
            type="#4ec9b0",
            variable="#9cdcfe",
            operator="#d4d4d4",
            punctuation="#d4d4d4",
            property="#9cdcfe",
            attribute="#dcdcaa",
        )

    def color_for(self, category: TokenCategory | str) -> str:
        """Return the hex color for a category (enum member or name)."""
        return getattr(self, TokenCategory(category).value)

    def as_rgb(self, category: TokenCategory | str) -> tuple[int, int, int]:
        """Return the color for a category as an RGB triple."""
        return hex_to_rgb(self.color_for(category))

    def items(self) -> Iterator[tuple[TokenCategory, str]]:
        """Iterate ``(category, color)`` pairs in category order."""
        for category in TokenCategory:
            yield category, self.color_for(category)


@dataclass(frozen=True)
class SyntaxTheme:
    """A light/dark pair of syntax palettes.

    Parameters
    ----------
    light : SyntaxColors, default = SyntaxColors.light()
        Palette used in light mode
    dark : SyntaxColors, default = SyntaxColors.dark()
        Palette used in dark mode

    """

    light: SyntaxColors = field(default_factory=SyntaxColors.light)
    dark: SyntaxColors = field(default_factory=SyntaxColors.dark)

    def __post_init__(self) -> None:
        """Reject palettes that are not SyntaxColors instances."""
        for name in ("light", "dark"):
            value = getattr(self, name)
            if not isinstance(value, SyntaxColors):
                raise ThemeError(
                    f"SyntaxTheme.{name} must be SyntaxColors, got {type(value).__name__}",
                    field_name=name,
                    value=value,
                )

    @classmethod
    def default(cls) -> SyntaxTheme:
        """Theme made of the built-in light and dark palettes."""
        return cls(light=SyntaxColors.light(), dark=SyntaxColors.dark())

    def colors_for(self, mode: ColorMode | str) -> SyntaxColors:
        """Return the palette for the given appearance mode."""
        return self.dark if ColorMode(mode) is ColorMode.DARK else self.light

    def generate_css(self) -> str:
        """Generate the stylesheet binding this theme to token classes.

        The output has three parts: a ``:root`` rule declaring one
        ``--syntax-<category>`` property per category with the light colors,
        a ``prefers-color-scheme: dark`` media rule redeclaring them with the
        dark colors, and one ``.token-<category>`` rule per category reading
        the property. Comments are additionally italic.

        Returns
        -------
        str
            CSS text; identical themes always produce identical text

        """
        lines = [":root {"]
        lines.extend(f"    {category.css_variable}: {color};" for category, color in self.light.items())
        lines.extend(["}", "", "@media (prefers-color-scheme: dark) {", "    :root {"])
        lines.extend(f"        {category.css_variable}: {color};" for category, color in self.dark.items())
        lines.extend(["    }", "}", ""])

        for category in TokenCategory:
            declarations = f"color: var({category.css_variable});"
            if category.value in ITALIC_TOKEN_CATEGORIES:
                declarations += " font-style: italic;"
            lines.append(f".{category.css_class} {{ {declarations} }}")

        return "\n".join(lines)


__all__ = [
    "ColorMode",
    "ColorValue",
    "SyntaxColors",
    "SyntaxTheme",
    "TokenCategory",
    "hex_to_rgb",
    "normalize_color",
]
