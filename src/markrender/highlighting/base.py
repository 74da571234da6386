#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/highlighting/base.py
"""Highlighter contract and token helpers.

A highlighter turns code text plus an optional language tag into an ordered
list of :class:`Token` values. Each token covers a half-open range of
character offsets into the original Python string and carries one of the
eleven :class:`~markrender.themes.TokenCategory` values. Text between tokens
is plain.

Highlighters are strategies: renderers accept any
:class:`SyntaxHighlighter` and treat an empty token list as "no
highlighting".

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from markrender.themes.syntax import TokenCategory
from markrender.utils.html_utils import escape_html


@dataclass(frozen=True, order=True)
class Token:
    """A categorized range of a code block.

    Parameters
    ----------
    start : int
        Offset of the first character (inclusive)
    end : int
        Offset after the last character (exclusive)
    category : TokenCategory
        Syntax category of the range

    Raises
    ------
    ValueError
        If the range is empty or negative

    """

    start: int
    end: int
    category: TokenCategory

    def __post_init__(self) -> None:
        """Validate the range and coerce the category."""
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Token range must satisfy 0 <= start < end, got [{self.start}, {self.end})")
        object.__setattr__(self, "category", TokenCategory(self.category))

    def text(self, code: str) -> str:
        """Return the slice of ``code`` this token covers."""
        return code[self.start : self.end]


class SyntaxHighlighter(ABC):
    """Abstract base class for syntax highlighters.

    ``tokenize`` must be total: empty code, a missing or unknown language and
    malformed code all return a (possibly empty) list instead of raising.
    Returned tokens do not overlap and are sorted by start offset. Identical
    inputs always produce identical output.

    """

    @abstractmethod
    def tokenize(self, code: str, language: Optional[str]) -> list[Token]:
        """Split ``code`` into categorized tokens.

        Parameters
        ----------
        code : str
            Code text to highlight
        language : str or None
            Language tag from the code fence

        Returns
        -------
        list of Token
            Ordered, non-overlapping tokens; empty when the language is not supported

        """

    @abstractmethod
    def supports_language(self, language: Optional[str]) -> bool:
        """Whether ``tokenize`` can produce tokens for this language tag."""

    @property
    @abstractmethod
    def supported_languages(self) -> list[str]:
        """Sorted list of language names this highlighter recognizes."""


def normalize_tokens(tokens: Iterable[Token], length: int) -> list[Token]:
    """Sort tokens and drop overlaps and out-of-range tokens.

    Tokens are ordered by start offset. A token that starts before the end of
    the previously kept token is dropped, as is any token reaching past
    ``length``. Adjacent tokens of the same category are merged.

    Parameters
    ----------
    tokens : iterable of Token
        Raw tokens in any order
    length : int
        Length of the code text the tokens index into

    Returns
    -------
    list of Token
        Ordered, non-overlapping tokens

    """
    result: list[Token] = []
    for token in sorted(tokens, key=lambda t: (t.start, t.end)):
        if token.end > length:
            continue
        if result and token.start < result[-1].end:
            continue
        if result and result[-1].end == token.start and result[-1].category is token.category:
            result[-1] = Token(result[-1].start, token.end, token.category)
            continue
        result.append(token)
    return result


def highlight_to_html(code: str, tokens: Iterable[Token]) -> str:
    """Render code as escaped HTML with one span per token.

    Gaps between tokens are emitted as escaped plain text. Unescaping the
    result and removing the span tags yields ``code`` unchanged.

    Parameters
    ----------
    code : str
        Original code text
    tokens : iterable of Token
        Tokens into ``code``; normalized before use

    Returns
    -------
    str
        HTML fragment suitable for the inside of ``<code>``

    """
    parts: list[str] = []
    position = 0
    for token in normalize_tokens(tokens, len(code)):
        if position < token.start:
            parts.append(escape_html(code[position : token.start]))
        parts.append(f'<span class="{token.category.css_class}">{escape_html(token.text(code))}</span>')
        position = token.end
    if position < len(code):
        parts.append(escape_html(code[position:]))
    return "".join(parts)


__all__ = [
    "SyntaxHighlighter",
    "Token",
    "highlight_to_html",
    "normalize_tokens",
]
