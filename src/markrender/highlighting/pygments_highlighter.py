#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/highlighting/pygments_highlighter.py
"""Reference highlighter backed by Pygments lexers.

Lexers are created with newline and whitespace stripping disabled and driven
through ``get_tokens_unprocessed``, which reports offsets into the text
exactly as given. Pygments token types are folded onto the eleven token
categories; types without a mapping (whitespace, generic text, errors)
become untagged gaps.

"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pygments.lexer import Lexer
from pygments.lexers import find_lexer_class_by_name, get_all_lexers
from pygments.token import Comment, Keyword, Name, Number, Operator, Punctuation, String, _TokenType
from pygments.util import ClassNotFound

from markrender.constants import LANGUAGE_ALIASES
from markrender.highlighting.base import SyntaxHighlighter, Token, normalize_tokens
from markrender.themes.syntax import TokenCategory

logger = logging.getLogger(__name__)

# First match wins, so subtypes precede their parents
_TOKEN_TYPE_MAPPING: tuple[tuple[_TokenType, TokenCategory], ...] = (
    (Comment, TokenCategory.COMMENT),
    (String, TokenCategory.STRING),
    (Number, TokenCategory.NUMBER),
    (Keyword.Type, TokenCategory.TYPE),
    (Keyword, TokenCategory.KEYWORD),
    (Operator.Word, TokenCategory.KEYWORD),
    (Name.Builtin.Pseudo, TokenCategory.VARIABLE),
    (Name.Function, TokenCategory.FUNCTION),
    (Name.Builtin, TokenCategory.FUNCTION),
    (Name.Class, TokenCategory.TYPE),
    (Name.Namespace, TokenCategory.TYPE),
    (Name.Decorator, TokenCategory.ATTRIBUTE),
    (Name.Attribute, TokenCategory.ATTRIBUTE),
    (Name.Property, TokenCategory.PROPERTY),
    (Name.Tag, TokenCategory.PROPERTY),
    (Name.Variable, TokenCategory.VARIABLE),
    (Name.Constant, TokenCategory.VARIABLE),
    (Operator, TokenCategory.OPERATOR),
    (Punctuation, TokenCategory.PUNCTUATION),
)


def category_for_token_type(ttype: _TokenType) -> Optional[TokenCategory]:
    """Map a Pygments token type to a token category.

    Parameters
    ----------
    ttype : pygments token type
        For example ``Token.Keyword.Namespace``

    Returns
    -------
    TokenCategory or None
        The category, or None when the type is rendered as plain text

    """
    for parent, category in _TOKEN_TYPE_MAPPING:
        if ttype in parent:
            return category
    return None


def _normalize_language(language: Optional[str]) -> Optional[str]:
    if language is None:
        return None
    name = language.strip().lower()
    if not name:
        return None
    return LANGUAGE_ALIASES.get(name, name)


@lru_cache(maxsize=128)
def _get_lexer(name: str) -> Optional[Lexer]:
    """Create (once per name) a lexer that preserves the input text verbatim."""
    try:
        lexer_class = find_lexer_class_by_name(name)
    except ClassNotFound:
        return None
    return lexer_class(stripnl=False, stripall=False, ensurenl=False)


class PygmentsHighlighter(SyntaxHighlighter):
    """Highlighter using Pygments lexers, looked up by name or alias.

    Examples
    --------
        >>> highlighter = PygmentsHighlighter()
        >>> [(t.start, t.end, t.category.value) for t in highlighter.tokenize("x = 1", "python")]
        [(2, 3, 'operator'), (4, 5, 'number')]

    """

    def tokenize(self, code: str, language: Optional[str]) -> list[Token]:
        """Tokenize ``code``; unknown languages and lexer failures yield ``[]``."""
        name = _normalize_language(language)
        if not code or name is None:
            return []

        lexer = _get_lexer(name)
        if lexer is None:
            logger.debug(f"No Pygments lexer for language {language!r}")
            return []

        tokens: list[Token] = []
        try:
            for index, ttype, value in lexer.get_tokens_unprocessed(code):
                category = category_for_token_type(ttype)
                if category is None or not value:
                    continue
                end = index + len(value)
                if code[index:end] != value:
                    # Lexers that rewrite text would misplace spans
                    continue
                tokens.append(Token(index, end, category))
        except Exception as e:
            logger.debug(f"Pygments lexer {name!r} failed: {type(e).__name__}: {e}")
            return []

        return normalize_tokens(tokens, len(code))

    def supports_language(self, language: Optional[str]) -> bool:
        """Whether a Pygments lexer exists for the (aliased) language tag."""
        name = _normalize_language(language)
        return name is not None and _get_lexer(name) is not None

    @property
    def supported_languages(self) -> list[str]:
        """All Pygments lexer aliases plus the local alias table."""
        return list(_all_language_names())


@lru_cache(maxsize=1)
def _all_language_names() -> tuple[str, ...]:
    names: set[str] = set(LANGUAGE_ALIASES)
    for _long_name, aliases, _filenames, _mimetypes in get_all_lexers():
        names.update(alias.lower() for alias in aliases)
    return tuple(sorted(names))


__all__ = ["PygmentsHighlighter", "category_for_token_type"]
