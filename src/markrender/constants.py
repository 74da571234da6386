#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for markrender.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Syntax Highlighting - Token categories and CSS naming
3. HTML Rendering - Fragment and document defaults
4. Plain Text Rendering - Separators and markers
5. Styled Text Rendering - Font sizes, spacing and markers
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right"]
TaskStatus = Literal["checked", "unchecked"]
ColorModeName = Literal["light", "dark"]

# =============================================================================
# Syntax Highlighting
# =============================================================================

# Closed set of token categories, in CSS emission order
TOKEN_CATEGORY_NAMES: tuple[str, ...] = (
    "keyword",
    "string",
    "comment",
    "number",
    "function",
    "type",
    "variable",
    "operator",
    "punctuation",
    "property",
    "attribute",
)

CSS_VARIABLE_PREFIX = "--syntax-"
CSS_TOKEN_CLASS_PREFIX = "token-"

# Categories that get font-style: italic in generated CSS
ITALIC_TOKEN_CATEGORIES: frozenset[str] = frozenset({"comment"})

DEFAULT_HIGHLIGHT_CACHE_SIZE = 256

# Short fence tags that Pygments does not resolve on its own
LANGUAGE_ALIASES: dict[str, str] = {
    "py3": "python",
    "python3": "python",
    "js": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "ts": "typescript",
    "sh": "bash",
    "shell": "bash",
    "zsh": "bash",
    "yml": "yaml",
    "c++": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "h": "c",
    "rs": "rust",
    "kt": "kotlin",
    "cs": "csharp",
    "rb": "ruby",
    "objc": "objective-c",
    "htm": "html",
    "conf": "ini",
    "cfg": "ini",
}

# =============================================================================
# HTML Rendering
# =============================================================================

DEFAULT_HTML_STANDALONE = False
DEFAULT_LANGUAGE_CLASS_PREFIX = "language-"
DEFAULT_ALLOW_RAW_HTML = True
DEFAULT_VALIDATE_IMAGES = False
DEFAULT_HTML_TITLE = "Document"
INVALID_IMAGE_CLASS = "invalid-image"

# =============================================================================
# Plain Text Rendering
# =============================================================================

DEFAULT_PARAGRAPH_SEPARATOR = "\n\n"
DEFAULT_PLAINTEXT_BULLET = "•"
DEFAULT_TABLE_CELL_SEPARATOR = " | "
DEFAULT_INCLUDE_TABLE_HEADERS = True
PLAINTEXT_LIST_INDENT = "  "
PLAINTEXT_THEMATIC_BREAK = "---"

# =============================================================================
# Styled Text Rendering
# =============================================================================

DEFAULT_HEADING_FONT_SIZES: tuple[int, ...] = (28, 24, 20, 18, 16, 14)
DEFAULT_BODY_FONT_SIZE = 16
DEFAULT_CODE_FONT_SIZE = 14
DEFAULT_PARAGRAPH_SPACING = 12
DEFAULT_LIST_INDENT = 24
DEFAULT_BLOCKQUOTE_INDENT = 16

# Bullet per nesting level; deeper levels reuse the last entry
STYLED_LIST_BULLETS: tuple[str, ...] = ("•", "◦", "▪")
STYLED_THEMATIC_BREAK_WIDTH = 40
MONOSPACE_FONT = "monospace"
