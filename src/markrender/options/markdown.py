#  Copyright (c) 2025 Tom Villani, Ph.D.
# markrender/options/markdown.py
"""Configuration options for the Markdown parser adapter."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from markrender.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Syntax extensions recognized by :class:`~markrender.parsers.markdown.MarkdownParser`.

    Every flag is independent. Disabling an extension only means the
    corresponding syntax stays literal text; renderers handle documents
    produced under any combination.

    Parameters
    ----------
    parse_block_directives : bool, default False
        Recognize ``@Name(arguments) { ... }`` block directives.
    parse_minimal_doxygen : bool, default False
        Recognize ``\\param``, ``\\returns``, ``\\return``, ``\\note`` and
        ``\\discussion`` command lines (also spelled with ``@``).
    parse_strikethrough : bool, default True
        Recognize ``~~strikethrough~~``.
    parse_tables : bool, default True
        Recognize GFM pipe tables.
    parse_task_lists : bool, default True
        Recognize ``[ ]``/``[x]`` task list items.
    parse_footnotes : bool, default True
        Recognize ``[^label]`` footnote references and definitions.

    """

    parse_block_directives: bool = field(
        default=False,
        metadata={"help": "Parse @Name(args) { ... } block directives", "importance": "core"},
    )
    parse_minimal_doxygen: bool = field(
        default=False,
        metadata={"help": "Parse \\param, \\returns, \\note and \\discussion commands", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse ~~strikethrough~~ spans", "importance": "advanced"},
    )
    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse GFM pipe tables", "importance": "advanced"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes", "importance": "advanced"},
    )
    parse_footnotes: bool = field(
        default=True,
        metadata={"help": "Parse footnote references and definitions", "importance": "advanced"},
    )

    @classmethod
    def all(cls) -> MarkdownParserOptions:
        """Options with every syntax extension enabled."""
        return cls(**{f.name: True for f in fields(cls)})

    @classmethod
    def none(cls) -> MarkdownParserOptions:
        """Options with every syntax extension disabled (plain CommonMark)."""
        return cls(**{f.name: False for f in fields(cls)})
