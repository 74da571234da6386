#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/renderers/context.py
"""Per-render bookkeeping state.

A :class:`RenderContext` lives for exactly one render call. It records where
the traversal currently is (enclosing block kinds, list numbering) and
allocates footnote numbers in first-seen order. Callers may pass a context to
select the appearance mode; renderers always work on ``for_render()`` copies,
so a caller's instance is never mutated and two renders never share state.

"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from markrender.themes.syntax import ColorMode


class BlockType(str, Enum):
    """Kinds of enclosing blocks tracked on the context's block stack."""

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    DIRECTIVE = "directive"
    FOOTNOTE = "footnote"


_NESTING_BLOCKS = frozenset({BlockType.BLOCKQUOTE, BlockType.ORDERED_LIST, BlockType.UNORDERED_LIST})
_LIST_BLOCKS = frozenset({BlockType.ORDERED_LIST, BlockType.UNORDERED_LIST})


class AppearanceMode(str, Enum):
    """User-facing appearance preference.

    ``SYSTEM`` defers to the host; detecting the host appearance is the
    caller's job, which passes the answer to :meth:`resolve`.
    """

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    def resolve(self, system_is_dark: bool = False) -> ColorMode:
        """Return the concrete color mode for this preference.

        Parameters
        ----------
        system_is_dark : bool, default False
            Whether the host currently uses a dark appearance; only consulted for ``SYSTEM``

        Returns
        -------
        ColorMode
            ``LIGHT`` or ``DARK``

        """
        if self is AppearanceMode.LIGHT:
            return ColorMode.LIGHT
        if self is AppearanceMode.DARK:
            return ColorMode.DARK
        return ColorMode.DARK if system_is_dark else ColorMode.LIGHT


@dataclass
class RenderContext:
    """Mutable state threaded through a single render pass.

    Parameters
    ----------
    mode : ColorMode, default ColorMode.LIGHT
        Active appearance used to resolve theme colors
    nesting_level : int, default 0
        Number of enclosing lists and block quotes
    block_stack : list of BlockType, default empty
        Enclosing block kinds, outermost first

    Examples
    --------
        >>> ctx = RenderContext(mode=ColorMode.DARK).for_render()
        >>> with ctx.entering(BlockType.ORDERED_LIST, start=3):
        ...     ctx.next_list_number(), ctx.next_list_number()
        (3, 4)

    """

    mode: ColorMode = ColorMode.LIGHT
    nesting_level: int = 0
    block_stack: list[BlockType] = field(default_factory=list)
    list_counters: list[int] = field(default_factory=list)
    footnotes: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Coerce the mode to a ColorMode."""
        self.mode = ColorMode(self.mode)

    def for_render(self) -> RenderContext:
        """Fresh context for one render call, keeping only the caller's mode selection."""
        return RenderContext(mode=self.mode)

    @property
    def parent_block_type(self) -> Optional[BlockType]:
        """Innermost enclosing block kind, or None at the top level."""
        return self.block_stack[-1] if self.block_stack else None

    @property
    def list_depth(self) -> int:
        """Number of enclosing lists."""
        return sum(1 for block in self.block_stack if block in _LIST_BLOCKS)

    @property
    def blockquote_depth(self) -> int:
        """Number of enclosing block quotes."""
        return self.block_stack.count(BlockType.BLOCKQUOTE)

    def is_inside(self, block_type: BlockType) -> bool:
        """Whether any enclosing block has the given kind."""
        return block_type in self.block_stack

    @contextmanager
    def entering(self, block_type: BlockType, start: int = 1) -> Iterator[RenderContext]:
        """Push ``block_type`` for the duration of a ``with`` block.

        Lists and block quotes also raise ``nesting_level``. Lists start a
        new item counter at ``start``.

        Parameters
        ----------
        block_type : BlockType
            Kind of block being entered
        start : int, default 1
            First item number for lists

        """
        self.block_stack.append(block_type)
        nests = block_type in _NESTING_BLOCKS
        if nests:
            self.nesting_level += 1
        if block_type in _LIST_BLOCKS:
            self.list_counters.append(start)
        try:
            yield self
        finally:
            if block_type in _LIST_BLOCKS:
                self.list_counters.pop()
            if nests:
                self.nesting_level -= 1
            self.block_stack.pop()

    def next_list_number(self) -> int:
        """Return the current item number of the innermost list and advance it.

        Raises
        ------
        RuntimeError
            If called outside any list

        """
        if not self.list_counters:
            raise RuntimeError("next_list_number() called outside a list")
        number = self.list_counters[-1]
        self.list_counters[-1] = number + 1
        return number

    def footnote_number(self, identifier: str) -> int:
        """Number for a footnote label, allocated 1, 2, ... in first-seen order."""
        number = self.footnotes.get(identifier)
        if number is None:
            number = len(self.footnotes) + 1
            self.footnotes[identifier] = number
        return number


__all__ = ["AppearanceMode", "BlockType", "RenderContext"]
