#  Copyright (c) 2025 Tom Villani, Ph.D.
# markrender/options/plaintext.py
"""Configuration options for plain text rendering."""

from dataclasses import dataclass, field

from markrender.constants import (
    DEFAULT_INCLUDE_TABLE_HEADERS,
    DEFAULT_PARAGRAPH_SEPARATOR,
    DEFAULT_PLAINTEXT_BULLET,
    DEFAULT_TABLE_CELL_SEPARATOR,
)
from markrender.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    r"""Configuration options for plain text rendering.

    All formatting is stripped, leaving only the text content.

    Parameters
    ----------
    paragraph_separator : str, default "\n\n"
        Separator string to use between paragraphs and block elements.
    bullet : str, default "•"
        Marker placed before unordered list items.
    table_cell_separator : str, default " | "
        Separator string to use between table cells.
    include_table_headers : bool, default True
        Whether to include table headers in the output.
        When False, only table body rows are rendered.

    Examples
    --------
        >>> from markrender.ast import Document, Paragraph, Text
        >>> from markrender.renderers.plaintext import PlainTextRenderer
        >>> doc = Document(children=[Paragraph(content=[Text(content="Hello")])])
        >>> PlainTextRenderer(PlainTextOptions(bullet="-")).render(doc)
        'Hello'

    """

    paragraph_separator: str = field(
        default=DEFAULT_PARAGRAPH_SEPARATOR,
        metadata={"help": "Separator between paragraphs and other blocks", "importance": "core"},
    )
    bullet: str = field(
        default=DEFAULT_PLAINTEXT_BULLET,
        metadata={"help": "Marker for unordered list items", "importance": "core"},
    )
    table_cell_separator: str = field(
        default=DEFAULT_TABLE_CELL_SEPARATOR,
        metadata={"help": "Separator between table cells", "importance": "advanced"},
    )
    include_table_headers: bool = field(
        default=DEFAULT_INCLUDE_TABLE_HEADERS,
        metadata={"help": "Include table header rows", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the paragraph separator contains non-whitespace characters

        """
        super().__post_init__()

        if not self.paragraph_separator or self.paragraph_separator.strip():
            raise ValueError(
                f"paragraph_separator must be non-empty whitespace, got {self.paragraph_separator!r}"
            )
