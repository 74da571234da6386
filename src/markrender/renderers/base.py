#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/renderers/base.py
"""Base classes for AST renderers.

Any object with a ``render(document)`` method satisfies the
:class:`MarkdownRenderer` protocol and can be passed to
:func:`markrender.render`. The built-in renderers additionally derive from
:class:`BaseRenderer`, which validates their options and gives every render
call its own working copy of the renderer.

"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

from markrender.ast import Document
from markrender.ast.nodes import Node
from markrender.exceptions import InvalidOptionsError
from markrender.options.base import BaseRendererOptions
from markrender.renderers.context import RenderContext

OutputT = TypeVar("OutputT")
OutputT_co = TypeVar("OutputT_co", covariant=True)
RendererT = TypeVar("RendererT", bound="BaseRenderer")


@runtime_checkable
class MarkdownRenderer(Protocol[OutputT_co]):
    """Capability contract for turning a document into one output type.

    Implementations must be deterministic and free of I/O.
    """

    def render(self, document: Document) -> OutputT_co:
        """Render ``document`` and return the output."""
        ...


class BaseRenderer(ABC, Generic[OutputT]):
    """Abstract base class for the built-in renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from markrender.ast.visitors import NodeVisitor
        >>> class WordCounter(NodeVisitor, BaseRenderer[int]):
        ...     def render(self, document):
        ...         worker = self._start_render(None)
        ...         worker.count = 0
        ...         worker.visit(document)
        ...         return worker.count
        ...
        ...     def visit_text(self, node):
        ...         self.count += len(node.content.split())

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options
        self._context = RenderContext()

    @abstractmethod
    def render(self, document: Document) -> OutputT:
        """Render the AST and return the output.

        Parameters
        ----------
        document : Document
            AST Document node to render

        Returns
        -------
        OutputT
            Rendered output

        """

    def _start_render(self: RendererT, context: Optional[RenderContext]) -> RendererT:
        """Return a working copy of this renderer for one render call.

        Per-call state (output buffers, the render context) lives on the copy,
        so one renderer instance can serve concurrent calls.

        Parameters
        ----------
        context : RenderContext or None
            Caller-supplied context; only its mode selection is carried over

        """
        worker = copy.copy(self)
        worker._context = context.for_render() if context is not None else worker._default_context()
        return worker

    def _default_context(self) -> RenderContext:
        """Context used when the caller supplies none."""
        return RenderContext()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin providing inline content rendering pattern for text-based renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of nodes to text by temporarily capturing output.

        Parameters
        ----------
        content : list of Node
            Nodes to render

        Returns
        -------
        str
            Rendered content as a string

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
