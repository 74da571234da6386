#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class shared by every renderer. Node
kinds dispatch themselves through ``Node.accept``; a visitor only implements
the ``visit_*`` hooks it cares about. Anything else, including node kinds
added by parser extensions after a visitor was written, reaches
``generic_visit``, which renders the node's children in order. Nodes without
children contribute nothing.

"""

from __future__ import annotations

import logging
from typing import Any

from markrender.ast.nodes import Node
from markrender.ast.utils import get_node_children

logger = logging.getLogger(__name__)


class NodeVisitor:
    """Base class for AST node visitors.

    Subclasses implement ``visit_<kind>`` methods for the node kinds they
    handle (see each node class's ``visit_name``). Unhandled kinds fall back
    to :meth:`generic_visit`.

    Examples
    --------
    Simple visitor that collects heading levels:

        >>> class HeadingCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.levels = []
        ...
        ...     def visit_heading(self, node):
        ...         self.levels.append(node.level)
        ...
        >>> collector = HeadingCollector()
        >>> collector.visit(document)
        >>> collector.levels
        [1, 2]

    """

    def visit(self, node: Node) -> Any:
        """Dispatch ``node`` to its hook on this visitor."""
        return node.accept(self)

    def generic_visit(self, node: Node) -> None:
        """Visit the children of a node this visitor has no hook for.

        Parameters
        ----------
        node : Node
            Node of an unhandled kind

        """
        children = get_node_children(node)
        if not children:
            logger.debug(f"Skipping {type(node).__name__}: no handler and no children")
            return
        logger.debug(f"No handler for {type(node).__name__}, rendering its children")
        for child in children:
            child.accept(self)


__all__ = ["NodeVisitor"]
