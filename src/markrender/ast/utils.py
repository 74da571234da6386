#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/ast/utils.py
"""Utility functions for working with AST nodes.

Child access is structural rather than type-based: any node exposing
``children``, ``content`` (as a list), ``items``, ``header``/``rows`` or
``cells`` is traversed the same way, so extension nodes defined outside this
package are walked without registration.

"""

from __future__ import annotations

from typing import Union

from markrender.ast.nodes import Code, Image, Node, Text


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node, in document order.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    children: list[Node] = []

    header = getattr(node, "header", None)
    if isinstance(header, Node):
        children.append(header)

    for attr in ("children", "content", "items", "rows", "cells"):
        value = getattr(node, attr, None)
        if isinstance(value, list):
            children.extend(child for child in value if isinstance(child, Node))

    return children


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Text and code-span content are concatenated in document order. Image alt
    text contributes as well, so headings or links containing images still
    yield meaningful text.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String placed between the text of sibling nodes

    Returns
    -------
    str
        Concatenated text content

    Examples
    --------
        >>> extract_text([Text(content="Hello "), Emphasis(content=[Text(content="world")])])
        'Hello world'

    """
    if isinstance(node_or_nodes, list):
        parts = [extract_text(node, joiner=joiner) for node in node_or_nodes]
        return joiner.join(part for part in parts if part)

    node = node_or_nodes
    if isinstance(node, (Text, Code)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text

    return extract_text(get_node_children(node), joiner=joiner)


__all__ = ["extract_text", "get_node_children"]
